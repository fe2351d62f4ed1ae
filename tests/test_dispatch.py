from arpg.dispatch import EventDispatcher


def test_emit_passes_data_to_handler():
    dispatcher = EventDispatcher()
    received = []
    dispatcher.register_handler("hit", received.append)
    dispatcher.emit("hit", {"damage": 3})
    assert received == [{"damage": 3}]


def test_handlers_run_in_registration_order():
    dispatcher = EventDispatcher()
    calls = []
    dispatcher.register_handler("tick", lambda data: calls.append(("first", data)))
    dispatcher.register_handler("tick", lambda data: calls.append(("second", data)))
    dispatcher.emit("tick", 7)
    assert calls == [("first", 7), ("second", 7)]


def test_emit_only_reaches_matching_type():
    dispatcher = EventDispatcher()
    received = []
    dispatcher.register_handler("a", received.append)
    dispatcher.emit("b", "ignored")
    assert received == []


def test_repeated_emits_accumulate():
    dispatcher = EventDispatcher()
    received = []
    dispatcher.register_handler("a", received.append)
    for value in ("x", "y", "z"):
        dispatcher.emit("a", value)
    assert received == ["x", "y", "z"]


def test_handler_may_emit_again():
    dispatcher = EventDispatcher()
    received = []
    dispatcher.register_handler("outer", lambda data: dispatcher.emit("inner", data))
    dispatcher.register_handler("inner", received.append)
    dispatcher.emit("outer", "payload")
    assert received == ["payload"]