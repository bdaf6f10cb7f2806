import pytest

from latren.events import EventHandler, SingleEventHandler, VariantEventHandler


def test_single_dispatch_passes_arguments_to_all_callbacks():
    handler = SingleEventHandler()
    received = []
    handler.subscribe(lambda a, b: received.append(("first", a, b)))
    handler.subscribe(lambda a, b: received.append(("second", a, b)))
    handler.dispatch(3, "x")
    assert sorted(received) == [("first", 3, "x"), ("second", 3, "x")]


def test_single_subscribe_returns_distinct_ids():
    handler = SingleEventHandler()
    ids = {handler.subscribe(lambda: None) for _ in range(10)}
    assert len(ids) == 10


def test_single_unsubscribe_removes_only_that_callback():
    handler = SingleEventHandler()
    received = []
    keep = handler.subscribe(lambda: received.append("keep"))
    drop = handler.subscribe(lambda: received.append("drop"))
    assert keep != drop
    handler.unsubscribe(drop)
    handler.dispatch()
    assert received == ["keep"]


def test_single_unsubscribe_unknown_id_is_ignored():
    handler = SingleEventHandler()
    received = []
    handler.subscribe(lambda: received.append(1))
    handler.unsubscribe(12345)
    handler.dispatch()
    assert received == [1]


def test_single_clear_events():
    handler = SingleEventHandler()
    received = []
    handler.subscribe(lambda: received.append(1))
    handler.clear_events()
    handler.dispatch()
    assert received == []


def test_event_handler_dispatches_only_matching_event():
    handler = EventHandler()
    received = []
    handler.subscribe("enter", lambda: received.append("enter"))
    handler.subscribe("leave", lambda: received.append("leave"))
    handler.dispatch("enter")
    assert received == ["enter"]


def test_event_handler_unknown_event_calls_nothing():
    handler = EventHandler()
    received = []
    handler.subscribe("a", lambda: received.append("a"))
    handler.dispatch("missing")
    assert received == []


def test_event_handler_ids_are_shared_across_events():
    handler = EventHandler()
    first = handler.subscribe("a", lambda: None)
    second = handler.subscribe("b", lambda: None)
    assert first != second


def test_event_handler_unsubscribe_and_clear():
    handler = EventHandler()
    received = []
    eid = handler.subscribe("a", lambda value: received.append(value))
    handler.subscribe("a", lambda value: received.append(value * 2))
    handler.unsubscribe("a", eid)
    handler.dispatch("a", 4)
    assert received == [8]
    handler.clear_events()
    handler.dispatch("a", 4)
    assert received == [8]


def test_event_handler_unsubscribe_from_wrong_event_keeps_callback():
    handler = EventHandler()
    received = []
    eid = handler.subscribe("a", lambda: received.append("a"))
    handler.unsubscribe("b", eid)
    handler.dispatch("a")
    assert received == ["a"]


def test_variant_handler_calls_no_arg_callbacks_without_arguments():
    handler = VariantEventHandler()
    received = []
    handler.subscribe("scroll", lambda: received.append("bare"))
    handler.subscribe("scroll", lambda delta: received.append(delta))
    handler.dispatch("scroll", 1.5)
    assert sorted(map(str, received)) == ["1.5", "bare"]


def test_variant_handler_callback_with_default_is_called_bare():
    handler = VariantEventHandler()
    received = []
    handler.subscribe("resize", lambda size=None: received.append(size))
    handler.dispatch("resize", (640, 480))
    assert received == [None]


def test_variant_handler_wrong_arity_raises():
    handler = VariantEventHandler()
    handler.subscribe("resize", lambda w, h: None)
    with pytest.raises(TypeError):
        handler.dispatch("resize", (640, 480))