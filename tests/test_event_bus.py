from element8.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_ignored():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []
    handler = lambda sender, **kwargs: calls.append(kwargs)
    bus.subscribe("ping", handler)
    bus.emit("ping", n=1)
    bus.unsubscribe("ping", handler)
    bus.emit("ping", n=2)
    assert calls == [{"n": 1}]
