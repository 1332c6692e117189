"""Tests for sitefs.core.events module."""

from sitefs.core.events import FILE_CREATED, EventBus


class TestEventBus:
    """Tests for EventBus."""

    def test_publish_reaches_subscribers(self):
        bus = EventBus()
        seen = []
        bus.subscribe(lambda event, path: seen.append((event, path)))
        bus.subscribe(lambda event, path: seen.append(("second", path)))

        bus.publish(FILE_CREATED, "content/foo.html")

        assert seen == [(FILE_CREATED, "content/foo.html"), ("second", "content/foo.html")]

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []

        def handler(event, path):
            seen.append(path)

        bus.subscribe(handler)
        bus.unsubscribe(handler)
        bus.publish(FILE_CREATED, "x")

        assert seen == []

    def test_failing_handler_is_isolated(self, caplog):
        bus = EventBus()
        seen = []

        def broken(event, path):
            raise RuntimeError("boom")

        bus.subscribe(broken)
        bus.subscribe(lambda event, path: seen.append(path))

        bus.publish(FILE_CREATED, "x")

        assert seen == ["x"]
        assert "Error in event handler" in caplog.text
