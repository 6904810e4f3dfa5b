"""EventBus tests"""

import logging

from framtidsbygget.core.event_bus import MAX_DEPTH, EventBus, GameEvent
from framtidsbygget.core.event_types import EventTypes


def _unlocked(achievement_id: str, source: str = "progress_service") -> GameEvent:
    return GameEvent(
        event_type=EventTypes.ACHIEVEMENT_UNLOCKED,
        data={"user_id": "u1", "achievement_id": achievement_id},
        source=source,
    )


class TestDelivery:
    def test_handler_receives_event(self, event_bus):
        received = []
        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, received.append)
        event_bus.emit(_unlocked("first_victory"))
        assert [e.data["achievement_id"] for e in received] == ["first_victory"]
        assert received[0].depth == 0

    def test_subscription_order(self, event_bus):
        calls = []
        event_bus.subscribe(EventTypes.MISSION_COMPLETED, lambda e: calls.append("audio"))
        event_bus.subscribe(EventTypes.MISSION_COMPLETED, lambda e: calls.append("stats"))
        event_bus.emit(GameEvent(EventTypes.MISSION_COMPLETED, {"world_id": "w"}, "s"))
        assert calls == ["audio", "stats"]

    def test_no_subscribers(self, event_bus):
        event_bus.emit(GameEvent(EventTypes.PROGRESS_SAVED, {"user_id": "u1"}, "s"))
        assert event_bus.dispatched[EventTypes.PROGRESS_SAVED] == 0

    def test_unsubscribe(self, event_bus):
        received = []
        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, received.append)
        event_bus.unsubscribe(EventTypes.ACHIEVEMENT_UNLOCKED, received.append)
        event_bus.emit(_unlocked("first_victory"))
        assert received == []
        assert event_bus.handler_count == 0

    def test_unsubscribe_unknown_handler(self, event_bus):
        event_bus.unsubscribe(EventTypes.ACHIEVEMENT_UNLOCKED, lambda e: None)

    def test_failing_handler_isolated(self, event_bus):
        calls = []

        def broken(event):
            raise RuntimeError("speaker unplugged")

        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, broken)
        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, lambda e: calls.append(e))
        event_bus.emit(_unlocked("first_victory"))
        assert len(calls) == 1

    def test_dispatch_counts(self, event_bus):
        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, lambda e: None)
        event_bus.emit(_unlocked("first_victory"))
        event_bus.emit(_unlocked("security_expert"))
        assert event_bus.dispatched[EventTypes.ACHIEVEMENT_UNLOCKED] == 2


class TestDepthLimit:
    def test_runaway_chain_stops(self, event_bus):
        calls = 0

        def echo(event):
            nonlocal calls
            calls += 1
            # fresh source each hop so only the depth limit applies
            event_bus.emit(GameEvent("ping", {}, f"hop_{calls}"))

        event_bus.subscribe("ping", echo)
        event_bus.emit(GameEvent("ping", {}, "origin"))
        assert calls == MAX_DEPTH


class TestDuplicates:
    def test_same_event_delivered_once_per_chain(self, event_bus):
        received = []
        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, received.append)
        event_bus.emit(_unlocked("first_victory"))
        event_bus.emit(_unlocked("first_victory"))
        assert len(received) == 1

    def test_reentrant_duplicate_blocked(self, event_bus):
        calls = 0

        def handler(event):
            nonlocal calls
            calls += 1
            event_bus.emit(_unlocked("first_victory"))

        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, handler)
        event_bus.emit(_unlocked("first_victory"))
        assert calls == 1

    def test_payload_distinguishes_events(self, event_bus):
        received = []
        event_bus.subscribe(
            EventTypes.ACHIEVEMENT_UNLOCKED, lambda e: received.append(e.data["achievement_id"])
        )
        for achievement_id in ("first_victory", "security_expert", "first_victory"):
            event_bus.emit(_unlocked(achievement_id))
        assert received == ["first_victory", "security_expert"]

    def test_source_distinguishes_events(self, event_bus):
        received = []
        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, received.append)
        event_bus.emit(_unlocked("first_victory", source="a"))
        event_bus.emit(_unlocked("first_victory", source="b"))
        assert len(received) == 2

    def test_reset_chain(self, event_bus):
        received = []
        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, received.append)
        event_bus.emit(_unlocked("first_victory"))
        event_bus.reset_chain()
        event_bus.emit(_unlocked("first_victory"))
        assert len(received) == 2


class TestPayload:
    def test_non_scalar_data_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="framtidsbygget.core.event_bus"):
            GameEvent(EventTypes.PROGRESS_SAVED, {"user_id": "u1", "progress": {"a": 1}}, "s")
        assert "non-scalar" in caplog.text

    def test_scalar_data_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="framtidsbygget.core.event_bus"):
            _unlocked("first_victory")
        assert caplog.text == ""


class TestClear:
    def test_clear(self, event_bus):
        event_bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, lambda e: None)
        event_bus.subscribe(EventTypes.MISSION_COMPLETED, lambda e: None)
        event_bus.emit(_unlocked("first_victory"))
        assert event_bus.handler_count == 2
        event_bus.clear()
        assert event_bus.handler_count == 0
        assert sum(event_bus.dispatched.values()) == 0
