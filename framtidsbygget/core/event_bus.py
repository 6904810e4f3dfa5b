"""EventBus - synchronous event dispatch between services.

Rules:
- services never import each other; they talk through the bus
- events carry identifiers and scalars only
- propagation depth is capped at MAX_DEPTH
- the same event from the same cause is delivered once per chain
"""

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Set

from framtidsbygget.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5  # nested emits allowed inside one chain

_SCALARS = (str, int, float, bool, type(None))


@dataclass
class GameEvent:
    """Something that happened to a player.

    Args:
        event_type: one of EventTypes (e.g. "achievement_unlocked")
        data: ids and scalars, e.g. {"user_id": ..., "achievement_id": ...}
        source: name of the emitting service
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    depth: int = field(default=0, repr=False)  # set by the bus on dispatch

    def __post_init__(self) -> None:
        heavy = [k for k, v in self.data.items() if not isinstance(v, _SCALARS)]
        if heavy:
            logger.warning(
                f"GameEvent {self.event_type} carries non-scalar data: {sorted(heavy)}"
            )

    @property
    def chain_key(self) -> str:
        """Identity used for duplicate suppression within a chain."""
        payload = sorted((k, repr(v)) for k, v in self.data.items())
        return f"{self.source}:{self.event_type}:{payload}"


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """Synchronous, in-process event bus. One per app (or per test).

    Usage:
        bus = EventBus()
        bus.subscribe(EventTypes.ACHIEVEMENT_UNLOCKED, on_unlock)
        bus.emit(GameEvent(event_type=EventTypes.ACHIEVEMENT_UNLOCKED,
                           data={"achievement_id": "first_victory"},
                           source="progress_service"))
        bus.reset_chain()  # at the end of the unit of work
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._depth = 0
        self._seen: Set[str] = set()
        self.dispatched: Counter = Counter()  # event_type -> delivered count

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug(f"EventBus subscribe: {event_type} -> {handler.__qualname__}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        """Remove a handler. Unknown handlers only log a warning."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            logger.warning(f"Handler not registered: {event_type} -> {handler.__qualname__}")
            return
        handlers.remove(handler)
        logger.debug(f"EventBus unsubscribe: {event_type} -> {handler.__qualname__}")

    def _admit(self, event: GameEvent) -> bool:
        """Depth and duplicate checks. Records the event when admitted."""
        if self._depth >= MAX_DEPTH:
            logger.warning(
                f"EventBus depth {MAX_DEPTH} reached, dropped "
                f"{event.source}:{event.event_type}"
            )
            return False
        key = event.chain_key
        if key in self._seen:
            logger.warning(f"EventBus duplicate event blocked: {key}")
            return False
        self._seen.add(key)
        return True

    def emit(self, event: GameEvent) -> None:
        """Deliver event to its handlers, in subscription order.

        A failing handler is logged and does not stop the others.
        """
        if not self._admit(event):
            return
        event.depth = self._depth

        handlers = list(self._handlers.get(event.event_type, ()))
        if not handlers:
            logger.debug(f"EventBus: no subscribers for {event.event_type}")
            return

        logger.info(
            f"EventBus dispatch: {event.event_type} from {event.source} "
            f"(depth={event.depth}, handlers={len(handlers)})"
        )
        self.dispatched[event.event_type] += 1
        self._depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        f"EventBus handler {handler.__qualname__} failed on {event.event_type}"
                    )
        finally:
            self._depth -= 1

    def reset_chain(self) -> None:
        """End of a unit of work: forget delivered events."""
        self._seen.clear()
        self._depth = 0

    def clear(self) -> None:
        """Drop every subscription and the dispatch counts."""
        self._handlers.clear()
        self.dispatched.clear()
        self.reset_chain()

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())
