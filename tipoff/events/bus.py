"""
Event bus for simulation progress.

Handlers subscribe to an event class and receive that class and its
subclasses, so a handler on SimulationEvent sees every event. The most
specific subscription runs first.

A season emits its events one matchday at a time: inside ``deferred()``
events are queued and only delivered once the whole matchday (games and
development) has been applied.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from tipoff.events.types import SimulationEvent

T = TypeVar("T", bound=SimulationEvent)
EventHandler = Callable[[SimulationEvent], None]


class EventBus:
    """
    Per-simulation pub/sub bus.

    Example:
        bus = EventBus()
        bus.subscribe(GameCompleted, lambda e: print(e.home_score, e.away_score))
        simulator = PossessionSimulator(event_bus=bus)
    """

    def __init__(self) -> None:
        self._handlers: dict[type[SimulationEvent], list[EventHandler]] = {}
        self._pending: Optional[list[SimulationEvent]] = None

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Register a handler for an event class and its subclasses."""
        self._handlers.setdefault(event_type, []).append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler for every event; it runs after typed handlers."""
        self.subscribe(SimulationEvent, handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        self.unsubscribe(SimulationEvent, handler)

    def clear(self) -> None:
        self._handlers.clear()

    def handler_count(self, event_type: Optional[type[SimulationEvent]] = None) -> int:
        """
        Number of handlers an event of ``event_type`` would reach.

        With no type, the total number of registered handlers.
        """
        if event_type is None:
            return sum(len(handlers) for handlers in self._handlers.values())
        return sum(len(self._handlers.get(cls, ())) for cls in event_type.__mro__)

    def wants(self, event_type: type[SimulationEvent]) -> bool:
        """Whether anyone is listening for this event type."""
        return self.handler_count(event_type) > 0

    # =========================================================================
    # Delivery
    # =========================================================================

    def emit(self, event: SimulationEvent) -> None:
        """Deliver an event now, or queue it inside a deferred block."""
        if self._pending is not None:
            self._pending.append(event)
            return
        self._dispatch(event)

    @contextmanager
    def deferred(self) -> Iterator[None]:
        """
        Hold events emitted inside the block and deliver them in order when
        it exits normally. If the block raises, held events are dropped.
        Nested blocks join the outermost one.
        """
        if self._pending is not None:
            yield
            return

        held: list[SimulationEvent] = []
        self._pending = held
        try:
            yield
        finally:
            self._pending = None
        for event in held:
            self._dispatch(event)

    @property
    def pending_count(self) -> int:
        return len(self._pending) if self._pending is not None else 0

    def _dispatch(self, event: SimulationEvent) -> None:
        for cls in type(event).__mro__:
            for handler in list(self._handlers.get(cls, ())):
                handler(event)
