"""Events — optional structured narration of what happens during a game.

Insects, the colony and the hive report noteworthy moments (a leaf
thrown, a bee swallowed, an ant drowned) to an ``EventSink``.  Every
event is also written to this module's logger.  Nothing in the game
reads events back, so a sink with no subscribers changes nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Categories of narrated game events."""

    DEPLOY = auto()
    REMOVE = auto()
    BOOST = auto()
    FOUND_BOOST = auto()
    THROW = auto()
    STING = auto()
    SPRAY = auto()
    EAT = auto()
    DIGEST = auto()
    COUGH = auto()
    EXPIRE = auto()
    DROWN = auto()
    ADVANCE = auto()
    INVADE = auto()
    TURN = auto()


@dataclass(frozen=True)
class GameEvent:
    """One narrated occurrence.

    Attributes:
        kind: Event category.
        message: Human-readable sentence.
        data: Extra structured fields (names, amounts, places).
    """

    kind: EventKind
    message: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class EventSink:
    """Fan-out hub for game events.

    Attributes:
        subscribers: Callbacks invoked with every emitted event, in
            subscription order.
    """

    subscribers: list[Callable[[GameEvent], None]] = field(default_factory=list)

    def subscribe(self, callback: Callable[[GameEvent], None]) -> None:
        self.subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[GameEvent], None]) -> None:
        if callback in self.subscribers:
            self.subscribers.remove(callback)

    def emit(self, kind: EventKind, message: str, **data: Any) -> None:
        """Log an event and hand it to every subscriber.

        Args:
            kind: Event category.
            message: Human-readable sentence.
            **data: Structured details attached to the event.
        """
        logger.debug("%s: %s", kind.name, message)
        if not self.subscribers:
            return
        event = GameEvent(kind=kind, message=message, data=data)
        for callback in list(self.subscribers):
            callback(event)
