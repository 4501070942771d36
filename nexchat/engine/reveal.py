"""Typewriter reveal of an already received response.

The full text is known up front. The reveal only paces how it appears:
one code point per tick, cancellable between ticks.
"""

import asyncio
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from nexchat.engine.errors import Busy

logger = logging.getLogger(__name__)


def interval_from_env() -> float:
    """Seconds between reveal ticks, from `REVEAL_INTERVAL_MS` (default 5 ms)."""
    return float(os.getenv("REVEAL_INTERVAL_MS", "5")) / 1000


DEFAULT_REVEAL_INTERVAL = interval_from_env()


class RevealStatus(str, Enum):
    """Lifecycle of a reveal."""

    IDLE = "idle"
    REVEALING = "revealing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class RevealState:
    """Transient progress of the running reveal."""

    target_text: str
    revealed_prefix_length: int = 0
    cancelled: bool = False


class Revealer:
    """Publishes growing prefixes of a text on a fixed interval.

    Only one reveal may run at a time. ``stop()`` is advisory: the running
    reveal notices it at the next tick, publishes the full text and ends.
    """

    def __init__(self, interval: float = DEFAULT_REVEAL_INTERVAL) -> None:
        """Initialize the revealer.

        Args:
            interval: Pause between ticks, in seconds.
        """
        self.interval = interval
        self.status = RevealStatus.IDLE
        self._state: RevealState | None = None

    @property
    def is_revealing(self) -> bool:
        return self.status is RevealStatus.REVEALING

    def stop(self) -> None:
        """Request cancellation of the running reveal. No-op when idle."""
        if self._state is not None:
            self._state.cancelled = True

    async def run(self, text: str, publish: Callable[[str], None]) -> str:
        """Reveal ``text`` by publishing each prefix to ``publish``.

        Args:
            text: The complete text to reveal.
            publish: Receives every partial snapshot, starting with "".

        Returns:
            The full text, whether the reveal completed or was cancelled.

        Raises:
            Busy: If another reveal is running.
        """
        if self.is_revealing:
            raise Busy("A reveal is already running")

        state = RevealState(target_text=text)
        self._state = state
        self.status = RevealStatus.REVEALING

        try:
            publish("")
            while state.revealed_prefix_length < len(text):
                await asyncio.sleep(self.interval)
                if state.cancelled:
                    publish(text)
                    self.status = RevealStatus.CANCELLED
                    logger.debug(
                        f"Reveal cancelled at {state.revealed_prefix_length}/{len(text)}"
                    )
                    return text
                state.revealed_prefix_length += 1
                publish(text[: state.revealed_prefix_length])

            self.status = RevealStatus.COMPLETED
            return text
        finally:
            # Task cancellation or a failing publisher leaves no reveal running
            if self.status is RevealStatus.REVEALING:
                self.status = RevealStatus.CANCELLED
            self._state = None
