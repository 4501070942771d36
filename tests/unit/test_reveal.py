"""Unit tests for the typewriter reveal state machine."""

import asyncio
from unittest.mock import patch

import pytest
import pytest_check as check

from nexchat.engine import Busy, Revealer, RevealStatus
from nexchat.engine.reveal import interval_from_env


class TestRevealCompletion:
    """Tests for reveals that run to the end."""

    async def test_publishes_every_prefix(self) -> None:
        """Text of length N yields N+1 snapshots from "" to the full text."""
        revealer = Revealer(interval=0)
        snapshots: list[str] = []

        result = await revealer.run("Hi there", snapshots.append)

        check.equal(result, "Hi there")
        check.equal(len(snapshots), len("Hi there") + 1)
        check.equal(snapshots[0], "")
        check.equal(snapshots[-1], "Hi there")
        check.equal(snapshots, ["Hi there"[:i] for i in range(len("Hi there") + 1)])
        check.equal(revealer.status, RevealStatus.COMPLETED)

    async def test_empty_text_publishes_once(self) -> None:
        """Empty text completes after publishing the empty prefix."""
        revealer = Revealer(interval=0)
        snapshots: list[str] = []

        await revealer.run("", snapshots.append)

        check.equal(snapshots, [""])
        check.equal(revealer.status, RevealStatus.COMPLETED)

    async def test_advances_by_code_point(self) -> None:
        """Non-ASCII characters are revealed whole, one per tick."""
        revealer = Revealer(interval=0)
        snapshots: list[str] = []

        await revealer.run("héllo👋", snapshots.append)

        check.equal(len(snapshots), 7)
        check.equal(snapshots[2], "hé")
        check.equal(snapshots[6], "héllo👋")

    async def test_starts_idle(self) -> None:
        """A fresh revealer is idle and not revealing."""
        revealer = Revealer(interval=0)

        check.equal(revealer.status, RevealStatus.IDLE)
        check.is_false(revealer.is_revealing)


class TestRevealCancellation:
    """Tests for stop() and task cancellation."""

    async def _reveal_with_stops(self, stop_calls: int) -> tuple[Revealer, list[str], str]:
        revealer = Revealer(interval=0)
        snapshots: list[str] = []

        def publish(snapshot: str) -> None:
            snapshots.append(snapshot)
            if len(snapshot) == 3:
                for _ in range(stop_calls):
                    revealer.stop()

        result = await revealer.run("Hello world", publish)
        return revealer, snapshots, result

    async def test_stop_publishes_full_text(self) -> None:
        """Stopping ends the reveal with the full text as final snapshot."""
        revealer, snapshots, result = await self._reveal_with_stops(1)

        check.equal(result, "Hello world")
        check.equal(snapshots, ["", "H", "He", "Hel", "Hello world"])
        check.equal(revealer.status, RevealStatus.CANCELLED)

    async def test_stop_is_idempotent(self) -> None:
        """Calling stop() several times behaves like calling it once."""
        _, once, _ = await self._reveal_with_stops(1)
        _, thrice, _ = await self._reveal_with_stops(3)

        assert once == thrice

    async def test_stop_when_idle_is_noop(self) -> None:
        """stop() before any reveal does not cancel the next one."""
        revealer = Revealer(interval=0)
        revealer.stop()
        snapshots: list[str] = []

        await revealer.run("abc", snapshots.append)

        check.equal(snapshots[-1], "abc")
        check.equal(len(snapshots), 4)
        check.equal(revealer.status, RevealStatus.COMPLETED)

    async def test_task_cancellation_ends_reveal(self) -> None:
        """Cancelling the awaiting task leaves the revealer reusable."""
        revealer = Revealer(interval=0.05)
        task = asyncio.create_task(revealer.run("long text", lambda _: None))
        await asyncio.sleep(0)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        check.equal(revealer.status, RevealStatus.CANCELLED)
        check.is_false(revealer.is_revealing)


class TestRevealConcurrency:
    """Tests for the one-reveal-at-a-time contract."""

    async def test_second_reveal_is_busy(self) -> None:
        """Starting a reveal while one runs raises Busy."""
        revealer = Revealer(interval=0.01)
        first = asyncio.create_task(revealer.run("abc", lambda _: None))
        await asyncio.sleep(0)

        with pytest.raises(Busy):
            await revealer.run("xyz", lambda _: None)

        assert await first == "abc"

    async def test_reveal_allowed_after_completion(self) -> None:
        """A finished reveal does not block the next one."""
        revealer = Revealer(interval=0)
        await revealer.run("one", lambda _: None)

        assert await revealer.run("two", lambda _: None) == "two"


class TestRevealInterval:
    """Tests for reading the tick interval from the environment."""

    def test_default_is_five_milliseconds(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            assert interval_from_env() == 0.005

    def test_accepts_fractional_milliseconds(self) -> None:
        with patch.dict("os.environ", {"REVEAL_INTERVAL_MS": "2.5"}):
            assert interval_from_env() == 0.0025
