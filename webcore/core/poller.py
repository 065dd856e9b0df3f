#!/usr/bin/env python3
"""
Bounded polling loop.

wait_for() evaluates a predicate against a target until the predicate
reports success, the timeout elapses or the predicate raises an error that
is not in the ignorable set. Predicates return an Outcome: found(value) ends
the wait, pending(detail) asks for another poll. Time is read and spent
through a Clock so tests can run without sleeping.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type

from ..config import TimeoutsInSeconds
from ..exceptions import WaitTimeoutError

logger = logging.getLogger(__name__)


class Clock:
    """Wall-clock source used by every wait."""

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


SYSTEM_CLOCK = Clock()


@dataclass(frozen=True)
class Outcome:
    """Result of one predicate evaluation."""

    ready: bool
    value: Any = None
    detail: Optional[str] = None


def found(value=True) -> Outcome:
    """The awaited condition holds; ``value`` is returned from the wait."""
    return Outcome(True, value)


def pending(detail=None) -> Outcome:
    """The condition does not hold yet; ``detail`` describes what was seen."""
    return Outcome(False, None, detail)


Predicate = Callable[[Any], Outcome]


@dataclass(frozen=True)
class WaitSpec:
    """Parameters of a single wait."""

    predicate: Predicate
    timeout: float
    poll_interval: float = TimeoutsInSeconds.ONE_SECOND
    ignored_exceptions: Tuple[Type[BaseException], ...] = ()
    description: Optional[str] = None

    def __post_init__(self):
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")

    def run(self, target, clock: Optional[Clock] = None):
        """
        Poll ``target`` until the predicate succeeds.

        Args:
            target: Object handed to the predicate (a session or an element)
            clock: Clock to read and sleep on; the system clock by default

        Returns:
            The value carried by the predicate's found() outcome

        Raises:
            WaitTimeoutError: If the predicate never succeeds in time
        """
        clock = clock or SYSTEM_CLOCK
        description = self.description or getattr(self.predicate, "__name__", "condition")
        start = clock.monotonic()
        last_state = None

        while True:
            try:
                outcome = self.predicate(target)
            except self.ignored_exceptions as e:
                outcome = pending(f"{type(e).__name__}: {e}".strip())

            if outcome.ready:
                return outcome.value

            if outcome.detail is not None:
                last_state = outcome.detail

            elapsed = clock.monotonic() - start
            if elapsed >= self.timeout:
                logger.debug("Gave up waiting for %s after %.2fs", description, elapsed)
                raise WaitTimeoutError(description, self.timeout, elapsed, last_state)

            clock.sleep(min(self.poll_interval, self.timeout - elapsed))


def wait_for(target, predicate, timeout, poll_interval=TimeoutsInSeconds.ONE_SECOND,
             ignored_exceptions=(), description=None, clock=None):
    """
    Wait until ``predicate(target)`` returns a found() outcome.

    The predicate is evaluated once immediately. A timeout of zero or less
    means exactly one evaluation and no sleeping.

    Args:
        target: Session or element the predicate inspects
        predicate: Callable returning found(value) or pending(detail)
        timeout: Maximum time to wait in seconds
        poll_interval: Time between evaluations in seconds
        ignored_exceptions: Exception types treated as "not yet"
        description: Human-readable subject for timeout messages
        clock: Clock override, for tests

    Returns:
        The value of the successful outcome
    """
    spec = WaitSpec(
        predicate=predicate,
        timeout=timeout,
        poll_interval=poll_interval,
        ignored_exceptions=tuple(ignored_exceptions),
        description=description,
    )
    return spec.run(target, clock=clock)
