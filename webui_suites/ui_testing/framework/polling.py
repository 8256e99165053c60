# ================================================================================
# Polling Module
# ================================================================================
#
# Bounded "poll until predicate or timeout" primitive shared by every
# readiness and visibility check of the interaction driver.
#
# Key Features:
#   - Fixed polling interval with an overall timeout
#   - Wall-clock budget (readiness polls) or interval-counted budget
#     (dynamic visibility waits)
#   - Predicate errors are logged and polling continues
#   - Injectable delay and clock so callers can drive it from the page
#
# Usage:
#   ready = await poll_until(check, timeout_ms=60000, interval_ms=500,
#                            delay=driver.delay, clock=time.monotonic)
#
# ================================================================================

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Union

from loguru import logger

from .errors import ConfigurationError


Predicate = Callable[["PollState"], Union[bool, Awaitable[bool]]]
Delay = Callable[[float], Awaitable[Any]]
Clock = Callable[[], float]


@dataclass
class PollState:
    """
    Per-operation polling state.

    Attributes:
        timeout_ms: Total budget in milliseconds
        interval_ms: Pause between attempts in milliseconds
        started_at: Clock reading (seconds) when polling started
        attempts: Number of predicate evaluations so far
        consumed_ms: Budget consumed by completed pauses (interval-counted mode)
        last_error: Last exception raised by the predicate, if any
    """
    timeout_ms: float
    interval_ms: float
    clock: Optional[Clock] = None
    started_at: float = 0.0
    attempts: int = 0
    consumed_ms: float = 0.0
    last_error: Optional[BaseException] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.clock is not None:
            self.started_at = self.clock()

    @property
    def elapsed_ms(self) -> float:
        if self.clock is None:
            return self.consumed_ms
        return (self.clock() - self.started_at) * 1000.0

    @property
    def remaining_ms(self) -> float:
        return max(self.timeout_ms - self.elapsed_ms, 0.0)

    @property
    def exhausted(self) -> bool:
        if self.clock is None:
            # Budget counted down by intervals; anything under 1 ms is spent.
            return self.remaining_ms < 1
        return self.elapsed_ms >= self.timeout_ms


async def poll_until(
    predicate: Predicate,
    timeout_ms: float,
    interval_ms: float,
    delay: Delay,
    clock: Optional[Clock] = None,
    description: str = "condition",
) -> bool:
    """
    Evaluate ``predicate`` until it returns True or the budget is spent.

    The predicate runs immediately, then once per ``interval_ms``. Errors it
    raises are logged and treated as "not yet".

    Args:
        predicate: Sync or async callable receiving the PollState
        timeout_ms: Total budget in milliseconds
        interval_ms: Pause between attempts in milliseconds
        delay: Awaitable pause function taking milliseconds
        clock: Monotonic clock in seconds. When None, the budget is counted
            down by ``interval_ms`` per pause instead of wall-clock time.
        description: Human-readable description for logging

    Returns:
        True if the predicate held before the budget ran out, else False

    Raises:
        ConfigurationError: Non-positive interval or negative timeout
    """
    if interval_ms <= 0 or timeout_ms < 0:
        raise ConfigurationError(
            f"Polling {description} needs interval > 0 and timeout >= 0 "
            f"(got interval={interval_ms}, timeout={timeout_ms})"
        )

    state = PollState(timeout_ms=timeout_ms, interval_ms=interval_ms, clock=clock)

    while True:
        state.attempts += 1
        try:
            result = predicate(state)
            if inspect.isawaitable(result):
                result = await result
            if result:
                logger.debug(
                    f"{description} satisfied after {state.attempts} attempt(s) "
                    f"({state.elapsed_ms:.0f} ms)"
                )
                return True
        except Exception as e:
            state.last_error = e
            logger.warning(f"Attempt {state.attempts} for {description} failed: {e}")

        if clock is not None and state.exhausted:
            break

        await delay(interval_ms)
        state.consumed_ms += interval_ms

        if state.exhausted:
            break

    logger.debug(
        f"{description} not satisfied after {state.attempts} attempt(s) "
        f"({state.elapsed_ms:.0f} ms of {timeout_ms} ms)"
    )
    return False


__all__ = [
    "PollState",
    "poll_until",
]
