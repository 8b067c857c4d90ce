# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Bounded polling utilities for UI synchronization points.
#
# Key Features:
#   - Poll-until-true with a hard time bound
#   - Poll-until-stable for asynchronously rendered content
#   - Timeouts converted to a False result; the caller decides what a miss means
#
# Usage:
#   appeared = await wait_until(check_banner, config=WaitConfig(timeout_ms=5000))
#   settled, texts = await wait_until_stable(read_errors, config=errors_wait)
#
# ================================================================================

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Tuple, TypeVar

from loguru import logger


T = TypeVar("T")


@dataclass(frozen=True)
class WaitConfig:
    """
    Configuration for a bounded wait.

    Attributes:
        timeout_ms: Hard upper bound for the whole wait
        interval_ms: Pause between two samples
    """
    timeout_ms: int = 5000
    interval_ms: int = 100


async def wait_until(
    check_fn: Callable[[], Awaitable[bool]],
    description: str = "condition",
    config: WaitConfig = WaitConfig(),
) -> bool:
    """
    Poll ``check_fn`` until it returns True or the bound elapses.

    Errors raised by ``check_fn`` count as a failed sample.

    Args:
        check_fn: Async predicate
        description: Human-readable description for logging
        config: Time bound and poll interval

    Returns:
        True if the condition was met within the bound, False otherwise
    """
    deadline = time.monotonic() + config.timeout_ms / 1000
    attempt = 0
    last_error: Optional[str] = None

    while True:
        attempt += 1
        try:
            if await check_fn():
                logger.debug(f"Wait met after {attempt} attempt(s): {description}")
                return True
        except Exception as e:
            last_error = str(e)
            logger.debug(f"Attempt {attempt} for '{description}' errored: {e}")

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        await asyncio.sleep(min(config.interval_ms / 1000, remaining))

    logger.debug(
        f"Timeout after {config.timeout_ms}ms waiting for: {description} "
        f"(attempts={attempt}, last error={last_error})"
    )
    return False


async def wait_until_stable(
    sample_fn: Callable[[], Awaitable[T]],
    description: str = "stable value",
    config: WaitConfig = WaitConfig(),
    accept: Callable[[Any], bool] = bool,
) -> Tuple[bool, Optional[T]]:
    """
    Poll ``sample_fn`` until two consecutive samples are equal and accepted.

    Args:
        sample_fn: Async function producing a comparable snapshot
        description: Human-readable description for logging
        config: Time bound and poll interval
        accept: Predicate a sample must satisfy to count as settled

    Returns:
        (settled, last_sample). ``settled`` is False when the bound elapsed
        first; the last sample taken is still returned.
    """
    deadline = time.monotonic() + config.timeout_ms / 1000
    previous: Optional[T] = None
    has_previous = False
    current: Optional[T] = None

    while True:
        try:
            current = await sample_fn()
        except Exception as e:
            logger.debug(f"Sampling '{description}' errored: {e}")
            has_previous = False
        else:
            if has_previous and current == previous and accept(current):
                logger.debug(f"Settled: {description} -> {current!r}")
                return True, current
            previous, has_previous = current, True

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            logger.debug(f"Did not settle within {config.timeout_ms}ms: {description}")
            return False, current
        await asyncio.sleep(min(config.interval_ms / 1000, remaining))


__all__ = [
    "WaitConfig",
    "wait_until",
    "wait_until_stable",
]
