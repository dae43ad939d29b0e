# Concurrent fan-out over named coroutine factories with an explicit join policy.
# Created: 2026-09-15
#
# TOLERANT: every call runs to completion; failures and timeouts are logged
#           and dropped from the result.
# STRICT:   the first failure (in completion order) is re-raised.

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JoinPolicy(str, Enum):
    """How fan_out() treats a failing call."""

    TOLERANT = "tolerant"
    STRICT = "strict"


async def _run_one(
    name: str,
    factory: Callable[[], Awaitable[T]],
    timeout: float | None,
) -> T:
    if timeout is None:
        return await factory()
    try:
        return await asyncio.wait_for(factory(), timeout=timeout)
    except TimeoutError:
        logger.warning("'%s' did not finish within %.1fs", name, timeout)
        raise


async def fan_out(
    calls: Mapping[str, Callable[[], Awaitable[T]]],
    *,
    policy: JoinPolicy,
    timeout: float | None = None,
    label: str = "call",
) -> dict[str, T]:
    """Start every call at once and join them according to *policy*.

    Args:
        calls: Name -> zero-argument coroutine factory. Iteration order of the
            mapping is the order of the returned dict.
        policy: TOLERANT drops failures, STRICT re-raises the first one.
        timeout: Per-call limit in seconds (None = unbounded).
        label: Used in log messages ("widgets", "preload", ...).

    Returns:
        Name -> result for every call that succeeded.
    """
    if not calls:
        return {}

    names = list(calls)
    coros = [_run_one(name, calls[name], timeout) for name in names]

    if policy is JoinPolicy.STRICT:
        results = await asyncio.gather(*coros)
        return dict(zip(names, results))

    outcomes = await asyncio.gather(*coros, return_exceptions=True)
    collected: dict[str, T] = {}
    for name, outcome in zip(names, outcomes):
        if isinstance(outcome, asyncio.CancelledError):
            logger.warning("%s for '%s' was cancelled", label, name)
            continue
        if isinstance(outcome, Exception):
            logger.warning(
                "%s for '%s' failed: %s",
                label,
                name,
                outcome,
                exc_info=(type(outcome), outcome, outcome.__traceback__),
            )
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        collected[name] = outcome
    return collected
