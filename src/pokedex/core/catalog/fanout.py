# pokedex/core/catalog/fanout.py
"""
Join-all fan-out for per-item hydration.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def gather_bounded(
    func: Callable[[T], Awaitable[R]],
    items: Sequence[T],
    *,
    max_concurrency: int | None = None,
) -> list[R]:
    """Run ``func`` over every item concurrently and wait for all of them.

    Results are index-aligned with ``items`` regardless of completion
    order. At most ``max_concurrency`` calls are in flight at once
    (``None`` means one per item). The first exception propagates and the
    remaining calls are cancelled.
    """
    if not items:
        return []

    if max_concurrency is not None and max_concurrency < 1:
        raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")

    semaphore = asyncio.Semaphore(max_concurrency or len(items))

    async def _run(item: T) -> R:
        async with semaphore:
            return await func(item)

    logger.debug(
        "Fan-out: %d item(s), max_concurrency=%s", len(items), max_concurrency
    )

    tasks = [asyncio.ensure_future(_run(item)) for item in items]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
