# core/fanout.py
import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def gather_settled(
    items: Sequence[T], fetch: Callable[[T], Awaitable[Optional[R]]]
) -> List[R]:
    """
    Run `fetch(item)` for every item concurrently and wait for all of them.

    Each call has its own error boundary: an exception (or a None result) drops
    that item only. Survivors keep the order of `items`, not completion order.
    """

    async def _settle(index: int, item: T) -> Optional[R]:
        try:
            return await fetch(item)
        except Exception as e:
            logger.warning("Fan-out item %d (%r) failed: %s", index, item, e)
            return None

    results = await asyncio.gather(*(_settle(i, it) for i, it in enumerate(items)))
    return [r for r in results if r is not None]
