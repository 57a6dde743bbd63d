"""Concurrent fan-out/join helper shared by the task orchestration."""

import asyncio
from typing import Any, Awaitable


async def gather_all(*awaitables: Awaitable[Any]) -> list[Any]:
    """Run the awaitables concurrently and return their results in order.

    Every awaitable runs to completion; none is cancelled when a sibling
    fails. If any of them raised, the exception of the left-most failing
    awaitable is re-raised, so the reported failure does not depend on
    completion order.
    """
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)
