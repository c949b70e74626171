from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List

from ..utils.logging import get_logger

logger = get_logger("frontpage.fetchers.gather")


def gather_all(*calls: Callable[[], Any], max_workers: int | None = None) -> List[Any]:
    """Run every call concurrently and return their results in call order.

    All calls are submitted before any result is awaited. If one or more
    fail, the first failure in call order is re-raised once every call has
    settled; no partial results are returned.
    """
    if not calls:
        return []

    workers = max_workers or len(calls)
    logger.debug("Starting %d concurrent call(s) (workers=%d)", len(calls), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(call) for call in calls]

    # Leaving the executor block waits for every future
    errors = [fut.exception() for fut in futures]
    for exc in errors:
        if exc is not None:
            raise exc
    return [fut.result() for fut in futures]
