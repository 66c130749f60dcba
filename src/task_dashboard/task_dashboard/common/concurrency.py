from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Callable, Sequence


def run_all(calls: Sequence[Callable[[], Any]]) -> list[Any]:
    """Run independent calls in parallel and return their results in order.

    Every call is allowed to settle; if any of them failed, the first failure
    (in call order) is re-raised and the other results are discarded.
    """
    if not calls:
        return []

    with ThreadPoolExecutor(max_workers=len(calls), thread_name_prefix="sheet-fetch") as pool:
        futures = [pool.submit(call) for call in calls]
        wait(futures)

    for future in futures:
        exc = future.exception()
        if exc is not None:
            raise exc
    return [future.result() for future in futures]
