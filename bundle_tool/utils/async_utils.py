# bundle_tool/utils/async_utils.py
"""Asynchronous operation utilities"""

import asyncio
from typing import Any, Callable, Coroutine, List, TypeVar

T = TypeVar('T')


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run async coroutine in sync context

    Args:
        coro: Coroutine to run

    Returns:
        Coroutine result
    """
    loop = None
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # No running loop
        pass

    if loop and loop.is_running():
        # Already in async context, run on a fresh loop in a new thread
        import threading

        result = None
        exception = None

        def run_in_thread():
            nonlocal result, exception
            try:
                result = asyncio.run(coro)
            except BaseException as e:
                exception = e

        thread = threading.Thread(target=run_in_thread)
        thread.start()
        thread.join()

        if exception:
            raise exception
        return result
    else:
        return asyncio.run(coro)


async def run_in_chunks(items: List[Any],
                        processor: Callable[[Any], Coroutine[Any, Any, T]],
                        chunk_size: int = 10) -> List[T]:
    """
    Process items in chunks to limit concurrency

    Args:
        items: Items to process
        processor: Async processor function
        chunk_size: Number of items to process concurrently

    Returns:
        List of results in item order
    """
    results = []

    for i in range(0, len(items), chunk_size):
        chunk = items[i:i + chunk_size]
        chunk_results = await asyncio.gather(
            *[processor(item) for item in chunk]
        )
        results.extend(chunk_results)

    return results
