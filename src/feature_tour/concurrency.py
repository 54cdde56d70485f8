"""Worker pool dispatch and a deferred computation with a continuation."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor


logger = logging.getLogger(__name__)

TASK_RESULT = "Task Complete"


def _report_task(index: int) -> int:
    print(f"Running task {index} on thread: {threading.current_thread().name}")
    return index


def demonstrate_worker_pool(task_count: int = 5) -> list[Future[int]]:
    """Submit numbered tasks to a thread pool without waiting for them.

    The pool is shut down with ``wait=False``: the routine returns once every
    task is submitted and leaves completion to the workers.
    """

    executor = ThreadPoolExecutor(thread_name_prefix="tour-worker")
    futures = [executor.submit(_report_task, i) for i in range(1, task_count + 1)]
    executor.shutdown(wait=False)
    logger.debug("submitted %d tasks to the worker pool", len(futures))
    return futures


def _delayed_result(delay: float) -> str:
    try:
        time.sleep(delay)
    except InterruptedError:
        logger.exception("deferred computation interrupted while sleeping")
    return TASK_RESULT


def async_task(delay: float = 1.0) -> Future[str]:
    """Return a future that yields ``TASK_RESULT`` after ``delay`` seconds."""
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tour-async")
    future = executor.submit(_delayed_result, delay)
    executor.shutdown(wait=False)
    return future


def print_when_done(future: Future[str]) -> None:
    """Attach a continuation that prints the result once it is available."""
    future.add_done_callback(lambda done: print(done.result()))


def demonstrate_deferred_computation(delay: float = 1.0) -> Future[str]:
    future = async_task(delay)
    print_when_done(future)
    return future


def run_all() -> None:
    """Run both concurrency demos; neither waits for its workers."""
    demonstrate_worker_pool()
    demonstrate_deferred_computation()


if __name__ == "__main__":
    run_all()
