"""Thread-based building blocks: a locked counter, a bounded producer/consumer
buffer, a worker pool, a dependency-aware task scheduler, deadlock-free
multi-lock acquisition and a parallel quicksort."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import Future
from contextlib import contextmanager
from typing import Any, Optional, TypeVar

T = TypeVar("T")

_PARALLEL_DEPTH = 4


class SharedCounter:
    """Integer counter whose increments are serialised by a mutex."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self, times: int = 1) -> int:
        """Add one to the counter ``times`` times, locking for each step."""
        current = self._value
        for _ in range(times):
            with self._lock:
                self._value += 1
                current = self._value
        return current

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


def run_counters(num_threads: int, increments: int) -> int:
    """Let ``num_threads`` threads each increment one shared counter; return the total."""
    counter = SharedCounter()
    threads = [
        threading.Thread(target=counter.increment, args=(increments,))
        for _ in range(num_threads)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter.value


class ProducerConsumer:
    """Bounded buffer shared by a producing and a consuming thread."""

    def __init__(
        self,
        max_size: int,
        *,
        produce_delay: float = 0.1,
        consume_delay: float = 0.15,
        rng: Optional[random.Random] = None,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._max_size = max_size
        self._buffer: deque[int] = deque()
        self._cv = threading.Condition()
        self._produce_delay = produce_delay
        self._consume_delay = consume_delay
        self._rng = rng or random.Random()

    @property
    def max_size(self) -> int:
        return self._max_size

    def produce(self, count: int) -> list[int]:
        """Put ``count`` random numbers from 1 to 100 into the buffer, waiting for room."""
        produced: list[int] = []
        for _ in range(count):
            with self._cv:
                self._cv.wait_for(lambda: len(self._buffer) < self._max_size)
                item = self._rng.randint(1, 100)
                self._buffer.append(item)
                self._cv.notify_all()
            produced.append(item)
            if self._produce_delay:
                time.sleep(self._produce_delay)
        return produced

    def consume(self, count: int) -> list[int]:
        """Take ``count`` items from the buffer in FIFO order, waiting for data."""
        consumed: list[int] = []
        for _ in range(count):
            with self._cv:
                self._cv.wait_for(lambda: bool(self._buffer))
                item = self._buffer.popleft()
                self._cv.notify_all()
            consumed.append(item)
            if self._consume_delay:
                time.sleep(self._consume_delay)
        return consumed


class ThreadPool:
    """Fixed set of worker threads taking callables from a shared queue.

    Shutting down lets the workers finish every task already queued.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 1:
            raise ValueError("num_threads must be at least 1")
        self._tasks: deque[tuple[Future, Callable[..., Any], tuple, dict]] = deque()
        self._condition = threading.Condition()
        self._stopped = False
        self._joined = False
        self._workers = [
            threading.Thread(target=self._work, daemon=True) for _ in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stopped or bool(self._tasks))
                if self._stopped and not self._tasks:
                    return
                future, fn, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def submit(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._condition:
            if self._stopped:
                raise RuntimeError("enqueue on stopped ThreadPool.")
            self._tasks.append((future, fn, args, kwargs))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, run the queued ones and join the workers."""
        with self._condition:
            self._stopped = True
            self._condition.notify_all()
            if self._joined:
                return
            self._joined = True
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.shutdown()


class TaskScheduler:
    """Runs each task on its own thread; a task may wait on another's result."""

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    def _spawn(self, job: Callable[[], T]) -> Future:
        future: Future = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = job()
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

        thread = threading.Thread(target=run, daemon=True)
        with self._lock:
            self._threads.append(thread)
        thread.start()
        return future

    def submit(self, func: Callable[..., T], *args: Any) -> Future:
        """Start ``func(*args)`` at once and return a future for its result."""
        return self._spawn(lambda: func(*args))

    def submit_with_dependency(
        self, dependency: Future, func: Callable[..., T], *args: Any
    ) -> Future:
        """Start a task computing ``func(dependency.result(), *args)``.

        An exception raised by the dependency is raised by the new task too.
        """
        return self._spawn(lambda: func(dependency.result(), *args))

    def shutdown(self) -> None:
        """Wait for every task started so far to finish."""
        with self._lock:
            threads = list(self._threads)
            self._threads.clear()
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()


@contextmanager
def lock_all(*args: Any) -> Iterator[None]:
    """Acquire every lock given without risk of deadlock; release them on exit.

    Blocks on one lock, tries the rest without blocking and, on failure,
    releases everything and starts again from the lock that was busy.
    """
    locks = list(args)
    if len({id(lock) for lock in locks}) != len(locks):
        raise ValueError("the same lock was given more than once")
    if not locks:
        yield
        return
    first = 0
    while True:
        locks[first].acquire()
        acquired = [locks[first]]
        busy: Optional[int] = None
        for position, lock in enumerate(locks):
            if position == first:
                continue
            if lock.acquire(blocking=False):
                acquired.append(lock)
            else:
                busy = position
                break
        if busy is None:
            break
        for lock in reversed(acquired):
            lock.release()
        first = busy
    try:
        yield
    finally:
        for lock in reversed(locks):
            lock.release()


def _partition(items: list, left: int, right: int) -> int:
    pivot = items[right]
    store = left
    for position in range(left, right):
        if items[position] < pivot:
            items[store], items[position] = items[position], items[store]
            store += 1
    items[store], items[right] = items[right], items[store]
    return store


def _sort_range(items: list, left: int, right: int, depth: int) -> None:
    while left < right:
        split = _partition(items, left, right)
        if depth > 0:
            workers = [
                threading.Thread(target=_sort_range, args=(items, left, split - 1, depth - 1)),
                threading.Thread(target=_sort_range, args=(items, split + 1, right, depth - 1)),
            ]
            for worker in workers:
                worker.start()
            for worker in workers:
                worker.join()
            return
        if split - left < right - split:
            _sort_range(items, left, split - 1, 0)
            left = split + 1
        else:
            _sort_range(items, split + 1, right, 0)
            right = split - 1


def quick_sort(values: Iterable[T]) -> list[T]:
    """Return the values sorted ascending, sorting partitions on separate threads."""
    items = list(values)
    _sort_range(items, 0, len(items) - 1, _PARALLEL_DEPTH)
    return items