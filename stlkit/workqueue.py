"""A thread-safe FIFO queue, a pool of workers that poll it, and a
process-wide single instance holder."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections import deque
from collections.abc import Callable
from typing import Any, ClassVar, Generic, Optional, TypeVar

T = TypeVar("T")

_log = logging.getLogger(__name__)


class ThreadSafeQueue(Generic[T]):
    """FIFO queue guarded by a lock, with a blocking pop."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, value: T) -> None:
        with self._cond:
            self._items.append(value)
            self._cond.notify()

    def try_pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None when the queue is empty."""
        with self._cond:
            if not self._items:
                return None
            return self._items.popleft()

    def wait_and_pop(self) -> T:
        """Remove and return the oldest item, waiting until one is available."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def empty(self) -> bool:
        with self._cond:
            return not self._items


class PollingPool:
    """Worker threads that repeatedly poll a shared queue for tasks.

    Closing stops the workers; tasks still queued at that point are not run.
    """

    def __init__(self, thread_count: Optional[int] = None) -> None:
        count = thread_count if thread_count is not None else (os.cpu_count() or 1)
        if count < 1:
            raise ValueError("thread_count must be at least 1")
        self._queue: ThreadSafeQueue[Callable[[], Any]] = ThreadSafeQueue()
        self._done = threading.Event()
        self._threads = [
            threading.Thread(target=self._work, daemon=True) for _ in range(count)
        ]
        for thread in self._threads:
            thread.start()

    def _work(self) -> None:
        while not self._done.is_set():
            task = self._queue.try_pop()
            if task is None:
                time.sleep(0)
                continue
            try:
                task()
            except Exception:
                _log.exception("task raised an exception")

    def submit(self, fn: Callable[[], Any]) -> None:
        """Queue a callable taking no arguments."""
        if self._done.is_set():
            raise RuntimeError("submit on closed pool")
        self._queue.push(fn)

    def close(self) -> None:
        """Signal the workers to stop and wait for them to exit."""
        self._done.set()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> PollingPool:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()


class Singleton:
    """One instance per class, created by the first caller of get_instance.

    Later calls return that instance and ignore the value they pass.
    """

    _instances: ClassVar[dict[type, Singleton]] = {}
    _guard: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, value: Any) -> None:
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    @classmethod
    def get_instance(cls, value: Any) -> Singleton:
        with Singleton._guard:
            instance = Singleton._instances.get(cls)
            if instance is None:
                instance = cls(value)
                Singleton._instances[cls] = instance
            return instance