"""A fixed set of threads executing queued jobs."""

from __future__ import annotations

import threading
import traceback
from collections import deque
from typing import Callable


class WorkerPool:
    """Runs added jobs on ``num_threads`` worker threads in FIFO order.

    Shutting down lets the workers finish every job already queued.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 0:
            raise ValueError("num_threads must not be negative")
        self._jobs: deque[Callable[[], None]] = deque()
        self._condition = threading.Condition()
        self._stopping = False
        self._workers = [
            threading.Thread(target=self._work, name=f"worker-{n}", daemon=True)
            for n in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def add_job(self, job: Callable[[], None]) -> None:
        """Queue ``job``; raises RuntimeError once the pool is shutting down."""
        with self._condition:
            if self._stopping:
                raise RuntimeError("WorkerPool is shut down")
            self._jobs.append(job)
            self._condition.notify()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._jobs or self._stopping)
                if not self._jobs:
                    return
                job = self._jobs.popleft()
            try:
                job()
            except Exception:
                traceback.print_exc()

    def shutdown(self) -> None:
        """Stop accepting jobs and wait for the workers to drain the queue."""
        with self._condition:
            self._stopping = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()