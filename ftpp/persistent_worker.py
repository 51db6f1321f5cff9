"""A background thread that keeps running a set of named tasks."""

from __future__ import annotations

import threading
import time
import traceback
from typing import Callable


class PersistentWorker:
    """Runs every registered task over and over until stopped.

    The worker sleeps while no task is registered.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Callable[[], None]] = {}
        self._condition = threading.Condition()
        self._running = True
        self._thread = threading.Thread(
            target=self._loop, name="persistent-worker", daemon=True
        )
        self._thread.start()

    @property
    def running(self) -> bool:
        return self._running

    def add_task(self, name: str, task: Callable[[], None]) -> None:
        """Register ``task`` under ``name``, replacing any task of that name."""
        with self._condition:
            self._tasks[name] = task
            self._condition.notify_all()

    def remove_task(self, name: str) -> None:
        """Unregister the task called ``name``; unknown names are ignored."""
        with self._condition:
            self._tasks.pop(name, None)

    def _loop(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: not self._running or self._tasks)
                if not self._running:
                    return
                tasks = list(self._tasks.values())
            for task in tasks:
                try:
                    task()
                except Exception:
                    traceback.print_exc()
            time.sleep(0)

    def stop(self) -> None:
        """Stop the loop and wait for the worker thread to end."""
        with self._condition:
            self._running = False
            self._condition.notify_all()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> PersistentWorker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()