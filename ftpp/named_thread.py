"""A named thread that announces the start and end of its work."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from ftpp.thread_safe_iostream import thread_safe_cout


class Thread:
    """Runs a function on a thread whose console output is prefixed with its name."""

    def __init__(self, name: str, func: Callable[[], None]) -> None:
        self._name = name
        self._func = func
        self._thread: Optional[threading.Thread] = None
        self._running = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_running(self) -> bool:
        return self._running

    def _run(self) -> None:
        cout = thread_safe_cout()
        cout.set_prefix(self._name)
        cout.writeline(" Starting execution")
        self._func()
        cout.writeline(" Finished execution")

    def start(self) -> None:
        """Start the thread unless it is already running."""
        if self._running:
            return
        self._running = True
        self._thread = threading.Thread(target=self._run, name=self._name)
        self._thread.start()

    def stop(self) -> None:
        """Wait for the thread to finish and report that it stopped."""
        if not self._running or self._thread is None:
            return
        self._thread.join()
        self._thread = None
        self._running = False
        print(f"{self._name} Stopped", flush=True)