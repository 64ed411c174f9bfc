"""Executors used to run upload operations."""

from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any, Callable


class DirectExecutor(Executor):
    """Executor running each submitted callable inline, in the caller's thread.

    Exceptions are stored on the returned future. ``KeyboardInterrupt``,
    ``SystemExit`` and other non-``Exception`` errors propagate to the caller.
    """

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        future: Future = Future()
        future.set_running_or_notify_cancel()
        try:
            result = fn(*args, **kwargs)
        except Exception as e:
            future.set_exception(e)
        else:
            future.set_result(result)
        return future
