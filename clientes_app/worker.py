"""
Background task runner.

Design:
- Each gateway call runs in its own daemon thread so the UI stays responsive.
- The outcome is posted back to the Tk main loop with root.after(0, ...), so every
  state mutation happens on the main thread (one callback per submitted task).
- Timers (call_later / cancel) are thin wrappers over Tk's after/after_cancel.
 - Methods:
    submit(fn, on_success, on_error): run fn off-thread, deliver its result or exception
    call_later(delay_ms, fn): schedule fn on the main loop, returns a handle
    cancel(handle): cancel a pending call_later
- Thread-safety: Callbacks always run on the main thread.
"""

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)


class TkTaskRunner:
    def __init__(self, root) -> None:
        self.root = root

    def submit(self, fn: Callable[[], Any], on_success: Callable[[Any], None],
               on_error: Callable[[Exception], None]) -> threading.Thread:
        def _work() -> None:
            try:
                result = fn()
            except Exception as exc:
                logger.debug("Task %s failed: %s", getattr(fn, "__name__", fn), exc)
                self.root.after(0, lambda error=exc: on_error(error))
                return
            self.root.after(0, lambda: on_success(result))

        thread = threading.Thread(target=_work, daemon=True)
        thread.start()
        return thread

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> str:
        return self.root.after(delay_ms, fn)

    def cancel(self, handle: str) -> None:
        self.root.after_cancel(handle)
