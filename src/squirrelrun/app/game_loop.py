from __future__ import annotations

import time
import tkinter as tk
from collections.abc import Callable


class GameLoop:
    """Frame clock: calls update_fn(dt_ms) then render_fn() roughly fps times a second."""

    def __init__(
        self,
        *,
        root: tk.Tk,
        update_fn: Callable[[float], None],
        render_fn: Callable[[], None],
        fps: int = 60,
        max_dt_ms: float = 100.0,
    ) -> None:
        self._root = root
        self._update_fn = update_fn
        self._render_fn = render_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))
        self._max_dt_ms = max_dt_ms

        self._running = False
        self._after_id: str | None = None
        self._last_t = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_t = time.monotonic()
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        self._after_id = None
        if not self._running:
            return

        now = time.monotonic()
        dt_ms = (now - self._last_t) * 1000.0
        self._last_t = now

        # Clamp to avoid a burst of spawns after pauses/minimize.
        if dt_ms > self._max_dt_ms:
            dt_ms = self._max_dt_ms

        try:
            self._update_fn(dt_ms)
            self._render_fn()
        except Exception:
            self.stop()
            raise

        # update_fn may have stopped us (game over).
        if self._running:
            self._schedule_next()
