from __future__ import annotations
import tkinter as tk
from collections.abc import Callable


class TkInputMapper:
    """Forwards a jump request the moment Space goes down; key auto-repeat is ignored."""

    def __init__(self, root: tk.Tk, on_jump: Callable[[], object]) -> None:
        self._on_jump = on_jump
        self._jump_down = False

        root.bind("<KeyPress-space>", self._on_space_down)
        root.bind("<KeyRelease-space>", self._on_space_up)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_space_down(self, _evt: tk.Event) -> None:
        if not self._jump_down:
            self._on_jump()
        self._jump_down = True

    def _on_space_up(self, _evt: tk.Event) -> None:
        self._jump_down = False
