from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from squirrelrun.domain.game_state import RunStats


class ControlsView(tk.Frame):
    def __init__(
        self,
        master: tk.Misc,
        *,
        on_start_clicked: Callable[[], None],
        on_restart_clicked: Callable[[], None],
    ) -> None:
        super().__init__(master)

        self._start_btn = tk.Button(self, text="Start ▶", command=on_start_clicked, takefocus=0)
        self._start_btn.pack(side="left", padx=4, pady=4)
        self._restart_btn = tk.Button(self, text="Restart", command=on_restart_clicked, takefocus=0)
        self._restart_btn.pack(side="left", padx=4, pady=4)

        self._score = tk.Label(self, text="", anchor="w")
        self._score.pack(side="left", padx=(12, 4))
        self._passed = tk.Label(self, text="", anchor="w")
        self._passed.pack(side="left", padx=4)
        self._speed = tk.Label(self, text="", anchor="w")
        self._speed.pack(side="left", padx=4)

        tk.Label(self, text="Space = jump", anchor="e").pack(side="right", padx=8)

    def set_buttons(self, *, start_enabled: bool, restart_enabled: bool) -> None:
        self._start_btn.config(state="normal" if start_enabled else "disabled")
        self._restart_btn.config(state="normal" if restart_enabled else "disabled")

    def render_stats(self, stats: RunStats) -> None:
        self._score.config(text=f"Score: {stats.score}")
        self._passed.config(text=f"Passed: {stats.passed_count}")
        self._speed.config(text=f"Speed: {stats.speed_multiplier:.2f}")
