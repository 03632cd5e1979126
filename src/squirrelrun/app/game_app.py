from __future__ import annotations

import random
import tkinter as tk

from squirrelrun.app.game_loop import GameLoop
from squirrelrun.app.settings import AppSettings
from squirrelrun.domain.config import GameConfig
from squirrelrun.domain.game import Game
from squirrelrun.domain.game_state import GameOverEvent, RunPhase
from squirrelrun.ui.controls_view import ControlsView
from squirrelrun.ui.input_mapper import TkInputMapper
from squirrelrun.ui.tk_canvas_view import TkCanvasView


class GameApp:
    def __init__(self, settings: AppSettings) -> None:
        self.root = tk.Tk()
        self.root.title("Squirrel Run")

        config = GameConfig().with_viewport(settings.width, settings.height)
        self.game = Game(config, random.Random(settings.seed))
        self.game.add_game_over_listener(self._on_game_over)

        # --- Views ---
        self.controls = ControlsView(
            self.root,
            on_start_clicked=self._on_start,
            on_restart_clicked=self._on_restart,
        )
        self.controls.pack(side="top", fill="x")
        self.view = TkCanvasView(self.root, width=settings.width, height=settings.height)

        self.input = TkInputMapper(self.root, on_jump=self.game.request_jump)

        # Loop
        self.loop = GameLoop(
            root=self.root,
            update_fn=self.game.tick,
            render_fn=self._render,
            fps=settings.fps,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        # Initial static frame
        self.controls.set_buttons(start_enabled=True, restart_enabled=False)
        self._render()

    def run(self) -> None:
        self.root.mainloop()

    # ---------- Controls ----------

    def _on_start(self) -> None:
        if self.game.phase is RunPhase.GAME_OVER:
            self.game.reset()
        if not self.game.start():
            return
        self.view.hide_overlay()
        self.controls.set_buttons(start_enabled=False, restart_enabled=True)
        self.loop.start()

    def _on_restart(self) -> None:
        self.loop.stop()
        self.game.reset()
        self.view.hide_overlay()
        self.controls.set_buttons(start_enabled=True, restart_enabled=False)
        self._render()

    def _on_game_over(self, event: GameOverEvent) -> None:
        # Called from inside game.tick(); the loop will not reschedule after this.
        self.loop.stop()
        self.view.show_game_over(event)
        self.controls.set_buttons(start_enabled=True, restart_enabled=True)

    # ---------- Rendering ----------

    def _render(self) -> None:
        snap = self.game.snapshot()
        self.view.render_game(snap)
        self.controls.render_stats(snap.stats)

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
