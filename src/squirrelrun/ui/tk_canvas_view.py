import tkinter as tk
from squirrelrun.domain.game_state import GameOverEvent, GameSnapshot


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int) -> None:
        self._w = width
        self._h = height

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="#cfefff")
        self.canvas.pack(side="top", fill="both", expand=True)

        self._ground_id = self.canvas.create_rectangle(0, 0, width, 0, outline="", fill="#8dbb6b")
        self._actor_id = self.canvas.create_rectangle(0, 0, 0, 0, outline="", fill="#b05a2d")
        self._eye_id = self.canvas.create_oval(0, 0, 0, 0, outline="", fill="#111")
        self._hud_id = self.canvas.create_text(
            12, 12, anchor="nw", text="", fill="#221144", font=("TkDefaultFont", 11)
        )
        self._overlay_id = self.canvas.create_text(
            width / 2, height / 3, text="", fill="#221144", font=("TkDefaultFont", 16, "bold"), justify="center"
        )

    def render_game(self, snap: GameSnapshot) -> None:
        gy = snap.ground_y
        self.canvas.coords(self._ground_id, 0, gy, self._w, self._h)

        a = snap.actor
        self.canvas.coords(self._actor_id, a.x, a.y, a.right, a.bottom)
        ex, ey = a.right - 18, a.y + 10
        self.canvas.coords(self._eye_id, ex - 3, ey - 3, ex + 3, ey + 3)

        # Redraw obstacles (few per frame, cheap enough)
        self.canvas.delete("obstacle")
        for o in snap.obstacles:
            self.canvas.create_rectangle(o.x, o.y, o.right, o.bottom, outline="", fill="#356859", tags=("obstacle",))
        self.canvas.tag_raise(self._hud_id)
        self.canvas.tag_raise(self._overlay_id)

        s = snap.stats
        self.canvas.itemconfigure(self._hud_id, text=f"Score: {s.score}\nObstacles: {s.passed_count}")

    def show_game_over(self, event: GameOverEvent) -> None:
        self.canvas.itemconfigure(
            self._overlay_id,
            text=f"Game Over\nYou cleared {event.passed_count} obstacles. Score: {event.score}",
        )

    def hide_overlay(self) -> None:
        self.canvas.itemconfigure(self._overlay_id, text="")
