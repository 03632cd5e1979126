from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from squirrelrun.app import game_loop  # noqa: E402
from squirrelrun.app.game_loop import GameLoop  # noqa: E402
from squirrelrun.domain.game_state import RunPhase  # noqa: E402


class FakeRoot:
    """Just enough of tk.Tk for the loop: after/after_cancel with manual firing."""

    def __init__(self) -> None:
        self.pending: dict[str, object] = {}
        self.delays: list[int] = []
        self._next = 0

    def after(self, ms, fn):
        self._next += 1
        after_id = f"after#{self._next}"
        self.pending[after_id] = fn
        self.delays.append(ms)
        return after_id

    def after_cancel(self, after_id):
        self.pending.pop(after_id, None)

    def fire(self) -> None:
        after_id, fn = next(iter(self.pending.items()))
        del self.pending[after_id]
        fn()


@pytest.fixture
def clock(monkeypatch):
    times: list[float] = []
    monkeypatch.setattr(game_loop, "time", SimpleNamespace(monotonic=lambda: times.pop(0)))
    return times


def _loop(root, update_fn, render_fn=lambda: None, **kw):
    return GameLoop(root=root, update_fn=update_fn, render_fn=render_fn, **kw)


def test_start_schedules_one_frame_at_target_rate(clock):
    root = FakeRoot()
    clock.extend([1.0])
    loop = _loop(root, update_fn=lambda dt: None, fps=50)

    loop.start()
    loop.start()

    assert loop.running
    assert len(root.pending) == 1
    assert root.delays == [20]


def test_elapsed_time_is_passed_in_milliseconds(clock):
    root = FakeRoot()
    seen: list[float] = []
    clock.extend([10.0, 10.016, 10.05])
    loop = _loop(root, update_fn=seen.append)

    loop.start()
    root.fire()
    root.fire()

    assert seen == [pytest.approx(16.0), pytest.approx(34.0)]
    assert len(root.pending) == 1


def test_long_stall_is_capped(clock):
    root = FakeRoot()
    seen: list[float] = []
    clock.extend([0.0, 5.0])
    loop = _loop(root, update_fn=seen.append)

    loop.start()
    root.fire()

    assert seen == [100.0]


def test_stop_cancels_pending_frame(clock):
    root = FakeRoot()
    clock.extend([0.0])
    loop = _loop(root, update_fn=lambda dt: None)

    loop.start()
    loop.stop()

    assert not loop.running
    assert root.pending == {}


def test_stop_tolerates_destroyed_root(clock):
    class DeadRoot(FakeRoot):
        def after_cancel(self, after_id):
            raise tk.TclError("application has been destroyed")

    root = DeadRoot()
    clock.extend([0.0])
    loop = _loop(root, update_fn=lambda dt: None)
    loop.start()
    loop.stop()
    assert not loop.running


def test_update_error_stops_loop_and_propagates(clock):
    root = FakeRoot()
    clock.extend([0.0, 0.016])

    def boom(dt):
        raise RuntimeError("broken frame")

    loop = _loop(root, update_fn=boom)
    loop.start()

    with pytest.raises(RuntimeError, match="broken frame"):
        root.fire()
    assert not loop.running
    assert root.pending == {}


def test_game_over_stops_ticking_after_final_render(clock, quiet_game, blocking):
    root = FakeRoot()
    clock.extend([0.0, 0.016])
    renders = []
    loop = _loop(root, update_fn=quiet_game.tick, render_fn=lambda: renders.append(quiet_game.phase))
    quiet_game.add_game_over_listener(lambda event: loop.stop())
    quiet_game.context.obstacles.append(blocking(170.0))

    loop.start()
    root.fire()

    assert quiet_game.phase is RunPhase.GAME_OVER
    assert renders == [RunPhase.GAME_OVER]
    assert not loop.running
    assert root.pending == {}
