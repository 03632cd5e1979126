from __future__ import annotations

import argparse
import random
from dataclasses import replace

from squirrelrun.app.headless import lookahead_policy, run_headless
from squirrelrun.app.settings import check_log_level, load_settings
from squirrelrun.domain.config import GameConfig
from squirrelrun.domain.game import Game
from squirrelrun.infra.logging_setup import get_logger, setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="squirrelrun", description="Jump over obstacles. Space to jump.")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle sizes")
    parser.add_argument("--log-level", default=None, help="debug, info, warning, ...")
    parser.add_argument(
        "--headless",
        type=int,
        metavar="FRAMES",
        default=None,
        help="simulate FRAMES frames with an auto-jumping player and print the result",
    )
    args = parser.parse_args(argv)

    settings = load_settings()
    if args.seed is not None:
        settings = replace(settings, seed=args.seed)
    if args.log_level:
        settings = replace(settings, log_level=check_log_level(args.log_level))

    setup_logging(settings.log_level)
    log = get_logger("main")

    if args.headless is not None:
        config = GameConfig().with_viewport(settings.width, settings.height)
        game = Game(config, random.Random(settings.seed))
        snap = run_headless(game, frames=args.headless, policy=lookahead_policy(40.0))
        log.info("headless run finished in phase %s", snap.phase.value)
        print(f"phase={snap.phase.value} passed={snap.stats.passed_count} score={snap.stats.score}")
        return 0

    # Import late so headless runs work without a display.
    from squirrelrun.app.game_app import GameApp

    GameApp(settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
