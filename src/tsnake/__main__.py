from __future__ import annotations

import argparse
import logging
import os
import sys

from . import config
from .core import Config, ConfigError, Game, SnakeError
from .linalg import Vec2

logger = logging.getLogger("tsnake")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tsnake", description="Play Snake on a grid.")
    parser.add_argument(
        "--frontend",
        choices=("terminal", "window"),
        default="terminal",
        help="terminal=curses in this terminal, window=pygame window.",
    )
    parser.add_argument("--width", type=int, default=config.MAP_WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=config.MAP_HEIGHT, help="Grid height in cells.")
    parser.add_argument("--start-tail", type=int, default=config.START_TAIL, help="Initial tail length.")
    parser.add_argument(
        "--step-ms",
        type=float,
        default=config.STEP_INTERVAL * 1000,
        help="Milliseconds between snake steps at the start.",
    )
    parser.add_argument(
        "--accel",
        type=float,
        default=config.STEP_ACCEL,
        help="Fraction the step interval shrinks by per apple (0 <= accel < 1).",
    )
    parser.add_argument("--fps", type=int, default=config.FPS_LIMIT, help="Frame cap, 0 to disable.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    parser.add_argument("--log-file", help="Write logs here instead of stderr.")
    return parser


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        map_size=Vec2(args.width, args.height),
        start_tail=args.start_tail,
        step_interval=args.step_ms / 1000.0,
        step_accel=args.accel,
    )


def setup_logging(level: str, log_file: str | None) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=log_file,
    )


def run_terminal(cfg: Config, fps: int) -> int:
    import curses

    from .frontends.terminal import TerminalController, TerminalRenderer

    # Make Esc register without the default one second delay.
    os.environ.setdefault("ESCDELAY", "25")

    def play(stdscr) -> int:
        renderer = TerminalRenderer(stdscr, cfg.map_size)
        return Game(cfg, TerminalController(stdscr), renderer, frame_limit=fps).run()

    return curses.wrapper(play)


def run_window(cfg: Config, fps: int) -> int:
    import pygame

    from .frontends.window import WindowController, WindowRenderer, window_size

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(cfg.map_size))
        pygame.display.set_caption("tsnake")
        return Game(cfg, WindowController(), WindowRenderer(screen), frame_limit=fps).run()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        cfg = build_config(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    run = run_window if args.frontend == "window" else run_terminal
    try:
        score = run(cfg, args.fps)
    except SnakeError as e:
        logger.error("game aborted: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"You scored {score}!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
