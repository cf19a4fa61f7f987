"""Entry point: ``python -m dungeon``.

Supports two modes:
  - ``python -m dungeon``         → Launch the FastAPI server (play over HTTP)
  - ``python -m dungeon play``    → Play in the terminal, one command per line
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dungeon.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based dungeon simulation")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Terminal mode ---
    play = sub.add_parser("play", help="Play in the terminal (w/a/s/d, f toggles the panel, q quits)")
    play.add_argument("--seed", type=int, default=42)
    play.add_argument("--map-width", type=int, default=80)
    play.add_argument("--map-height", type=int, default=43)
    play.add_argument("--max-rooms", type=int, default=10)
    play.add_argument("--torch-radius", type=int, default=10)
    play.add_argument("--no-color", action="store_true", help="Plain ASCII output")
    play.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def build_config(args: argparse.Namespace) -> GameConfig:
    """Turn parsed flags into a GameConfig; raises ValueError on impossible sizes."""
    from dungeon.config import GameConfig

    if args.command == "play":
        return GameConfig(
            seed=args.seed,
            map_width=args.map_width,
            map_height=args.map_height,
            max_rooms=args.max_rooms,
            torch_radius=args.torch_radius,
            log_level=args.log_level,
        )
    return GameConfig(seed=args.seed, log_level=args.log_level)


def _run_server(args: argparse.Namespace, config: GameConfig) -> None:
    import uvicorn

    from dungeon.api.app import create_app

    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_play(args: argparse.Namespace, config: GameConfig) -> int:
    from dungeon.core.enums import TerminationReason
    from dungeon.engine.turn_controller import TurnController
    from dungeon.render.terminal import StdinInputSource, TerminalRenderer
    from dungeon.utils.logging import setup_logging

    setup_logging(config.log_level)

    renderer = TerminalRenderer(config, color=not args.no_color)
    controller = TurnController.new_game(config, renderer, StdinInputSource())
    reason = controller.run()

    if reason == TerminationReason.PLAYER_DIED:
        print(f"You died on turn {controller.state.turn}.")
    logger.info("Done after %d turns (%s).", controller.state.turn, reason.name)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])

    try:
        config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "serve":
        _run_server(args, config)
    elif args.command == "play":
        sys.exit(_run_play(args, config))


if __name__ == "__main__":
    main()
