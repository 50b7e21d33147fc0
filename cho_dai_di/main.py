"""Main entry point for Cho Dai Di."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from cho_dai_di.config import GameLogConfig, apply_env_overrides, load_config
from cho_dai_di.logging import GameLogger
from cho_dai_di.orchestrator import SessionOrchestrator
from cho_dai_di.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str) -> str:
    """Generate a timestamped log filename.

    Format: {timestamp}_cho_dai_di.jsonl

    Args:
        log_dir: Directory for log files.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_cho_dai_di.jsonl")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cho Dai Di (Big Two) against three computer players"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the deal and AI choices (overrides config)",
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Let the computer take the human seat too",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show every player's hand each turn",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)

    # Load config
    config = apply_env_overrides(load_config(args.config))

    # Apply command-line overrides
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.seed is not None:
        config.game.seed = args.seed
    if args.autoplay:
        config.player.autoplay = True
    if args.show_hands:
        config.logging.show_hands = True

    # CLI argument overrides config file
    if args.game_log is not None:
        game_log_config = GameLogConfig(
            enabled=True, output_path=generate_log_filename(str(args.game_log))
        )
    else:
        game_log_config = config.game_log

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    try:
        with GameLogger(game_log_config) as game_logger:
            orchestrator = SessionOrchestrator(
                config=config,
                display=display,
                game_logger=game_logger,
            )
            orchestrator.run()
        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
