"""Configuration management."""

import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import BaseModel

PLAYER_NAME_ENV = "DAI_DI_PLAYER_NAME"
DEFAULT_PLAYER_NAME = "Player"


class PlayerConfig(BaseModel):
    """Human seat configuration."""

    name: str = DEFAULT_PLAYER_NAME
    autoplay: bool = False  # Seat the human chair with an AI instead


class GameConfig(BaseModel):
    """Game configuration."""

    seed: int | None = None  # Seed for shuffling and AI choices


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    show_hands: bool = False


class GameLogConfig(BaseModel):
    """JSONL game event log configuration."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    player: PlayerConfig = PlayerConfig()
    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()


def apply_env_overrides(
    config: Config,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Apply environment variable overrides.

    Only DAI_DI_PLAYER_NAME is read: it sets the human player's name.

    Args:
        config: Config to update in place.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        The same Config object.
    """
    environ = os.environ if environ is None else environ
    name = environ.get(PLAYER_NAME_ENV)
    if name:
        config.player.name = name
    return config
