"""Tests for configuration loading."""

from cho_dai_di.config import (
    DEFAULT_PLAYER_NAME,
    PLAYER_NAME_ENV,
    Config,
    apply_env_overrides,
    load_config,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config()

        assert config.player.name == DEFAULT_PLAYER_NAME
        assert not config.player.autoplay
        assert config.game.seed is None
        assert config.logging.level == "WARNING"
        assert not config.game_log.enabled

    def test_missing_file(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config == Config()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "player:\n"
            "  name: Alice\n"
            "  autoplay: true\n"
            "game:\n"
            "  seed: 7\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  show_hands: true\n"
        )

        config = load_config(path)

        assert config.player.name == "Alice"
        assert config.player.autoplay
        assert config.game.seed == 7
        assert config.logging.level == "DEBUG"
        assert config.logging.show_hands


class TestEnvOverrides:
    """Tests for apply_env_overrides."""

    def test_player_name(self):
        config = apply_env_overrides(Config(), {PLAYER_NAME_ENV: "Bob"})
        assert config.player.name == "Bob"

    def test_empty_value_ignored(self):
        config = apply_env_overrides(Config(), {PLAYER_NAME_ENV: ""})
        assert config.player.name == DEFAULT_PLAYER_NAME

    def test_os_environ(self, monkeypatch):
        monkeypatch.setenv(PLAYER_NAME_ENV, "Carol")
        assert apply_env_overrides(Config()).player.name == "Carol"
