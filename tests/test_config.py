"""Tests for featuretree.config module."""

from pathlib import Path

from featuretree.config import Config, KeyConfig, SwipeConfig


class TestConfigDefaults:
    def test_default_hierarchy_file(self, config_dirs):
        config = Config()
        assert config.hierarchy_file == config_dirs / "tree.toml"

    def test_default_root_label(self):
        assert Config().root_label == "Start"

    def test_default_watch_and_logging(self):
        config = Config()
        assert config.watch is True
        assert config.log_file == ""
        assert config.log_level == "INFO"

    def test_default_keys(self):
        keys = Config().keys
        assert keys.back == ["escape", "backspace", "left"]
        assert keys.root == ["home"]


class TestConfigSaveLoad:
    def test_save_creates_file(self, config_dirs, tmp_path):
        Config(hierarchy_file=tmp_path / "tree.md").save()
        assert (config_dirs / "config.toml").exists()

    def test_round_trip(self, config_dirs, tmp_path):
        original = Config(
            hierarchy_file=tmp_path / "features.md",
            root_label="Nutzen",
            watch=False,
            log_file=str(tmp_path / "ft.log"),
            log_level="DEBUG",
            keys=KeyConfig(back=["escape"], root=["home", "r"]),
            swipe=SwipeConfig(threshold=12, max_vertical=2),
        )
        original.save()

        loaded = Config.load()
        assert loaded == original

    def test_load_creates_defaults_when_missing(self, config_dirs):
        config = Config.load()
        assert (config_dirs / "config.toml").exists()
        assert config.root_label == "Start"

    def test_load_partial_config(self, config_dirs):
        config_dirs.mkdir(parents=True)
        (config_dirs / "config.toml").write_text(
            'hierarchy_file = "/tmp/features.toml"\n[keys]\nroot = ["r"]\n'
        )

        config = Config.load()
        assert config.hierarchy_file == Path("/tmp/features.toml")
        assert config.keys.root == ["r"]
        # Defaults for missing fields
        assert config.keys.back == ["escape", "backspace", "left"]
        assert config.swipe.threshold == 8
        assert config.watch is True
