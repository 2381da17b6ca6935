"""Configuration loading and defaults for featuretree."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


def get_config_dir() -> Path:
    """Get the featuretree config directory (XDG-style)."""
    return Path.home() / ".config" / "featuretree"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def get_default_hierarchy_file() -> Path:
    """Get the default hierarchy document path."""
    return get_config_dir() / "tree.toml"


@dataclass
class KeyConfig:
    """Keys mapped to navigation actions."""

    back: list[str] = field(default_factory=lambda: ["escape", "backspace", "left"])
    root: list[str] = field(default_factory=lambda: ["home"])


@dataclass
class SwipeConfig:
    """Mouse-drag swipe recognition, in terminal cells."""

    threshold: int = 8
    max_vertical: int = 3


@dataclass
class Config:
    """Application configuration."""

    hierarchy_file: Path = field(default_factory=lambda: get_default_hierarchy_file())
    root_label: str = "Start"
    watch: bool = True
    log_file: str = ""  # empty = logging disabled
    log_level: str = "INFO"
    keys: KeyConfig = field(default_factory=KeyConfig)
    swipe: SwipeConfig = field(default_factory=SwipeConfig)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        # Ensure config directory exists
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        hierarchy = data.get("hierarchy_file", str(get_default_hierarchy_file()))
        hierarchy_file = Path(hierarchy).expanduser()

        # Parse keys config, keeping defaults for omitted actions
        defaults = KeyConfig()
        keys_data = data.get("keys", {})
        keys = KeyConfig(
            back=keys_data.get("back", defaults.back),
            root=keys_data.get("root", defaults.root),
        )

        swipe_data = data.get("swipe", {})
        swipe = SwipeConfig(
            threshold=swipe_data.get("threshold", SwipeConfig.threshold),
            max_vertical=swipe_data.get("max_vertical", SwipeConfig.max_vertical),
        )

        return cls(
            hierarchy_file=hierarchy_file,
            root_label=data.get("root_label", "Start"),
            watch=data.get("watch", True),
            log_file=data.get("log_file", ""),
            log_level=data.get("log_level", "INFO"),
            keys=keys,
            swipe=swipe,
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        def _key_list(keys: list[str]) -> str:
            return "[" + ", ".join(f'"{k}"' for k in keys) + "]"

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# featuretree configuration',
            '',
            '# Hierarchy document (.toml or Markdown outline .md)',
            f'hierarchy_file = "{self.hierarchy_file}"',
            '',
            '# Label of the first breadcrumb',
            f'root_label = "{self.root_label}"',
            '',
            '# Reload the hierarchy when the file changes',
            f'watch = {str(self.watch).lower()}',
            '',
            '# Log file (empty = no logging) and level',
            f'log_file = "{self.log_file}"',
            f'log_level = "{self.log_level}"',
            '',
            '# Keys bound to navigation',
            '[keys]',
            f'back = {_key_list(self.keys.back)}',
            f'root = {_key_list(self.keys.root)}',
            '',
            '# Mouse-drag swipe: right swipe goes back',
            '[swipe]',
            f'threshold = {self.swipe.threshold}  # minimum horizontal cells',
            f'max_vertical = {self.swipe.max_vertical}  # maximum vertical drift',
        ]

        config_path.write_text("\n".join(lines) + "\n")
