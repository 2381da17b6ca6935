"""Entry point for featuretree."""

import logging
import sys
from pathlib import Path

from .app import run_app
from .config import Config, get_default_hierarchy_file
from .hierarchy import load_hierarchy, write_sample_hierarchy


def configure_logging(config: Config) -> None:
    """Log to the configured file; the terminal belongs to the UI."""
    if not config.log_file:
        return
    logging.basicConfig(
        filename=Path(config.log_file).expanduser(),
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    """Main entry point for featuretree."""
    try:
        # Load configuration
        config = Config.load()
        if len(sys.argv) > 1:
            config.hierarchy_file = Path(sys.argv[1]).expanduser()

        configure_logging(config)

        # First run: give the default location something to show
        hierarchy_file = config.hierarchy_file
        if hierarchy_file == get_default_hierarchy_file() and not hierarchy_file.exists():
            write_sample_hierarchy(hierarchy_file)

        model = load_hierarchy(hierarchy_file)

        # Run the application
        run_app(config, model)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
