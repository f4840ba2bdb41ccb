"""CLI entry point for drawer_config package.

Usage:
    python -m drawer_config

Reads config/keymap.json and config/keymap_drawer.template.yaml and writes
config/keymap_drawer.yaml. --layout, --template and --output override those
paths; -v enables debug logging.
"""

from .cli import main

if __name__ == "__main__":
    main()
