"""Command-line interface for keymap-drawer config generation."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .bindings import BindingError
from .config import GeneratorConfig
from .generator import run


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    defaults = GeneratorConfig()
    parser = argparse.ArgumentParser(
        prog="drawer_config",
        description="Generate a keymap-drawer config from a ZMK keymap JSON export",
    )
    parser.add_argument(
        "--layout",
        type=Path,
        default=defaults.layout_path,
        help=f"Keymap JSON export (default: {defaults.layout_path})",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=defaults.template_path,
        help=f"keymap-drawer config template (default: {defaults.template_path})",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=defaults.output_path,
        help=f"Output keymap-drawer config (default: {defaults.output_path})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def cmd_generate(args: argparse.Namespace) -> int:
    """Execute generation."""
    if not args.layout.exists():
        print(f"Error: Keymap JSON not found: {args.layout}", file=sys.stderr)
        return 1
    if not args.template.exists():
        print(f"Error: Template not found: {args.template}", file=sys.stderr)
        return 1

    config = GeneratorConfig(
        layout_path=args.layout,
        template_path=args.template,
        output_path=args.output,
    )

    try:
        run(config)
    except BindingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (json.JSONDecodeError, ValidationError) as e:
        print(f"Error: Invalid keymap JSON {args.layout}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"keymap-drawer config written to {args.output}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    sys.exit(cmd_generate(args))


if __name__ == "__main__":
    main()
