"""
Command-line entry point for the interactive interpreter.
"""

import argparse
import logging
import os
import sys
from typing import Optional

from cli_interpreter.container import DependencyContainer, container
from cli_interpreter.exceptions import ConfigurationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli-interpreter",
        description="Interactive command interpreter with builtins and external commands.",
    )
    parser.add_argument(
        "--app-name", default=None, help="Name shown in the prompt (default: settings)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--no-banner",
        dest="banner",
        action="store_false",
        default=None,
        help="Do not print the welcome banner",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Disable colored output",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Start in this directory instead of the current one",
    )
    return parser


def main(
    argv: Optional[list[str]] = None, deps: Optional[DependencyContainer] = None
) -> int:
    """Main entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)
    deps = deps or container

    try:
        settings = deps.get_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.app_name:
        settings.app_name = args.app_name
    if args.log_level:
        settings.log_level = args.log_level
    if args.banner is not None:
        settings.banner = args.banner
    if args.color is not None:
        settings.color = args.color
    deps.set_settings(settings)

    # Configure logging
    logging.basicConfig(
        level=settings.numeric_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Optional start directory
    if args.cwd:
        try:
            os.chdir(args.cwd)
        except OSError as e:
            print(f"Failed to chdir to {args.cwd}: {e}", file=sys.stderr)
            return 2

    return deps.get_read_eval_loop().run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
