#!/usr/bin/env python3
"""
Entry point for the spectrum token compiler.

Reads a spectrum-tokens directory and prints the generated variable
initialization block on stdout. Diagnostics for dropped tokens go to
stderr with --verbose.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from spectrum_tokens.compiler.pipeline import TokenCompiler
from spectrum_tokens.config import load_config
from spectrum_tokens.constants import ErrorMessages
from spectrum_tokens.errors import ConfigError, TokenFileError

logger = logging.getLogger(__name__)


class UsageParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad usage."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = UsageParser(
        prog="spectrum-tokens",
        description="Generate theme variable initialization code from Spectrum design tokens",
    )
    parser.add_argument(
        "token_dir",
        help="Directory containing the spectrum token JSON files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        "-verbose",
        action="store_true",
        help="Report dropped tokens on stderr",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["tcl", "python"],
        default=None,
        help="Output syntax (default: tcl)",
    )
    parser.add_argument(
        "--namespace",
        default=None,
        help="Namespace of the generated variables (default: ::spectrum)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file overriding file set and output settings",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    token_dir = Path(args.token_dir)
    if not token_dir.is_dir():
        print(ErrorMessages.NOT_A_DIRECTORY.format(path=args.token_dir), file=sys.stderr)
        return 1

    try:
        config = load_config(
            args.config,
            output_format=args.output_format,
            namespace=args.namespace,
        )
        result = TokenCompiler(config).compile(token_dir)
    except (ConfigError, TokenFileError) as e:
        print(str(e), file=sys.stderr)
        return 1

    print(result.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
