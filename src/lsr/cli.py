"""CLI entry point for lsr — I/O boundary only."""

from __future__ import annotations

import logging
import os
import sys

from lsr import LsrError
from lsr.config import DEFAULT_TARGET, ListingConfig
from lsr.formatter.listing import format_listing
from lsr.lister import scan

OPTION_PREFIX = "-"

# Option characters and the ListingConfig builder each one enables.
SWITCHES: dict[str, str] = {
    "d": "with_directories",
    "h": "with_hidden",
    "f": "with_files",
    "s": "with_symlinks",
}


def _is_option(token: str) -> bool:
    return token.startswith(OPTION_PREFIX)


def _collect_switches(argv: list[str]) -> set[str]:
    """Return the recognized switch characters found in option tokens.

    Characters are read independently, so ``-dh`` and ``-d -h`` are the
    same. Unknown characters are ignored.
    """
    found: set[str] = set()
    for token in argv:
        if _is_option(token):
            found.update(char for char in token[1:] if char in SWITCHES)
    return found


def _target_path(argv: list[str]) -> str:
    """Return the last token when it is not an option, else the default."""
    if argv and not _is_option(argv[-1]):
        return argv[-1]
    return DEFAULT_TARGET


def parse_args(argv: list[str]) -> ListingConfig:
    """Build a listing configuration from command-line tokens.

    With no recognized switch the default configuration (files only)
    applies. Otherwise exactly the given switches are enabled.

    Args:
        argv: Command-line tokens without the program name.

    Returns:
        ListingConfig: Configuration for a single scan.
    """
    config = ListingConfig().with_target_path(_target_path(argv))
    switches = _collect_switches(argv)
    if not switches:
        return config

    for char, builder in SWITCHES.items():
        config = getattr(config, builder)(char in switches)
    return config


def run_lsr(argv: list[str] | None = None, colorize: bool = True) -> list[str]:
    """Scan and format a listing for the given arguments.

    This function writes nothing and is the primary test target for
    CLI behavior.

    Args:
        argv: Command-line tokens without the program name. ``None`` uses
            ``sys.argv[1:]``.
        colorize: Whether to emit ANSI styling.

    Returns:
        list[str]: Display lines in scan order.

    Raises:
        LsrError: If the directory cannot be read to completion.
    """
    tokens = sys.argv[1:] if argv is None else argv
    config = parse_args(tokens)
    return format_listing(scan(config), colorize)


def _stdout_is_tty() -> bool:
    try:
        return os.isatty(sys.stdout.fileno())
    except (OSError, ValueError):
        # Replaced streams without a file descriptor.
        return False


def main(argv: list[str] | None = None) -> None:
    """Run the CLI and print one line per entry.

    Styling is only emitted when stdout is a terminal. Diagnostics go to
    stderr. The process always exits normally.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="lsr: %(message)s",
        stream=sys.stderr,
    )

    try:
        lines = run_lsr(argv, colorize=_stdout_is_tty())
    except LsrError as exc:
        sys.stderr.write(f"lsr: {exc}\n")
        return

    for line in lines:
        sys.stdout.write(line + "\n")
