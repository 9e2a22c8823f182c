"""lsr — single-level directory listing with icons and colors."""

__version__ = "0.1.0"


class LsrError(Exception):
    """User-facing error.

    The message is printed to stderr with an ``lsr:`` prefix. The process
    still terminates normally.
    """


class ScanOpenError(LsrError):
    """Target path is missing, not a directory, or not accessible."""


class ScanReadError(LsrError):
    """Enumeration failed after the target directory was opened."""
