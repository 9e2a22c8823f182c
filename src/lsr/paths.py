"""Path and character helpers shared by the lister and formatter."""

from __future__ import annotations

import os

HIDDEN_MARKER = "./."
DOT_SLASH = "./"


def scan_prefix(target_path: str) -> str:
    """Return ``target_path`` with exactly one trailing separator added.

    A path that already ends in a separator is returned unchanged.
    """
    if target_path.endswith(os.sep) or target_path.endswith("/"):
        return target_path
    return target_path + os.sep


def relative_name(full_path: str, prefix: str) -> str:
    """Remove every occurrence of ``prefix`` from ``full_path``.

    This is plain text substitution. A prefix that recurs inside the
    entry name is removed there as well.
    """
    return full_path.replace(prefix, "")


def is_current_dir(target_path: str) -> bool:
    """Return whether ``target_path`` names the current directory as ``.``."""
    return target_path in (".", DOT_SLASH, "." + os.sep)


def is_representable(path: str) -> bool:
    """Return whether ``path`` can be rendered as UTF-8 text.

    Undecodable bytes in a filename reach Python as lone surrogates,
    which fail strict encoding.
    """
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def looks_hidden(path: str) -> bool:
    return HIDDEN_MARKER in path


def strip_dot_slash(name: str) -> str:
    """Drop a single leading ``./`` from ``name``."""
    return name.removeprefix(DOT_SLASH)
