"""Single-level directory scan using os.scandir, in enumeration order."""

from __future__ import annotations

import enum
import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from lsr import ScanOpenError, ScanReadError
from lsr.config import ListingConfig
from lsr.paths import (
    is_current_dir,
    is_representable,
    looks_hidden,
    relative_name,
    scan_prefix,
)

logger = logging.getLogger(__name__)


class EntryKind(enum.Enum):
    """Classification assigned to each entry at scan time."""

    DIRECTORY = "directory"
    SYMLINK = "symlink"
    FILE = "file"
    HIDDEN_FILE = "hidden_file"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Entry:
    """A classified entry produced by one directory scan.

    Attributes:
        display_name: Entry path with the scan-path prefix removed.
        kind: Classification of the entry.
    """

    display_name: str
    kind: EntryKind


@contextmanager
def _open_directory(target_path: str) -> Iterator[Iterator[os.DirEntry[str]]]:
    """Open ``target_path`` for enumeration and close it on exit.

    Raises:
        ScanOpenError: If the path does not exist, is not a directory,
            or cannot be accessed.
    """
    try:
        handle = os.scandir(target_path)
    except OSError as exc:
        raise ScanOpenError(
            f"cannot open '{target_path}': {exc.strerror or exc}"
        ) from exc
    with handle:
        yield handle


def classify(
    dir_entry: os.DirEntry[str],
    display_name: str,
    hidden_probe: str | None = None,
) -> EntryKind:
    """Classify a directory entry without following symlinks.

    The hidden-file check is a substring test for ``./.``, not a leading-dot
    test.

    Args:
        dir_entry: Raw entry from ``os.scandir``.
        display_name: Entry path with the scan-path prefix removed.
        hidden_probe: Text the ``./.`` test runs on. Defaults to
            ``display_name``.

    Returns:
        EntryKind: ``OTHER`` when the type query itself fails.
    """
    probe = display_name if hidden_probe is None else hidden_probe
    try:
        if dir_entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if dir_entry.is_file(follow_symlinks=False):
            if looks_hidden(probe):
                return EntryKind.HIDDEN_FILE
            return EntryKind.FILE
    except OSError:
        logger.debug("Cannot query type: %s", dir_entry.path)
        return EntryKind.OTHER
    return EntryKind.SYMLINK


def should_include(entry: Entry, config: ListingConfig) -> bool:
    """Return whether ``entry`` passes the inclusion switches of ``config``.

    ``OTHER`` entries and entries with an empty display name never pass.
    """
    if not entry.display_name:
        return False
    if entry.kind is EntryKind.DIRECTORY:
        return config.include_directories
    if entry.kind is EntryKind.HIDDEN_FILE:
        return config.include_hidden
    if entry.kind is EntryKind.FILE:
        return config.include_files
    if entry.kind is EntryKind.SYMLINK:
        return config.include_symlinks
    return False


def _read_entry(
    dir_entry: os.DirEntry[str], prefix: str, probe_full_path: bool
) -> Entry | None:
    full_path = dir_entry.path
    if not is_representable(full_path):
        logger.debug("Skipping unrepresentable path: %r", full_path)
        return None
    display_name = relative_name(full_path, prefix)
    # "./.name" only appears in the raw path when listing the current directory.
    hidden_probe = full_path if probe_full_path else display_name
    return Entry(
        display_name=display_name,
        kind=classify(dir_entry, display_name, hidden_probe),
    )


def _collect(
    dir_entries: Iterator[os.DirEntry[str]],
    prefix: str,
    config: ListingConfig,
) -> list[Entry]:
    result: list[Entry] = []
    probe_full_path = is_current_dir(config.target_path)
    try:
        for dir_entry in dir_entries:
            entry = _read_entry(dir_entry, prefix, probe_full_path)
            if entry is not None and should_include(entry, config):
                result.append(entry)
    except OSError as exc:
        raise ScanReadError(
            f"error reading '{config.target_path}': {exc.strerror or exc}"
        ) from exc
    return result


def scan(config: ListingConfig | None = None) -> list[Entry]:
    """Read the target directory once and return the included entries.

    Entries keep the order the filesystem yields them in; nothing is
    sorted. A target that cannot be opened is reported as a warning and
    yields an empty list.

    Args:
        config: Listing configuration. Defaults to ``ListingConfig()``.

    Returns:
        list[Entry]: Included entries in enumeration order.

    Raises:
        ScanReadError: If enumeration fails part way through.
    """
    listing_config = config or ListingConfig()
    prefix = scan_prefix(listing_config.target_path)

    try:
        with _open_directory(listing_config.target_path) as dir_entries:
            return _collect(dir_entries, prefix, listing_config)
    except ScanOpenError as exc:
        logger.warning("%s", exc)
        return []
