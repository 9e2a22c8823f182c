"""Listing configuration: target path and inclusion switches."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_TARGET = "."


@dataclass(frozen=True, slots=True)
class ListingConfig:
    """Which directory to list and which entry kinds to show.

    Every ``with_*`` method returns a new configuration with one field
    replaced; the receiver is never modified.

    Attributes:
        target_path: Directory to enumerate.
        include_directories: Show subdirectories.
        include_files: Show regular files.
        include_hidden: Show hidden files.
        include_symlinks: Show symlinks and other non-regular entries.
    """

    target_path: str = DEFAULT_TARGET
    include_directories: bool = False
    include_files: bool = True
    include_hidden: bool = False
    include_symlinks: bool = False

    def with_target_path(self, target_path: str) -> ListingConfig:
        return replace(self, target_path=target_path)

    def with_directories(self, include: bool) -> ListingConfig:
        return replace(self, include_directories=include)

    def with_files(self, include: bool) -> ListingConfig:
        return replace(self, include_files=include)

    def with_hidden(self, include: bool) -> ListingConfig:
        return replace(self, include_hidden=include)

    def with_symlinks(self, include: bool) -> ListingConfig:
        return replace(self, include_symlinks=include)
