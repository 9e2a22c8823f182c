"""Icon-and-color listing formatter."""

from __future__ import annotations

from dataclasses import dataclass

from lsr.formatter.style import Style, apply_style
from lsr.lister import Entry, EntryKind
from lsr.paths import strip_dot_slash


@dataclass(frozen=True, slots=True)
class Decoration:
    """Icon glyph and style for one entry kind."""

    icon: str
    style: Style


DECORATIONS: dict[EntryKind, Decoration] = {
    EntryKind.DIRECTORY: Decoration("📁", Style((255, 180, 20), bold=True)),
    EntryKind.FILE: Decoration("📄", Style((255, 255, 255))),
    EntryKind.SYMLINK: Decoration("🔗", Style((170, 250, 250))),
    EntryKind.HIDDEN_FILE: Decoration("🫣", Style((130, 130, 130), italic=True)),
}


def format_entry(entry: Entry, colorize: bool = True) -> str:
    """Render one entry as ``<icon> <styled name>``.

    Kinds without a decoration (``OTHER``) pass the name through unstyled.
    With ``colorize`` off the name is written without escape codes.
    """
    name = strip_dot_slash(entry.display_name)
    decoration = DECORATIONS.get(entry.kind)
    if decoration is None:
        return name
    if colorize:
        name = apply_style(name, decoration.style)
    return f"{decoration.icon} {name}"


def format_listing(entries: list[Entry], colorize: bool = True) -> list[str]:
    """Render entries one string each, in the order given.

    Args:
        entries: Scanner entries to render.
        colorize: Whether to emit ANSI styling.

    Returns:
        list[str]: One display line per entry.
    """
    return [format_entry(entry, colorize) for entry in entries]
