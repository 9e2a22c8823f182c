"""24-bit ANSI SGR styling for listing lines."""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"


@dataclass(frozen=True, slots=True)
class Style:
    """Foreground color plus text attributes.

    Attributes:
        rgb: Foreground color as ``(red, green, blue)``.
        bold: Render in bold.
        italic: Render in italics.
    """

    rgb: tuple[int, int, int]
    bold: bool = False
    italic: bool = False

    def sgr(self) -> str:
        """Return the SGR parameter string, e.g. ``1;38;2;255;180;20``."""
        params: list[str] = []
        if self.bold:
            params.append("1")
        if self.italic:
            params.append("3")
        red, green, blue = self.rgb
        params.extend(["38", "2", str(red), str(green), str(blue)])
        return ";".join(params)


def apply_style(text: str, style: Style) -> str:
    """Wrap ``text`` in the escape sequences for ``style``."""
    return f"\033[{style.sgr()}m{text}{RESET}"
