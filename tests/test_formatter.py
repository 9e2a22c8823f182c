"""Tests for lsr.formatter — icons, styling and name normalization."""

import pytest

from conftest import plain
from lsr.formatter.listing import DECORATIONS, format_entry, format_listing
from lsr.formatter.style import RESET, Style, apply_style
from lsr.lister import Entry, EntryKind


class TestStyle:
    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            (Style((255, 255, 255)), "38;2;255;255;255"),
            (Style((255, 180, 20), bold=True), "1;38;2;255;180;20"),
            (Style((130, 130, 130), italic=True), "3;38;2;130;130;130"),
        ],
    )
    def test_sgr(self, style: Style, expected: str) -> None:
        assert style.sgr() == expected

    def test_apply_style_wraps_and_resets(self) -> None:
        styled = apply_style("name", Style((1, 2, 3)))
        assert styled == "\033[38;2;1;2;3mname" + RESET


class TestFormatEntry:
    @pytest.mark.parametrize(
        ("kind", "icon"),
        [
            (EntryKind.DIRECTORY, "📁"),
            (EntryKind.FILE, "📄"),
            (EntryKind.SYMLINK, "🔗"),
            (EntryKind.HIDDEN_FILE, "🫣"),
        ],
    )
    def test_icon_then_styled_name(self, kind: EntryKind, icon: str) -> None:
        line = format_entry(Entry("name", kind))
        assert line == f"{icon} " + apply_style("name", DECORATIONS[kind].style)
        assert plain(line) == f"{icon} name"

    def test_directory_is_bold_orange(self) -> None:
        line = format_entry(Entry("src", EntryKind.DIRECTORY))
        assert line == "📁 \033[1;38;2;255;180;20msrc\033[0m"

    def test_other_passes_through(self) -> None:
        assert format_entry(Entry("odd", EntryKind.OTHER)) == "odd"

    def test_leading_dot_slash_stripped_once(self) -> None:
        assert plain(format_entry(Entry("./a.txt", EntryKind.FILE))) == "📄 a.txt"
        assert plain(format_entry(Entry("././a.txt", EntryKind.FILE))) == "📄 ./a.txt"
        assert format_entry(Entry("./odd", EntryKind.OTHER)) == "odd"

    def test_hidden_name_keeps_dot(self) -> None:
        line = format_entry(Entry(".env", EntryKind.HIDDEN_FILE))
        assert plain(line) == "🫣 .env"

    @pytest.mark.parametrize("kind", [k for k in EntryKind if k is not EntryKind.OTHER])
    def test_without_color_has_no_escape_codes(self, kind: EntryKind) -> None:
        line = format_entry(Entry("./name", kind), colorize=False)
        assert line == f"{DECORATIONS[kind].icon} name"
        assert "\033[" not in line

    def test_other_without_color(self) -> None:
        assert format_entry(Entry("odd", EntryKind.OTHER), colorize=False) == "odd"


class TestFormatListing:
    def test_order_and_length_preserved(self) -> None:
        entries = [
            Entry("zeta", EntryKind.FILE),
            Entry("alpha", EntryKind.DIRECTORY),
            Entry("odd", EntryKind.OTHER),
            Entry("link", EntryKind.SYMLINK),
        ]
        lines = format_listing(entries)
        assert [plain(line) for line in lines] == [
            "📄 zeta",
            "📁 alpha",
            "odd",
            "🔗 link",
        ]

    def test_empty(self) -> None:
        assert format_listing([]) == []

    def test_plain_listing(self) -> None:
        entries = [Entry("b", EntryKind.DIRECTORY), Entry("a", EntryKind.FILE)]
        assert format_listing(entries, colorize=False) == ["📁 b", "📄 a"]
