"""Styled text segments that make up a prompt module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_RESET = "\x1b[0m"


class Color(IntEnum):
    """The eight basic terminal colours, valued by their ANSI offset."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7

    def normal(self) -> Style:
        """A style with this colour as foreground and no other attributes."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style in this colour."""
        return Style(foreground=self, bold=True)

    def dimmed(self) -> Style:
        """A dimmed style in this colour."""
        return Style(foreground=self, dimmed=True)


@dataclass(frozen=True)
class Style:
    """Terminal text attributes that can be applied to a string."""

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    def _codes(self) -> list[str]:
        flags = (
            (self.bold, "1"),
            (self.dimmed, "2"),
            (self.italic, "3"),
            (self.underline, "4"),
            (self.blink, "5"),
            (self.reverse, "7"),
            (self.hidden, "8"),
            (self.strikethrough, "9"),
        )
        codes = [code for enabled, code in flags if enabled]
        if self.background is not None:
            codes.append(str(40 + int(self.background)))
        if self.foreground is not None:
            codes.append(str(30 + int(self.foreground)))
        return codes

    @property
    def is_plain(self) -> bool:
        """True when the style carries no attributes at all."""
        return not self._codes()

    def paint(self, text: str) -> str:
        """Wrap ``text`` in the escape sequences for this style."""
        codes = self._codes()
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


@dataclass
class Segment:
    """A single configurable element of a module, such as a version string.

    When ``style`` is None the segment inherits the style of its module.
    """

    name: str
    value: str = ""
    style: Style | None = None

    def ansi_string(self) -> str:
        """The value painted with the segment's style, if any."""
        if self.style is None:
            return self.value
        return self.style.paint(self.value)

    def is_empty(self) -> bool:
        """True when the value holds nothing but whitespace."""
        return not self.value.strip()

    def __str__(self) -> str:
        return self.ansi_string()