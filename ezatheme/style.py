"""Terminal text styles: colours, attributes and ANSI rendering."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union


class Colour(Enum):
    """The sixteen named terminal colours, valued by their foreground code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37
    DARK_GRAY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_PURPLE = 95
    LIGHT_CYAN = 96
    LIGHT_GRAY = 97


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Fixed:
    """A colour from the 256-colour palette."""

    number: int

    def __post_init__(self) -> None:
        _check_byte(self.number, "palette index")


@dataclass(frozen=True)
class Rgb:
    """A 24-bit true colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte(self.red, "red")
        _check_byte(self.green, "green")
        _check_byte(self.blue, "blue")


AnyColour = Union[Colour, Fixed, Rgb]


def _colour_code(colour: AnyColour, background: bool) -> str:
    if isinstance(colour, Colour):
        return str(colour.value + (10 if background else 0))
    lead = "48" if background else "38"
    if isinstance(colour, Fixed):
        return f"{lead};5;{colour.number}"
    return f"{lead};2;{colour.red};{colour.green};{colour.blue}"


@dataclass(frozen=True)
class Style:
    """An immutable set of colours and text attributes."""

    foreground: AnyColour | None = None
    background: AnyColour | None = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    def blink(self) -> Style:
        return replace(self, is_blink=True)

    def reverse(self) -> Style:
        return replace(self, is_reverse=True)

    def hidden(self) -> Style:
        return replace(self, is_hidden=True)

    def strikethrough(self) -> Style:
        return replace(self, is_strikethrough=True)

    def fg(self, colour: AnyColour) -> Style:
        """Return a copy with the given foreground colour."""
        return replace(self, foreground=colour)

    def on(self, colour: AnyColour) -> Style:
        """Return a copy with the given background colour."""
        return replace(self, background=colour)

    def paint(self, text: str) -> str:
        """Wrap text in the ANSI escape codes for this style."""
        flags = (
            (self.is_bold, "1"),
            (self.is_dimmed, "2"),
            (self.is_italic, "3"),
            (self.is_underline, "4"),
            (self.is_blink, "5"),
            (self.is_reverse, "7"),
            (self.is_hidden, "8"),
            (self.is_strikethrough, "9"),
        )
        codes = [code for enabled, code in flags if enabled]
        if self.background is not None:
            codes.append(_colour_code(self.background, background=True))
        if self.foreground is not None:
            codes.append(_colour_code(self.foreground, background=False))
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"