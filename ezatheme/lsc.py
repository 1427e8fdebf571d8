"""Parsing of LS_COLORS-style definitions into styles."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator

from ezatheme.style import AnyColour, Colour, Fixed, Rgb, Style

_BYTE = re.compile(r"\+?[0-9]+")

_ATTRIBUTES: dict[str, Callable[[Style], Style]] = {
    "1": Style.bold,
    "2": Style.dimmed,
    "3": Style.italic,
    "4": Style.underline,
    "5": Style.blink,
    "7": Style.reverse,
    "8": Style.hidden,
    "9": Style.strikethrough,
}

_FOREGROUNDS: dict[str, Colour] = {str(colour.value): colour for colour in Colour}
_BACKGROUNDS: dict[str, Colour] = {str(colour.value + 10): colour for colour in Colour}


def _parse_byte(text: str) -> int | None:
    if not _BYTE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def _parse_high_colour(tokens: deque[str]) -> AnyColour | None:
    """Consume an extended colour specification following 38 or 48."""
    if not tokens:
        return None
    kind = tokens[0]
    if kind == "5":
        tokens.popleft()
        if tokens:
            number = _parse_byte(tokens.popleft())
            if number is not None:
                return Fixed(number)
    elif kind == "2":
        tokens.popleft()
        if tokens:
            red = _parse_byte(tokens.popleft())
            green = _parse_byte(tokens.popleft()) if tokens else None
            blue = _parse_byte(tokens.popleft()) if tokens else None
            if red is not None and green is not None and blue is not None:
                return Rgb(red, green, blue)
    return None


@dataclass(frozen=True)
class Pair:
    """One key=value entry from a colour definition string."""

    key: str
    value: str

    def to_style(self) -> Style:
        """Interpret the value as semicolon-separated ANSI codes."""
        style = Style()
        tokens = deque(self.value.split(";"))
        while tokens:
            code = tokens.popleft().lstrip("0")
            if code in _ATTRIBUTES:
                style = _ATTRIBUTES[code](style)
            elif code in _FOREGROUNDS:
                style = style.fg(_FOREGROUNDS[code])
            elif code in _BACKGROUNDS:
                style = style.on(_BACKGROUNDS[code])
            elif code == "38":
                colour = _parse_high_colour(tokens)
                if colour is not None:
                    style = style.fg(colour)
            elif code == "48":
                colour = _parse_high_colour(tokens)
                if colour is not None:
                    style = style.on(colour)
        return style


@dataclass(frozen=True)
class LSColors:
    """A colon-separated list of key=value colour definitions."""

    text: str

    def pairs(self) -> Iterator[Pair]:
        """Yield each well-formed pair, skipping malformed entries."""
        for entry in self.text.split(":"):
            bits = entry.split("=", 2)
            if len(bits) == 2 and bits[0] and bits[1]:
                yield Pair(bits[0], bits[1])