"""User colour definitions from LS_COLORS and EZA_COLORS."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ezatheme.codes import set_exa, set_ls
from ezatheme.lsc import LSColors, Pair
from ezatheme.style import Style
from ezatheme.ui_styles import UiStyles

logger = logging.getLogger(__name__)


class GlobError(ValueError):
    """Raised when a glob pattern cannot be parsed."""


def _compile_class(text: str, start: int) -> tuple[str, int]:
    """Translate the bracket expression at ``start``; return regex and end index."""
    pos = start + 1
    negate = pos < len(text) and text[pos] == "!"
    if negate:
        pos += 1
    # A ']' straight after the opening bracket is a literal member.
    close = text.find("]", pos + 1)
    if pos >= len(text) or close < 0:
        raise GlobError(f"invalid range pattern in {text!r}")
    body = text[pos:close]

    items: list[str] = []
    index = 0
    while index < len(body):
        if index + 2 < len(body) and body[index + 1] == "-":
            low, high = body[index], body[index + 2]
            if low <= high:
                items.append(f"{re.escape(low)}-{re.escape(high)}")
            index += 3
        else:
            items.append(re.escape(body[index]))
            index += 1

    if not items:
        regex = "." if negate else "(?!)"
    else:
        regex = f"[{'^' if negate else ''}{''.join(items)}]"
    return regex, close + 1


def _compile_glob(text: str) -> re.Pattern[str]:
    parts: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "*":
            end = index
            while end < length and text[end] == "*":
                end += 1
            count = end - index
            if count > 2:
                raise GlobError(f"wildcards are either regular '*' or recursive '**' in {text!r}")
            if count == 2:
                if index > 0 and text[index - 1] != "/":
                    raise GlobError(f"recursive wildcards must form a single path component in {text!r}")
                if end < length and text[end] != "/":
                    raise GlobError(f"recursive wildcards must form a single path component in {text!r}")
                if end < length:
                    parts.append("(?:.*/)?")
                    end += 1
                else:
                    parts.append(".*")
            else:
                parts.append(".*")
            index = end
        elif char == "?":
            parts.append(".")
            index += 1
        elif char == "[":
            regex, index = _compile_class(text, index)
            parts.append(regex)
        else:
            parts.append(re.escape(char))
            index += 1
    return re.compile("".join(parts), re.DOTALL)


@dataclass(frozen=True)
class GlobPattern:
    """A shell-style glob matched against whole file names."""

    text: str
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", _compile_glob(self.text))

    def matches(self, name: str) -> bool:
        return self._regex.fullmatch(name) is not None


@dataclass
class ExtensionMappings:
    """Glob patterns paired with the style for file names they match."""

    mappings: list[tuple[GlobPattern, Style]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.mappings)

    def add(self, pattern: GlobPattern, style: Style) -> None:
        self.mappings.append((pattern, style))

    def get_style(self, name: str) -> Optional[Style]:
        """Return the style of the last pattern matching ``name``, if any."""
        # Later definitions override earlier ones.
        for pattern, style in reversed(self.mappings):
            if pattern.matches(name):
                return style
        return None


@dataclass
class Definitions:
    """The raw LS_COLORS and EZA_COLORS values, either of which may be unset."""

    ls: Optional[str] = None
    exa: Optional[str] = None

    def _add_glob(self, exts: ExtensionMappings, pair: Pair) -> None:
        try:
            pattern = GlobPattern(pair.key)
        except GlobError as error:
            logger.warning("Couldn't parse glob pattern %r: %s", pair.key, error)
            return
        exts.add(pattern, pair.to_style())

    def parse_color_vars(self, colours: UiStyles) -> tuple[ExtensionMappings, bool]:
        """Apply UI codes to ``colours`` and collect file glob styles.

        Returns the glob mappings and whether the default file type styles
        should still be used; a leading ``reset`` in EZA_COLORS turns them off.
        """
        exts = ExtensionMappings()

        if self.ls is not None:
            for pair in LSColors(self.ls).pairs():
                if not set_ls(colours, pair):
                    self._add_glob(exts, pair)

        use_default_filetypes = True

        if self.exa is not None:
            if self.exa == "reset" or self.exa.startswith("reset:"):
                use_default_filetypes = False
            for pair in LSColors(self.exa).pairs():
                if not set_ls(colours, pair) and not set_exa(colours, pair):
                    self._add_glob(exts, pair)

        return exts, use_default_filetypes