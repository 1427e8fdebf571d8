"""Building a theme from colour options and looking styles up in it."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional, Protocol

from ezatheme.default_theme import default_theme
from ezatheme.definitions import Definitions, ExtensionMappings
from ezatheme.style import Style
from ezatheme.ui_styles import FileKinds, FileNameStyle, Size, UiStyles

FileTypeClassifier = Callable[[str], Optional[str]]
"""Maps a file name to a file type field name such as ``"image"``, or ``None``."""


class FileStyle(Protocol):
    """Anything that may pick a style for a file name."""

    def get_style(self, name: str) -> Optional[Style]: ...


class UseColours(Enum):
    """When to colour the output."""

    ALWAYS = "always"
    AUTOMATIC = "automatic"
    NEVER = "never"


class NoFileStyle:
    """A file styler that never picks a style."""

    def get_style(self, name: str) -> Optional[Style]:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoFileStyle)

    def __hash__(self) -> int:
        return hash(NoFileStyle)


@dataclass(frozen=True)
class FallbackFileStyle:
    """Try the first styler, then the second if the first picks nothing."""

    first: FileStyle
    second: FileStyle

    def get_style(self, name: str) -> Optional[Style]:
        style = self.first.get_style(name)
        if style is not None:
            return style
        return self.second.get_style(name)


@dataclass(frozen=True)
class _FileTypes:
    """Styles files by their broad type, using the theme's file type styles."""

    ui: UiStyles
    classify: FileTypeClassifier

    def get_style(self, name: str) -> Optional[Style]:
        kind = self.classify(name)
        if kind is None or self.ui.file_type is None:
            return None
        return getattr(self.ui.file_type, kind)


_PREFIX_GROUPS = {
    "kilo": "kilo",
    "kibi": "kilo",
    "mega": "mega",
    "mebi": "mega",
    "giga": "giga",
    "gibi": "giga",
}


def _magnitude(prefix: Optional[str]) -> str:
    if prefix is None:
        return "byte"
    return _PREFIX_GROUPS.get(prefix.lower(), "huge")


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend ``base`` with the colours and attributes set in ``overlay``."""
    changes: dict[str, object] = {}
    if overlay.foreground is not None:
        changes["foreground"] = overlay.foreground
    if overlay.background is not None:
        changes["background"] = overlay.background
    for flag in (
        "is_bold",
        "is_dimmed",
        "is_italic",
        "is_underline",
        "is_blink",
        "is_reverse",
        "is_hidden",
        "is_strikethrough",
    ):
        if getattr(overlay, flag):
            changes[flag] = True
    return replace(base, **changes)


def _or_default(style: Optional[Style]) -> Style:
    return Style() if style is None else style


@dataclass
class Theme:
    """The UI styles together with the styler for file names."""

    ui: UiStyles
    exts: FileStyle = field(default_factory=NoFileStyle)

    def _filekinds(self) -> FileKinds:
        return FileKinds() if self.ui.filekinds is None else self.ui.filekinds

    def _size(self) -> Size:
        return Size() if self.ui.size is None else self.ui.size

    def colour_file(self, name: str) -> Style:
        """The style for a file name, falling back to the normal file style."""
        style = self.exts.get_style(name)
        if style is not None:
            return style
        return _or_default(self._filekinds().normal)

    def broken_filename(self) -> Style:
        """The style for the target of a broken symlink."""
        return apply_overlay(
            _or_default(self.ui.broken_symlink),
            _or_default(self.ui.broken_path_overlay),
        )

    def broken_control_char(self) -> Style:
        """The style for control characters in the target of a broken symlink."""
        return apply_overlay(
            _or_default(self.ui.control_char),
            _or_default(self.ui.broken_path_overlay),
        )

    def size_style(self, prefix: Optional[str]) -> Style:
        """The style for a size number with the given prefix name, e.g. ``"kibi"``."""
        return _or_default(getattr(self._size(), f"number_{_magnitude(prefix)}"))

    def unit_style(self, prefix: Optional[str]) -> Style:
        """The style for a size unit with the given prefix name, e.g. ``"mega"``."""
        return _or_default(getattr(self._size(), f"unit_{_magnitude(prefix)}"))

    def style_override(self, name: str, ext: Optional[str]) -> Optional[FileNameStyle]:
        """An override for the file name, else for its extension, if any."""
        if self.ui.filenames is not None and name in self.ui.filenames:
            return self.ui.filenames[name]
        if self.ui.extensions is not None and ext is not None:
            return self.ui.extensions.get(ext)
        return None


def _choose_exts(
    exts: ExtensionMappings,
    use_default_filetypes: bool,
    ui: UiStyles,
    classify: Optional[FileTypeClassifier],
) -> FileStyle:
    file_types: Optional[FileStyle] = None
    if use_default_filetypes and classify is not None:
        file_types = _FileTypes(ui, classify)
    if len(exts) > 0:
        return exts if file_types is None else FallbackFileStyle(exts, file_types)
    return NoFileStyle() if file_types is None else file_types


@dataclass
class ThemeOptions:
    """Everything that decides what the theme will be."""

    use_colours: UseColours = UseColours.AUTOMATIC
    fixed_size_colours: bool = False
    definitions: Definitions = field(default_factory=Definitions)
    theme_config: Optional[UiStyles] = None
    file_type_of: Optional[FileTypeClassifier] = None

    def to_theme(self, isatty: bool) -> Theme:
        """Build the theme, plain when colours are off for this output."""
        if self.use_colours is UseColours.NEVER or (
            self.use_colours is UseColours.AUTOMATIC and not isatty
        ):
            return Theme(UiStyles.plain(), NoFileStyle())

        if self.theme_config is not None:
            ui = copy.deepcopy(self.theme_config)
        else:
            ui = default_theme(self.fixed_size_colours)
        exts, use_default_filetypes = self.definitions.parse_color_vars(ui)
        return Theme(ui, _choose_exts(exts, use_default_filetypes, ui, self.file_type_of))