"""The styles for every colourable part of the interface."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Optional, TypeVar

from ezatheme.style import Colour, Style

_T = TypeVar("_T")


def _filled(cls: type[_T], style: Style) -> _T:
    """Build an instance of a style group with every field set to ``style``."""
    return cls(**{f.name: style for f in fields(cls)})


@dataclass(frozen=True)
class IconStyle:
    """An icon override: its glyph and the style to draw it with."""

    glyph: Optional[str] = None
    style: Optional[Style] = None


@dataclass(frozen=True)
class FileNameStyle:
    """A per-name or per-extension override of icon and filename style."""

    icon: Optional[IconStyle] = None
    filename: Optional[Style] = None


@dataclass
class FileKinds:
    """Styles for the kinds of file (codes fi, di, ln, pi, bd, cd, so, sp, ex, mp)."""

    normal: Optional[Style] = Style()
    directory: Optional[Style] = Style(foreground=Colour.BLUE, is_bold=True)
    symlink: Optional[Style] = Style(foreground=Colour.CYAN)
    pipe: Optional[Style] = Style(foreground=Colour.YELLOW)
    block_device: Optional[Style] = Style(foreground=Colour.YELLOW, is_bold=True)
    char_device: Optional[Style] = Style(foreground=Colour.YELLOW, is_bold=True)
    socket: Optional[Style] = Style(foreground=Colour.RED, is_bold=True)
    special: Optional[Style] = Style(foreground=Colour.YELLOW)
    executable: Optional[Style] = Style(foreground=Colour.GREEN, is_bold=True)
    mount_point: Optional[Style] = Style(
        foreground=Colour.BLUE, is_bold=True, is_underline=True
    )


@dataclass
class Permissions:
    """Styles for the permission bits."""

    user_read: Optional[Style] = None
    user_write: Optional[Style] = None
    user_execute_file: Optional[Style] = None
    user_execute_other: Optional[Style] = None
    group_read: Optional[Style] = None
    group_write: Optional[Style] = None
    group_execute: Optional[Style] = None
    other_read: Optional[Style] = None
    other_write: Optional[Style] = None
    other_execute: Optional[Style] = None
    special_user_file: Optional[Style] = None
    special_other: Optional[Style] = None
    attribute: Optional[Style] = None


@dataclass
class Size:
    """Styles for file sizes, by magnitude."""

    major: Optional[Style] = None
    minor: Optional[Style] = None
    number_byte: Optional[Style] = None
    number_kilo: Optional[Style] = None
    number_mega: Optional[Style] = None
    number_giga: Optional[Style] = None
    number_huge: Optional[Style] = None
    unit_byte: Optional[Style] = None
    unit_kilo: Optional[Style] = None
    unit_mega: Optional[Style] = None
    unit_giga: Optional[Style] = None
    unit_huge: Optional[Style] = None


@dataclass
class Users:
    """Styles for user and group names."""

    user_you: Optional[Style] = None
    user_root: Optional[Style] = None
    user_other: Optional[Style] = None
    group_yours: Optional[Style] = None
    group_other: Optional[Style] = None
    group_root: Optional[Style] = None


@dataclass
class Links:
    """Styles for hard link counts."""

    normal: Optional[Style] = None
    multi_link_file: Optional[Style] = None


@dataclass
class Git:
    """Styles for per-file Git statuses."""

    new: Optional[Style] = Style(foreground=Colour.GREEN)
    modified: Optional[Style] = Style(foreground=Colour.BLUE)
    deleted: Optional[Style] = Style(foreground=Colour.RED)
    renamed: Optional[Style] = Style(foreground=Colour.YELLOW)
    typechange: Optional[Style] = Style(foreground=Colour.PURPLE)
    ignored: Optional[Style] = Style(is_dimmed=True)
    conflicted: Optional[Style] = Style(foreground=Colour.RED)


@dataclass
class GitRepo:
    """Styles for the repository column of subdirectories."""

    branch_main: Optional[Style] = Style(foreground=Colour.GREEN)
    branch_other: Optional[Style] = Style(foreground=Colour.YELLOW)
    git_clean: Optional[Style] = Style(foreground=Colour.GREEN)
    git_dirty: Optional[Style] = Style(foreground=Colour.YELLOW, is_bold=True)


@dataclass
class SELinuxContext:
    """Styles for the parts of an SELinux security context."""

    colon: Optional[Style] = None
    user: Optional[Style] = None
    role: Optional[Style] = None
    typ: Optional[Style] = None
    range: Optional[Style] = None


def _default_selinux() -> SELinuxContext:
    return SELinuxContext(
        colon=Style(is_dimmed=True),
        user=Style(foreground=Colour.BLUE),
        role=Style(foreground=Colour.GREEN),
        typ=Style(foreground=Colour.YELLOW),
        range=Style(foreground=Colour.CYAN),
    )


@dataclass
class SecurityContext:
    """Styles for the security context column."""

    none: Optional[Style] = Style()
    selinux: Optional[SELinuxContext] = field(default_factory=_default_selinux)


@dataclass
class FileType:
    """Styles for files by their broad type (image, video, source, ...)."""

    image: Optional[Style] = None
    video: Optional[Style] = None
    music: Optional[Style] = None
    lossless: Optional[Style] = None
    crypto: Optional[Style] = None
    document: Optional[Style] = None
    compressed: Optional[Style] = None
    temp: Optional[Style] = None
    compiled: Optional[Style] = None
    build: Optional[Style] = None
    source: Optional[Style] = None


@dataclass
class UiStyles:
    """Every style used to colour the listing; unset groups are ``None``."""

    colourful: Optional[bool] = None

    filekinds: Optional[FileKinds] = None
    perms: Optional[Permissions] = None
    size: Optional[Size] = None
    users: Optional[Users] = None
    links: Optional[Links] = None
    git: Optional[Git] = None
    git_repo: Optional[GitRepo] = None
    security_context: Optional[SecurityContext] = None
    file_type: Optional[FileType] = None

    punctuation: Optional[Style] = None
    date: Optional[Style] = None
    inode: Optional[Style] = None
    blocks: Optional[Style] = None
    header: Optional[Style] = None
    octal: Optional[Style] = None
    flags: Optional[Style] = None

    symlink_path: Optional[Style] = None
    control_char: Optional[Style] = None
    broken_symlink: Optional[Style] = None
    broken_path_overlay: Optional[Style] = None

    filenames: Optional[dict[str, FileNameStyle]] = None
    extensions: Optional[dict[str, FileNameStyle]] = None

    @classmethod
    def plain(cls) -> UiStyles:
        """Styles that add no colour or attributes anywhere."""
        plain = Style()
        return cls(
            colourful=False,
            filekinds=_filled(FileKinds, plain),
            perms=_filled(Permissions, plain),
            size=Size(),
            users=_filled(Users, plain),
            links=_filled(Links, plain),
            git=_filled(Git, plain),
            git_repo=_filled(GitRepo, plain),
            security_context=SecurityContext(
                none=plain, selinux=_filled(SELinuxContext, plain)
            ),
            file_type=_filled(FileType, plain),
            punctuation=plain,
            date=plain,
            inode=plain,
            blocks=plain,
            octal=plain,
            flags=plain,
            header=plain,
            symlink_path=plain,
            control_char=plain,
            broken_symlink=plain,
            broken_path_overlay=plain,
            filenames=None,
            extensions=None,
        )

    def _size(self) -> Size:
        if self.size is None:
            self.size = Size()
        return self.size

    def set_number_style(self, style: Style) -> None:
        """Use one style for the numbers of every size magnitude."""
        size = self._size()
        size.number_byte = style
        size.number_kilo = style
        size.number_mega = style
        size.number_giga = style
        size.number_huge = style

    def set_unit_style(self, style: Style) -> None:
        """Use one style for the units of every size magnitude."""
        size = self._size()
        size.unit_byte = style
        size.unit_kilo = style
        size.unit_mega = style
        size.unit_giga = style
        size.unit_huge = style