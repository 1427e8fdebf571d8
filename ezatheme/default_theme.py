"""The built-in colourful theme."""

from __future__ import annotations

from ezatheme.style import Colour, Style
from ezatheme.ui_styles import (
    FileKinds,
    FileType,
    Git,
    GitRepo,
    Links,
    Permissions,
    SecurityContext,
    Size,
    UiStyles,
    Users,
)


def _normal(colour: Colour) -> Style:
    return Style(foreground=colour)


def _bold(colour: Colour) -> Style:
    return Style(foreground=colour, is_bold=True)


def colourful_size(fixed: bool) -> Size:
    """Size styles: all green when ``fixed``, otherwise graded by magnitude."""
    if fixed:
        number = _bold(Colour.GREEN)
        unit = _normal(Colour.GREEN)
        return Size(
            major=_bold(Colour.GREEN),
            minor=_normal(Colour.GREEN),
            number_byte=number,
            number_kilo=number,
            number_mega=number,
            number_giga=number,
            number_huge=number,
            unit_byte=unit,
            unit_kilo=unit,
            unit_mega=unit,
            unit_giga=unit,
            unit_huge=unit,
        )
    return Size(
        major=_bold(Colour.GREEN),
        minor=_normal(Colour.GREEN),
        number_byte=_normal(Colour.GREEN),
        number_kilo=_bold(Colour.GREEN),
        number_mega=_normal(Colour.YELLOW),
        number_giga=_normal(Colour.RED),
        number_huge=_normal(Colour.PURPLE),
        unit_byte=_normal(Colour.GREEN),
        unit_kilo=_bold(Colour.GREEN),
        unit_mega=_normal(Colour.YELLOW),
        unit_giga=_normal(Colour.RED),
        unit_huge=_normal(Colour.PURPLE),
    )


def default_ui_styles() -> UiStyles:
    """The default colourful styles, with sizes graded by magnitude."""
    return UiStyles(
        colourful=True,
        filekinds=FileKinds(),
        perms=Permissions(
            user_read=_bold(Colour.YELLOW),
            user_write=_bold(Colour.RED),
            user_execute_file=_bold(Colour.GREEN).underline(),
            user_execute_other=_bold(Colour.GREEN),
            group_read=_normal(Colour.YELLOW),
            group_write=_normal(Colour.RED),
            group_execute=_normal(Colour.GREEN),
            other_read=_normal(Colour.YELLOW),
            other_write=_normal(Colour.RED),
            other_execute=_normal(Colour.GREEN),
            special_user_file=_normal(Colour.PURPLE),
            special_other=_normal(Colour.PURPLE),
            attribute=Style(),
        ),
        size=colourful_size(False),
        users=Users(
            user_you=_bold(Colour.YELLOW),
            user_other=Style(),
            user_root=Style(),
            group_yours=_bold(Colour.YELLOW),
            group_other=Style(),
            group_root=Style(),
        ),
        links=Links(
            normal=_bold(Colour.RED),
            multi_link_file=Style(foreground=Colour.RED, background=Colour.YELLOW),
        ),
        git=Git(),
        git_repo=GitRepo(),
        security_context=SecurityContext(),
        file_type=FileType(
            image=_normal(Colour.PURPLE),
            video=_bold(Colour.PURPLE),
            music=_normal(Colour.CYAN),
            lossless=_bold(Colour.CYAN),
            crypto=_bold(Colour.GREEN),
            document=_normal(Colour.GREEN),
            compressed=_normal(Colour.RED),
            temp=_normal(Colour.WHITE),
            compiled=_normal(Colour.YELLOW),
            build=_bold(Colour.YELLOW).underline(),
            source=_bold(Colour.YELLOW),
        ),
        punctuation=_bold(Colour.DARK_GRAY),
        date=_normal(Colour.BLUE),
        inode=_normal(Colour.PURPLE),
        blocks=_normal(Colour.CYAN),
        octal=_normal(Colour.PURPLE),
        flags=Style(),
        header=Style().underline(),
        symlink_path=_normal(Colour.CYAN),
        control_char=_normal(Colour.RED),
        broken_symlink=_normal(Colour.RED),
        broken_path_overlay=Style().underline(),
        filenames=None,
        extensions=None,
    )


def default_theme(fixed: bool) -> UiStyles:
    """The default styles, with size colours chosen by ``fixed``."""
    styles = default_ui_styles()
    styles.size = colourful_size(fixed)
    return styles