"""Applying two-letter colour codes from colour definitions to UI styles."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from ezatheme.lsc import Pair
from ezatheme.style import Style
from ezatheme.ui_styles import (
    FileKinds,
    FileType,
    Git,
    GitRepo,
    Links,
    Permissions,
    SecurityContext,
    SELinuxContext,
    Size,
    UiStyles,
    Users,
)

_GROUPS: Dict[str, Callable[[], object]] = {
    "filekinds": FileKinds,
    "perms": Permissions,
    "size": Size,
    "users": Users,
    "links": Links,
    "git": Git,
    "git_repo": GitRepo,
    "security_context": SecurityContext,
    "file_type": FileType,
}

_Target = Tuple[Optional[str], str]

# Codes shared with LS_COLORS. Codes such as MULTIHARDLINK, DOOR, SETUID,
# SETGID, CAPABILITY, STICKY and OTHER_WRITABLE are not used.
_LS_CODES: Dict[str, _Target] = {
    "di": ("filekinds", "directory"),
    "ex": ("filekinds", "executable"),
    "fi": ("filekinds", "normal"),
    "pi": ("filekinds", "pipe"),
    "so": ("filekinds", "socket"),
    "bd": ("filekinds", "block_device"),
    "cd": ("filekinds", "char_device"),
    "ln": ("filekinds", "symlink"),
    "or": (None, "broken_symlink"),
}

_EXA_CODES: Dict[str, _Target] = {
    "ur": ("perms", "user_read"),
    "uw": ("perms", "user_write"),
    "ux": ("perms", "user_execute_file"),
    "ue": ("perms", "user_execute_other"),
    "gr": ("perms", "group_read"),
    "gw": ("perms", "group_write"),
    "gx": ("perms", "group_execute"),
    "tr": ("perms", "other_read"),
    "tw": ("perms", "other_write"),
    "tx": ("perms", "other_execute"),
    "su": ("perms", "special_user_file"),
    "sf": ("perms", "special_other"),
    "xa": ("perms", "attribute"),
    "nb": ("size", "number_byte"),
    "nk": ("size", "number_kilo"),
    "nm": ("size", "number_mega"),
    "ng": ("size", "number_giga"),
    "nt": ("size", "number_huge"),
    "ub": ("size", "unit_byte"),
    "uk": ("size", "unit_kilo"),
    "um": ("size", "unit_mega"),
    "ug": ("size", "unit_giga"),
    "ut": ("size", "unit_huge"),
    "df": ("size", "major"),
    "ds": ("size", "minor"),
    "uu": ("users", "user_you"),
    "un": ("users", "user_other"),
    "uR": ("users", "user_root"),
    "gu": ("users", "group_yours"),
    "gn": ("users", "group_other"),
    "gR": ("users", "group_root"),
    "lc": ("links", "normal"),
    "lm": ("links", "multi_link_file"),
    "ga": ("git", "new"),
    "gm": ("git", "modified"),
    "gd": ("git", "deleted"),
    "gv": ("git", "renamed"),
    "gt": ("git", "typechange"),
    "gi": ("git", "ignored"),
    "gc": ("git", "conflicted"),
    "Gm": ("git_repo", "branch_main"),
    "Go": ("git_repo", "branch_other"),
    "Gc": ("git_repo", "git_clean"),
    "Gd": ("git_repo", "git_dirty"),
    "xx": (None, "punctuation"),
    "da": (None, "date"),
    "in": (None, "inode"),
    "bl": (None, "blocks"),
    "hd": (None, "header"),
    "oc": (None, "octal"),
    "ff": (None, "flags"),
    "lp": (None, "symlink_path"),
    "cc": (None, "control_char"),
    "bO": (None, "broken_path_overlay"),
    "mp": ("filekinds", "mount_point"),
    # Catch-all for unrecognised file kinds.
    "sp": ("filekinds", "special"),
    "im": ("file_type", "image"),
    "vi": ("file_type", "video"),
    "mu": ("file_type", "music"),
    "lo": ("file_type", "lossless"),
    "cr": ("file_type", "crypto"),
    "do": ("file_type", "document"),
    "co": ("file_type", "compressed"),
    "tm": ("file_type", "temp"),
    "cm": ("file_type", "compiled"),
    "bu": ("file_type", "build"),
    "sc": ("file_type", "source"),
    "Sn": ("security_context", "none"),
}

_SELINUX_CODES: Dict[str, str] = {
    "Su": "user",
    "Sr": "role",
    "St": "typ",
    "Sl": "range",
}


def _group(styles: UiStyles, name: str) -> object:
    """Return a style group, creating its default first if it is unset."""
    group = getattr(styles, name)
    if group is None:
        group = _GROUPS[name]()
        setattr(styles, name, group)
    return group


def _assign(styles: UiStyles, target: _Target, style: Style) -> None:
    group_name, field_name = target
    owner = styles if group_name is None else _group(styles, group_name)
    setattr(owner, field_name, style)


def set_ls(styles: UiStyles, pair: Pair) -> bool:
    """Apply a pair whose key is an LS_COLORS code; return whether it was one."""
    target = _LS_CODES.get(pair.key)
    if target is None:
        return False
    _assign(styles, target, pair.to_style())
    return True


def set_exa(styles: UiStyles, pair: Pair) -> bool:
    """Apply a pair whose key is an extended code; return whether it was one.

    LS_COLORS codes are not handled here, so ``set_ls`` should be tried first.
    """
    key = pair.key
    if key == "sn":
        styles.set_number_style(pair.to_style())
    elif key == "sb":
        styles.set_unit_style(pair.to_style())
    elif key in _SELINUX_CODES:
        context = _group(styles, "security_context")
        assert isinstance(context, SecurityContext)
        if context.selinux is None:
            context.selinux = SELinuxContext()
        setattr(context.selinux, _SELINUX_CODES[key], pair.to_style())
    elif key in _EXA_CODES:
        _assign(styles, _EXA_CODES[key], pair.to_style())
    else:
        return False
    return True