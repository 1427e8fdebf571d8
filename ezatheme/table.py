"""Table columns, their headers and alignment, and row layout."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Mapping, Optional, Sequence

from wcwidth import wcswidth

EZA_WINDOWS_ATTRIBUTES = "EZA_WINDOWS_ATTRIBUTES"

_SECURITY_CONTEXT_SUPPORTED = sys.platform.startswith("linux")

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class SizeFormat(Enum):
    """How file sizes are formatted."""

    DECIMAL_BYTES = "decimal"
    BINARY_BYTES = "binary"
    JUST_BYTES = "bytes"


class UserFormat(Enum):
    """Whether users and groups are shown by number or by name."""

    NUMERIC = "numeric"
    NAME = "name"


class GroupFormat(Enum):
    """How the group column is shown."""

    REGULAR = "regular"
    SMART = "smart"


class TimeType(Enum):
    """Which of a file's timestamps a column shows."""

    MODIFIED = "modified"
    CHANGED = "changed"
    ACCESSED = "accessed"
    CREATED = "created"

    def header(self) -> str:
        """The column heading for this timestamp."""
        return _TIME_HEADERS[self]


_TIME_HEADERS = {
    TimeType.MODIFIED: "Date Modified",
    TimeType.CHANGED: "Date Changed",
    TimeType.ACCESSED: "Date Accessed",
    TimeType.CREATED: "Date Created",
}


class FlagsFormat(Enum):
    """How file flags are displayed."""

    LONG = "long"
    SHORT = "short"

    @classmethod
    def deduce(cls, vars: Optional[Mapping[str, str]]) -> FlagsFormat:
        """Read the flags format from the environment, defaulting to long."""
        value = None if vars is None else vars.get(EZA_WINDOWS_ATTRIBUTES)
        if value is None:
            return cls.LONG
        lowered = value.lower()
        if lowered == "short":
            return cls.SHORT
        return cls.LONG


@dataclass(frozen=True)
class TimeTypes:
    """Which timestamps to show; by default just the modified time."""

    modified: bool = True
    changed: bool = False
    accessed: bool = False
    created: bool = False


class Alignment(Enum):
    """Which side of its column a cell is drawn against."""

    LEFT = "left"
    RIGHT = "right"


class ColumnKind(Enum):
    """The kinds of column a table can have."""

    PERMISSIONS = "permissions"
    FILE_SIZE = "file_size"
    TIMESTAMP = "timestamp"
    BLOCKSIZE = "blocksize"
    USER = "user"
    GROUP = "group"
    HARD_LINKS = "hard_links"
    INODE = "inode"
    GIT_STATUS = "git_status"
    SUBDIR_GIT_REPO = "subdir_git_repo"
    OCTAL = "octal"
    SECURITY_CONTEXT = "security_context"
    FILE_FLAGS = "file_flags"


_HEADERS = {
    ColumnKind.PERMISSIONS: "Permissions",
    ColumnKind.FILE_SIZE: "Size",
    ColumnKind.BLOCKSIZE: "Blocksize",
    ColumnKind.USER: "User",
    ColumnKind.GROUP: "Group",
    ColumnKind.HARD_LINKS: "Links",
    ColumnKind.INODE: "inode",
    ColumnKind.GIT_STATUS: "Git",
    ColumnKind.SUBDIR_GIT_REPO: "Repo",
    ColumnKind.OCTAL: "Octal",
    ColumnKind.SECURITY_CONTEXT: "Security Context",
    ColumnKind.FILE_FLAGS: "Flags",
}

_RIGHT_ALIGNED = frozenset(
    {
        ColumnKind.FILE_SIZE,
        ColumnKind.HARD_LINKS,
        ColumnKind.INODE,
        ColumnKind.BLOCKSIZE,
        ColumnKind.GIT_STATUS,
    }
)


@dataclass(frozen=True)
class Column:
    """One column of a table.

    Timestamp columns carry the time type they show; repository columns
    carry whether they show the repository status.
    """

    kind: ColumnKind
    time_type: Optional[TimeType] = None
    with_status: bool = False

    def __post_init__(self) -> None:
        if self.kind is ColumnKind.TIMESTAMP and self.time_type is None:
            raise ValueError("a timestamp column needs a time type")
        if self.kind is not ColumnKind.TIMESTAMP and self.time_type is not None:
            raise ValueError(f"a {self.kind.value} column takes no time type")

    def alignment(self) -> Alignment:
        """Numbers are right-aligned; text is left-aligned."""
        return Alignment.RIGHT if self.kind in _RIGHT_ALIGNED else Alignment.LEFT

    def header(self) -> str:
        """The text for this column in the header row."""
        if self.kind is ColumnKind.TIMESTAMP:
            assert self.time_type is not None
            return self.time_type.header()
        return _HEADERS[self.kind]


@dataclass(frozen=True)
class Columns:
    """Which optional columns are switched on."""

    time_types: TimeTypes = field(default_factory=TimeTypes)
    inode: bool = False
    links: bool = False
    blocksize: bool = False
    group: bool = False
    git: bool = False
    subdir_git_repos: bool = False
    subdir_git_repos_no_stat: bool = False
    octal: bool = False
    security_context: bool = False
    file_flags: bool = False
    permissions: bool = True
    filesize: bool = True
    user: bool = True

    def collect(self, actually_enable_git: bool, git_repos: bool) -> list[Column]:
        """The columns to show, in display order."""
        columns: list[Column] = []
        switches = (
            (self.inode, ColumnKind.INODE),
            (self.octal, ColumnKind.OCTAL),
            (self.permissions, ColumnKind.PERMISSIONS),
            (self.links, ColumnKind.HARD_LINKS),
            (self.filesize, ColumnKind.FILE_SIZE),
            (self.blocksize, ColumnKind.BLOCKSIZE),
            (self.user, ColumnKind.USER),
            (self.group, ColumnKind.GROUP),
            (self.file_flags, ColumnKind.FILE_FLAGS),
            (
                self.security_context and _SECURITY_CONTEXT_SUPPORTED,
                ColumnKind.SECURITY_CONTEXT,
            ),
        )
        columns.extend(Column(kind) for enabled, kind in switches if enabled)

        times = self.time_types
        for enabled, time_type in (
            (times.modified, TimeType.MODIFIED),
            (times.changed, TimeType.CHANGED),
            (times.created, TimeType.CREATED),
            (times.accessed, TimeType.ACCESSED),
        ):
            if enabled:
                columns.append(Column(ColumnKind.TIMESTAMP, time_type=time_type))

        if self.git and actually_enable_git:
            columns.append(Column(ColumnKind.GIT_STATUS))
        if self.subdir_git_repos and git_repos:
            columns.append(Column(ColumnKind.SUBDIR_GIT_REPO, with_status=True))
        if self.subdir_git_repos_no_stat and git_repos:
            columns.append(Column(ColumnKind.SUBDIR_GIT_REPO, with_status=False))
        return columns


class TableWidths:
    """The widest cell seen so far in each column."""

    def __init__(self, widths: Iterable[int] = ()) -> None:
        self._widths = list(widths)

    @classmethod
    def zero(cls, count: int) -> TableWidths:
        return cls([0] * count)

    def __iter__(self) -> Iterator[int]:
        return iter(self._widths)

    def __len__(self) -> int:
        return len(self._widths)

    def __getitem__(self, index: int) -> int:
        return self._widths[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TableWidths):
            return self._widths == other._widths
        return NotImplemented

    def __repr__(self) -> str:
        return f"TableWidths({self._widths!r})"

    def add_widths(self, widths: Iterable[int]) -> None:
        """Widen each column to fit the matching cell width of a row."""
        for index, width in zip(range(len(self._widths)), widths):
            self._widths[index] = max(self._widths[index], width)

    def total(self) -> int:
        """The full row width, counting one separating space per column."""
        return len(self._widths) + sum(self._widths)


def _cell_width(text: str) -> int:
    plain = _ANSI_ESCAPE.sub("", text)
    width = wcswidth(plain)
    return len(plain) if width < 0 else width


def render_row(
    columns: Sequence[Column], widths: Iterable[int], cells: Iterable[str]
) -> str:
    """Lay out a row's cells, padding each to its column's width.

    Every cell is followed by one space. Escape codes in cells do not count
    towards their width.
    """
    parts: list[str] = []
    for column, width, cell in zip(columns, widths, cells):
        padding = width - _cell_width(cell)
        if padding < 0:
            raise ValueError(
                f"cell {cell!r} is wider than its column width of {width}"
            )
        if column.alignment() is Alignment.LEFT:
            parts.append(cell + " " * padding)
        else:
            parts.append(" " * padding + cell)
        parts.append(" ")
    return "".join(parts)