"""Tree-drawing parts such as ``├──`` and ``└──`` for tree views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")


class TreePart(Enum):
    """One column of box-drawing characters in a tree row."""

    EDGE = "├──"
    LINE = "│  "
    CORNER = "└──"
    BLANK = "   "

    def ascii_art(self) -> str:
        """Return the box-drawing characters for this part."""
        return self.value


@dataclass(frozen=True)
class TreeDepth:
    """How many directories deep an entry is; the top level is 0."""

    value: int = 0

    @classmethod
    def root(cls) -> TreeDepth:
        return cls(0)

    def deeper(self) -> TreeDepth:
        return TreeDepth(self.value + 1)

    def iterate_over(self, items: Iterable[T]) -> Iterator[tuple[TreeParams, T]]:
        """Yield each item with parameters marking whether it is the last."""
        iterator = iter(items)
        sentinel = object()
        current = next(iterator, sentinel)
        while current is not sentinel:
            following = next(iterator, sentinel)
            yield TreeParams(self, following is sentinel), current
            current = following


@dataclass(frozen=True)
class TreeParams:
    """The depth of an entry and whether it is the last in its directory."""

    depth: TreeDepth
    last: bool

    def is_at_root(self) -> bool:
        return self.depth.value == 0


@dataclass
class TreeTrunk:
    """Builds up the tree parts for successive rows."""

    _stack: list[TreePart] = field(default_factory=list)
    _last_params: TreeParams | None = None

    def new_row(self, params: TreeParams) -> list[TreePart]:
        """Return the tree parts for a row, updating state for later rows."""
        if self._last_params is not None:
            last = self._last_params
            self._stack[last.depth.value] = TreePart.BLANK if last.last else TreePart.LINE

        size = params.depth.value + 1
        del self._stack[size:]
        self._stack.extend([TreePart.EDGE] * (size - len(self._stack)))
        self._stack[params.depth.value] = TreePart.CORNER if params.last else TreePart.EDGE

        self._last_params = params
        # The zeroth level is left out so top-level entries are not joined.
        return self._stack[1:]