"""Terminal styles, LS_COLORS parsing, colour themes, tree parts, timestamps and table layout."""

__version__ = "0.1.0"