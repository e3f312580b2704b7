#!/usr/bin/env python3
"""
ILCF ERRORS
-----------
Exception hierarchy raised by the reader and the typed accessor layer.

Author: ILCF Team
Date: 2026-10-18
"""

from typing import Optional


class ILCFError(Exception):
    """Base class for every error raised by ilcf."""


class IndentationFault(ILCFError):
    """A line is indented more than one level past the active namespace."""

    def __init__(self, depth: int, allowed: int, line_no: Optional[int] = None,
                 source: Optional[str] = None):
        self.depth = depth
        self.allowed = allowed
        self.line_no = line_no
        self.source = source
        super().__init__(self._render())

    def _render(self) -> str:
        where = ""
        if self.source:
            where += f"{self.source}:"
        if self.line_no:
            where += f"{self.line_no}: "
        elif where:
            where += " "
        return (f"{where}Too many indentations: depth {self.depth}, "
                f"at most {self.allowed} allowed")

    def locate(self, line_no: int, source: Optional[str] = None) -> "IndentationFault":
        """Attaches position information once the caller knows it."""
        self.line_no = line_no
        if source is not None:
            self.source = source
        self.args = (self._render(),)
        return self


class KeyNotFoundError(ILCFError, KeyError):
    """A flattened key is absent from the parsed mapping."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found: '{self.key}'"


class ConversionError(ILCFError, ValueError):
    """A stored value does not fit the requested scalar type."""

    def __init__(self, key: str, value: str, target: str):
        self.key = key
        self.value = value
        self.target = target
        super().__init__(f"Cannot convert '{key}' = {value!r} to {target}")


class ILCFReadError(ILCFError):
    """The line source could not be opened or decoded."""
