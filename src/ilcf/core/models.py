#!/usr/bin/env python3
"""
ILCF CORE MODELS
----------------
Defines the fundamental data structures shared across the ILCF reader.
These models represent the lowest level of configuration abstraction.

Author: ILCF Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ilcf.core.errors import KeyNotFoundError


class LineKind(Enum):
    BLANK = auto()
    COMMENT = auto()
    SEQUENCE = auto()        # '-' ordered-sequence element
    ASSOCIATIVE = auto()     # '*' associative-block element
    LABEL = auto()           # name without '=', opens a namespace level
    ASSIGNMENT = auto()      # name = value


@dataclass(frozen=True)
class FormatSettings:
    """
    Delimiters of the Indented Line Configuration Format.

    The defaults describe the format itself; only the key separator is
    commonly overridden (e.g. '.' for dotted keys).
    """
    assign_delim: str = "="
    comment_delim: str = "#"
    escape_char: str = "\\"
    sequence_marker: str = "-"
    associative_marker: str = "*"
    prefix_delim: str = "_"
    indent_char: str = "\t"


@dataclass
class LineShard:
    """
    The atomic unit of an ILCF document.

    A LineShard represents a single classified line produced by the lexer
    before the cascade processor applies it to the namespace stack.
    """
    line_no: int              # 1-based line number, 0 when fed directly
    depth: int                # Number of leading tab characters
    kind: LineKind
    name: str = ""            # Label/assignment name, trimmed
    value: Optional[str] = None   # Assignment value with comment stripped
    comment: Optional[str] = None # Inline or full-line comment text
    raw_line: str = ""        # The original unmutated line


@dataclass(frozen=True)
class ListElement:
    """A non-empty '-' or '*' line, recognized but not materialized."""
    kind: LineKind
    depth: int
    content: str
    prefix: str
    line_no: int = 0


@dataclass(frozen=True)
class Lookup:
    """
    Discriminated result of a key lookup.

    ``found`` separates a missing key from a key holding an empty string.
    """
    key: str
    found: bool
    value: Optional[str] = None

    def unwrap(self) -> str:
        if not self.found:
            raise KeyNotFoundError(self.key)
        return self.value
