#!/usr/bin/env python3
"""
ILCF LEXER - Line Classifier
----------------------------
Decomposes raw configuration lines into LineShard models.
The lexer is stateless: namespace tracking belongs to the CascadeProcessor.

Author: ILCF Team
Date: 2026-10-18
"""

from typing import Optional, Tuple

from ilcf.core.models import FormatSettings, LineKind, LineShard


class ILCFLexer:
    """
    Turns one raw line into a classified LineShard.
    Preserves leading tabs for depth counting and honours escaped comment markers.
    """

    def __init__(self, settings: Optional[FormatSettings] = None):
        self.settings = settings or FormatSettings()

    def trim(self, line: str) -> Tuple[str, str]:
        """
        Returns (partial, full): trailing spaces removed with leading tabs
        kept, and the line stripped on both ends.
        """
        line = line.rstrip("\r\n")
        return line.rstrip(" "), line.strip()

    def count_indent(self, partial: str) -> int:
        """Counts leading indent characters; spaces never count."""
        depth = 0
        for char in partial:
            if char != self.settings.indent_char:
                break
            depth += 1
        return depth

    def find_comment_split(self, text: str) -> int:
        """Index of the first comment marker not preceded by an escape, or -1."""
        marker = self.settings.comment_delim
        escape = self.settings.escape_char
        for i, char in enumerate(text):
            if char == marker and (i == 0 or text[i - 1] != escape):
                return i
        return -1

    def unescape(self, text: str) -> str:
        return text.replace(self.settings.escape_char + self.settings.comment_delim,
                            self.settings.comment_delim)

    def classify(self, full: str) -> LineKind:
        if not full:
            return LineKind.BLANK
        first = full[0]
        if first == self.settings.sequence_marker:
            return LineKind.SEQUENCE
        if first == self.settings.associative_marker:
            return LineKind.ASSOCIATIVE
        if first == self.settings.comment_delim:
            return LineKind.COMMENT
        if self.settings.assign_delim in self._split_comment(full)[0]:
            return LineKind.ASSIGNMENT
        return LineKind.LABEL

    def _split_comment(self, full: str) -> Tuple[str, Optional[str]]:
        idx = self.find_comment_split(full)
        if idx == -1:
            return full, None
        return full[:idx], full[idx + 1:].strip()

    def shard(self, line: str, line_no: int = 0) -> LineShard:
        """
        Classifies a single line.
        Example: "\\tport = 80 # http" -> LineShard(depth=1, name="port", value="80")
        """
        partial, full = self.trim(line)
        kind = self.classify(full)
        shard = LineShard(line_no=line_no, depth=self.count_indent(partial),
                          kind=kind, raw_line=line)

        if kind is LineKind.BLANK:
            return shard
        if kind is LineKind.COMMENT:
            shard.comment = full[1:].strip()
            return shard

        code, shard.comment = self._split_comment(full)

        if kind in (LineKind.SEQUENCE, LineKind.ASSOCIATIVE):
            # Empty elements ("-", "*", "- # note") carry no content and are discarded upstream
            body = code[1:].strip()
            if len(full) >= 2 and body:
                shard.value = self.unescape(body)
            return shard

        if kind is LineKind.LABEL:
            shard.name = self.unescape(code.strip())
            return shard

        name, _, value = code.partition(self.settings.assign_delim)
        shard.name = self.unescape(name.strip())
        shard.value = self.unescape(value.strip())
        return shard
