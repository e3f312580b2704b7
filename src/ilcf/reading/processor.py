#!/usr/bin/env python3
"""
ILCF CASCADE PROCESSOR - Namespace State Machine
------------------------------------------------
Applies classified lines to the indentation cascade and flattens every
assignment into a single key/value mapping.

    server               ->  (label, opens "server")
    <TAB>host = 0.0.0.0  ->  server_host = "0.0.0.0"
    <TAB>port = 80       ->  server_port = "80"
    debug = true         ->  debug = "true"

One processor instance serves exactly one parse pass.

Author: ILCF Team
Date: 2026-10-18
"""

import logging
from typing import Dict, List, Optional

from ilcf.core.errors import IndentationFault
from ilcf.core.models import FormatSettings, LineKind, LineShard, ListElement
from ilcf.reading.lexer import ILCFLexer

logger = logging.getLogger("ilcf.processor")


class CascadeProcessor:
    """
    Owns the prefix stack and the output mapping for a single parse pass.
    `process_line` is the only operation that mutates either of them.
    """

    def __init__(self, settings: Optional[FormatSettings] = None):
        self.settings = settings or FormatSettings()
        self.lexer = ILCFLexer(self.settings)
        self.variables: Dict[str, str] = {}
        self.prefixes: List[str] = []
        self.list_elements: List[ListElement] = []
        self.labels: List[str] = []
        self.key_lines: Dict[str, int] = {}

    def process_line(self, line: str, line_no: int = 0) -> LineShard:
        """
        Processes one line of an ILCF document.

        Blank and comment-only lines return without touching any state.
        Raises IndentationFault if the line is nested more than one level
        below the previous label or assignment.
        """
        shard = self.lexer.shard(line, line_no)

        if shard.kind in (LineKind.BLANK, LineKind.COMMENT):
            return shard
        if shard.kind in (LineKind.SEQUENCE, LineKind.ASSOCIATIVE):
            self._process_list_element(shard)
            return shard

        self._process_cascade_element(shard)
        return shard

    def get_variables(self) -> Dict[str, str]:
        return self.variables

    def _process_list_element(self, shard: LineShard):
        if shard.value is None:
            logger.debug("Line %d: empty list element discarded", shard.line_no)
            return
        element = ListElement(
            kind=shard.kind,
            depth=shard.depth,
            content=shard.value,
            # Ancestors at the element's own depth; the stack itself is left alone
            prefix=self.settings.prefix_delim.join(self.prefixes[:shard.depth]),
            line_no=shard.line_no,
        )
        self.list_elements.append(element)
        logger.debug("Line %d: list element under '%s' recorded, not materialized",
                     shard.line_no, element.prefix)

    def _process_cascade_element(self, shard: LineShard):
        self._update_cascade(shard)
        prefix = self._generate_prefix()
        key = f"{prefix}{self.settings.prefix_delim}{shard.name}" if prefix else shard.name
        self.prefixes.append(shard.name)

        if shard.kind is LineKind.LABEL:
            self.labels.append(key)
            logger.debug("Line %d: label '%s'", shard.line_no, key)
            return

        if key in self.variables:
            logger.debug("Line %d: '%s' overrides an earlier value", shard.line_no, key)
        self.variables[key] = shard.value
        self.key_lines[key] = shard.line_no
        logger.debug("Line %d: %s = %r", shard.line_no, key, shard.value)

    def _update_cascade(self, shard: LineShard):
        # The stack holds one entry per ancestor, so its length is the deepest legal depth
        if shard.depth > len(self.prefixes):
            raise IndentationFault(shard.depth, len(self.prefixes), shard.line_no or None)
        del self.prefixes[shard.depth:]

    def _generate_prefix(self) -> str:
        return self.settings.prefix_delim.join(self.prefixes)
