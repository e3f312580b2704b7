#!/usr/bin/env python3
"""
ILCF READER - Line Source
-------------------------
Feeds a file, path or text stream into a fresh CascadeProcessor, one
line at a time and strictly in order, and collects the result into a
ReadContext.

Usage:
    import ilcf

    data = ilcf.loads("server\\n\\tport = 8080\\n")
    # {'server_port': '8080'}

    with open("app.ilcf", encoding="utf-8") as fp:
        data = ilcf.load(fp)

Author: ILCF Team
Date: 2026-10-18
"""

import io
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, TextIO, Union

from ilcf.core.errors import ILCFReadError, IndentationFault
from ilcf.core.models import FormatSettings
from ilcf.reading.context import ReadContext
from ilcf.reading.processor import CascadeProcessor

logger = logging.getLogger("ilcf.reader")

Source = Union[str, "os.PathLike[str]", TextIO]


class ILCFReader:
    """
    Indented Line Configuration Format reader.
    Accepts a path or an already opened text stream.
    """

    def __init__(self, source: Source, encoding: str = "utf-8-sig",
                 settings: Optional[FormatSettings] = None):
        self.source = source
        self.encoding = encoding
        self.settings = settings or FormatSettings()

    @property
    def name(self) -> str:
        if isinstance(self.source, (str, os.PathLike)):
            return str(self.source)
        return getattr(self.source, "name", "<stream>")

    def read(self) -> ReadContext:
        """
        Parses the whole source.

        Raises IndentationFault (with line number and source name attached)
        or ILCFReadError if the source cannot be opened or decoded.
        """
        if not isinstance(self.source, (str, os.PathLike)):
            return self.read_lines(self.source)

        path = Path(self.source)
        try:
            with path.open("r", encoding=self.encoding) as fp:
                return self.read_lines(fp)
        except UnicodeDecodeError as e:
            raise ILCFReadError(f"{path}: not valid {self.encoding} text ({e.reason})") from e
        except OSError as e:
            raise ILCFReadError(f"{path}: {e.strerror or e}") from e

    def read_lines(self, lines: Iterable[str]) -> ReadContext:
        processor = CascadeProcessor(self.settings)
        context = ReadContext(source=self.name)

        for line_no, line in enumerate(self._clean_artifacts(lines), 1):
            try:
                processor.process_line(line, line_no)
            except IndentationFault as e:
                e.locate(line_no, self.name)
                raise
            context.lines_read = line_no

        context.variables = processor.get_variables()
        context.list_elements = processor.list_elements
        context.labels = processor.labels
        context.key_lines = processor.key_lines
        logger.debug("%s: %d lines, %d keys", self.name, context.lines_read,
                     len(context.variables))
        return context

    def _clean_artifacts(self, lines: Iterable[str]) -> Iterator[str]:
        """Strips a leading BOM and any line terminators."""
        first = True
        for line in lines:
            if first:
                line = line.lstrip("\ufeff")
                first = False
            yield line.rstrip("\r\n")


def loads(text: str, settings: Optional[FormatSettings] = None) -> Dict[str, str]:
    """Parses ILCF text into the flat key/value mapping."""
    return ILCFReader(io.StringIO(text, newline=None), settings=settings).read().variables


def load(source: Source, encoding: str = "utf-8-sig",
         settings: Optional[FormatSettings] = None) -> Dict[str, str]:
    """Parses an ILCF file (path or text stream) into the flat key/value mapping."""
    return ILCFReader(source, encoding=encoding, settings=settings).read().variables
