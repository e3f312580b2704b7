#!/usr/bin/env python3
"""
ILCF READ CONTEXT
-----------------
The record of a single parse pass: what was read, from where, and what
the cascade processor produced.

Author: ILCF Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ilcf.core.models import ListElement


@dataclass
class ReadContext:
    """
    Result of ILCFReader.read().

    Populated by the reader once the CascadeProcessor has consumed every line.
    """
    source: str                                   # Path or stream name
    variables: Dict[str, str] = field(default_factory=dict)
    list_elements: List[ListElement] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)  # Flattened label keys, in order
    key_lines: Dict[str, int] = field(default_factory=dict)  # Key -> line of last assignment
    lines_read: int = 0
