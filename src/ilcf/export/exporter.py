#!/usr/bin/env python3
"""
ILCF EXPORTER - Flat Mapping Serializer
---------------------------------------
Renders a parsed flat mapping as YAML (ruamel.yaml round-trip dumper) or
JSON. Keys are emitted in sorted order so exports diff cleanly.

Author: ILCF Team
Date: 2026-10-18
"""

import io
import json
from typing import Dict, Mapping, Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

FORMATS = ("yaml", "json")


class FlatExporter:
    """
    The Serializer: converts the flat key/value mapping into a document
    another tool can load.
    """

    def __init__(self, fmt: str = "yaml"):
        if fmt not in FORMATS:
            raise ValueError(f"Unsupported export format '{fmt}' (choose from {', '.join(FORMATS)})")
        self.fmt = fmt
        self.yaml = YAML(typ="rt")
        self.yaml.width = 4096

    @property
    def extension(self) -> str:
        return f".{self.fmt}"

    def _to_commented_map(self, variables: Mapping[str, str],
                          key_lines: Optional[Mapping[str, int]]) -> CommentedMap:
        doc = CommentedMap()
        for key in sorted(variables):
            doc[key] = variables[key]
            # Source position survives as an end-of-line comment
            if key_lines and key_lines.get(key):
                doc.yaml_add_eol_comment(f"line {key_lines[key]}", key)
        return doc

    def export(self, variables: Mapping[str, str],
               key_lines: Optional[Mapping[str, int]] = None) -> str:
        """
        Exports the mapping into a single string.
        `key_lines` (key -> source line) is only used by the YAML format.
        """
        if self.fmt == "json":
            ordered: Dict[str, str] = {k: variables[k] for k in sorted(variables)}
            return json.dumps(ordered, indent=2, ensure_ascii=False) + "\n"

        if not variables:
            return "{}\n"

        stream = io.StringIO()
        self.yaml.dump(self._to_commented_map(variables, key_lines), stream)
        return stream.getvalue()
