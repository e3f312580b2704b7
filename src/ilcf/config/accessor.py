#!/usr/bin/env python3
"""
ILCF TYPED ACCESSOR
-------------------
Read-only view over a parsed mapping. Looks up flattened keys and converts
their string values at the boundary; the mapping itself is never coerced.

Author: ILCF Team
Date: 2026-10-18
"""

import io
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, TypeVar

from ilcf.core.errors import ConversionError
from ilcf.core.models import FormatSettings, Lookup
from ilcf.reading.reader import ILCFReader, Source

T = TypeVar("T")

_MISSING = object()

_BOOLEANS = {"true": True, "false": False}


class ILCFConfig:
    """
    Typed accessor for a flat ILCF mapping.

    Missing keys raise KeyNotFoundError; values that do not fit the
    requested type raise ConversionError.
    """

    def __init__(self, variables: Mapping[str, str],
                 settings: Optional[FormatSettings] = None):
        self._variables: Dict[str, str] = dict(variables)
        self.settings = settings or FormatSettings()

    @classmethod
    def from_reader(cls, reader: ILCFReader) -> "ILCFConfig":
        return cls(reader.read().variables, reader.settings)

    @classmethod
    def load(cls, source: Source, settings: Optional[FormatSettings] = None) -> "ILCFConfig":
        return cls.from_reader(ILCFReader(source, settings=settings))

    @classmethod
    def loads(cls, text: str, settings: Optional[FormatSettings] = None) -> "ILCFConfig":
        return cls.from_reader(ILCFReader(io.StringIO(text, newline=None), settings=settings))

    def lookup(self, key: str) -> Lookup:
        if key in self._variables:
            return Lookup(key=key, found=True, value=self._variables[key])
        return Lookup(key=key, found=False)

    def get(self, key: str, default: Any = _MISSING) -> Any:
        result = self.lookup(key)
        if not result.found and default is not _MISSING:
            return default
        return result.unwrap()

    def get_string(self, key: str) -> str:
        return self.get(key)

    def get_int(self, key: str) -> int:
        return self._convert(key, int, "int")

    def get_float(self, key: str) -> float:
        return self._convert(key, float, "float")

    def get_bool(self, key: str) -> bool:
        return self._convert(key, lambda v: _BOOLEANS[v.lower()], "bool")

    def get_char(self, key: str) -> str:
        def single(value: str) -> str:
            if len(value) != 1:
                raise ValueError(value)
            return value
        return self._convert(key, single, "char")

    def with_prefix(self, prefix: str) -> Dict[str, str]:
        """
        Entries nested under `prefix`, with the prefix and separator removed.
        An empty prefix is the root namespace and returns every entry.
        """
        if not prefix:
            return self.as_dict()
        head = prefix + self.settings.prefix_delim
        return {k[len(head):]: v for k, v in self._variables.items() if k.startswith(head)}

    def as_dict(self) -> Dict[str, str]:
        return dict(self._variables)

    def keys(self):
        return self._variables.keys()

    def _convert(self, key: str, parse: Callable[[str], T], target: str) -> T:
        value = self.get(key)
        try:
            return parse(value.strip())
        except (ValueError, KeyError) as e:
            raise ConversionError(key, value, target) from e

    def __contains__(self, key: object) -> bool:
        return key in self._variables

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)
