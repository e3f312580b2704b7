"""
ILCF - Indented Line Configuration Format

Tab-indented configuration files flattened into a single key/value mapping.
"""

from ilcf.config.accessor import ILCFConfig
from ilcf.core.errors import (
    ConversionError,
    ILCFError,
    ILCFReadError,
    IndentationFault,
    KeyNotFoundError,
)
from ilcf.core.models import FormatSettings, LineKind, ListElement, Lookup
from ilcf.reading.processor import CascadeProcessor
from ilcf.reading.reader import ILCFReader, load, loads

__all__ = [
    'load', 'loads', 'ILCFReader', 'CascadeProcessor', 'ILCFConfig',
    'FormatSettings', 'LineKind', 'ListElement', 'Lookup',
    'ILCFError', 'IndentationFault', 'KeyNotFoundError', 'ConversionError',
    'ILCFReadError',
]
