"""
iniopt — typed configuration options

A named option holds one value or an ordered list of values of a single
primitive kind: boolean, signed, unsigned, float or string.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - INI file layout (sections, comments, line syntax)
    - File or network I/O
    - Where a schema comes from

This package defines OPTION VALUES only.

Parsers and writers are external layers that hand text in and take text out.
"""

from .errors import BadCast, NotFound, OptionError, ParseError
from .option import Option
from .schema import OptionSchema, Schema, SchemaLookup, SchemaMode, validate_options
from .values import OptionType

__version__ = "0.1.0"

__all__ = [
    "Option",
    "OptionType",
    "OptionSchema",
    "Schema",
    "SchemaLookup",
    "SchemaMode",
    "validate_options",
    "OptionError",
    "NotFound",
    "BadCast",
    "ParseError",
]
