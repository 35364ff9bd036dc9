# topmark:header:start
#
#   project      : FrontMeta
#   file         : __init__.py
#   file_relpath : src/frontmeta/metadecoders/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format detection and decoding for front matter and data files.

Typical flow:
    1. Resolve a `Format` from a filename (`format_from_string`), a front matter
       marker (`format_from_front_matter_type`) or the content itself
       (`format_from_content`).
    2. Decode with `DEFAULT_DECODER.decode_to_mapping` (front matter) or
       `DEFAULT_DECODER.decode_to_value` (data files).
    3. Optionally render the result again with `encode`.

Decoded YAML never carries non-string mapping keys: ``true: 1`` decodes to
``{"true": 1}``, as it would from JSON or TOML.
"""

from __future__ import annotations

from .cast import to_bool, to_float, to_int, to_int64, to_string
from .decoder import DEFAULT_DECODER, Decoder
from .encoder import encode
from .errors import (
    MetaDecoderError,
    ParseFailureError,
    TypeConversionError,
    UnsupportedFormatError,
    UnsupportedTypeError,
)
from .formats import (
    Format,
    FrontMatterType,
    format_from_content,
    format_from_front_matter_type,
    format_from_string,
)
from .normalize import stringify_map_keys
from .targets import TargetKind

__all__: list[str] = [
    "DEFAULT_DECODER",
    "Decoder",
    "Format",
    "FrontMatterType",
    "MetaDecoderError",
    "ParseFailureError",
    "TargetKind",
    "TypeConversionError",
    "UnsupportedFormatError",
    "UnsupportedTypeError",
    "encode",
    "format_from_content",
    "format_from_front_matter_type",
    "format_from_string",
    "stringify_map_keys",
    "to_bool",
    "to_float",
    "to_int",
    "to_int64",
    "to_string",
]
