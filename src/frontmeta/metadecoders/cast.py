# topmark:header:start
#
#   project      : FrontMeta
#   file         : cast.py
#   file_relpath : src/frontmeta/metadecoders/cast.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Permissive scalar conversion helpers.

These converters accept the loose spellings people write in front matter and
config files (``"t"``, ``" 42 "``, ``"0x1F"``, ``"10.0"``) instead of requiring
canonical Python literals. Every converter either returns a value of the
requested type or raises [`TypeConversionError`][frontmeta.metadecoders.errors.TypeConversionError].
"""

from __future__ import annotations

import math
import re
from typing import Final

from .errors import TypeConversionError

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_TRUE_STRINGS: Final[frozenset[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS: Final[frozenset[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_ZERO_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"([+-]?\d+)\.0*")
_LEGACY_OCTAL_RE: Final[re.Pattern[str]] = re.compile(r"([+-]?)0([0-7]+)")


def to_bool(value: object) -> bool:
    """Convert ``value`` to a bool.

    Strings must be one of ``1 t T TRUE true True`` or ``0 f F FALSE false False``.
    Numbers are true when non-zero; ``None`` is false.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        s: str = value.strip()
        if s in _TRUE_STRINGS:
            return True
        if s in _FALSE_STRINGS:
            return False
        raise TypeConversionError(value, "bool", "invalid syntax")
    raise TypeConversionError(value, "bool")


def _parse_int_string(value: str) -> int:
    s: str = value.strip()
    m: re.Match[str] | None = _ZERO_DECIMAL_RE.fullmatch(s)
    if m:
        s = m.group(1)
    m = _LEGACY_OCTAL_RE.fullmatch(s)
    if m:
        return int(m.group(1) + m.group(2), 8)
    try:
        return int(s, 0)
    except ValueError as exc:
        raise TypeConversionError(value, "int", "invalid syntax") from exc


def to_int(value: object) -> int:
    """Convert ``value`` to an int.

    Strings may carry a base prefix (``0x``, ``0o``, ``0b``), a legacy leading-zero
    octal form, digit-group underscores, or a zero decimal tail (``"10.0"``).
    Floats are truncated toward zero; bools map to 0/1; ``None`` maps to 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if value is None:
        return 0
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeConversionError(value, "int", "not a finite number")
        return int(value)
    if isinstance(value, str):
        return _parse_int_string(value)
    raise TypeConversionError(value, "int")


def to_int64(value: object) -> int:
    """Convert ``value`` like `to_int`, rejecting results outside the signed 64-bit range."""
    try:
        result: int = to_int(value)
    except TypeConversionError as exc:
        raise TypeConversionError(value, "int64", str(exc)) from exc
    if not INT64_MIN <= result <= INT64_MAX:
        raise TypeConversionError(value, "int64", "value out of range")
    return result


def to_float(value: object) -> float:
    """Convert ``value`` to a float (bools map to 0.0/1.0, ``None`` to 0.0)."""
    if isinstance(value, (bool, int, float)):
        return float(value)
    if value is None:
        return 0.0
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise TypeConversionError(value, "float", "invalid syntax") from exc
    raise TypeConversionError(value, "float")


def to_string(value: object) -> str:
    """Convert a scalar ``value`` to its textual form.

    Bools render as ``true``/``false`` and integral floats drop their fraction
    (``1.0`` -> ``"1"``), matching how the values are spelled in YAML and TOML.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TypeConversionError(value, "string", "invalid UTF-8") from exc
    raise TypeConversionError(value, "string")
