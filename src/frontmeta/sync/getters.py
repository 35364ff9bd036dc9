# topmark:header:start
#
#   project      : FrontMeta
#   file         : getters.py
#   file_relpath : src/frontmeta/sync/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for decoded config tables.

Each getter returns the value for ``key`` converted to the expected type with
the permissive converters from [`frontmeta.metadecoders.cast`][frontmeta.metadecoders.cast]
(so ``concurrency: "8"`` is accepted). When the key is missing the default is
returned silently; when the value cannot be converted a **warning** is logged
and recorded in the `DiagnosticLog`, and the default is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from frontmeta.metadecoders import TypeConversionError, to_bool, to_int, to_string

if TYPE_CHECKING:
    from frontmeta.config.logging import FrontmetaLogger
    from frontmeta.core.diagnostics import DiagnosticLog


def _warn(
    *,
    expected: str,
    loc: str,
    value: object,
    diagnostics: DiagnosticLog,
    logger: FrontmetaLogger,
) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected {expected} in {loc}, got {type(value).__name__}: {value}")


def get_string_value_checked(
    table: dict[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: FrontmetaLogger,
    default: str = "",
) -> str:
    """Return a string value; numbers and bools are rendered as text.

    Mappings and lists are rejected with a warning.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if not isinstance(value, (dict, list)):
        try:
            return to_string(value)
        except TypeConversionError:
            pass

    _warn(
        expected="string",
        loc=f"{where}.{key}",
        value=value,
        diagnostics=diagnostics,
        logger=logger,
    )
    return default


def get_int_value_checked(
    table: dict[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: FrontmetaLogger,
    default: int = 0,
) -> int:
    """Return an int value; numeric strings are converted.

    Notes:
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return default

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        try:
            return to_int(value)
        except TypeConversionError:
            pass

    _warn(expected="int", loc=loc, value=value, diagnostics=diagnostics, logger=logger)
    return default


def get_bool_value_checked(
    table: dict[str, Any],
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: FrontmetaLogger,
    default: bool = False,
) -> bool:
    """Return a boolean value; ``"true"``, ``"f"``, ``1`` and friends are converted."""
    value: Any | None = table.get(key)
    if value is None:
        return default

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, (bool, int, float, str)):
        try:
            return to_bool(value)
        except TypeConversionError:
            pass

    _warn(expected="bool", loc=loc, value=value, diagnostics=diagnostics, logger=logger)
    return default
