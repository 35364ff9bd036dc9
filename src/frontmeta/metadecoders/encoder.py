# topmark:header:start
#
#   project      : FrontMeta
#   file         : encoder.py
#   file_relpath : src/frontmeta/metadecoders/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render decoded values back to JSON, YAML or TOML text.

TOML has no `null` value, so `None` entries are stripped before rendering TOML.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
import yaml
from yaml.representer import RepresenterError

from frontmeta.config.logging import get_logger

from .errors import UnsupportedFormatError, UnsupportedTypeError
from .formats import Format

if TYPE_CHECKING:
    from frontmeta.config.logging import FrontmetaLogger

logger: FrontmetaLogger = get_logger(__name__)


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists.

    Keys with None values are omitted and None items are dropped from lists.
    Mapping keys are normalized to strings, since TOML tables are string-keyed.
    """
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            out[k] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        out_list: list[object] = []
        seq: list[object] = cast("list[object]", value)
        for v_any in seq:
            if v_any is None:
                logger.debug("Ignoring `None` entry in list")
                continue
            out_list.append(_strip_none_for_toml(v_any))
        return out_list

    return value


def to_toml(value: object) -> str:
    """Serialize a mapping to a TOML document.

    Raises:
        UnsupportedTypeError: If ``value`` is not a mapping (TOML documents are tables).
    """
    if not isinstance(value, Mapping):
        raise UnsupportedTypeError(type(value).__name__, operation="marshal TOML")
    cleaned: Any = _strip_none_for_toml(value)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def to_json(value: object) -> str:
    """Serialize ``value`` as indented JSON; dates and other scalars fall back to ``str``."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str) + "\n"


def to_yaml(value: object) -> str:
    """Serialize ``value`` as block-style YAML, keeping mapping order."""
    return cast(
        "str",
        yaml.safe_dump(value, sort_keys=False, allow_unicode=True, default_flow_style=False),
    )


def encode(value: object, fmt: Format) -> str:
    """Render ``value`` as text in format ``fmt``.

    Raises:
        UnsupportedFormatError: If ``fmt`` is not JSON, YAML or TOML.
        UnsupportedTypeError: If ``value`` cannot be represented in ``fmt``.
    """
    if fmt == Format.JSON:
        return to_json(value)
    if fmt == Format.YAML:
        try:
            return to_yaml(value)
        except RepresenterError as exc:
            raise UnsupportedTypeError(str(exc), operation="marshal YAML") from exc
    if fmt == Format.TOML:
        return to_toml(value)
    raise UnsupportedFormatError(fmt, operation="marshal")
