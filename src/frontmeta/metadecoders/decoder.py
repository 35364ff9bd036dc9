# topmark:header:start
#
#   project      : FrontMeta
#   file         : decoder.py
#   file_relpath : src/frontmeta/metadecoders/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode JSON, YAML and TOML into plain Python values.

Parsing is delegated to ``json`` (JSON), ``yaml.safe_load`` (YAML) and
``tomlkit`` (TOML, unwrapped to plain ``dict``/``list`` values). YAML results
are post-processed by
[`stringify_map_keys`][frontmeta.metadecoders.normalize.stringify_map_keys] so
every mapping in a decoded tree has string keys, whatever the source format.

Entry points:
    - `Decoder.decode_to_mapping`: front matter, always a mapping.
    - `Decoder.decode_to_value`: data files, any top-level shape.
    - `Decoder.decode_file_to_mapping`: read and decode a file by extension.
    - `Decoder.decode_typed`: decode a string into a requested `TargetKind`.
    - `Decoder.decode`: the format dispatch shared by all of the above.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, Union

import tomlkit
import yaml
from tomlkit.exceptions import TOMLKitError

from frontmeta.config.logging import get_logger

from .cast import to_bool, to_float, to_int, to_int64
from .errors import ParseFailureError, UnsupportedFormatError, UnsupportedTypeError
from .formats import Format, format_from_content, format_from_string
from .normalize import RecursiveValueError, stringify_map_keys
from .targets import TargetKind

if TYPE_CHECKING:
    from os import PathLike

    from frontmeta.config.logging import FrontmetaLogger

logger: FrontmetaLogger = get_logger(__name__)

DecoderInput = Union[bytes, bytearray, str, None]


def _to_file_error(fmt: Format, exc: Exception, context: str) -> ParseFailureError:
    """Wrap a parser exception with its format and log it."""
    err = ParseFailureError(fmt, f"{context}: {exc}")
    logger.error("%s %s", fmt.value, err)
    return err


@dataclass(frozen=True)
class Decoder:
    """Decoder options and entry points.

    Attributes:
        delimiter (str): Field delimiter for delimited-text data. Defaults to ``","``.
        comment (str | None): If set, lines starting with this character are
            comments in delimited-text data.
    """

    delimiter: str = ","
    comment: str | None = None

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")
        if self.comment is not None and len(self.comment) != 1:
            raise ValueError(f"comment must be a single character, got {self.comment!r}")

    def options_key(self) -> str:
        """Return a string identifying these options, for use in cache keys."""
        return self.delimiter + (self.comment or "")

    def format_from_content_string(self, data: str) -> Format:
        """Guess the format of ``data``; see `format_from_content`."""
        return format_from_content(data)

    def decode_to_mapping(self, data: DecoderInput, fmt: Format) -> dict[str, Any]:
        """Decode ``data`` in format ``fmt`` into a new mapping.

        This is what front matter decoding needs. ``None`` or empty input gives
        an empty mapping.

        Raises:
            UnsupportedFormatError: If ``fmt`` is not JSON, YAML or TOML.
            ParseFailureError: If the input does not parse or is not a mapping.
        """
        if not data:
            return {}

        value: Any = self.decode(data, fmt)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise _to_file_error(
                fmt,
                TypeError(f"cannot decode {type(value).__name__} into a mapping"),
                "unmarshal failed",
            )
        return value

    def decode_to_value(self, data: DecoderInput, fmt: Format) -> Any:
        """Decode ``data`` in format ``fmt`` into a value of any shape.

        This is what data files need: a top-level list or scalar is legal.
        ``None`` or empty input gives an empty mapping.
        """
        if not data:
            return {}
        return self.decode(data, fmt)

    def decode_file_to_mapping(
        self,
        path: str | PathLike[str],
        fmt: Format | None = None,
    ) -> dict[str, Any]:
        """Read ``path`` and decode it into a mapping.

        The format is taken from the file extension unless ``fmt`` is given.

        Raises:
            UnsupportedFormatError: If no format can be resolved from the filename.
            OSError: If the file cannot be read.
        """
        filename: str = str(path)
        resolved: Format = fmt or format_from_string(filename)
        if not resolved:
            raise UnsupportedFormatError(resolved, source=filename)

        data: bytes = Path(path).read_bytes()
        logger.debug("Decoding %s as %s (%d bytes)", filename, resolved.label, len(data))
        return self.decode_to_mapping(data, resolved)

    def decode_typed(self, data: str, target: TargetKind | object) -> Any:
        """Decode the string ``data`` into the shape named by ``target``.

        ``target`` is a `TargetKind` or an example value of the desired type
        (``""``, ``{}``, ``[]``, ``False``, ``0``, ``0.0``). Surrounding
        whitespace is trimmed first. Mappings are format-sniffed; sequences
        are always read as YAML.

        Raises:
            UnsupportedTypeError: If the target shape is not supported.
            TypeConversionError: If a scalar cannot be converted.
        """
        kind: TargetKind = TargetKind.for_example(target)
        text: str = data.strip()

        if kind is TargetKind.STRING:
            return text
        if kind is TargetKind.MAPPING:
            return self.decode_to_mapping(text, self.format_from_content_string(text))
        if kind is TargetKind.SEQUENCE:
            return self.decode_to_value(text, Format.YAML)
        if kind is TargetKind.BOOL:
            return to_bool(text)
        if kind is TargetKind.INT:
            return to_int(text)
        if kind is TargetKind.INT64:
            return to_int64(text)
        if kind is TargetKind.FLOAT:
            return to_float(text)
        raise UnsupportedTypeError(kind.label)

    def decode(self, data: DecoderInput, fmt: Format) -> Any:
        """Decode ``data`` with the parser for ``fmt``.

        Raises:
            UnsupportedFormatError: If ``fmt`` is not JSON, YAML or TOML.
            ParseFailureError: If the parser rejects the input.
        """
        resolved: Format | None = Format.parse(fmt) if isinstance(fmt, str) else None
        if resolved is None or not resolved.is_specified:
            raise UnsupportedFormatError(fmt)
        fmt = resolved

        text: str = _as_text(data, fmt)
        logger.trace("Decoding %d characters as %s", len(text), fmt.label)

        if fmt is Format.JSON:
            try:
                return json.loads(text)
            except ValueError as exc:
                raise _to_file_error(fmt, exc, "unmarshal failed") from exc

        if fmt is Format.TOML:
            try:
                return tomlkit.parse(text).unwrap()
            except (TOMLKitError, ValueError) as exc:
                raise _to_file_error(fmt, exc, "unmarshal failed") from exc

        try:
            value: Any = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise _to_file_error(fmt, exc, "failed to unmarshal YAML") from exc

        try:
            normalized, _ = stringify_map_keys(value)
        except RecursiveValueError as exc:
            raise _to_file_error(fmt, exc, "failed to unmarshal YAML") from exc
        return normalized


def _as_text(data: DecoderInput, fmt: Format) -> str:
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise _to_file_error(fmt, exc, "invalid UTF-8") from exc


DEFAULT_DECODER: Final[Decoder] = Decoder()
