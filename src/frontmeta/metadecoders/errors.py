# topmark:header:start
#
#   project      : FrontMeta
#   file         : errors.py
#   file_relpath : src/frontmeta/metadecoders/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the metadata decoders.

All errors derive from `MetaDecoderError` so callers can catch the whole family
in one place. They are raised synchronously and never retried; a failure
discards any partially decoded value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .formats import Format


class MetaDecoderError(Exception):
    """Base class for all metadata decoding errors."""


class UnsupportedFormatError(MetaDecoderError):
    """The requested format is not one of JSON, YAML or TOML."""

    def __init__(
        self,
        fmt: object,
        *,
        operation: str = "unmarshal",
        source: str | None = None,
    ) -> None:
        self.format = fmt
        self.operation = operation
        self.source = source
        if source is not None:
            super().__init__(f"{source!r} is not a valid configuration format")
            return
        label: str = str(getattr(fmt, "value", fmt))
        super().__init__(f"{operation} of format {label!r} is not supported")


class UnsupportedTypeError(MetaDecoderError):
    """A typed decode (or encode) was requested for an unhandled shape."""

    def __init__(self, shape: str, *, operation: str = "unmarshal") -> None:
        self.shape = shape
        self.operation = operation
        super().__init__(f"{operation}: {shape} not supported")


class ParseFailureError(MetaDecoderError):
    """The underlying parser rejected the input.

    Attributes:
        format (Format): The format that was being decoded.
        message (str): The parser's original message.
    """

    def __init__(self, fmt: Format, message: str) -> None:
        self.format = fmt
        self.message = message
        super().__init__(f"failed to unmarshal {fmt.label}: {message}")


class TypeConversionError(MetaDecoderError):
    """A scalar could not be converted to the requested type.

    Attributes:
        value (object): The value that failed to convert.
        target (str): Name of the requested type.
    """

    def __init__(self, value: object, target: str, reason: str | None = None) -> None:
        self.value = value
        self.target = target
        msg: str = f"unable to cast {value!r} of type {type(value).__name__} to {target}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
