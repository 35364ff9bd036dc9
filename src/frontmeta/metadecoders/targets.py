# topmark:header:start
#
#   project      : FrontMeta
#   file         : targets.py
#   file_relpath : src/frontmeta/metadecoders/targets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Target kinds for typed string decoding."""

from __future__ import annotations

from frontmeta.core.enum_mixins import KeyedStrEnum

from .errors import UnsupportedTypeError


class TargetKind(KeyedStrEnum):
    """The shape a string should be decoded into by `Decoder.decode_typed`."""

    STRING = ("string", "string", ("str",))
    MAPPING = ("mapping", "mapping", ("map", "dict"))
    SEQUENCE = ("sequence", "sequence", ("list", "slice"))
    BOOL = ("bool", "boolean", ("boolean",))
    INT = ("int", "integer", ("integer",))
    INT64 = ("int64", "64-bit integer")
    FLOAT = ("float", "float", ("float64", "double"))

    @classmethod
    def for_example(cls, example: object) -> TargetKind:
        """Return the kind matching an example value such as ``0`` or ``{}``.

        A `TargetKind` passed as example is returned unchanged.

        Raises:
            UnsupportedTypeError: If the example's type has no matching kind.
        """
        if isinstance(example, TargetKind):
            return example
        # bool before int: bool is a subclass of int
        if isinstance(example, bool):
            return cls.BOOL
        if isinstance(example, int):
            return cls.INT
        if isinstance(example, float):
            return cls.FLOAT
        if isinstance(example, str):
            return cls.STRING
        if isinstance(example, dict):
            return cls.MAPPING
        if isinstance(example, list):
            return cls.SEQUENCE
        raise UnsupportedTypeError(type(example).__name__)
