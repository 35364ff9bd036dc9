# topmark:header:start
#
#   project      : FrontMeta
#   file         : normalize.py
#   file_relpath : src/frontmeta/metadecoders/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Key normalization for decoded YAML.

YAML allows mapping keys of any scalar type (``true: 1``, ``3: x``, ``~: y``),
while JSON and TOML consumers expect string keys throughout. After a YAML
parse every mapping in the tree is rewritten so that all keys are strings.

YAML anchors can make one node appear several times in a tree, or even inside
itself (``&a [ *a ]``). Shared nodes are normalized once; a node that contains
itself is rejected with `RecursiveValueError`.
"""

from __future__ import annotations

from typing import Any

from frontmeta.config.logging import FrontmetaLogger, get_logger

from .cast import to_string
from .errors import TypeConversionError

logger: FrontmetaLogger = get_logger(__name__)


class RecursiveValueError(ValueError):
    """A decoded container contains itself (a recursive YAML alias)."""


def _stringify_key(key: object) -> str:
    try:
        return to_string(key)
    except TypeConversionError:
        return str(key)


def stringify_map_keys(value: Any) -> tuple[Any, bool]:
    """Recursively convert every mapping under ``value`` to string keys.

    Mappings whose keys are all strings, and lists, are updated in place.
    Mappings with at least one non-string key are rebuilt; non-string keys
    are converted with [`to_string`][frontmeta.metadecoders.cast.to_string],
    falling back to ``str(key)``. If two keys collide after conversion the
    later entry wins. Tuples (YAML ``!!pairs`` and ``!!omap`` entries) are
    rebuilt when one of their items changed.

    Args:
        value (Any): A decoded value (mapping, list, tuple, or scalar).

    Returns:
        tuple[Any, bool]: ``(result, changed)`` where ``result`` is the value to
        use in place of ``value`` and ``changed`` tells whether it is a new object.

    Raises:
        RecursiveValueError: If a container contains itself.
    """
    return _normalize(value, {}, set())


def _normalize(
    value: Any,
    done: dict[int, tuple[Any, bool]],
    active: set[int],
) -> tuple[Any, bool]:
    if not isinstance(value, (list, tuple, dict)):
        return value, False

    node_id: int = id(value)
    if node_id in done:
        return done[node_id]
    if node_id in active:
        raise RecursiveValueError(f"recursive alias in {type(value).__name__}")

    active.add(node_id)
    try:
        result: tuple[Any, bool] = _normalize_container(value, done, active)
    finally:
        active.discard(node_id)
    done[node_id] = result
    return result


def _normalize_container(
    value: list[Any] | tuple[Any, ...] | dict[Any, Any],
    done: dict[int, tuple[Any, bool]],
    active: set[int],
) -> tuple[Any, bool]:
    if isinstance(value, list):
        for i, item in enumerate(value):
            new_item, replaced = _normalize(item, done, active)
            if replaced:
                value[i] = new_item
        return value, False

    if isinstance(value, tuple):
        items: list[tuple[Any, bool]] = [_normalize(item, done, active) for item in value]
        if not any(replaced for _, replaced in items):
            return value, False
        return tuple(item for item, _ in items), True

    if all(isinstance(k, str) for k in value):
        for k, v in value.items():
            new_v, changed = _normalize(v, done, active)
            if changed:
                value[k] = new_v
        return value, False

    rebuilt: dict[str, Any] = {}
    for k, v in value.items():
        ks: str = k if isinstance(k, str) else _stringify_key(k)
        if ks in rebuilt:
            logger.debug("Key %r collides with %r after normalization; keeping later", k, ks)
        rebuilt[ks] = _normalize(v, done, active)[0]
    return rebuilt, True
