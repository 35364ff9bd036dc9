# topmark:header:start
#
#   project      : FrontMeta
#   file         : cli_types.py
#   file_relpath : src/frontmeta/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for the FrontMeta CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, Protocol, TypeVar, cast

import click

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    Matching is case-insensitive on the member value. Enums that provide a
    ``parse()`` classmethod (see `KeyedStrEnum`) also accept their aliases, so
    ``--format yml`` selects ``Format.YAML``.

    Args:
        enum_cls (type[E]): The Enum class.
        members (Iterable[E] | None): Restrict the accepted members (default: all).
    """

    enum_cls: type[E]
    name: str
    members: list[E]
    choices: list[str]

    def __init__(self, enum_cls: type[E], members: Iterable[E] | None = None) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.members = list(members) if members is not None else list(enum_cls)
        self.choices = [str(m.value) for m in self.members]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return cast("E | None", value)

        key: str = str(value).lower()
        for member in self.members:
            if str(member.value).lower() == key:
                return member

        parse = getattr(self.enum_cls, "parse", None)
        if callable(parse):
            parsed = cast("E | None", parse(str(value)))
            if parsed is not None and parsed in self.members:
                return parsed

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        from click.shell_completion import CompletionItem

        prefix: str = (incomplete or "").lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]
