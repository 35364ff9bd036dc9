# topmark:header:start
#
#   project      : FrontMeta
#   file         : errors.py
#   file_relpath : src/frontmeta/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FrontMeta CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. Library errors are translated with
`from_decoder_error`.
"""

from __future__ import annotations

from typing import IO, Any

import click

from frontmeta.core.exit_codes import ExitCode
from frontmeta.metadecoders import (
    MetaDecoderError,
    ParseFailureError,
    TypeConversionError,
    UnsupportedFormatError,
)


class FrontmetaError(click.ClickException):
    """Base class for all FrontMeta CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class FrontmetaUsageError(FrontmetaError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FrontmetaDataError(FrontmetaError):
    """Error for input that does not parse or convert."""

    exit_code = ExitCode.DATA_ERROR


class FrontmetaFileNotFoundError(FrontmetaError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FrontmetaUnsupportedFormatError(FrontmetaError):
    """Error when a data format cannot be resolved or is not supported."""

    exit_code = ExitCode.UNSUPPORTED_FORMAT


class FrontmetaIOError(FrontmetaError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class FrontmetaConfigError(FrontmetaError):
    """Error for sync configuration problems."""

    exit_code = ExitCode.CONFIG_ERROR


def from_decoder_error(exc: MetaDecoderError, *, where: str) -> FrontmetaError:
    """Translate a library decoding error into the matching CLI error."""
    message: str = f"{where}: {exc}"
    if isinstance(exc, UnsupportedFormatError):
        return FrontmetaUnsupportedFormatError(message)
    if isinstance(exc, (ParseFailureError, TypeConversionError)):
        return FrontmetaDataError(message)
    return FrontmetaError(message)


def from_os_error(exc: OSError, *, where: str) -> FrontmetaError:
    """Translate an OS error raised while reading ``where``."""
    if isinstance(exc, FileNotFoundError):
        return FrontmetaFileNotFoundError(f"{where}: file not found")
    return FrontmetaIOError(f"{where}: {exc.strerror or exc}")
