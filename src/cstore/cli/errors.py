# topmark:header:start
#
#   project      : CStore
#   file         : errors.py
#   file_relpath : src/cstore/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CStore CLI.

Usage:
    Commands run library calls inside `translate_errors()`, which converts
    library and filesystem exceptions into these Click exceptions so each
    failure maps to a standardized message and exit code.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from cstore.cli.exit_codes import ExitCode
from cstore.errors import DecodingError, EncodingError

if TYPE_CHECKING:
    from collections.abc import Iterator


class CstoreCliError(click.ClickException):
    """Base class for all CStore CLI errors."""

    exit_code = ExitCode.FAILURE


class CstoreFileNotFoundError(CstoreCliError):
    """Error when a store file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CstoreDataError(CstoreCliError):
    """Error when store content cannot be encoded or decoded."""

    exit_code = ExitCode.DATA_ERROR


class CstoreIOError(CstoreCliError):
    """Error for other I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


@contextmanager
def translate_errors() -> Iterator[None]:
    """Convert library and OS exceptions raised in the block into CLI errors."""
    try:
        yield
    except FileNotFoundError as exc:
        raise CstoreFileNotFoundError(f"No such file: {exc.filename}") from exc
    except (DecodingError, EncodingError) as exc:
        raise CstoreDataError(str(exc)) from exc
    except OSError as exc:
        raise CstoreIOError(str(exc)) from exc
