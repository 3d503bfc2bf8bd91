"""Joining decoded fragments and writing them to standard output."""

from __future__ import annotations

from typing import BinaryIO, Iterable, Optional

import typer

from .exceptions import OutputError


SEPARATOR = "---\n"


def join_fragments(fragments: Iterable[str], separator: str = SEPARATOR) -> str:
    return separator.join(fragments)


def write_output(text: str, stream: Optional[BinaryIO] = None) -> None:
    """Write *text* as UTF-8 in one pass to *stream* or the binary stdout."""

    data = text.encode("utf-8")
    try:
        typer.echo(data, file=stream, nl=False)
    except OSError as exc:
        raise OutputError(f"failed to write output: {exc}") from exc
