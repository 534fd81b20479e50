"""Line reading shared by the resolv.conf and hosts parsers."""

from __future__ import annotations

import logging
from typing import IO, Iterator

from .models import DecodeError, ReadError

LOG = logging.getLogger("nsconf.lines")

COMMENT_PREFIXES = ("#",)
INDENT_PREFIXES = (" ", "\t")


def _strip_newline(raw: bytes | str) -> bytes | str:
    """Drop a trailing LF or CRLF."""
    newline, carriage = (b"\n", b"\r") if isinstance(raw, bytes) else ("\n", "\r")
    if raw.endswith(newline):
        raw = raw[:-1]
        if raw.endswith(carriage):
            raw = raw[:-1]
    return raw


def _undecodable(line_number: int, exc: UnicodeDecodeError, strict: bool) -> str:
    """Reject an undecodable line, or log it and return an empty line."""
    if strict:
        raise DecodeError(line_number, str(exc)) from exc
    LOG.warning("Skipping undecodable line %s: %s", line_number, exc)
    return ""


def read_lines(stream: IO, strict: bool = False) -> Iterator[str]:
    """Yield decoded lines from a byte (or text) stream.

    A line that is not valid UTF-8 is logged and yielded as an empty line,
    unless ``strict`` is set, in which case :class:`DecodeError` is raised.
    Text streams decode while being read, so their failures surface from the
    read itself and may drop the rest of the buffered chunk.
    """
    line_number = 0
    iterator = iter(stream)
    while True:
        line_number += 1
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            yield _undecodable(line_number, exc, strict)
            continue
        except OSError as exc:
            raise ReadError(f"Failed to read input: {exc}") from exc
        raw = _strip_newline(raw)
        if isinstance(raw, str):
            yield raw
            continue
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            yield _undecodable(line_number, exc, strict)


def is_noise(line: str) -> bool:
    """Return True for empty, comment, and indented lines."""
    return not line or line.startswith(COMMENT_PREFIXES) or line.startswith(INDENT_PREFIXES)


def logical_lines(stream: IO, strict: bool = False) -> Iterator[str]:
    """Yield the lines of a stream that carry configuration."""
    for line in read_lines(stream, strict=strict):
        if not is_noise(line):
            yield line
