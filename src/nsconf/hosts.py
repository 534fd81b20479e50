"""Parser for the static host table (hosts)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterator

from .lines import logical_lines
from .models import Host, ReadError, parse_address

LOG = logging.getLogger("nsconf.hosts")

HOSTS_PATH = "/etc/hosts"


def parse_line(line: str) -> Host:
    """Parse one ``address name...`` line."""
    tokens = line.split()
    address = parse_address(tokens[0] if tokens else "")
    return Host(ip=address, names=tuple(tokens[1:]))


def parse(stream: IO, strict: bool = False) -> Iterator[Host]:
    """Parse hosts content from a readable stream.

    Every line is parsed before anything is returned, so a bad line fails the
    whole call. The result is a one-shot iterator over the parsed entries.
    """
    hosts = [parse_line(line) for line in logical_lines(stream, strict=strict)]
    LOG.debug("Parsed %s host entries", len(hosts))
    return iter(hosts)


def parse_default(path: str | Path = HOSTS_PATH, strict: bool = False) -> Iterator[Host]:
    """Open and parse the hosts file."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise ReadError(f"Failed to open {path}: {exc}") from exc
    with handle:
        return parse(handle, strict=strict)
