"""Parser for the resolver configuration file (resolv.conf)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Callable

from .lines import logical_lines
from .models import (
    Config,
    ConfigItem,
    ConfigOption,
    Domain,
    IPPair,
    Nameserver,
    Options,
    ReadError,
    SearchDomains,
    SortList,
    UnknownOptionError,
    parse_address,
)

LOG = logging.getLogger("nsconf.resolv")

RESOLV_CONF_PATH = "/etc/resolv.conf"


def _nameserver(rest: str) -> Nameserver:
    return Nameserver(address=parse_address(rest))


def _domain(rest: str) -> Domain:
    return Domain(name=rest)


def _search(rest: str) -> SearchDomains:
    return SearchDomains(names=tuple(rest.split()))


def _sortlist(rest: str) -> SortList:
    return SortList(pairs=tuple(IPPair.parse(token) for token in rest.split()))


def _options(rest: str) -> Options:
    return Options(options=tuple(ConfigOption.parse(token) for token in rest.split()))


DIRECTIVES: dict[str, Callable[[str], ConfigItem]] = {
    "nameserver": _nameserver,
    "domain": _domain,
    "search": _search,
    "sortlist": _sortlist,
    "options": _options,
}


def parse_item(line: str) -> ConfigItem:
    """Parse one resolv.conf directive line."""
    parts = line.split(None, 1)
    keyword = parts[0] if parts else ""
    handler = DIRECTIVES.get(keyword)
    if handler is None:
        raise UnknownOptionError(line)
    rest = parts[1].strip() if len(parts) > 1 else ""
    return handler(rest)


def parse(stream: IO, strict: bool = False) -> Config:
    """Parse resolv.conf content from a readable stream.

    The first malformed line aborts the whole parse.
    """
    items = [parse_item(line) for line in logical_lines(stream, strict=strict)]
    config = Config.from_items(items)
    LOG.debug(
        "Parsed %s directives: %s nameservers, %s search domains, %s sortlist entries, %s options",
        len(items),
        len(config.nameservers),
        len(config.search_domains),
        len(config.sort_list),
        len(config.options),
    )
    return config


def parse_default(path: str | Path = RESOLV_CONF_PATH, strict: bool = False) -> Config:
    """Open and parse the resolver configuration file."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise ReadError(f"Failed to open {path}: {exc}") from exc
    with handle:
        return parse(handle, strict=strict)
