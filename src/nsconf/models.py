"""Core data models used by nsconf."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


class NsconfError(Exception):
    """Base exception for nsconf."""


class ParseError(NsconfError):
    """Raised when a configuration line cannot be parsed."""


class UnknownOptionError(ParseError):
    """Raised for an unrecognised directive or option keyword."""

    def __init__(self, text: str):
        super().__init__(f"unknown option parsed: {text}")
        self.text = text


class AddressParseError(ParseError, ValueError):
    """Raised when a token is not a valid IP address."""

    def __init__(self, text: str, reason: str | None = None):
        message = reason or f"invalid IP address syntax: {text!r}"
        super().__init__(message)
        self.text = text


class IntegerParseError(ParseError, ValueError):
    """Raised when an option payload is not a non-negative integer."""

    def __init__(self, text: str):
        super().__init__(f"invalid digit found in string: {text!r}")
        self.text = text


class DecodeError(ParseError):
    """Raised in strict mode for a line that is not valid UTF-8."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"line {line_number}: {reason}")
        self.line_number = line_number


class ReadError(NsconfError, OSError):
    """Raised when the input stream cannot be opened or read."""


class SettingsError(NsconfError):
    """Raised when environment settings are invalid."""


def parse_address(text: str) -> IPAddress:
    """Return the IP address written in text."""
    try:
        return ipaddress.ip_address(text)
    except ValueError as exc:
        raise AddressParseError(text, str(exc)) from exc


def parse_unsigned(text: str) -> int:
    """Return the non-negative decimal integer written in text."""
    if not UNSIGNED_PATTERN.fullmatch(text):
        raise IntegerParseError(text)
    return int(text)


@dataclass(frozen=True)
class IPPair:
    """A sortlist entry: an address and an optional netmask."""

    address: IPAddress
    netmask: IPAddress | None = None

    @classmethod
    def parse(cls, token: str) -> IPPair:
        """Parse an ``addr`` or ``addr/mask`` token."""
        parts = token.split("/")
        address = parse_address(parts[0])
        netmask = parse_address(parts[1]) if len(parts) > 1 else None
        return cls(address=address, netmask=netmask)

    def __str__(self) -> str:
        if self.netmask is None:
            return str(self.address)
        return f"{self.address}/{self.netmask}"


class OptionKind(Enum):
    """Keys accepted by the ``options`` directive."""

    DEBUG = "debug"
    NDOTS = "ndots"
    TIMEOUT = "timeout"
    ATTEMPTS = "attempts"
    ROTATE = "rotate"
    NOAAAA = "no-aaaa"
    NOCHECKNAME = "no-check-names"
    INET6 = "inet6"
    IP6BSTRING = "ip6-bytestring"
    IP6DOTINT = "ip6-dotint"
    NOIP6DOTINT = "no-ip6-dotint"
    EDNS0 = "edns0"
    SNGLKUP = "single-request"
    SNGLKUPREOP = "single-request-reopen"
    NOTLDQUERY = "no-tld-query"
    USEVC = "use-vc"
    NORELOAD = "no-reload"
    TRUSTAD = "trust-ad"

    @property
    def takes_value(self) -> bool:
        """Return True for the kinds written as ``key:N``."""
        return self in {OptionKind.NDOTS, OptionKind.TIMEOUT, OptionKind.ATTEMPTS}


@dataclass(frozen=True)
class ConfigOption:
    """One resolver option, with a payload for ndots/timeout/attempts."""

    kind: OptionKind
    value: int | None = None

    @classmethod
    def parse(cls, token: str) -> ConfigOption:
        """Parse an option token such as ``edns0`` or ``ndots:3``."""
        segments = token.split(":")
        key = segments[0]
        payload = segments[1] if len(segments) > 1 else ""
        try:
            kind = OptionKind(key)
        except ValueError as exc:
            raise UnknownOptionError(key) from exc
        if kind.takes_value:
            return cls(kind=kind, value=parse_unsigned(payload))
        return cls(kind=kind)

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}:{self.value}"


@dataclass(frozen=True)
class Nameserver:
    """A ``nameserver`` line."""

    address: IPAddress


@dataclass(frozen=True)
class Domain:
    """A ``domain`` line."""

    name: str


@dataclass(frozen=True)
class SearchDomains:
    """A ``search`` line."""

    names: tuple[str, ...]


@dataclass(frozen=True)
class SortList:
    """A ``sortlist`` line."""

    pairs: tuple[IPPair, ...]


@dataclass(frozen=True)
class Options:
    """An ``options`` line."""

    options: tuple[ConfigOption, ...]


ConfigItem = Union[Nameserver, Domain, SearchDomains, SortList, Options]


@dataclass(frozen=True)
class Config:
    """Parsed resolver configuration."""

    nameservers: tuple[IPAddress, ...] = ()
    search_domains: tuple[str, ...] = ()
    sort_list: tuple[IPPair, ...] = ()
    options: tuple[ConfigOption, ...] = ()

    @classmethod
    def from_items(cls, items: Iterable[ConfigItem]) -> Config:
        """Fold per-line items into a configuration, in file order."""
        nameservers: list[IPAddress] = []
        search_domains: list[str] = []
        sort_list: list[IPPair] = []
        options: list[ConfigOption] = []
        for item in items:
            if isinstance(item, Nameserver):
                nameservers.append(item.address)
            elif isinstance(item, Domain):
                search_domains.append(item.name)
            elif isinstance(item, SearchDomains):
                search_domains.extend(item.names)
            elif isinstance(item, SortList):
                sort_list.extend(item.pairs)
            elif isinstance(item, Options):
                options.extend(item.options)
            else:
                raise TypeError(f"Unsupported config item {item!r}")
        return cls(
            nameservers=tuple(nameservers),
            search_domains=tuple(search_domains),
            sort_list=tuple(sort_list),
            options=tuple(options),
        )

    def find_option(self, kind: OptionKind) -> ConfigOption | None:
        """Return the last option of the given kind, if present."""
        for option in reversed(self.options):
            if option.kind is kind:
                return option
        return None

    def _option_value(self, kind: OptionKind) -> int | None:
        option = self.find_option(kind)
        return option.value if option else None

    @property
    def ndots(self) -> int | None:
        """Return the effective ndots value, if set."""
        return self._option_value(OptionKind.NDOTS)

    @property
    def timeout(self) -> int | None:
        """Return the effective timeout in seconds, if set."""
        return self._option_value(OptionKind.TIMEOUT)

    @property
    def attempts(self) -> int | None:
        """Return the effective number of attempts, if set."""
        return self._option_value(OptionKind.ATTEMPTS)


@dataclass(frozen=True)
class Host:
    """One hosts file entry."""

    ip: IPAddress
    names: tuple[str, ...] = ()

    @property
    def canonical_name(self) -> str | None:
        """Return the first name on the line."""
        return self.names[0] if self.names else None

    @property
    def aliases(self) -> tuple[str, ...]:
        """Return the names after the canonical one."""
        return self.names[1:]
