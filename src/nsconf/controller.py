"""High-level access to the system name-service files."""

from __future__ import annotations

import logging
from ipaddress import IPv4Address, IPv6Address

from .config import AppConfig
from .hosts import parse_default as parse_hosts_file
from .models import Config, Host
from .resolv import parse_default as parse_resolv_file

LOG = logging.getLogger("nsconf")


class NameServiceController:
    """Reads the configured resolv.conf and hosts files."""

    def __init__(self, config: AppConfig):
        """Store configuration for subsequent reads."""
        self.config = config

    def resolver(self) -> Config:
        """Parse the configured resolver configuration file."""
        LOG.info("Reading resolver configuration from %s", self.config.resolv_conf_path)
        config = parse_resolv_file(self.config.resolv_conf_path, strict=self.config.strict)
        LOG.debug("Resolver configuration lists %s nameservers", len(config.nameservers))
        return config

    def hosts(self) -> list[Host]:
        """Parse the configured hosts file."""
        LOG.info("Reading hosts from %s", self.config.hosts_path)
        hosts = list(parse_hosts_file(self.config.hosts_path, strict=self.config.strict))
        LOG.debug("Hosts file lists %s entries", len(hosts))
        return hosts

    def lookup(self, name: str) -> list[IPv4Address | IPv6Address]:
        """Return the addresses mapped to a name, in file order."""
        return [host.ip for host in matching_hosts(self.hosts(), name)]


def configure_logging(level: str) -> None:
    """Configure logging output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def matching_hosts(hosts: list[Host], name: str) -> list[Host]:
    """Return hosts carrying the name, compared case-insensitively."""
    lowered = name.lower()
    return [host for host in hosts if any(entry.lower() == lowered for entry in host.names)]
