"""Utilities to turn parsed configuration into plain data, YAML, and JSON."""

from __future__ import annotations

import json
from typing import Any, Iterable

import yaml

from .models import Config, Host


def config_to_dict(config: Config) -> dict[str, Any]:
    """Create a dictionary describing a resolver configuration."""
    return {
        "nameservers": [str(address) for address in config.nameservers],
        "search_domains": list(config.search_domains),
        "sort_list": [str(pair) for pair in config.sort_list],
        "options": [str(option) for option in config.options],
    }


def _host_to_dict(host: Host) -> dict[str, Any]:
    """Convert a host entry into a serialisable dictionary."""
    return {"ip": str(host.ip), "names": list(host.names)}


def hosts_to_dict(hosts: Iterable[Host]) -> dict[str, Any]:
    """Create a dictionary describing hosts entries."""
    return {"hosts": [_host_to_dict(host) for host in hosts]}


def to_yaml(data: dict[str, Any]) -> str:
    """Return YAML representation of exported data."""
    return yaml.safe_dump(data, sort_keys=False)


def to_json(data: dict[str, Any]) -> str:
    """Return JSON representation of exported data."""
    return json.dumps(data, indent=2)
