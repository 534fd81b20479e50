"""
Pytest configuration and shared fixtures for nsconf tests.

Provides:
- Sample resolv.conf and hosts content
- Files written from that content under tmp_path
- Isolation from any .env file on the developer machine
"""

from io import BytesIO
from pathlib import Path

import pytest

# ============================================================================
# Sample Content
# ============================================================================

RESOLV_SAMPLE = b"""
nameserver 127.0.0.53
nameserver 127.0.0.52
options edns0 trust-ad timeout:5 attempts:2 ndots:3 debug
search . 127.0.0.1
sortlist 130.155.160.0/255.255.240.0 130.155.0.0
        """

HOSTS_SAMPLE = b"""
127.0.0.1\tlocalhost

# The following lines are desirable for IPv6 capable hosts
::1     ip6-localhost ip6-loopback
fe00::0 ip6-localnet
ff02::1 ip6-allnodes
ff02::2 ip6-allrouters
        """


@pytest.fixture
def resolv_stream() -> BytesIO:
    """Return the sample resolver configuration as a byte stream."""
    return BytesIO(RESOLV_SAMPLE)


@pytest.fixture
def hosts_stream() -> BytesIO:
    """Return the sample hosts content as a byte stream."""
    return BytesIO(HOSTS_SAMPLE)


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def resolv_file(tmp_path: Path) -> Path:
    """Write the sample resolver configuration to disk."""
    path = tmp_path / "resolv.conf"
    path.write_bytes(RESOLV_SAMPLE)
    return path


@pytest.fixture
def hosts_file(tmp_path: Path) -> Path:
    """Write the sample hosts content to disk."""
    path = tmp_path / "hosts"
    path.write_bytes(HOSTS_SAMPLE)
    return path


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings independent of the caller's environment."""
    for name in ("NSCONF_RESOLV_CONF", "NSCONF_HOSTS", "NSCONF_STRICT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("nsconf.config.load_dotenv", lambda: False)
