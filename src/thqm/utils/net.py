"""Local address resolution and URL formatting.

The page URL is what ends up in the QR code, so it must use an address
reachable from other devices on the network rather than ``0.0.0.0``.
"""

from __future__ import annotations

import logging
import socket

import netifaces

logger = logging.getLogger(__name__)

# Any routable address works; connecting a UDP socket sends no packet.
_PROBE_ADDRESS = ("10.255.255.255", 1)


class AddressResolutionError(Exception):
    """Raised when the local IP address cannot be determined."""


def _interface_ipv4(name: str) -> str | None:
    addresses = netifaces.ifaddresses(name).get(netifaces.AF_INET, [])
    for entry in addresses:
        if entry.get("addr"):
            return entry["addr"]
    return None


def _list_interfaces() -> list[str]:
    try:
        return netifaces.interfaces()
    except (OSError, ValueError) as e:
        raise AddressResolutionError(f"Failed to list network interfaces: {e}") from e


def _outbound_ip() -> str | None:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            sock.connect(_PROBE_ADDRESS)
        except OSError as e:
            logger.debug("No default route for outbound address lookup: %s", e)
            return None
        return sock.getsockname()[0]


def resolve_local_address(interface: str | None = None) -> str:
    """Get the local IPv4 address.

    Args:
        interface: Restrict the lookup to this network interface. When
            omitted, the address of the default outbound route is used.

    Raises:
        AddressResolutionError: If the interface does not exist, has no
            IPv4 address, or no address could be found at all.
    """
    if interface is not None:
        if interface not in _list_interfaces():
            raise AddressResolutionError(f"Failed to get ip for interface: {interface!r}")
        ip = _interface_ipv4(interface)
        if ip is None:
            raise AddressResolutionError(f"Interface {interface!r} has no IPv4 address")
        return ip

    ip = _outbound_ip()
    if ip is not None and ip != "0.0.0.0":
        return ip

    # Offline host: fall back to whatever the interfaces carry.
    fallback = None
    for name in _list_interfaces():
        candidate = _interface_ipv4(name)
        if candidate is None:
            continue
        if not candidate.startswith("127."):
            return candidate
        fallback = fallback or candidate
    if fallback is None:
        raise AddressResolutionError("Failed to determine local ip address")
    return fallback


def format_address(host: str, port: int) -> str:
    """Create the ``host:port`` string."""
    return f"{host}:{port}"


def format_full_url(
    host: str,
    port: int,
    username: str | None = None,
    password: str | None = None,
) -> str:
    """Create the page URL, embedding basic auth credentials when both are given."""
    if username is not None and password is not None:
        return f"http://{username}:{password}@{host}:{port}"
    return f"http://{format_address(host, port)}"
