"""
Local device configuration lookup.

Every lookup degrades to a placeholder instead of raising, so a host with no
resolvable address or no active interface still produces a report.
"""

from __future__ import annotations

import logging
import socket
from dataclasses import dataclass

import psutil

from .constants import DEVICE_SERIAL_NUMBER, NOT_FOUND_PLACEHOLDER

logger = logging.getLogger(__name__)

_NULL_MAC = "00:00:00:00:00:00"


@dataclass(frozen=True)
class DeviceConfiguration:
    ip_address: str
    mac_address: str
    serial_number: str = DEVICE_SERIAL_NUMBER

    def report_lines(self) -> list[str]:
        return [
            "Device Configuration:",
            f"IP Address: {self.ip_address}",
            f"MAC Address: {self.mac_address}",
            f"Serial Number: {self.serial_number}",
        ]


def get_local_ip_address() -> str:
    """Return the first IPv4 address the host name resolves to."""
    try:
        hostname = socket.gethostname()
        infos = socket.getaddrinfo(hostname, None, socket.AF_INET)
    except OSError as exc:
        logger.debug("IPv4 lookup failed: %s", exc)
        return NOT_FOUND_PLACEHOLDER

    for _family, _type, _proto, _canonname, sockaddr in infos:
        if sockaddr and sockaddr[0]:
            return str(sockaddr[0])
    return NOT_FOUND_PLACEHOLDER


def get_mac_address() -> str:
    """Return the hardware address of the first interface that is up."""
    try:
        stats = psutil.net_if_stats()
        addresses = psutil.net_if_addrs()
    except (psutil.Error, OSError) as exc:
        logger.debug("Interface lookup failed: %s", exc)
        return NOT_FOUND_PLACEHOLDER

    for interface_name, interface_stats in stats.items():
        if not interface_stats.isup:
            continue
        for address in addresses.get(interface_name, []):
            if address.family != psutil.AF_LINK:
                continue
            mac = (address.address or "").replace("-", ":").upper()
            if mac and mac != _NULL_MAC:
                return mac
    return NOT_FOUND_PLACEHOLDER


def collect_device_configuration() -> DeviceConfiguration:
    return DeviceConfiguration(ip_address=get_local_ip_address(), mac_address=get_mac_address())


__all__ = [
    "DeviceConfiguration",
    "collect_device_configuration",
    "get_local_ip_address",
    "get_mac_address",
]
