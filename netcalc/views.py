"""Screen names, themes and the parsing shared by the calculator tools."""

from __future__ import annotations

import ipaddress
import re
from enum import Enum

_MAX_U32 = 0xFFFFFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


class _Slug(str, Enum):
    def __str__(self) -> str:
        return self.value


class View(_Slug):
    """The main screens of the application."""

    HOME = "home"
    IP_RANGE = "ip-range"
    SUBNET_MASK = "subnet-mask"
    BROADCAST = "broadcast"
    HOST_COUNT = "host-count"
    SUBNET_SPLIT = "subnet-split"
    HELP = "help"


class Theme(_Slug):
    """Colour theme choices."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class Modal(_Slug):
    """The explanatory widgets reachable from the help screen."""

    NET_ADDRESS = "net-address"
    FIND_IPS_ADDR = "find-ips-addr"
    BROADCAST_ADDR = "broadcast-addr"
    SUBNETTING = "subnetting"
    FIND_MASK = "find-mask"


def format_ipv4(ip: int) -> str:
    """Render a 32-bit integer as a dotted-quad address."""
    if not 0 <= ip <= _MAX_U32:
        raise ValueError(f"not a 32-bit address: {ip}")
    return ".".join(str(octet) for octet in ip.to_bytes(4, "big"))


def parse_ipv4(text: str) -> int:
    """Parse a strict dotted-quad address into a 32-bit integer."""
    if not isinstance(text, str):
        raise TypeError("address must be given as text")
    try:
        return int(ipaddress.IPv4Address(text))
    except ipaddress.AddressValueError as exc:
        raise ValueError(f"invalid IPv4 address: {text!r}") from exc


def parse_mask(text: str) -> int:
    """Parse an unsigned 32-bit decimal number, as typed into a mask field."""
    if not isinstance(text, str) or not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if value > _MAX_U32:
        raise ValueError(f"number too large: {text!r}")
    return value