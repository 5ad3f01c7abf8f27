"""Step-by-step calculations of network, broadcast and usable addresses."""

from __future__ import annotations

from dataclasses import dataclass

from netcalc.address import NetAddress, ip_range
from netcalc.bits import octet_bits, render_bit_line
from netcalc.tools import INVALID_INPUTS, NO_HOST_BITS, InvalidInput
from netcalc.views import format_ipv4, parse_ipv4, parse_mask

_ALL_ONES = 0xFFFFFFFF


def _bits(value: int) -> str:
    return f"{value:032b}"


def _netmask(prefix: int) -> int:
    return (_ALL_ONES << (32 - prefix)) & _ALL_ONES


def _parse(ip: str, mask: str) -> tuple[int, int]:
    try:
        return parse_ipv4(ip), parse_mask(mask)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(INVALID_INPUTS) from exc


@dataclass(frozen=True)
class NetworkCalculation:
    """The AND of an address with its netmask, with the bits that produce it."""

    ip: int
    netmask: int
    network: int

    @property
    def message(self) -> str:
        return f"Adresse Réseau : {format_ipv4(self.network)}"

    @property
    def ip_bits(self) -> str:
        return _bits(self.ip)

    @property
    def mask_bits(self) -> str:
        return _bits(self.netmask)

    @property
    def network_bits(self) -> str:
        return _bits(self.network)

    def lines(self) -> list[str]:
        """Return the labelled binary lines for address, mask and result."""
        return [
            render_bit_line("IP", self.ip_bits),
            render_bit_line("Masque", self.mask_bits),
            render_bit_line("Résultat", self.network_bits),
        ]

    def octet(self, part: int) -> tuple[str, str, str]:
        """Return the address, mask and result bits of one octet (1 to 4)."""
        return (
            octet_bits(self.ip_bits, part),
            octet_bits(self.mask_bits, part),
            octet_bits(self.network_bits, part),
        )


@dataclass(frozen=True)
class BroadcastCalculation:
    """An address OR the complement of its netmask."""

    ip: int
    netmask: int
    broadcast: int

    @property
    def message(self) -> str:
        return f"Adresse de diffusion : {format_ipv4(self.broadcast)}"

    @property
    def ip_bits(self) -> str:
        return _bits(self.ip)

    @property
    def mask_bits(self) -> str:
        return _bits(self.netmask)

    @property
    def broadcast_bits(self) -> str:
        return _bits(self.broadcast)

    def lines(self) -> list[str]:
        """Return the labelled binary lines for address, mask and broadcast."""
        return [
            render_bit_line("IP", self.ip_bits),
            render_bit_line("Masque", self.mask_bits),
            render_bit_line("Diffusion", self.broadcast_bits),
        ]


@dataclass(frozen=True)
class UsableRange:
    """The first and last usable addresses of a network."""

    first: int
    last: int
    netmask: int

    @property
    def message(self) -> str:
        return (
            f"Première IP utilisable : {format_ipv4(self.first)}\n"
            f"Dernière IP utilisable : {format_ipv4(self.last)}"
        )

    @property
    def first_bits(self) -> str:
        return _bits(self.first)

    @property
    def last_bits(self) -> str:
        return _bits(self.last)

    @property
    def mask_bits(self) -> str:
        return _bits(self.netmask)

    def lines(self) -> list[str]:
        """Return the labelled binary lines for both ends and the mask."""
        return [
            render_bit_line("Première IP", self.first_bits),
            render_bit_line("Dernière IP", self.last_bits),
            render_bit_line("Masque", self.mask_bits),
        ]


def calculate_network(ip: str, mask: str) -> NetworkCalculation:
    """Compute the network address of ``ip`` under a prefix of 1 to 32 bits."""
    address, prefix = _parse(ip, mask)
    if not 1 <= prefix <= 32:
        raise InvalidInput(INVALID_INPUTS)
    netmask = _netmask(prefix)
    return NetworkCalculation(address, netmask, address & netmask)


def find_broadcast(ip: str, mask: str) -> BroadcastCalculation:
    """Compute the broadcast address; a /32 has no host bits and is refused."""
    address, prefix = _parse(ip, mask)
    if prefix > 32:
        raise InvalidInput(INVALID_INPUTS)
    if prefix == 32:
        raise InvalidInput(NO_HOST_BITS)
    broadcast = NetAddress(address, prefix).broadcast_address()
    return BroadcastCalculation(address, _netmask(prefix), broadcast)


def find_usable_range(ip: str, mask: str) -> UsableRange:
    """Compute the first and last usable addresses; a /32 is refused."""
    address, prefix = _parse(ip, mask)
    if prefix > 32:
        raise InvalidInput(INVALID_INPUTS)
    if prefix == 32:
        raise InvalidInput(NO_HOST_BITS)
    try:
        first, last = ip_range(address, prefix)
    except OverflowError as exc:
        raise InvalidInput(INVALID_INPUTS) from exc
    return UsableRange(first, last, _netmask(prefix))