"""IPv4 network arithmetic on 32-bit integer addresses."""

from __future__ import annotations

from dataclasses import dataclass

_ALL_ONES = 0xFFFFFFFF
_MAX_COUNT = 0xFFFFFFFF


def _check_mask(mask: int) -> None:
    if not 0 <= mask <= 32:
        raise ValueError(f"mask must be between 0 and 32, got {mask}")


def _netmask(mask: int) -> int:
    return (_ALL_ONES << (32 - mask)) & _ALL_ONES


def _dotted(address: int) -> str:
    return ".".join(str(octet) for octet in address.to_bytes(4, "big"))


@dataclass(frozen=True)
class NetAddress:
    """An IPv4 address together with its prefix length."""

    address: int
    mask: int

    def __post_init__(self) -> None:
        if not 0 <= self.address <= _ALL_ONES:
            raise ValueError(f"address out of range: {self.address}")
        _check_mask(self.mask)

    def subnet_split(self, new_mask: int) -> list[NetAddress]:
        """Split the network, aligned on its own mask, into subnets of ``new_mask``."""
        _check_mask(new_mask)
        if new_mask < self.mask:
            raise ValueError(
                f"new mask /{new_mask} is shorter than current mask /{self.mask}"
            )
        count = 2 ** (new_mask - self.mask)
        size = 2 ** (32 - new_mask)
        base = self.address & _netmask(self.mask)
        return [NetAddress(base + index * size, new_mask) for index in range(count)]

    def broadcast_address(self) -> int:
        """Return the address with every host bit set."""
        return self.address | ((1 << (32 - self.mask)) - 1)

    def to_binary_string(self) -> str:
        """Return the address as four dot-separated 8-bit binary groups."""
        return ".".join(f"{octet:08b}" for octet in self.address.to_bytes(4, "big"))

    def ip_to_string(self) -> str:
        """Return the address in ``a.b.c.d/mask`` notation."""
        return f"{_dotted(self.address)}/{self.mask}"

    def describe(self) -> str:
        """Return the CIDR notation followed by a line with the binary form."""
        return f"{self.ip_to_string()}\n<=>{self.to_binary_string()}"

    def __str__(self) -> str:
        return self.ip_to_string()


def ip_range(address: int, mask: int) -> tuple[int, int]:
    """Return the first and last usable address of a network."""
    _check_mask(mask)
    count = 2 ** (32 - mask)
    first = address if count < 2 else address + 1
    last = address + count - 2 if mask < 31 else address + 2
    if last > _ALL_ONES or first > _ALL_ONES:
        raise OverflowError("address range exceeds the IPv4 space")
    return first, last


def calc_mask(ip_count: int) -> int:
    """Return the longest prefix whose network holds ``ip_count`` addresses."""
    if ip_count < 1:
        raise ValueError("the number of addresses must be at least 1")
    if ip_count > _MAX_COUNT:
        raise ValueError(f"too many addresses: {ip_count}")
    return 32 - (ip_count - 1).bit_length()


def number_of_host_addresses(mask: int) -> int:
    """Return the number of assignable host addresses for a prefix length."""
    if mask >= 32 or mask <= 0:
        return 0
    if mask == 31:
        return 2
    return 2 ** (32 - mask) - 2