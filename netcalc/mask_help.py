"""Explain how the smallest netmask for a number of addresses is found."""

from __future__ import annotations

from dataclasses import dataclass

from netcalc.address import calc_mask
from netcalc.bits import render_bit_line
from netcalc.tools import INVALID_INPUTS, InvalidInput
from netcalc.views import format_ipv4, parse_mask

_ALL_ONES = 0xFFFFFFFF


@dataclass(frozen=True)
class MaskExplanation:
    """The figures behind the netmask chosen for ``count`` addresses."""

    count: int
    total_ips: int
    host_bits: int
    network_bits: int
    prefix: int
    netmask: int

    @property
    def mask_text(self) -> str:
        """The prefix and its dotted netmask, as ``/n → a.b.c.d``."""
        return f"/{self.prefix} → {format_ipv4(self.netmask)}"

    @property
    def mask_bits(self) -> str:
        return f"{self.netmask:032b}"

    def bit_line(self) -> str:
        """Return the labelled binary form of the netmask."""
        return render_bit_line("Masque", self.mask_bits)

    def explain(self) -> str:
        """Return the step-by-step explanation, one paragraph per line."""
        lines = [
            "1. Nombre total d'adresses IP nécessaires : "
            f"{self.count} + 2 = {self.total_ips}."
            " Les deux adresses supplémentaires sont :",
            "- L'adresse réseau (non assignable à un hôte)",
            "- L'adresse de diffusion (non assignable à un hôte)",
            "2. Nombre de bits d'hôte nécessaires : "
            f"h = log2({self.total_ips}) "
            "(arrondir le résultat à l'entier supérieur le plus proche).",
            f"Donc, vous avez besoin de h={self.host_bits} bits d'hôte.",
            "Nombre de bits de réseau : "
            f"32 - {self.host_bits} = {self.network_bits} bits.",
            self.mask_text,
        ]
        return "\n".join(lines)


def find_mask(count: str) -> MaskExplanation:
    """Work out the netmask covering ``count`` addresses, as typed by a user."""
    try:
        wanted = parse_mask(count)
    except ValueError as exc:
        raise InvalidInput(INVALID_INPUTS) from exc
    if wanted < 1:
        raise InvalidInput(INVALID_INPUTS)
    prefix = calc_mask(wanted)
    netmask = (_ALL_ONES << (32 - prefix)) & _ALL_ONES
    total_ips = wanted + 2
    host_bits = (total_ips - 1).bit_length()
    if host_bits > 32:
        raise InvalidInput(INVALID_INPUTS)
    return MaskExplanation(
        count=wanted,
        total_ips=total_ips,
        host_bits=host_bits,
        network_bits=32 - host_bits,
        prefix=prefix,
        netmask=netmask,
    )