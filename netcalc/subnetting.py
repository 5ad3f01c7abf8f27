"""Split a network into smaller subnets, shown as a table."""

from __future__ import annotations

from netcalc.address import NetAddress
from netcalc.table import Table
from netcalc.tools import INVALID_INPUTS, InvalidInput
from netcalc.views import parse_ipv4, parse_mask


def subnetting_table(ip: str, mask: str, new_mask: str) -> Table:
    """Return a table of the subnets of ``new_mask`` with their binary form."""
    try:
        address = parse_ipv4(ip)
        prefix = parse_mask(mask)
        new_prefix = parse_mask(new_mask)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(INVALID_INPUTS) from exc
    if not 1 <= prefix <= 32 or not prefix < new_prefix <= 32:
        raise InvalidInput(INVALID_INPUTS)
    table = Table(headers=["IP", "Binaire"])
    for subnet in NetAddress(address, prefix).subnet_split(new_prefix):
        table.add_row([subnet.ip_to_string(), subnet.to_binary_string()])
    return table