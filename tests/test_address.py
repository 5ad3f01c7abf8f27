import ipaddress

import pytest

from netcalc.address import (
    NetAddress,
    calc_mask,
    ip_range,
    number_of_host_addresses,
)


def _ip(text):
    return int(ipaddress.IPv4Address(text))


def test_subnet_split_matches_documented_example():
    net = NetAddress(_ip("192.168.1.0"), 24)
    subnets = [str(s) for s in net.subnet_split(26)]
    assert subnets[:3] == ["192.168.1.0/26", "192.168.1.64/26", "192.168.1.128/26"]


def test_subnet_split_agrees_with_ipaddress():
    net = NetAddress(_ip("10.20.0.0"), 16)
    expected = [
        str(n) for n in ipaddress.IPv4Network("10.20.0.0/16").subnets(new_prefix=19)
    ]
    assert [s.ip_to_string() for s in net.subnet_split(19)] == expected


def test_subnet_split_aligns_base_on_original_mask():
    net = NetAddress(_ip("192.168.1.77"), 24)
    first = net.subnet_split(26)[0]
    assert first.address == _ip("192.168.1.0")
    assert first.mask == 26


def test_subnet_split_same_mask_returns_network():
    net = NetAddress(_ip("172.16.5.9"), 20)
    result = net.subnet_split(20)
    assert len(result) == 1
    assert result[0].address == int(
        ipaddress.IPv4Network("172.16.5.9/20", strict=False).network_address
    )


def test_subnet_split_rejects_shorter_mask():
    with pytest.raises(ValueError):
        NetAddress(_ip("10.0.0.0"), 24).subnet_split(16)


def test_subnet_split_rejects_mask_over_32():
    with pytest.raises(ValueError):
        NetAddress(_ip("10.0.0.0"), 24).subnet_split(33)


@pytest.mark.parametrize(
    "cidr", ["192.168.1.10/24", "10.1.2.3/8", "172.16.33.4/30", "8.8.8.8/32"]
)
def test_broadcast_address_agrees_with_ipaddress(cidr):
    text, mask = cidr.split("/")
    net = NetAddress(_ip(text), int(mask))
    expected = ipaddress.IPv4Network(cidr, strict=False).broadcast_address
    assert net.broadcast_address() == int(expected)


def test_invalid_mask_rejected_on_construction():
    with pytest.raises(ValueError):
        NetAddress(0, 40)


def test_to_binary_string_round_trip():
    address = _ip("203.0.113.77")
    text = NetAddress(address, 24).to_binary_string()
    groups = text.split(".")
    assert [len(g) for g in groups] == [8, 8, 8, 8]
    assert int("".join(groups), 2) == address


def test_ip_to_string_round_trip():
    net = NetAddress(_ip("198.51.100.42"), 27)
    parsed = ipaddress.IPv4Interface(net.ip_to_string())
    assert int(parsed.ip) == net.address
    assert parsed.network.prefixlen == 27


def test_describe_has_cidr_and_binary_lines():
    net = NetAddress(_ip("192.168.1.0"), 24)
    first, second = net.describe().split("\n")
    assert first == net.ip_to_string()
    assert second == "<=>" + net.to_binary_string()


def test_ip_range_usable_hosts():
    network = ipaddress.IPv4Network("192.168.1.0/24")
    hosts = list(network.hosts())
    assert ip_range(int(network.network_address), 24) == (
        int(hosts[0]),
        int(hosts[-1]),
    )


def test_ip_range_point_to_point_quirk():
    address = _ip("10.0.0.4")
    assert ip_range(address, 31) == (address + 1, address + 2)


def test_ip_range_rejects_large_mask():
    with pytest.raises(ValueError):
        ip_range(0, 33)


@pytest.mark.parametrize("count", [1, 2, 3, 50, 256, 257, 1000, 65536, 16777217])
def test_calc_mask_is_smallest_fitting_network(count):
    mask = calc_mask(count)
    assert 2 ** (32 - mask) >= count
    if mask < 32:
        assert 2 ** (32 - mask - 1) < count


def test_calc_mask_single_address():
    assert calc_mask(1) == 32


def test_calc_mask_rejects_zero():
    with pytest.raises(ValueError):
        calc_mask(0)


@pytest.mark.parametrize("mask", [16, 24, 30])
def test_number_of_host_addresses_matches_hosts(mask):
    network = ipaddress.IPv4Network(f"10.0.0.0/{mask}")
    assert number_of_host_addresses(mask) == sum(1 for _ in network.hosts())


@pytest.mark.parametrize("mask, expected", [(31, 2), (32, 0), (0, 0)])
def test_number_of_host_addresses_edges(mask, expected):
    assert number_of_host_addresses(mask) == expected