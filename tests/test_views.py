import ipaddress

import pytest

from netcalc.views import Modal, Theme, View, format_ipv4, parse_ipv4, parse_mask


@pytest.mark.parametrize("enum", [View, Theme, Modal])
def test_slug_round_trip(enum):
    for member in enum:
        assert enum(str(member)) is member


def test_view_slugs_are_distinct():
    slugs = [
        "home",
        "ip-range",
        "subnet-mask",
        "broadcast",
        "host-count",
        "subnet-split",
        "help",
    ]
    members = [View(slug) for slug in slugs]
    assert [str(member) for member in members] == slugs
    assert len(set(members)) == len(slugs)


def test_format_ipv4_documented_mask():
    assert format_ipv4(0xFFFFFF00) == "255.255.255.0"


@pytest.mark.parametrize("text", ["0.0.0.0", "192.168.1.1", "255.255.255.255"])
def test_format_and_parse_round_trip(text):
    assert format_ipv4(parse_ipv4(text)) == text


def test_parse_ipv4_agrees_with_ipaddress():
    assert parse_ipv4("10.20.30.40") == int(ipaddress.IPv4Address("10.20.30.40"))


def test_format_ipv4_rejects_out_of_range():
    with pytest.raises(ValueError):
        format_ipv4(1 << 32)


@pytest.mark.parametrize(
    "text", ["256.0.0.1", "1.2.3", "01.2.3.4", " 1.2.3.4", "", "a.b.c.d", "1.2.3.4/24"]
)
def test_parse_ipv4_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_ipv4(text)


@pytest.mark.parametrize("text, expected", [("24", 24), ("+7", 7), ("4294967295", 4294967295)])
def test_parse_mask_accepts_unsigned(text, expected):
    assert parse_mask(text) == expected


@pytest.mark.parametrize("text", ["-1", "4294967296", " 24", "", "2.5", "abc"])
def test_parse_mask_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_mask(text)