import pytest

from netcalc.bits import bit_octets, octet_bits, render_bit_line

SAMPLE = "11000000101010000000000100001010"


def test_bit_octets_joins_back():
    octets = bit_octets(SAMPLE)
    assert "".join(octets) == SAMPLE
    assert len(octets) == 4
    assert all(len(octet) == 8 for octet in octets)


def test_bit_octets_short_tail():
    octets = bit_octets("1" * 10)
    assert octets == ["1" * 8, "11"]


def test_bit_octets_empty():
    assert bit_octets("") == []


@pytest.mark.parametrize("part", [1, 2, 3, 4])
def test_octet_bits_matches_chunks(part):
    assert octet_bits(SAMPLE, part) == bit_octets(SAMPLE)[part - 1]


def test_octet_bits_concatenate():
    assert "".join(octet_bits(SAMPLE, part) for part in range(1, 5)) == SAMPLE


@pytest.mark.parametrize("part", [0, -1, 5])
def test_octet_bits_out_of_range(part):
    with pytest.raises(ValueError):
        octet_bits(SAMPLE, part)


def test_octet_bits_short_string():
    with pytest.raises(ValueError):
        octet_bits("1010", 1)


def test_render_bit_line():
    line = render_bit_line("IP", SAMPLE)
    assert line.startswith("IP :")
    assert line.split()[2:] == bit_octets(SAMPLE)


def test_render_bit_line_empty_bits():
    assert render_bit_line("Masque", "") == "Masque :"