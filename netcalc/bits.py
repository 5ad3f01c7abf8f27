"""Helpers for showing 32-bit values as groups of bits."""

from __future__ import annotations


def bit_octets(bits: str) -> list[str]:
    """Split a bit string into chunks of eight characters (the last may be shorter)."""
    return [bits[start:start + 8] for start in range(0, len(bits), 8)]


def octet_bits(bits: str, part: int) -> str:
    """Return the eight bits of octet ``part``, counted from 1 at the left."""
    if part < 1:
        raise ValueError(f"octet number must be at least 1, got {part}")
    start = (part - 1) * 8
    end = start + 8
    if end > len(bits):
        raise ValueError(f"bit string too short for octet {part}")
    return bits[start:end]


def render_bit_line(label: str, bits: str) -> str:
    """Render a labelled line with the bits grouped by octet."""
    return f"{label} :" + "".join(f" {octet}" for octet in bit_octets(bits))