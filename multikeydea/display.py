"""Helpers for showing sample data and building test patterns."""

from __future__ import annotations

import string

HEX_LIMIT = 20
TEXT_LIMIT = 40


def format_data(label: str, data: bytes | bytearray) -> str:
    """Render the start of ``data`` as a hex line and a printable-text line."""
    hex_part = "".join(f"{byte:02X} " for byte in data[:HEX_LIMIT])
    hex_tail = "... (truncated)" if len(data) > HEX_LIMIT else ""
    text = "".join(chr(b) if 32 <= b <= 126 else "." for b in data[:TEXT_LIMIT])
    text_tail = '..."' if len(data) > TEXT_LIMIT else '"'
    return f"{label} (hex): {hex_part}{hex_tail}\n{label} (text): \"{text}{text_tail}"


def make_pattern(size: int) -> bytes:
    """Return ``size`` bytes cycling through the uppercase alphabet."""
    if size < 0:
        raise ValueError("size must not be negative")
    alphabet = string.ascii_uppercase.encode("ascii")
    return (alphabet * (size // len(alphabet) + 1))[:size]