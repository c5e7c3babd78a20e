import pytest

from multikeydea.display import format_data, make_pattern


def test_short_data_format():
    assert format_data("X", b"AB") == 'X (hex): 41 42 \nX (text): "AB"'


def test_non_printable_shown_as_dot():
    text_line = format_data("L", b"\x00A\x7f").splitlines()[1]
    assert text_line == 'L (text): ".A."'


def test_hex_truncated_after_twenty_bytes():
    hex_line, text_line = format_data("D", make_pattern(21)).splitlines()
    assert hex_line.endswith("... (truncated)")
    assert len(hex_line[len("D (hex): "):-len("... (truncated)")].split()) == 20
    assert text_line.endswith('"')
    assert not text_line.endswith('..."')


def test_text_truncated_after_forty_bytes():
    data = make_pattern(100)
    text_line = format_data("D", data).splitlines()[1]
    assert text_line == 'D (text): "' + data[:40].decode() + '..."'


def test_pattern_wraps_alphabet():
    assert make_pattern(28) == b"ABCDEFGHIJKLMNOPQRSTUVWXYZAB"


def test_pattern_length_and_empty():
    assert len(make_pattern(1000)) == 1000
    assert make_pattern(0) == b""


def test_pattern_negative_rejected():
    with pytest.raises(ValueError):
        make_pattern(-1)