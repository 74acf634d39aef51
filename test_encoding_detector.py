import pytest

from encoding_detector import (
    FALLBACK,
    PREFIX_SIZE,
    UTF8,
    codec_for,
    detect_encoding,
    display_name,
    is_valid_utf8,
)


def test_bom_wins_regardless_of_following_bytes():
    assert detect_encoding(b"\xef\xbb\xbf\xff\xfe\x80garbage") == UTF8


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"plain ascii;text\n",
        "Grüße;Straße".encode("utf-8"),
        "€ 3 und 😀".encode("utf-8"),
    ],
)
def test_valid_utf8_resolves_utf8(data):
    assert detect_encoding(data) == UTF8


@pytest.mark.parametrize(
    "data",
    [
        "Grüße".encode("cp1252"),
        b"\x80abc",
        b"abc\xc3",  # lead byte with no continuation at end of short input
        b"\xe2\x82x",  # broken three-byte sequence
        b"\xf8\x88\x80\x80\x80",  # five-byte lead is never valid
    ],
)
def test_malformed_utf8_falls_back(data):
    assert detect_encoding(data) == FALLBACK


def test_only_the_prefix_is_scanned():
    data = b"a" * PREFIX_SIZE + b"\xff\xff"
    assert detect_encoding(data) == UTF8


def test_sequence_cut_by_prefix_boundary_is_tolerated():
    data = b"a" * (PREFIX_SIZE - 1) + "ü".encode("utf-8") + b"tail"
    assert detect_encoding(data) == UTF8


def test_is_valid_utf8_rejects_truncated_sequence_at_real_end():
    assert is_valid_utf8(b"ok\xe2\x82") is False
    assert is_valid_utf8(b"ok\xe2\x82", truncated=True) is True


def test_codec_strips_bom_for_utf8():
    raw = b"\xef\xbb\xbfa;b"
    assert raw.decode(codec_for(UTF8)) == "a;b"
    assert codec_for(FALLBACK) == "cp1252"


def test_display_name():
    assert display_name(UTF8) == "UTF-8"
    assert display_name(None) == "N/A"
