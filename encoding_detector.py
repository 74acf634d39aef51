UTF8 = "utf-8"
FALLBACK = "cp1252"

UTF8_BOM = b"\xef\xbb\xbf"
PREFIX_SIZE = 4096

DISPLAY_NAMES = {
    UTF8: "UTF-8",
    FALLBACK: "Windows-1252",
}


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def is_valid_utf8(data: bytes, truncated: bool = False) -> bool:
    """Strict scan of multi-byte sequences by leading-byte class.

    With ``truncated`` set, a sequence cut off by the end of ``data`` is
    accepted, since the missing continuation bytes lie beyond the sampled
    prefix.
    """
    i = 0
    n = len(data)
    while i < n:
        size = _sequence_length(data[i])
        if size == 0:
            return False
        if i + size > n:
            if not truncated:
                return False
            return all(b & 0xC0 == 0x80 for b in data[i + 1 :])
        for j in range(i + 1, i + size):
            if data[j] & 0xC0 != 0x80:
                return False
        i += size
    return True


def detect_encoding(prefix: bytes) -> str:
    if prefix[:3] == UTF8_BOM:
        return UTF8
    sample = prefix[:PREFIX_SIZE]
    if is_valid_utf8(sample, truncated=len(prefix) > PREFIX_SIZE):
        return UTF8
    return FALLBACK


def codec_for(encoding: str) -> str:
    # utf-8-sig strips a leading BOM and decodes BOM-less input unchanged
    return "utf-8-sig" if encoding == UTF8 else encoding


def display_name(encoding: str | None) -> str:
    if encoding is None:
        return "N/A"
    return DISPLAY_NAMES.get(encoding, encoding)
