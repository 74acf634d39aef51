from itertools import islice

from record_parser import iter_lines

CANDIDATES = (";", ",", "\t")
DEFAULT_DELIMITER = ","
SAMPLE_LINES = 5


def sniff_delimiter(lines) -> str:
    """Pick the most frequent candidate over the sampled lines.

    Best-effort only: ties go to the earlier candidate in ``CANDIDATES`` and
    an empty sample yields a comma.
    """
    lines = list(lines or [])
    if not lines:
        return DEFAULT_DELIMITER

    best = CANDIDATES[0]
    best_count = -1
    for cand in CANDIDATES:
        count = sum(line.count(cand) for line in lines)
        if count > best_count:
            best = cand
            best_count = count
    return best


def read_sample_lines(text: str, count: int = SAMPLE_LINES) -> list[str]:
    # lazy, so only the sampled prefix of a large file is split
    return list(islice(iter_lines(text), count))


def display_delimiter(delimiter: str | None) -> str:
    if not delimiter:
        return "N/A"
    if delimiter == "\t":
        return "'\\t'"
    return f"'{delimiter}'"
