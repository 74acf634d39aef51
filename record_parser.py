import re

QUOTE = '"'

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def iter_lines(text: str):
    """Yield lines split on CR, LF or CRLF only; a trailing break adds no
    empty line.
    """
    start = 0
    for m in _LINE_BREAK.finditer(text):
        yield text[start : m.start()]
        start = m.end()
    if start < len(text):
        yield text[start:]


def parse_line(line: str, delimiter: str) -> list[str]:
    """Split one line into fields.

    Quoted fields may contain the delimiter and doubled quotes. An unterminated
    quote runs to the end of the line; there are no multi-line fields.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if in_quotes:
            if ch == QUOTE:
                if i + 1 < n and line[i + 1] == QUOTE:
                    current.append(QUOTE)
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(ch)
        elif ch == QUOTE:
            in_quotes = True
        elif ch == delimiter:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return fields


def parse_text(text: str, delimiter: str) -> list[list[str]]:
    return [parse_line(line, delimiter) for line in iter_lines(text)]

