SAMPLE_ROWS = 1000
MIN_COL_WIDTH = 5
MAX_COL_WIDTH = 50
SEPARATOR_WIDTH = 1


def clamp_width(length: int) -> int:
    return max(MIN_COL_WIDTH, min(MAX_COL_WIDTH, length))


def compute_column_widths(table) -> list[int]:
    """Widths from the first SAMPLE_ROWS rows only, so huge tables stay cheap.

    The result does not depend on the terminal size.
    """
    if table.column_count == 0:
        return []
    sample = table.rows[:SAMPLE_ROWS]
    widths = []
    for col in range(table.column_count):
        max_len = 0
        for row in sample:
            if col < len(row):
                max_len = max(max_len, len(row[col]))
        widths.append(clamp_width(max_len))
    return widths


def visible_columns(widths, scroll_col: int, available_width: int) -> list[int]:
    cols: list[int] = []
    used = 0
    for c in range(max(0, scroll_col), len(widths)):
        cw = widths[c] + SEPARATOR_WIDTH
        if used + cw > available_width:
            # a single over-wide column is still drawn
            if not cols:
                cols.append(c)
            break
        used += cw
        cols.append(c)
    return cols
