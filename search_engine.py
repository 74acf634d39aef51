from dataclasses import replace
from typing import Optional

from viewport import ViewState, is_row_visible

CONTEXT_ROWS = 5


def row_contains(row, needle: str) -> bool:
    """``needle`` must already be casefolded."""
    for cell in row:
        if needle in cell.casefold():
            return True
    return False


def _start_row(state: ViewState, forward: bool) -> int:
    # data row r is table row r + 1
    if state.highlight_row is not None:
        data_row = state.highlight_row - 1
        return data_row + 1 if forward else data_row - 1
    return state.scroll_row + 1 if forward else state.scroll_row - 1


def find_row(rows, term: str, start: int, forward: bool) -> Optional[int]:
    """Return the first matching data row index, scanning without wraparound.

    ``rows`` is the full table including the header at index 0, which is
    never a candidate.
    """
    last = len(rows) - 2
    if last < 0:
        return None
    needle = term.casefold()
    if forward:
        candidates = range(max(0, start), last + 1)
    else:
        candidates = range(min(start, last), -1, -1)
    for r in candidates:
        if row_contains(rows[r + 1], needle):
            return r
    return None


def find(
    table,
    state: ViewState,
    term: str,
    *,
    forward: bool = True,
    start_row: Optional[int] = None,
    viewport_height: int = 1,
    context_rows: int = CONTEXT_ROWS,
) -> ViewState:
    """Search ``table`` for ``term`` and return the updated view state.

    ``start_row`` is a data row index (0 is the first row below the header).
    An explicit start always repositions the view so the match has some
    leading context; a continued search only scrolls when the match is off
    screen.
    """
    if not term:
        return replace(state, status_message="No search term.")

    start = start_row if start_row is not None else _start_row(state, forward)
    found = find_row(table.rows, term, start, forward)

    if found is None:
        return replace(
            state, highlight_row=None, status_message=f"'{term}' not found."
        )

    scroll_row = state.scroll_row
    if start_row is not None or not is_row_visible(state, found, viewport_height):
        scroll_row = max(0, found - max(0, context_rows))

    return replace(
        state,
        scroll_row=scroll_row,
        highlight_row=found + 1,
        status_message=f"Found '{term}' at row {found + 1}",
    )
