from dataclasses import dataclass, replace
from typing import Optional


class Command:
    LINE_UP = "line_up"
    LINE_DOWN = "line_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    COLUMN_LEFT = "column_left"
    COLUMN_RIGHT = "column_right"

    ALL = (
        LINE_UP,
        LINE_DOWN,
        PAGE_UP,
        PAGE_DOWN,
        HOME,
        END,
        COLUMN_LEFT,
        COLUMN_RIGHT,
    )


@dataclass(frozen=True)
class ViewState:
    scroll_row: int = 0
    scroll_col: int = 0
    highlight_row: Optional[int] = None
    status_message: str = ""

    def with_status(self, message: str) -> "ViewState":
        return replace(self, status_message=message)

    def clear_status(self) -> "ViewState":
        if not self.status_message:
            return self
        return replace(self, status_message="")


def max_scroll_row(row_count: int) -> int:
    # row 0 is the pinned header, so the last data row is row_count - 1
    return max(0, row_count - 2)


def clamp_row(row: int, row_count: int) -> int:
    return max(0, min(row, max_scroll_row(row_count)))


def clamp_col(col: int, column_count: int) -> int:
    return max(0, min(col, max(0, column_count - 1)))


def is_row_visible(state: ViewState, data_row: int, viewport_height: int) -> bool:
    return state.scroll_row <= data_row < state.scroll_row + max(1, viewport_height)


def reduce(
    state: ViewState,
    command: str,
    *,
    row_count: int,
    column_count: int,
    viewport_height: int,
) -> ViewState:
    """Apply one navigation command and return the new state.

    Any command clears the transient status message. Unknown commands only
    do that.
    """
    page = max(1, viewport_height)
    row = state.scroll_row
    col = state.scroll_col

    if command == Command.LINE_UP:
        row -= 1
    elif command == Command.LINE_DOWN:
        row += 1
    elif command == Command.PAGE_UP:
        row -= page
    elif command == Command.PAGE_DOWN:
        row += page
    elif command == Command.HOME:
        row = 0
    elif command == Command.END:
        row = max_scroll_row(row_count)
    elif command == Command.COLUMN_LEFT:
        col -= 1
    elif command == Command.COLUMN_RIGHT:
        col += 1

    return replace(
        state,
        scroll_row=clamp_row(row, row_count),
        scroll_col=clamp_col(col, column_count),
        status_message="",
    )
