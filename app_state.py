import search_engine
from layout_engine import compute_column_widths
from viewport import ViewState, reduce


class AppState:
    def __init__(self, document, config=None):
        self.document = document
        self.config = config or {}
        self.view = ViewState()
        self.last_search_term = ""
        self.col_widths: list[int] = compute_column_widths(document.active)

    @property
    def table(self):
        return self.document.active

    @property
    def file_path(self):
        return self.document.path

    def set_status(self, message: str):
        self.view = self.view.with_status(message)

    def navigate(self, command: str, viewport_height: int):
        self.view = reduce(
            self.view,
            command,
            row_count=self.table.row_count,
            column_count=self.table.column_count,
            viewport_height=viewport_height,
        )

    def switch_sheet(self, index: int) -> bool:
        """Activate sheet ``index`` (0-based). Returns False and leaves the
        current sheet in place when it does not exist.
        """
        number = index + 1
        if not self.document.has_sheet(index):
            self.set_status(f"Sheet {number} not found.")
            return False

        name = self.document.tables[index].name
        if index == self.document.active_index:
            self.set_status(f"Already on Sheet {number}: {name}")
            return True

        self.document.active_index = index
        self.col_widths = compute_column_widths(self.table)
        self.view = ViewState(status_message=f"Switched to Sheet {number}: {name}")
        return True

    def search(
        self,
        term: str,
        *,
        forward: bool = True,
        start_row=None,
        viewport_height: int = 1,
    ):
        if term:
            self.last_search_term = term
        self.view = search_engine.find(
            self.table,
            self.view,
            term,
            forward=forward,
            start_row=start_row,
            viewport_height=viewport_height,
            context_rows=self.config.get(
                "SEARCH_CONTEXT_ROWS", search_engine.CONTEXT_ROWS
            ),
        )

    def find_again(self, forward: bool, viewport_height: int):
        self.search(self.last_search_term, forward=forward, viewport_height=viewport_height)

    def clear_status(self):
        self.view = self.view.clear_status()

