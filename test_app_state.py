import unittest

from app_state import AppState
from table_model import Document, SpreadsheetOrigin, Table
from viewport import Command


def _document(*sheets):
    origin = SpreadsheetOrigin("xlsx")
    tables = [Table.from_rows(name, rows, origin) for name, rows in sheets]
    return Document(path="book.xlsx", tables=tables)


def _column(prefix, n):
    return [["head"]] + [[f"{prefix}{i}"] for i in range(1, n + 1)]


class AppStateSheetTests(unittest.TestCase):
    def setUp(self):
        self.doc = _document(
            ("Orders", [["id", "customer"], ["1", "Alexandra"]]),
            ("Items", _column("item", 30)),
        )
        self.state = AppState(self.doc)

    def test_switch_to_missing_sheet_keeps_current(self):
        self.state.navigate(Command.LINE_DOWN, 10)
        before = self.state.view.scroll_row

        self.assertFalse(self.state.switch_sheet(5))

        self.assertEqual(self.doc.active.name, "Orders")
        self.assertEqual(self.state.view.scroll_row, before)
        self.assertEqual(self.state.view.status_message, "Sheet 6 not found.")

    def test_switch_resets_view_and_widths(self):
        self.state.search("Alexandra", start_row=0, viewport_height=10)
        self.assertIsNotNone(self.state.view.highlight_row)

        self.assertTrue(self.state.switch_sheet(1))

        self.assertEqual(self.doc.active.name, "Items")
        self.assertEqual(self.state.view.scroll_row, 0)
        self.assertIsNone(self.state.view.highlight_row)
        self.assertEqual(self.state.col_widths, [6])
        self.assertEqual(self.state.view.status_message, "Switched to Sheet 2: Items")

    def test_switch_to_active_sheet_reports_it(self):
        self.assertTrue(self.state.switch_sheet(0))
        self.assertEqual(self.state.view.status_message, "Already on Sheet 1: Orders")


class AppStateSearchTests(unittest.TestCase):
    def setUp(self):
        self.doc = _document(("Items", _column("item", 30)))
        self.state = AppState(self.doc, {"SEARCH_CONTEXT_ROWS": 2})

    def test_search_remembers_term_and_uses_configured_context(self):
        self.state.search("item20", viewport_height=5)
        self.assertEqual(self.state.last_search_term, "item20")
        self.assertEqual(self.state.view.highlight_row, 20)
        self.assertEqual(self.state.view.scroll_row, 17)

    def test_find_again_moves_to_next_match(self):
        self.state.search("item1", start_row=0, viewport_height=40)
        self.assertEqual(self.state.view.highlight_row, 1)

        self.state.find_again(True, 40)
        self.assertEqual(self.state.view.highlight_row, 10)

        self.state.find_again(False, 40)
        self.assertEqual(self.state.view.highlight_row, 1)

    def test_find_again_without_term(self):
        self.state.find_again(True, 10)
        self.assertEqual(self.state.view.status_message, "No search term.")

    def test_navigation_clears_status(self):
        self.state.set_status("hello")
        self.state.navigate(Command.PAGE_DOWN, 5)
        self.assertEqual(self.state.view.status_message, "")
        self.assertEqual(self.state.view.scroll_row, 5)


if __name__ == "__main__":
    unittest.main()
