import curses

from external_apps import APP_LABELS, open_in_app
from grid_pane import GridPane
from renderer import viewport_height
from screen_layout import ScreenLayout
from search_prompt import SearchPrompt
from viewport import Command

NAV_KEYS = {
    curses.KEY_UP: Command.LINE_UP,
    curses.KEY_DOWN: Command.LINE_DOWN,
    curses.KEY_PPAGE: Command.PAGE_UP,
    curses.KEY_NPAGE: Command.PAGE_DOWN,
    curses.KEY_HOME: Command.HOME,
    curses.KEY_END: Command.END,
    curses.KEY_LEFT: Command.COLUMN_LEFT,
    curses.KEY_RIGHT: Command.COLUMN_RIGHT,
}

QUIT_KEYS = (27, "q", "Q")
FIND_KEYS = ("f", "F", "/")
FIND_NEXT_KEYS = (curses.KEY_F3, "n")
# most terminals report Shift+F3 as F15
FIND_PREV_KEYS = (curses.KEY_F0 + 15, "N")
APP_KEYS = {"l": "libreoffice", "L": "libreoffice", "e": "excel", "E": "excel"}
SHEET_KEYS = {str(n): n - 1 for n in range(1, 10)}


def read_key(win):
    """Next key as an int (special and control keys) or a one-character str.
    Returns -1 when the read times out.
    """
    try:
        ch = win.get_wch()
    except curses.error:
        return -1
    if isinstance(ch, str) and len(ch) == 1 and (ord(ch) < 32 or ord(ch) == 127):
        return ord(ch)
    return ch


class Orchestrator:
    def __init__(self, stdscr, app_state):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        self.stdscr.timeout(100)

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()
        self.prompt = SearchPrompt(self._submit_search, self.state.set_status)

    # ---------------- helpers ----------------

    @property
    def viewport_height(self) -> int:
        return viewport_height(self.layout.H)

    def _submit_search(self, term):
        self.state.search(term, forward=True, viewport_height=self.viewport_height)

    def apply_startup(self, initial_tab=None, initial_search=None):
        """``initial_tab`` is 1-based, as given on the command line."""
        if initial_tab is not None and not self.state.switch_sheet(initial_tab - 1):
            self.state.set_status(f"Sheet {initial_tab} not found. Showing Sheet 1.")
        if initial_search:
            self.state.search(
                initial_search,
                forward=True,
                start_row=0,
                viewport_height=self.viewport_height,
            )

    def _open_external(self, app):
        label = APP_LABELS.get(app, app)
        self.state.set_status(f"Starting {label}...")
        self.redraw()
        self.state.set_status(
            open_in_app(app, self.state.file_path, self.state.config)
        )

    def _on_resize(self):
        try:
            curses.update_lines_cols()
        except (AttributeError, curses.error):
            pass
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr)

    # ---------------- UI ----------------

    def redraw(self):
        self.grid.draw(self.layout.grid_win, self.state)
        if self.prompt.active:
            try:
                curses.curs_set(1)
            except curses.error:
                pass
            self.prompt.draw(self.layout.prompt_win)
        else:
            try:
                curses.curs_set(0)
            except curses.error:
                pass

    # ---------------- input ----------------

    def handle_key(self, ch) -> bool:
        """Apply one key. Returns False when the viewer should exit."""
        if self.prompt.active:
            self.prompt.handle_key(ch)
            return True

        if ch in QUIT_KEYS:
            return False

        command = NAV_KEYS.get(ch) if isinstance(ch, int) else None
        if command is not None:
            self.state.navigate(command, self.viewport_height)
            return True

        self.state.clear_status()

        if ch in SHEET_KEYS:
            self.state.switch_sheet(SHEET_KEYS[ch])
        elif ch in FIND_KEYS:
            self.prompt.start(self.state.last_search_term)
        elif ch in FIND_NEXT_KEYS:
            self.state.find_again(True, self.viewport_height)
        elif ch in FIND_PREV_KEYS:
            self.state.find_again(False, self.viewport_height)
        elif ch in APP_KEYS:
            self._open_external(APP_KEYS[ch])
        return True

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = read_key(self.stdscr)

            if ch == -1:
                continue

            if ch == curses.KEY_RESIZE:
                self._on_resize()
                self.redraw()
                continue

            if ch == 3:  # Ctrl+C
                break

            if not self.handle_key(ch):
                break

            self.redraw()
