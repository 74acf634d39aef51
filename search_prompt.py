import curses
from typing import Callable


class SearchPrompt:
    PROMPT = " Search: "

    def __init__(self, on_submit: Callable[[str], None], set_status_cb: Callable[[str], None]):
        self._on_submit = on_submit
        self._set_status = set_status_cb

        self.active = False
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def start(self, initial: str = ""):
        self.active = True
        self.buffer = initial or ""
        self.cursor = len(self.buffer)
        self.hscroll = 0

    def _close(self):
        self.active = False
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    def handle_key(self, ch):
        if not self.active or ch == -1:
            return

        if ch in (10, 13, curses.KEY_ENTER):
            term = self.buffer
            self._close()
            if term.strip():
                self._on_submit(term)
            else:
                self._set_status("No search term.")
            return

        if ch == 27:  # Esc
            self._close()
            self._set_status("Search canceled")
            return

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
            return

        if ch == curses.KEY_DC:
            self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
            return

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return

        if ch == curses.KEY_HOME:
            self.cursor = 0
            return

        if ch == curses.KEY_END:
            self.cursor = len(self.buffer)
            return

        if ch == 21:  # Ctrl+U
            self.buffer = self.buffer[self.cursor :]
            self.cursor = 0
            return

        if isinstance(ch, str):
            if ch.isprintable():
                self._insert(ch)
            return

        # ints from KEY_MIN up are function keys, not characters
        if 0 <= ch < curses.KEY_MIN and chr(ch).isprintable():
            self._insert(chr(ch))

    def _insert(self, text: str):
        self.buffer = self.buffer[: self.cursor] + text + self.buffer[self.cursor :]
        self.cursor += len(text)

    def draw(self, win):
        h, w = win.getmaxyx()
        prompt = self.PROMPT
        # the last cell of the bottom line stays untouched
        text_w = max(1, w - len(prompt) - 1)

        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w - 1:
            self.hscroll = self.cursor - text_w + 1

        visible = self.buffer[self.hscroll : self.hscroll + text_w]
        attr = curses.A_REVERSE

        try:
            win.erase()
            win.addnstr(0, 0, (prompt + visible).ljust(w - 1), w - 1, attr)
            win.move(0, min(w - 2, len(prompt) + (self.cursor - self.hscroll)))
        except curses.error:
            pass
        win.refresh()
