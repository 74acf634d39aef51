import curses

import renderer


class GridPane:
    PAIR_INFO = 1
    PAIR_HEADER = 2
    PAIR_HIGHLIGHT = 3
    PAIR_FOOTER = 4

    def __init__(self):
        self.colors = False
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_INFO, curses.COLOR_BLACK, curses.COLOR_WHITE)
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_GREEN, -1)
            curses.init_pair(
                self.PAIR_HIGHLIGHT, curses.COLOR_BLACK, curses.COLOR_YELLOW
            )
            curses.init_pair(self.PAIR_FOOTER, curses.COLOR_BLACK, curses.COLOR_WHITE)
            self.colors = True
        except curses.error:
            pass

    def attr_for(self, style):
        if not self.colors:
            if style in (renderer.STYLE_INFO, renderer.STYLE_FOOTER, renderer.STYLE_HIGHLIGHT):
                return curses.A_REVERSE
            if style == renderer.STYLE_HEADER:
                return curses.A_BOLD
            return curses.A_NORMAL

        if style == renderer.STYLE_INFO:
            return curses.color_pair(self.PAIR_INFO)
        if style == renderer.STYLE_HEADER:
            return curses.color_pair(self.PAIR_HEADER) | curses.A_BOLD
        if style == renderer.STYLE_HIGHLIGHT:
            return curses.color_pair(self.PAIR_HIGHLIGHT)
        if style == renderer.STYLE_FOOTER:
            return curses.color_pair(self.PAIR_FOOTER)
        return curses.A_NORMAL

    def draw(self, win, state):
        win.erase()
        h, w = win.getmaxyx()

        lines = renderer.render(state.document, state.col_widths, state.view, h, w)
        for y, line in enumerate(lines):
            n = len(line.text)
            if y == h - 1:
                # writing the bottom-right cell scrolls some terminals
                n = min(n, w - 1)
            if n <= 0:
                continue
            try:
                win.addnstr(y, 0, line.text, n, self.attr_for(line.style))
            except curses.error:
                pass

        win.refresh()
