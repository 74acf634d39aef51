import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: grid over the whole screen; the search prompt overlays the
        # bottom (footer) line while active
        self.grid_win = curses.newwin(self.H, self.W, 0, 0)
        # grid pane must never own cursor
        self.grid_win.leaveok(True)

        self.prompt_win = curses.newwin(1, self.W, max(0, self.H - 1), 0)
