HELP_TEXT = (
    " Arrows/Pg/Home/End: Move | 'f': Find | F3/n: Next | Shift+F3/N: Prev"
    " | 'l': LibreOffice | 'e': Excel"
)
SHEETS_HINT = " | 1-9: Sheets"
QUIT_HINT = " | ESC/q: Quit"


def render_footer(status_msg, sheet_count, width):
    """
    Footer text: the status message when one is set, otherwise key help.
    Padded to width - 1; the bottom-right cell of the terminal is never
    written, some terminals scroll when it is.
    """
    if status_msg:
        text = f" {status_msg}"
    else:
        text = HELP_TEXT
        if sheet_count > 1:
            text += SHEETS_HINT
        text += QUIT_HINT

    safe_width = max(0, width - 1)
    return text[:safe_width].ljust(safe_width)
