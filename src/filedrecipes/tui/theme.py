from __future__ import annotations

APP_CSS = """
Screen {
    background: $background;
    color: $text;
}

Header, Footer {
    background: $panel;
    color: $text;
}

#browser {
    height: 1fr;
}

#recipe-list {
    width: 40%;
    min-width: 28;
    border: round $panel;
}

#detail-pane {
    width: 1fr;
    border: round $panel;
    background: $surface;
    padding: 0 2;
}

#status {
    height: 1;
    padding: 0 1;
    background: $panel;
}
"""
