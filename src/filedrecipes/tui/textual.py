from __future__ import annotations

from ..errors import ConfigError

try:  # Textual is only needed once the browser is launched.
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, VerticalScroll
    from textual.widgets import Footer, Header, Label, ListItem, ListView, Static
except Exception as exc:  # pragma: no cover
    raise ConfigError(
        "Textual is required for --tui. Install filedrecipes with its runtime dependencies."
    ) from exc

__all__ = [
    "App",
    "ComposeResult",
    "Footer",
    "Header",
    "Horizontal",
    "Label",
    "ListItem",
    "ListView",
    "Static",
    "VerticalScroll",
]
