"""Web presentation: JSON API and HTML board."""
from .app import create_app, LIVENESS_TEXT
from .board import render_board, sort_records, format_win_rate

__all__ = [
    "create_app",
    "LIVENESS_TEXT",
    "render_board",
    "sort_records",
    "format_win_rate",
]
