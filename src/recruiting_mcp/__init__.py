"""Recruiting Candidates MCP Server.

Ask your AI to find candidates: search new prospects with the Apify lead
scraper or list the existing hiring pipeline, shown in an interactive table.
"""

__version__ = "0.1.0"

from .widgets import WidgetRegistry, load_widgets


def get_widgets() -> WidgetRegistry:
    """Load the bundled widgets (or WIDGET_ASSETS_DIR) into a fresh registry."""
    return load_widgets()
