"""Widget assets served as MCP resources.

Every ``<name>.html`` in the assets directory becomes a resource at
``ui://widget/<name>.html``. The registry is built once at start-up and is
read-only afterwards.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

WIDGET_MIME = "text/html+skybridge"

DEFAULT_ASSETS_DIR = Path(__file__).parent / "assets"


class UnknownResourceError(KeyError):
    """No widget is registered under the requested URI."""

    def __init__(self, uri: str):
        super().__init__(uri)
        self.uri = uri

    def __str__(self) -> str:
        return f"Unknown resource: {self.uri}"


def widget_uri(name: str) -> str:
    return f"ui://widget/{name}.html"


def widget_meta(name: str) -> dict:
    """Host rendering hints for tools and results that render ``name``."""
    return {
        "openai/outputTemplate": widget_uri(name),
        "openai/toolInvocation/invoking": f"Preparing {name} UI",
        "openai/toolInvocation/invoked": f"Rendered {name} UI",
        "openai/widgetAccessible": True,
        "openai/resultCanProduceWidget": True,
    }


def widget_resource_meta(name: str) -> dict:
    """Metadata listed with the widget resource itself."""
    return {
        "openai/widgetDescription": f"Displays {name} UI",
        "openai/widgetAccessible": True,
    }


class Widget(BaseModel):
    """One pre-built HTML widget."""

    model_config = ConfigDict(frozen=True)

    name: str
    uri: str
    title: str
    html: str

    @property
    def resource_name(self) -> str:
        return f"{self.name} UI"

    @property
    def description(self) -> str:
        return f"UI for {self.name}"


class WidgetRegistry(Mapping[str, Widget]):
    """Immutable ``uri → Widget`` lookup."""

    def __init__(self, widgets: Optional[list[Widget]] = None):
        self._by_uri = MappingProxyType({w.uri: w for w in widgets or []})

    def __getitem__(self, uri: str) -> Widget:
        return self._by_uri[uri]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_uri)

    def __len__(self) -> int:
        return len(self._by_uri)

    def read(self, uri: str) -> Widget:
        """Look up a widget, failing with UnknownResourceError."""
        try:
            return self._by_uri[uri]
        except KeyError:
            raise UnknownResourceError(uri) from None


def get_assets_dir() -> Path:
    """Get the widget assets directory."""
    return Path(os.environ.get("WIDGET_ASSETS_DIR", DEFAULT_ASSETS_DIR))


def load_widgets(assets_dir: Optional[Path] = None) -> WidgetRegistry:
    """Build the registry from every ``*.html`` file in ``assets_dir``.

    A missing directory yields an empty registry.
    """
    assets_dir = assets_dir or get_assets_dir()
    if not assets_dir.is_dir():
        logger.warning("Widget assets directory %s not found, no widgets loaded", assets_dir)
        return WidgetRegistry()

    widgets = []
    for path in sorted(assets_dir.glob("*.html")):
        name = path.stem
        widgets.append(Widget(
            name=name,
            uri=widget_uri(name),
            title=f"{name[:1].upper()}{name[1:]} Widget",
            html=path.read_text(encoding="utf-8"),
        ))
    logger.info("Loaded %d widget(s) from %s: %s", len(widgets), assets_dir, ", ".join(w.name for w in widgets))
    return WidgetRegistry(widgets)
