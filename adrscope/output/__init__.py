"""
Presentation of records and views as HTML, wiki pages and statistics reports.
"""

from .html import HtmlRenderer, RenderConfig, Theme, ViewerData
from .stats_format import StatsFormat, format_statistics
from .wiki import WikiRenderer

__all__ = [
    "HtmlRenderer",
    "RenderConfig",
    "Theme",
    "ViewerData",
    "StatsFormat",
    "format_statistics",
    "WikiRenderer",
]
