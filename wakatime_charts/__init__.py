"""Render WakaTime language statistics as light and dark SVG bar charts."""

__version__ = "0.1.0"
