"""Presentation adapters for playground output (HTML, terminal text)."""

from .html_renderer import render_html, render_record
from .text_renderer import render_text

__all__ = ["render_html", "render_record", "render_text"]
