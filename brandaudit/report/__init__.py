"""Report rendering."""

from brandaudit.report.render import render_html, render_text

__all__ = ["render_html", "render_text"]
