"""Render an audit report as a standalone HTML document or plain text."""

from html import escape
from urllib.parse import urlparse

from brandaudit.audit.models import CONTROL_LABELS, CONTROL_TYPES, AuditReport, AuditSection

COLORS = {
    "FullControl": "#ff8800",
    "PartialControl": "#ffb366",
    "NoControl": "#ffd4b3",
    "MissedOpportunity": "#6fbf73",
}

_STYLE = """
body { font-family: Helvetica, Arial, sans-serif; color: #1f2937; max-width: 860px; margin: 2rem auto; }
h1 { font-size: 1.8rem; }
h2 { font-size: 1.25rem; margin-top: 2.5rem; }
.pie { width: 180px; height: 180px; border-radius: 50%; display: inline-block; vertical-align: middle; }
.legend { display: inline-block; vertical-align: middle; margin-left: 2rem; list-style: none; padding: 0; }
.legend li { margin: .25rem 0; }
.swatch { display: inline-block; width: .8rem; height: .8rem; margin-right: .4rem; }
.results { list-style: none; padding: 0; }
.results li { border-bottom: 1px solid #e5e7eb; padding: .5rem 0; }
.link { font-size: .75rem; color: #6b7280; word-break: break-all; }
.tag { display: inline-block; font-size: .75rem; padding: .15rem .5rem; color: #fff; border-radius: 4px; }
"""


def _pie_gradient(section: AuditSection) -> str:
    # Slices from raw counts so the pie always closes at 100%.
    total = section.total
    if not total:
        return "#e5e7eb"
    stops, start = [], 0.0
    for control in CONTROL_TYPES:
        count = section.counts.get(control, 0)
        if not count:
            continue
        end = start + count * 100 / total
        stops.append(f"{COLORS[control]} {start:.2f}% {end:.2f}%")
        start = end
    return f"conic-gradient({', '.join(stops)})"


def _render_link(link: str, title: str) -> str:
    text = escape(title) or escape(link)
    # Only web links become anchors; anything else is shown as plain text.
    try:
        scheme = urlparse(link.strip()).scheme.lower()
    except ValueError:
        scheme = ""
    if scheme not in ("http", "https"):
        return f"<strong>{text}</strong>"
    return f'<a href="{escape(link)}">{text}</a>'


def _render_section(section: AuditSection) -> str:
    legend = "".join(
        f'<li><span class="swatch" style="background:{COLORS[c]}"></span>'
        f"{CONTROL_LABELS[c]}: {section.counts.get(c, 0)} ({section.percentages.get(c, 0)}%)</li>"
        for c in CONTROL_TYPES
    )
    if section.results:
        items = "".join(
            "<li>"
            f"{_render_link(r.link, r.title)}<br>"
            f'<span class="link">{escape(r.link)}</span>'
            f"<p>{escape(r.snippet)}</p>"
            f'<span class="tag" style="background:{COLORS[r.control_type]}">'
            f"{CONTROL_LABELS[r.control_type]}</span>"
            "</li>"
            for r in section.results
        )
    else:
        items = "<li>No results found.</li>"

    return (
        "<section>"
        f"<h2>{escape(section.label)}: &quot;{escape(section.query)}&quot;</h2>"
        f'<div class="pie" style="background:{_pie_gradient(section)}"></div>'
        f'<ul class="legend">{legend}</ul>'
        f'<ul class="results">{items}</ul>'
        "</section>"
    )


def render_html(report: AuditReport, title: str = "Brand Control Audit") -> str:
    """Render the full report as a self-contained HTML document."""
    sections = "".join(_render_section(s) for s in report.sections)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(title)}: {escape(report.business_name)}</title>"
        f"<style>{_STYLE}</style></head><body>"
        f"<h1>{escape(title)}</h1>"
        f"<p><strong>Business:</strong> {escape(report.business_name)}<br>"
        f"<strong>Website:</strong> {escape(report.official_site)}</p>"
        f"{sections}"
        "</body></html>\n"
    )


def render_text(report: AuditReport) -> str:
    """Render a compact plain-text summary of the report."""
    lines = [f"Brand control audit for {report.business_name} ({report.official_site})"]
    for section in report.sections:
        lines.append("")
        lines.append(f'{section.label}: "{section.query}" ({section.total} results)')
        for control in CONTROL_TYPES:
            lines.append(
                f"  {CONTROL_LABELS[control]:<22} {section.counts.get(control, 0):>3}"
                f"  {section.percentages.get(control, 0):>3}%"
            )
        for i, r in enumerate(section.results, 1):
            lines.append(f"  {i}. [{CONTROL_LABELS[r.control_type]}] {r.title}")
            lines.append(f"     {r.link}")
    return "\n".join(lines)
