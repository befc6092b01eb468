"""
Plain-text renderer for terminal output.

Record payloads are stored HTML-escaped, so they are unescaped here:
a terminal is not a markup context.
"""

import html

from vibescript.model import OutputRecord, OutputStyle, SimulationResult


def _render_record(record: OutputRecord) -> str:
    text = html.unescape(record.text)
    if record.style == OutputStyle.GLOW:
        return f"✨ {text} ✨"
    if record.style == OutputStyle.EMPHASIS:
        return f"**{text}**"
    if record.style == OutputStyle.SENTINEL:
        return f"[{text}]"
    return text


def render_text(result: SimulationResult) -> str:
    return "\n".join(_render_record(r) for r in result.records)
