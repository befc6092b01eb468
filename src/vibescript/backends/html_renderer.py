"""
HTML renderer for simulated playground output.

Converts a SimulationResult into the markup the playground page inserts
into its output panel.

Styles:
    - PLAIN:    <div class="output-line">text</div>
    - GLOW:     <div class="output-line output-glow">✨ text ✨</div>
    - EMPHASIS: <div class="output-line"><strong>text</strong></div>
    - SENTINEL: <div class="output-placeholder">text</div> for the idle
                placeholders ("No code to run!", "Output cleared...");
                other sentinels (no output statements, running) are shown
                as an ordinary output-line
    - ERROR:    <div class="output-line output-error">text</div>

Record text arrives already escaped (see OutputRecord.from_text), so it
is inserted as-is. Escaping it again would double-encode entities.
"""

from vibescript.model import (
    CLEARED_TEXT,
    NO_CODE_TEXT,
    OutputRecord,
    OutputStyle,
    SimulationResult,
    escape_text,
)


_PLACEHOLDER_TEXTS = frozenset(escape_text(t) for t in (NO_CODE_TEXT, CLEARED_TEXT))


def render_record(record: OutputRecord) -> str:
    """Render a single record as one <div>."""
    if record.style == OutputStyle.GLOW:
        return f'<div class="output-line output-glow">✨ {record.text} ✨</div>'
    if record.style == OutputStyle.EMPHASIS:
        return f'<div class="output-line"><strong>{record.text}</strong></div>'
    if record.style == OutputStyle.SENTINEL and record.text in _PLACEHOLDER_TEXTS:
        return f'<div class="output-placeholder">{record.text}</div>'
    if record.style == OutputStyle.ERROR:
        return f'<div class="output-line output-error">{record.text}</div>'
    return f'<div class="output-line">{record.text}</div>'


def render_html(result: SimulationResult) -> str:
    """Render every record, in order, with no separator (as the page expects)."""
    return "".join(render_record(r) for r in result.records)


__all__ = ["render_html", "render_record"]
