"""
Output Simulator: fake a run by echoing literal print arguments.

No interpretation happens here. Variables are never bound and
expressions are never evaluated. For every spill / skibidi spill /
rizzmode spill line the first quoted string literal in the argument is
picked up and turned into an OutputRecord:

    spill "hi"            → OutputRecord(PLAIN, "hi")
    skibidi spill "hi"    → OutputRecord(GLOW, "hi")
    rizzmode spill "hi"   → OutputRecord(EMPHASIS, "hi")
    spill name            → (nothing, not a literal)

Record text always goes through escape_text() before it is stored.
"""

import logging
from typing import List, Optional

from vibescript.classifier import classify
from vibescript.model import (
    Category,
    NO_CODE_TEXT,
    NO_OUTPUT_TEXT,
    OutputRecord,
    OutputStyle,
    PRINT_CATEGORIES,
    SimulationResult,
)


logger = logging.getLogger(__name__)

_QUOTES = ("'", '"')

_STYLE_BY_CATEGORY = {
    Category.PLAIN_PRINT: OutputStyle.PLAIN,
    Category.GLOW_PRINT: OutputStyle.GLOW,
    Category.EMPHASIS_PRINT: OutputStyle.EMPHASIS,
}


def extract_first_literal(expr: str) -> Optional[str]:
    """
    Return the contents of the first quoted string literal in expr.

    Scan rules:
        - The first ' or " opens a literal
        - Only the same quote character closes it
        - A backslash escapes the next character; the backslash is dropped
          and the character is kept (so \\" inside "..." is a plain quote)
        - An unterminated literal yields None

    Args:
        expr: Expression text, e.g. `"Welcome to " + name`

    Returns:
        Literal contents, or None when there is no complete literal
    """
    pos = 0
    while pos < len(expr) and expr[pos] not in _QUOTES:
        pos += 1
    if pos >= len(expr):
        return None

    quote = expr[pos]
    chars: List[str] = []
    pos += 1
    while pos < len(expr):
        ch = expr[pos]
        if ch == "\\" and pos + 1 < len(expr):
            chars.append(expr[pos + 1])
            pos += 2
            continue
        if ch == quote:
            return "".join(chars)
        chars.append(ch)
        pos += 1

    return None


def simulate(source: str) -> SimulationResult:
    """
    Simulate running a VibeScript program.

    Args:
        source: VibeScript program text

    Returns:
        SimulationResult. Empty or whitespace-only source gives a single
        "No code to run!" sentinel; a program with no literal output gives
        a single "no output statements" sentinel.
    """
    if not source.strip():
        return SimulationResult(records=(OutputRecord.sentinel(NO_CODE_TEXT),))

    records: List[OutputRecord] = []
    for raw in source.split("\n"):
        category, residual = classify(raw)
        if category not in PRINT_CATEGORIES:
            continue
        literal = extract_first_literal(residual)
        if literal is None:
            logger.debug("No literal in print argument: %r", residual)
            continue
        records.append(OutputRecord.from_text(_STYLE_BY_CATEGORY[category], literal))

    if not records:
        records.append(OutputRecord.sentinel(NO_OUTPUT_TEXT))

    return SimulationResult(records=tuple(records))


__all__ = ["extract_first_literal", "simulate"]
