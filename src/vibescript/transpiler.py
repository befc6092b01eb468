"""
Statement Transpiler (Layer 2: Classified Lines → Target Syntax).

Rewrites VibeScript into Python-like pseudocode for display:

    braincell x = 1         → x = 1
    spill x                 → print(x)
    skibidi spill x         → print("✨", x, "✨")
    rizzmode spill x        → print("**", x, "**")
    sus check a > b         → if a > b:
    plot twist              → else:
    vibe until n >= 3       → while n >= 3:
    sum n 1                 → n += 1   (sub/mul/div → -= *= /=)
    end sus / end vibe      → (closes the block, no target text)
    anything else           → copied, with yeah/nah → True/False

The output is display-only: nothing downstream executes it.

Every call re-scans the whole source with a fresh IndentTracker, so
transpile() is a pure function of its input.
"""

import logging
import warnings
from typing import Callable, Dict, List, Optional

from vibescript.classifier import classify_line, substitute_booleans
from vibescript.indent import IndentTracker
from vibescript.model import Category, Line, TranspiledLine, TranspiledProgram


logger = logging.getLogger(__name__)

DEFAULT_INDENT_UNIT = "    "

_COMPOUND_OPERATORS = {
    Category.COMPOUND_ADD: "+",
    Category.COMPOUND_SUB: "-",
    Category.COMPOUND_MUL: "*",
    Category.COMPOUND_DIV: "/",
}


def _rewrite_compound(line: Line) -> str:
    """
    Rewrite `sum x 1` style statements into `x += 1`.

    Exactly two tokens are expected after the keyword. With fewer the line
    is copied as a FALLBACK line would be; with more, only the first two
    are used and a UserWarning names the ignored tokens.
    """
    parts = line.residual.split()
    if len(parts) < 2:
        return substitute_booleans(line.trimmed)
    if len(parts) > 2:
        warnings.warn(
            f"Ignoring extra tokens in '{line.trimmed}': {' '.join(parts[2:])}",
            UserWarning,
        )
    name, value = parts[0], parts[1]
    return f"{name} {_COMPOUND_OPERATORS[line.category]}= {value}"


_REWRITERS: Dict[Category, Callable[[Line], str]] = {
    Category.VARIABLE_DECL: lambda line: line.residual,
    Category.PLAIN_PRINT: lambda line: f"print({line.residual})",
    Category.GLOW_PRINT: lambda line: f'print("✨", {line.residual}, "✨")',
    Category.EMPHASIS_PRINT: lambda line: f'print("**", {line.residual}, "**")',
    Category.CONDITIONAL_OPEN: lambda line: f"if {line.residual}:",
    Category.ELSE_BRANCH: lambda line: "else:",
    Category.LOOP_OPEN: lambda line: f"while {line.residual}:",
    Category.COMPOUND_ADD: _rewrite_compound,
    Category.COMPOUND_SUB: _rewrite_compound,
    Category.COMPOUND_MUL: _rewrite_compound,
    Category.COMPOUND_DIV: _rewrite_compound,
    Category.FALLBACK: lambda line: line.residual,
}


def transpile_line(line: Line, depth: int, indent_unit: str = DEFAULT_INDENT_UNIT) -> Optional[str]:
    """
    Build the target-syntax text for one classified line.

    Returns None for block-end markers. Blank and comment lines are
    returned verbatim, without added indentation.
    """
    if line.category == Category.BLOCK_END:
        return None
    if line.category == Category.BLANK_OR_COMMENT:
        return line.raw
    return indent_unit * depth + _REWRITERS[line.category](line)


def transpile(source: str, indent_unit: str = DEFAULT_INDENT_UNIT) -> TranspiledProgram:
    """
    Transpile VibeScript source into target-syntax pseudocode.

    Args:
        source: VibeScript program text
        indent_unit: Indentation emitted per nesting level

    Returns:
        TranspiledProgram with exactly one TranspiledLine per source line
    """
    tracker = IndentTracker()
    lines: List[TranspiledLine] = []

    for raw in source.split("\n"):
        line = classify_line(raw)
        depth = tracker.before_emit(line.category)
        lines.append(TranspiledLine(
            category=line.category,
            depth=depth,
            text=transpile_line(line, depth, indent_unit),
        ))
        tracker.after_emit(line.category)

    if tracker.depth:
        logger.debug("Source ended with %d unclosed block(s)", tracker.depth)

    return TranspiledProgram(lines=tuple(lines), final_depth=tracker.depth)


__all__ = ["transpile", "transpile_line", "DEFAULT_INDENT_UNIT"]
