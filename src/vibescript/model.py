"""
Core Playground Model Objects

Defines the data structures passed between the playground stages:
    - Categories (what kind of statement a line is)
    - Lines (one classified source line)
    - Transpiled programs (target-syntax text, one line per source line)
    - Output records (one simulated line of program output)
    - Run results (transpiled program + simulation)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about HTML, terminals or any other presentation
        - Are immutable once built
        - Are fully serializable
        - Represent results, not behavior
"""

import html
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class Category(Enum):
    """
    Statement categories recognised by the line classifier.

    The order of the classifier's rule table decides precedence, not the
    order of this enum.
    """

    BLANK_OR_COMMENT = "blank_or_comment"
    BLOCK_END = "block_end"
    ELSE_BRANCH = "else_branch"
    GLOW_PRINT = "glow_print"
    EMPHASIS_PRINT = "emphasis_print"
    PLAIN_PRINT = "plain_print"
    VARIABLE_DECL = "variable_decl"
    CONDITIONAL_OPEN = "conditional_open"
    LOOP_OPEN = "loop_open"
    COMPOUND_ADD = "compound_add"
    COMPOUND_SUB = "compound_sub"
    COMPOUND_MUL = "compound_mul"
    COMPOUND_DIV = "compound_div"
    FALLBACK = "fallback"


PRINT_CATEGORIES = frozenset({
    Category.PLAIN_PRINT,
    Category.GLOW_PRINT,
    Category.EMPHASIS_PRINT,
})

COMPOUND_CATEGORIES = frozenset({
    Category.COMPOUND_ADD,
    Category.COMPOUND_SUB,
    Category.COMPOUND_MUL,
    Category.COMPOUND_DIV,
})


class OutputStyle(Enum):
    """Display styles for simulated output."""
    PLAIN = "plain"
    GLOW = "glow"
    EMPHASIS = "emphasis"
    SENTINEL = "sentinel"
    ERROR = "error"


NO_CODE_TEXT = "No code to run!"
NO_OUTPUT_TEXT = "Code executed successfully! No output statements found."
RUNNING_TEXT = "Running your vibes..."
CLEARED_TEXT = "Output cleared. Ready for new vibes!"


@dataclass(frozen=True)
class Line:
    """
    One classified source line.

    Properties:
        raw:
            The line exactly as it appeared in the source
        trimmed:
            The line with surrounding whitespace removed
        category:
            Category assigned by the classifier
        residual:
            The trimmed line with the matched keyword phrase stripped.
            For FALLBACK lines this is the boolean-substituted text.
    """

    raw: str
    trimmed: str
    category: Category
    residual: str


@dataclass(frozen=True)
class TranspiledLine:
    """
    Target-syntax rendering of one source line.

    Properties:
        category: Category of the source line
        depth: Nesting depth the line was emitted at
        text:
            Full target line including leading indentation.
            None for block-end markers, which close a block without
            producing target text.
    """

    category: Category
    depth: int
    text: Optional[str]


@dataclass(frozen=True)
class TranspiledProgram:
    """
    Result of one transpile pass.

    INVARIANT:
        len(lines) == number of source lines (1:1 mapping).

    Properties:
        lines: One TranspiledLine per source line, in source order
        final_depth: Depth of the indent tracker after the last line
    """

    lines: Tuple[TranspiledLine, ...]
    final_depth: int = 0

    @property
    def text(self) -> str:
        """Display text: every emitted line joined by newlines."""
        return "\n".join(line.text for line in self.lines if line.text is not None)


@dataclass(frozen=True)
class OutputRecord:
    """
    One simulated line of program output.

    Properties:
        style: OutputStyle tag used by the presentation adapter
        text: HTML-escaped text payload

    IMPORTANT:
        The text is already escaped. Build records through from_text()
        so that no unescaped payload can reach a renderer.
    """

    style: OutputStyle
    text: str

    @classmethod
    def from_text(cls, style: OutputStyle, raw_text: str) -> "OutputRecord":
        return cls(style=style, text=escape_text(raw_text))

    @classmethod
    def sentinel(cls, raw_text: str) -> "OutputRecord":
        return cls.from_text(OutputStyle.SENTINEL, raw_text)

    @classmethod
    def error(cls, message: str) -> "OutputRecord":
        return cls.from_text(OutputStyle.ERROR, f"Error: {message}")


def escape_text(text: str) -> str:
    """Neutralize markup-significant characters (& < > " ')."""
    return html.escape(text, quote=True)


@dataclass(frozen=True)
class SimulationResult:
    """
    Ordered sequence of OutputRecord produced by one simulation.

    Never empty: when nothing was printed a sentinel record stands in.
    """

    records: Tuple[OutputRecord, ...]

    @property
    def is_sentinel(self) -> bool:
        return all(r.style == OutputStyle.SENTINEL for r in self.records)

    def texts(self) -> List[str]:
        return [r.text for r in self.records]


@dataclass(frozen=True)
class RunResult:
    """
    Everything one playground run produces.

    Properties:
        source: The VibeScript text that was run
        transpiled: Target-syntax program for display
        simulation: Simulated output records
    """

    source: str
    transpiled: TranspiledProgram
    simulation: SimulationResult

    @property
    def transpiled_text(self) -> str:
        return self.transpiled.text
