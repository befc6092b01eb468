"""
Line Classifier (Layer 1: Raw Source Line → Category).

Tags a single VibeScript line with a statement category.

Keyword table (checked top to bottom, first match wins):
    #... / blank      → BLANK_OR_COMMENT
    end sus, end vibe → BLOCK_END
    plot twist        → ELSE_BRANCH (exact phrase)
    skibidi spill     → GLOW_PRINT
    rizzmode spill    → EMPHASIS_PRINT
    spill             → PLAIN_PRINT
    braincell         → VARIABLE_DECL
    sus check         → CONDITIONAL_OPEN
    vibe until        → LOOP_OPEN
    sum/sub/mul/div   → COMPOUND_ADD/SUB/MUL/DIV
    anything else     → FALLBACK

Compound phrases sit above the shorter keywords they share a suffix or
prefix with, so a short keyword never shadows a longer one.

This stage cannot fail: FALLBACK catches every line.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from vibescript.model import Category, Line


_TRUE_RE = re.compile(r"\byeah\b")
_FALSE_RE = re.compile(r"\bnah\b")


@dataclass(frozen=True)
class KeywordRule:
    """
    One row of the dispatch table.

    Properties:
        category: Category assigned on match
        phrase: Keyword phrase the trimmed line must start with
        exact: If True the trimmed line must equal the phrase
    """

    category: Category
    phrase: str
    exact: bool = False

    def matches(self, trimmed: str) -> bool:
        if self.exact:
            return trimmed == self.phrase
        return trimmed.startswith(self.phrase)

    def strip(self, trimmed: str) -> str:
        return trimmed[len(self.phrase):]


KEYWORD_RULES: Tuple[KeywordRule, ...] = (
    KeywordRule(Category.BLOCK_END, "end sus"),
    KeywordRule(Category.BLOCK_END, "end vibe"),
    KeywordRule(Category.ELSE_BRANCH, "plot twist", exact=True),
    KeywordRule(Category.GLOW_PRINT, "skibidi spill "),
    KeywordRule(Category.EMPHASIS_PRINT, "rizzmode spill "),
    KeywordRule(Category.PLAIN_PRINT, "spill "),
    KeywordRule(Category.VARIABLE_DECL, "braincell "),
    KeywordRule(Category.CONDITIONAL_OPEN, "sus check "),
    KeywordRule(Category.LOOP_OPEN, "vibe until "),
    KeywordRule(Category.COMPOUND_ADD, "sum "),
    KeywordRule(Category.COMPOUND_SUB, "sub "),
    KeywordRule(Category.COMPOUND_MUL, "mul "),
    KeywordRule(Category.COMPOUND_DIV, "div "),
)


def substitute_booleans(text: str) -> str:
    """Replace whole-word yeah/nah with True/False."""
    return _FALSE_RE.sub("False", _TRUE_RE.sub("True", text))


def classify(line: str) -> Tuple[Category, str]:
    """
    Classify one line of VibeScript.

    Args:
        line: Raw source line (leading/trailing whitespace allowed)

    Returns:
        (category, residual) where residual is the trimmed line with the
        matched keyword phrase removed. BLANK_OR_COMMENT returns the raw
        line unchanged; FALLBACK returns the boolean-substituted line.
    """
    trimmed = line.strip()

    if not trimmed or trimmed.startswith("#"):
        return Category.BLANK_OR_COMMENT, line

    for rule in KEYWORD_RULES:
        if rule.matches(trimmed):
            return rule.category, rule.strip(trimmed)

    return Category.FALLBACK, substitute_booleans(trimmed)


def classify_line(line: str) -> Line:
    """Classify a line and package the result as a Line."""
    category, residual = classify(line)
    return Line(raw=line, trimmed=line.strip(), category=category, residual=residual)


__all__ = [
    "KeywordRule",
    "KEYWORD_RULES",
    "classify",
    "classify_line",
    "substitute_booleans",
]
