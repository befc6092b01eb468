"""
Indent Tracker: nesting depth for one transpile pass.

VibeScript marks blocks with explicit open/end keyword lines, so the
depth is driven entirely by line categories:

    BLOCK_END           depth - 1 (floored at 0), before emission
    ELSE_BRANCH         depth - 1 before emission, depth + 1 after
    CONDITIONAL_OPEN    emit at depth, then depth + 1
    LOOP_OPEN           emit at depth, then depth + 1
    anything else       emit at depth

An unmatched end marker is absorbed by the floor; it never raises.
"""

from vibescript.model import Category


_OPENERS = frozenset({Category.CONDITIONAL_OPEN, Category.LOOP_OPEN})


class IndentTracker:
    """Tracks block-nesting depth. One instance per transpile pass."""

    def __init__(self) -> None:
        self.depth = 0

    def _decrement(self) -> None:
        self.depth = max(0, self.depth - 1)

    def before_emit(self, category: Category) -> int:
        """Apply pre-emission transitions and return the depth to emit at."""
        if category in (Category.BLOCK_END, Category.ELSE_BRANCH):
            self._decrement()
        return self.depth

    def after_emit(self, category: Category) -> None:
        """Apply post-emission transitions."""
        if category in _OPENERS or category == Category.ELSE_BRANCH:
            self.depth += 1
