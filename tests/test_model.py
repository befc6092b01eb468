"""
Tests for the playground model objects.
"""

import pytest
from dataclasses import FrozenInstanceError
from vibescript.model import (
    Category,
    OutputRecord,
    OutputStyle,
    SimulationResult,
    TranspiledLine,
    TranspiledProgram,
    escape_text,
)


class TestOutputRecord:
    """Records are always built with escaped text."""

    def test_from_text_escapes(self):
        record = OutputRecord.from_text(OutputStyle.PLAIN, "<b>hi</b>")
        assert record.text == "&lt;b&gt;hi&lt;/b&gt;"

    def test_sentinel(self):
        record = OutputRecord.sentinel("nothing")
        assert record.style == OutputStyle.SENTINEL
        assert record.text == "nothing"

    def test_error_prefixes_message(self):
        record = OutputRecord.error("render <failed>")
        assert record.style == OutputStyle.ERROR
        assert record.text == "Error: render &lt;failed&gt;"

    def test_records_are_immutable(self):
        record = OutputRecord.sentinel("x")
        with pytest.raises(FrozenInstanceError):
            record.text = "y"

    def test_escape_text_leaves_plain_text(self):
        assert escape_text("Vibing... 💙") == "Vibing... 💙"


class TestTranspiledProgram:

    def test_text_skips_block_ends(self):
        program = TranspiledProgram(lines=(
            TranspiledLine(Category.CONDITIONAL_OPEN, 0, "if a:"),
            TranspiledLine(Category.PLAIN_PRINT, 1, "    print(a)"),
            TranspiledLine(Category.BLOCK_END, 0, None),
        ))
        assert program.text == "if a:\n    print(a)"
        assert len(program.lines) == 3


class TestSimulationResult:

    def test_is_sentinel(self):
        assert SimulationResult(records=(OutputRecord.sentinel("x"),)).is_sentinel

    def test_real_output_is_not_sentinel(self):
        result = SimulationResult(records=(OutputRecord.from_text(OutputStyle.GLOW, "x"),))
        assert not result.is_sentinel
        assert result.texts() == ["x"]
