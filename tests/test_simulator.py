"""
Tests for the output simulator.

The simulator only recognises literal strings in print statements. It
never evaluates anything, and every payload it emits is HTML-escaped.
"""

import pytest
from vibescript.examples import GREETING_EXAMPLE, LOOP_EXAMPLE
from vibescript.model import NO_CODE_TEXT, NO_OUTPUT_TEXT, OutputRecord, OutputStyle
from vibescript.simulator import extract_first_literal, simulate


class TestLiteralExtraction:
    """Quote-aware scan for the first string literal."""

    @pytest.mark.parametrize("expr,expected", [
        ('"hello"', 'hello'),
        ("'hello'", 'hello'),
        ('"Welcome to " + name', 'Welcome to '),
        ("'a' + \"b\"", 'a'),
        ('"it\'s fine"', "it's fine"),
        ('\'say "hi"\'', 'say "hi"'),
        ('"say \\"hi\\" now"', 'say "hi" now'),
        ('"back\\\\slash"', 'back\\slash'),
        ('""', ''),
        ('str(n) + "!"', '!'),
    ])
    def test_extracts_literal(self, expr, expected):
        assert extract_first_literal(expr) == expected

    @pytest.mark.parametrize("expr", [
        'name',
        '',
        '"unterminated',
        "'mixed\"",
    ])
    def test_no_literal(self, expr):
        assert extract_first_literal(expr) is None


class TestSimulate:
    """Records follow the source order and category."""

    def test_plain_literal(self):
        result = simulate('spill "Match found"')
        assert result.records == (OutputRecord(OutputStyle.PLAIN, "Match found"),)

    def test_variable_argument_produces_nothing(self):
        """Non-literal arguments are not evaluated; only the sentinel remains."""
        result = simulate('braincell name = "x"\nspill name')
        assert result.records == (OutputRecord(OutputStyle.SENTINEL, NO_OUTPUT_TEXT),)

    def test_styles_follow_categories(self):
        result = simulate('spill "a"\nskibidi spill "b"\nrizzmode spill "c"')
        assert [r.style for r in result.records] == [
            OutputStyle.PLAIN, OutputStyle.GLOW, OutputStyle.EMPHASIS,
        ]
        assert result.texts() == ["a", "b", "c"]

    def test_records_follow_source_order_across_branches(self):
        """Both branches of a conditional are echoed; nothing is evaluated."""
        result = simulate(GREETING_EXAMPLE)
        assert result.texts() == [
            "Welcome to ",
            "The vibes are immaculate! ✨",
            "Need more vibes...",
        ]
        assert result.records[0].style == OutputStyle.GLOW

    def test_loop_body_is_echoed_once(self):
        result = simulate(LOOP_EXAMPLE)
        assert result.texts() == ["Vibing... ", "Loop complete! 🎵"]

    def test_non_print_lines_are_ignored(self):
        result = simulate('braincell x = "not output"\n# spill "nope"\nprint("nope")')
        assert result.texts() == [NO_OUTPUT_TEXT]

    @pytest.mark.parametrize("source", ['', '   ', '\n\n\t\n'])
    def test_empty_source_sentinel(self, source):
        result = simulate(source)
        assert result.records == (OutputRecord(OutputStyle.SENTINEL, NO_CODE_TEXT),)
        assert result.is_sentinel

    def test_comment_only_source_is_not_empty(self):
        """Comments are code; the run completes with no output."""
        assert simulate('# hi').texts() == [NO_OUTPUT_TEXT]


class TestEscaping:
    """Payloads never reach a renderer as raw markup."""

    def test_script_tag_is_escaped(self):
        result = simulate('spill "<script>alert(1)</script>"')
        text = result.records[0].text
        assert text == "&lt;script&gt;alert(1)&lt;/script&gt;"
        assert "<" not in text and ">" not in text

    def test_ampersand_and_quotes_are_escaped(self):
        result = simulate('spill "Tom & Jerry\'s"')
        assert result.records[0].text == "Tom &amp; Jerry&#x27;s"
