"""
Test the built-in example programs shown by the "load example" action.

Each example should transpile to balanced blocks and produce real output.
"""

from vibescript.examples import BOOLEAN_EXAMPLE, builtin_examples
from vibescript.session import run


def test_three_examples_in_order():
    examples = builtin_examples()
    assert len(examples) == 3
    assert examples[2] == BOOLEAN_EXAMPLE


def test_every_example_closes_its_blocks():
    for source in builtin_examples():
        assert run(source).transpiled.final_depth == 0


def test_every_example_prints_something():
    for source in builtin_examples():
        assert not run(source).simulation.is_sentinel


def test_boolean_example():
    result = run(BOOLEAN_EXAMPLE)
    assert result.transpiled_text.split("\n")[3:] == [
        "if is_cool:",
        '    print("✨", "This language is fire! 🔥", "✨")',
    ]
    assert result.simulation.texts() == ["This language is fire! 🔥"]
