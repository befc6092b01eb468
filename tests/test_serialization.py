"""
Tests for serialization of playground results.

Exports must keep field names stable and read back losslessly using the
explicit functions in `vibescript.serialization`.
"""

import json

import pytest
import yaml
from vibescript.examples import GREETING_EXAMPLE
from vibescript.serialization import (
    SerializationError,
    record_to_dict,
    run_result_from_json,
    run_result_from_yaml,
    run_result_to_dict,
    run_result_to_json,
    run_result_to_yaml,
    simulation_from_dict,
)
from vibescript.model import OutputRecord, OutputStyle
from vibescript.session import run


def test_record_dict_shape():
    record = OutputRecord.from_text(OutputStyle.GLOW, "<hi>")
    assert record_to_dict(record) == {"style": "glow", "text": "&lt;hi&gt;"}


def test_run_result_dict_shape():
    d = run_result_to_dict(run('sus check a\nspill "x"\nend sus'))
    assert d["source"] == 'sus check a\nspill "x"\nend sus'
    assert d["transpiled"]["text"] == 'if a:\n    print("x")'
    assert [line["text"] for line in d["transpiled"]["lines"]] == ['if a:', '    print("x")', None]
    assert [line["category"] for line in d["transpiled"]["lines"]] == [
        "conditional_open", "plain_print", "block_end",
    ]
    assert d["simulation"] == {"records": [{"style": "plain", "text": "x"}]}


def test_json_roundtrip():
    result = run(GREETING_EXAMPLE)
    json_str = run_result_to_json(result)
    assert json.loads(json_str)["simulation"]["records"][0]["style"] == "glow"
    assert run_result_from_json(json_str) == result


def test_yaml_roundtrip():
    result = run(GREETING_EXAMPLE)
    yaml_str = run_result_to_yaml(result)
    assert yaml.safe_load(yaml_str)["transpiled"]["final_depth"] == 0
    assert run_result_from_yaml(yaml_str) == result


def test_escaped_text_is_not_escaped_again_on_load():
    result = run('spill "<b>"')
    restored = run_result_from_json(run_result_to_json(result))
    assert restored.simulation.records[0].text == "&lt;b&gt;"


def test_empty_simulation_is_rejected():
    with pytest.raises(SerializationError):
        simulation_from_dict({"records": []})


def test_unknown_style_is_rejected():
    with pytest.raises(SerializationError):
        simulation_from_dict({"records": [{"style": "sparkly", "text": "x"}]})
