"""
Tests for loading playground configuration from YAML.
"""

import pytest
from vibescript.config import (
    ConfigError,
    OverlapPolicy,
    PlaygroundConfig,
    config_from_dict,
    load_config,
    load_config_string,
)
from vibescript.examples import builtin_examples


class TestDefaults:

    def test_default_config(self):
        config = PlaygroundConfig()
        assert config.indent_unit == "    "
        assert config.run_delay == 0.8
        assert config.overlap_policy == OverlapPolicy.LAST_WRITE_WINS
        assert config.examples == builtin_examples()

    def test_empty_document_gives_defaults(self):
        assert load_config_string("") == PlaygroundConfig()


class TestLoading:

    def test_full_document(self):
        config = load_config_string(
            'indent_unit: "  "\n'
            'run_delay: 0\n'
            'overlap_policy: latest_only\n'
            'examples:\n'
            '  - |\n'
            '    spill "one"\n'
            '  - spill "two"\n'
        )
        assert config.indent_unit == "  "
        assert config.run_delay == 0.0
        assert config.overlap_policy == OverlapPolicy.LATEST_ONLY
        assert config.examples == ('spill "one"', 'spill "two"')

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "playground.yaml"
        path.write_text("run_delay: 1.5\n", encoding="utf-8")
        assert load_config(str(path)).run_delay == 1.5

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "absent.yaml"))


class TestValidation:

    @pytest.mark.parametrize("d", [
        {"colour": "purple"},
        {"indent_unit": ""},
        {"indent_unit": "xx"},
        {"indent_unit": 4},
        {"run_delay": -1},
        {"run_delay": "soon"},
        {"run_delay": True},
        {"overlap_policy": "first_write_wins"},
        {"examples": []},
        {"examples": "spill 1"},
        {"examples": ["ok", 3]},
    ])
    def test_invalid_values(self, d):
        with pytest.raises(ConfigError):
            config_from_dict(d)

    def test_non_mapping_document(self):
        with pytest.raises(ConfigError, match="mapping"):
            load_config_string("- a\n- b\n")

    def test_invalid_yaml(self):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config_string("run_delay: [1,\n")
