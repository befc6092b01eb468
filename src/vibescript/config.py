"""
Playground configuration.

Loaded from a YAML mapping, for example:

    indent_unit: "  "
    run_delay: 0.8
    overlap_policy: last_write_wins
    examples:
      - |
        spill "hello"

Every key is optional. Unknown keys or badly typed values raise
ConfigError rather than being ignored.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Tuple

import yaml

from vibescript.examples import builtin_examples
from vibescript.transpiler import DEFAULT_INDENT_UNIT


class ConfigError(Exception):
    """Raised when a configuration file is malformed."""
    pass


class OverlapPolicy(Enum):
    """
    What happens when a second run is scheduled before the first completes.

    LAST_WRITE_WINS: every completion writes the display; the one that
        finishes last is what the user sees.
    LATEST_ONLY: completions older than the newest scheduled run are dropped.
    """
    LAST_WRITE_WINS = "last_write_wins"
    LATEST_ONLY = "latest_only"


DEFAULT_RUN_DELAY = 0.8


@dataclass(frozen=True)
class PlaygroundConfig:
    """
    Settings for one playground session.

    Properties:
        indent_unit: Indentation emitted per nesting level by the transpiler
        run_delay: Seconds between a run action and its completion
        overlap_policy: Behavior for overlapping runs
        examples: Programs cycled through by the "load example" action
    """

    indent_unit: str = DEFAULT_INDENT_UNIT
    run_delay: float = DEFAULT_RUN_DELAY
    overlap_policy: OverlapPolicy = OverlapPolicy.LAST_WRITE_WINS
    examples: Tuple[str, ...] = field(default_factory=builtin_examples)


def config_from_dict(d: Dict[str, Any]) -> PlaygroundConfig:
    """Build a PlaygroundConfig from a plain mapping, validating each key."""
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(PlaygroundConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {unknown}")

    kwargs: Dict[str, Any] = {}

    if "indent_unit" in d:
        indent = d["indent_unit"]
        if not isinstance(indent, str) or not indent or indent.strip():
            raise ConfigError("indent_unit must be a non-empty string of whitespace")
        kwargs["indent_unit"] = indent

    if "run_delay" in d:
        delay = d["run_delay"]
        if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
            raise ConfigError("run_delay must be a non-negative number")
        kwargs["run_delay"] = float(delay)

    if "overlap_policy" in d:
        try:
            kwargs["overlap_policy"] = OverlapPolicy(d["overlap_policy"])
        except ValueError:
            choices = [p.value for p in OverlapPolicy]
            raise ConfigError(f"overlap_policy must be one of {choices}")

    if "examples" in d:
        examples = d["examples"]
        if (not isinstance(examples, list) or not examples
                or not all(isinstance(e, str) for e in examples)):
            raise ConfigError("examples must be a non-empty list of strings")
        kwargs["examples"] = tuple(e.rstrip("\n") for e in examples)

    return PlaygroundConfig(**kwargs)


def load_config_string(content: str) -> PlaygroundConfig:
    try:
        d = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}")
    if d is None:
        return PlaygroundConfig()
    return config_from_dict(d)


def load_config(filepath: str) -> PlaygroundConfig:
    """
    Load configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the content is malformed
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        content = f.read()
    return load_config_string(content)


__all__ = [
    "ConfigError",
    "OverlapPolicy",
    "PlaygroundConfig",
    "config_from_dict",
    "load_config",
    "load_config_string",
]
