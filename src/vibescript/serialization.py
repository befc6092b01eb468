"""
Serialization helpers for playground results (RunResult, OutputRecord, etc.).

Provides JSON/YAML export via an intermediate dict representation, plus
the reverse direction for simulation results so saved output can be
re-rendered. Field names are kept stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from vibescript.model import (
    Category,
    OutputRecord,
    OutputStyle,
    RunResult,
    SimulationResult,
    TranspiledLine,
    TranspiledProgram,
)


class SerializationError(Exception):
    """Raised when a serialized result cannot be read back."""
    pass


def record_to_dict(r: OutputRecord) -> Dict[str, Any]:
    return {"style": r.style.value, "text": r.text}


def record_from_dict(d: Dict[str, Any]) -> OutputRecord:
    # text is stored escaped, so it is restored as-is rather than re-escaped
    try:
        return OutputRecord(style=OutputStyle(d["style"]), text=d["text"])
    except (KeyError, ValueError, TypeError) as e:
        raise SerializationError(f"Invalid output record {d!r}: {e}")


def simulation_to_dict(s: SimulationResult) -> Dict[str, Any]:
    return {"records": [record_to_dict(r) for r in s.records]}


def simulation_from_dict(d: Dict[str, Any]) -> SimulationResult:
    records = d.get("records") if isinstance(d, dict) else None
    if not records:
        raise SerializationError("Simulation result must contain at least one record")
    return SimulationResult(records=tuple(record_from_dict(r) for r in records))


def transpiled_line_to_dict(line: TranspiledLine) -> Dict[str, Any]:
    return {"category": line.category.value, "depth": line.depth, "text": line.text}


def transpiled_line_from_dict(d: Dict[str, Any]) -> TranspiledLine:
    try:
        return TranspiledLine(category=Category(d["category"]), depth=int(d["depth"]), text=d.get("text"))
    except (KeyError, ValueError, TypeError) as e:
        raise SerializationError(f"Invalid transpiled line {d!r}: {e}")


def transpiled_to_dict(p: TranspiledProgram) -> Dict[str, Any]:
    return {
        "lines": [transpiled_line_to_dict(line) for line in p.lines],
        "final_depth": p.final_depth,
        "text": p.text,
    }


def transpiled_from_dict(d: Dict[str, Any]) -> TranspiledProgram:
    return TranspiledProgram(
        lines=tuple(transpiled_line_from_dict(line) for line in d.get("lines", [])),
        final_depth=d.get("final_depth", 0),
    )


def run_result_to_dict(r: RunResult) -> Dict[str, Any]:
    return {
        "source": r.source,
        "transpiled": transpiled_to_dict(r.transpiled),
        "simulation": simulation_to_dict(r.simulation),
    }


def run_result_from_dict(d: Dict[str, Any]) -> RunResult:
    return RunResult(
        source=d.get("source", ""),
        transpiled=transpiled_from_dict(d.get("transpiled", {})),
        simulation=simulation_from_dict(d.get("simulation", {})),
    )


def run_result_to_json(r: RunResult) -> str:
    return json.dumps(run_result_to_dict(r), sort_keys=True, ensure_ascii=False)


def run_result_from_json(s: str) -> RunResult:
    d = json.loads(s)
    return run_result_from_dict(d)


def run_result_to_yaml(r: RunResult) -> str:
    return yaml.safe_dump(run_result_to_dict(r), allow_unicode=True, sort_keys=False)


def run_result_from_yaml(s: str) -> RunResult:
    d = yaml.safe_load(s)
    return run_result_from_dict(d)
