"""
Playground session: the entry points the UI glue calls.

    run(source)            → RunResult (pure, no scheduling)
    session.load_next_example()
    session.clear()

The example-rotation counter is the only state that survives between
calls. It lives on the PlaygroundSession object, never at module level,
so the transpiler and simulator stay pure.
"""

import logging
import threading
from typing import Optional

from vibescript.config import PlaygroundConfig
from vibescript.model import CLEARED_TEXT, OutputRecord, RunResult, SimulationResult
from vibescript.simulator import simulate
from vibescript.transpiler import DEFAULT_INDENT_UNIT, transpile


logger = logging.getLogger(__name__)


def run(source: str, indent_unit: str = DEFAULT_INDENT_UNIT) -> RunResult:
    """Transpile and simulate one program. Pure; no delay, no display."""
    return RunResult(
        source=source,
        transpiled=transpile(source, indent_unit=indent_unit),
        simulation=simulate(source),
    )


def cleared_result() -> SimulationResult:
    return SimulationResult(records=(OutputRecord.sentinel(CLEARED_TEXT),))


class PlaygroundSession:
    """
    Session context threaded through the playground entry points.

    Properties:
        config: PlaygroundConfig for this session
        example_index: Index of the example the next load returns,
            always 0 <= example_index < len(config.examples)
    """

    def __init__(self, config: Optional[PlaygroundConfig] = None) -> None:
        self.config = config or PlaygroundConfig()
        self.example_index = 0
        self._lock = threading.Lock()

    def run(self, source: str) -> RunResult:
        return run(source, indent_unit=self.config.indent_unit)

    def load_next_example(self) -> str:
        """Return the current example and advance the counter (mod N)."""
        with self._lock:
            examples = self.config.examples
            loaded = self.example_index
            example = examples[loaded]
            self.example_index = (self.example_index + 1) % len(examples)
        logger.debug("Loaded example %d of %d", loaded + 1, len(examples))
        return example

    def clear(self) -> SimulationResult:
        """Clear action. No core state is reset; returns the cleared placeholder."""
        return cleared_result()


__all__ = ["PlaygroundSession", "cleared_result", "run"]
