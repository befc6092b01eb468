"""
Deferred run pipeline for the playground.

A run action does not show its result immediately. It shows a "running"
placeholder, waits a fixed delay, then computes and renders the result:

    IDLE ──schedule()──▶ RUNNING ──delay──▶ COMPLETE ──▶ IDLE

Empty input never enters RUNNING: the "No code to run!" sentinel is
written straight away and nothing is scheduled.

Overlapping runs are neither cancelled nor coalesced. Each scheduled run
gets its own completion and a generation number. With the default
LAST_WRITE_WINS policy every completion writes the display, so the one
that finishes last is what stays visible. LATEST_ONLY drops completions
whose generation is older than the newest scheduled run; a cancelled run
no longer counts as newest.
RunTicket.cancel() cancels one pending completion explicitly.

Any exception raised while rendering the running placeholder, or while
computing or rendering a completion, is turned into a single error record
on the display. The run control returns to IDLE and nothing is retried.

Everything runs on one asyncio event loop; there are no threads.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Set, Tuple

from vibescript.backends.html_renderer import render_html, render_record
from vibescript.config import OverlapPolicy
from vibescript.model import (
    NO_CODE_TEXT,
    RUNNING_TEXT,
    OutputRecord,
    SimulationResult,
)
from vibescript.session import PlaygroundSession


logger = logging.getLogger(__name__)

Renderer = Callable[[SimulationResult], str]


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


@dataclass
class RunControl:
    """
    The run button's state machine.

    Properties:
        state: Current RunState
        pending: Completions scheduled but not yet finished
        history: Every state entered, in order (starts with IDLE)
    """

    state: RunState = RunState.IDLE
    pending: int = 0
    history: List[RunState] = field(default_factory=lambda: [RunState.IDLE])

    def _enter(self, state: RunState) -> None:
        self.state = state
        self.history.append(state)

    def start(self) -> None:
        self.pending += 1
        if self.state != RunState.RUNNING:
            self._enter(RunState.RUNNING)

    def complete(self) -> None:
        self._enter(RunState.COMPLETE)
        self.release()

    def release(self) -> None:
        """Drop one pending run; back to IDLE once none remain."""
        self.pending = max(0, self.pending - 1)
        if self.pending == 0:
            self._enter(RunState.IDLE)
        elif self.state != RunState.RUNNING:
            self._enter(RunState.RUNNING)


@dataclass
class OutputDisplay:
    """
    The shared output surface. Whoever writes last is what is shown.

    Properties:
        records: Records currently displayed
        markup: Rendered markup for those records
        transpiled_text: Target-syntax text of the last completed run
        generation: Generation of the run that last wrote the display
            (0 for writes not tied to a scheduled run)
        writes: Number of writes so far
    """

    records: Tuple[OutputRecord, ...] = ()
    markup: str = ""
    transpiled_text: str = ""
    generation: int = 0
    writes: int = 0

    def show(self, records: Tuple[OutputRecord, ...], markup: str,
             transpiled_text: str = "", generation: int = 0) -> None:
        self.records = records
        self.markup = markup
        self.transpiled_text = transpiled_text
        self.generation = generation
        self.writes += 1


@dataclass
class RunTicket:
    """Handle for one scheduled completion."""

    generation: int
    source: str
    done: asyncio.Future
    _handle: Optional[asyncio.TimerHandle] = None
    _scheduler: Optional["RunScheduler"] = None

    def cancel(self) -> bool:
        """Cancel the completion if it has not fired yet."""
        if self.done.done() or self._handle is None:
            return False
        self._handle.cancel()
        self.done.cancel()
        if self._scheduler is not None:
            self._scheduler._cancelled.add(self.generation)
            self._scheduler.control.release()
        logger.info("Run %d cancelled", self.generation)
        return True


class RunScheduler:
    """
    Schedules deferred runs for a session and writes their results.

    Must be used from inside a running asyncio event loop.
    """

    def __init__(self, session: PlaygroundSession,
                 display: Optional[OutputDisplay] = None,
                 renderer: Renderer = render_html) -> None:
        self.session = session
        self.display = display or OutputDisplay()
        self.renderer = renderer
        self.control = RunControl()
        self.generation = 0
        self._tickets: List[RunTicket] = []
        self._cancelled: Set[int] = set()

    def _show_records(self, records: Tuple[OutputRecord, ...], generation: int = 0,
                      transpiled_text: str = "") -> None:
        result = SimulationResult(records=records)
        self.display.show(records, self.renderer(result),
                          transpiled_text=transpiled_text, generation=generation)

    def _show_error(self, exc: Exception, generation: int) -> None:
        """Write a single error record, using render_record if the renderer fails too."""
        error = OutputRecord.error(str(exc))
        try:
            markup = self.renderer(SimulationResult(records=(error,)))
        except Exception:
            logger.exception("Renderer failed on error record")
            markup = render_record(error)
        self.display.show((error,), markup, generation=generation)

    def _latest_generation(self) -> int:
        """Newest scheduled generation, skipping cancelled runs."""
        generation = self.generation
        while generation in self._cancelled:
            generation -= 1
        return generation

    def schedule(self, source: str, delay: Optional[float] = None) -> Optional[RunTicket]:
        """
        Start a run.

        Args:
            source: VibeScript program text
            delay: Seconds until completion (defaults to config.run_delay)

        Returns:
            RunTicket for the pending completion, or None when the source
            was empty and the sentinel was shown without scheduling.
        """
        if not source.strip():
            self._show_records((OutputRecord.sentinel(NO_CODE_TEXT),))
            return None

        loop = asyncio.get_running_loop()
        if delay is None:
            delay = self.session.config.run_delay

        generation = self.generation + 1
        try:
            self._show_records((OutputRecord.sentinel(RUNNING_TEXT),), generation=generation)
        except Exception as e:
            logger.exception("Run %d failed before scheduling", generation)
            self._show_error(e, generation)
            return None

        self.generation = generation
        ticket = RunTicket(generation=generation, source=source,
                           done=loop.create_future(), _scheduler=self)
        self.control.start()
        ticket._handle = loop.call_later(delay, self._complete, ticket)
        self._tickets.append(ticket)
        logger.info("Run %d scheduled in %.2fs", ticket.generation, delay)
        return ticket

    def _complete(self, ticket: RunTicket) -> None:
        try:
            if (self.session.config.overlap_policy == OverlapPolicy.LATEST_ONLY
                    and ticket.generation < self._latest_generation()):
                logger.info("Run %d superseded by run %d, dropped",
                            ticket.generation, self._latest_generation())
                self.control.release()
                return
            result = self.session.run(ticket.source)
            self._show_records(result.simulation.records, generation=ticket.generation,
                               transpiled_text=result.transpiled_text)
            self.control.complete()
            logger.info("Run %d complete: %d record(s)",
                        ticket.generation, len(result.simulation.records))
        except Exception as e:
            logger.exception("Run %d failed", ticket.generation)
            self._show_error(e, ticket.generation)
            self.control.release()
        finally:
            if not ticket.done.done():
                ticket.done.set_result(ticket.generation)

    async def wait_idle(self) -> None:
        """Wait until every scheduled completion has fired or been cancelled."""
        pending = [t.done for t in self._tickets if not t.done.done()]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._tickets = [t for t in self._tickets if not t.done.done()]


__all__ = [
    "OutputDisplay",
    "RunControl",
    "RunScheduler",
    "RunState",
    "RunTicket",
]
