"""Two-state coordinator deciding when the compile pipeline runs.

``IDLE``: only decorations for newly appeared elements are materialized.
``ACTIVE``: every debounced input change recompiles the latest text.

Any focus, edit or paste moves the coordinator to ``ACTIVE`` and re-arms the
inactivity timer. When that timer elapses the coordinator returns to
``IDLE`` and removes leftover decoration nodes if the current text no longer
contains decoration syntax.

Nothing runs on its own: the host calls :meth:`Coordinator.poll` from its
event loop (or a test calls it with a fake clock).
"""

from __future__ import annotations

import contextlib
import logging
import time
from enum import Enum
from typing import Callable, Iterable, Iterator

from dialectcss.compiler import Compiler, CompileResult
from dialectcss.config import CompilerConfig
from dialectcss.coordinator.timers import TimerSlot
from dialectcss.decoration import Element
from dialectcss.events import (
    CoordinatorActivated,
    CoordinatorIdled,
    DecorationsCleared,
    EventBus,
    InputChanged,
)

logger = logging.getLogger(__name__)


class CoordinatorState(Enum):
    IDLE = "idle"
    ACTIVE = "active"


class Coordinator:
    def __init__(
        self,
        compiler: Compiler,
        config: CompilerConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
        bus: EventBus | None = None,
        display: Callable[[str], None] | None = None,
    ) -> None:
        self.compiler = compiler
        self.config = config or compiler.config
        self.clock = clock
        self.bus = bus or compiler.bus
        self.display = display
        self.state = CoordinatorState.IDLE
        self.text = ""
        self.last_result: CompileResult | None = None
        self._debounce = TimerSlot("debounce")
        self._idle = TimerSlot("idle")
        self._suppressed = 0
        self._last_activity: float | None = None

    # ---- input events ----

    def on_focus(self) -> None:
        self._activate("focus")

    def on_input(self, text: str) -> None:
        self._on_text(text, "input")

    def on_paste(self, text: str) -> None:
        self._on_text(text, "paste")

    def _on_text(self, text: str, reason: str) -> None:
        if self._suppressed:
            return
        self.text = text
        self.bus.emit(InputChanged(len(text)))
        now = self._activate(reason)
        self._debounce.arm(now, self.config.debounce_seconds)

    def on_elements_added(self, elements: Iterable[Element]) -> None:
        """Decorate elements that appeared on the page; runs in either state."""
        self.compiler.decorations.process_new_elements(elements)

    @contextlib.contextmanager
    def suppress_input(self) -> Iterator[None]:
        """Ignore input events while the host redisplays regenerated text."""
        self._suppressed += 1
        try:
            yield
        finally:
            self._suppressed -= 1

    def _activate(self, reason: str) -> float:
        now = self.clock()
        self._last_activity = now
        if self.state is CoordinatorState.IDLE:
            self.state = CoordinatorState.ACTIVE
            logger.debug("Coordinator active (%s)", reason)
            self.bus.emit(CoordinatorActivated(reason))
        self._idle.arm(now, self.config.idle_timeout_seconds)
        return now

    # ---- timers ----

    def poll(self, now: float | None = None) -> CompileResult | None:
        """Fire due timers and flush queued decoration work.

        Returns the compile result when the debounce timer fired.
        """
        now = self.clock() if now is None else now
        result = None
        if self._debounce.fire_if_due(now):
            result = self._run()
        if self._idle.fire_if_due(now):
            self._go_idle(now)
        self.compiler.decorations.frames.flush()
        return result

    def _run(self) -> CompileResult:
        # Always the latest text, not the text seen when the timer was armed.
        result = self.compiler.compile(self.text)
        self.last_result = result
        if self.display is not None and result.applied and result.localized != self.text:
            with self.suppress_input():
                self.display(result.localized)
            self.text = result.localized
        return result

    def _go_idle(self, now: float) -> None:
        idle_for = now - (self._last_activity if self._last_activity is not None else now)
        self.state = CoordinatorState.IDLE
        logger.debug("Coordinator idle after %.2fs", idle_for)
        self.bus.emit(CoordinatorIdled(idle_for))

        engine = self.compiler.decorations
        if not engine.has_decoration_syntax(self.text) and (engine.rules or engine.node_count()):
            removed = engine.clear_all()
            self.bus.emit(DecorationsCleared(removed))

    # ---- lifecycle ----

    def status(self) -> dict[str, object]:
        now = self.clock()
        return {
            "state": self.state.value,
            "debounce_pending": self._debounce.armed,
            "idle_in": self._idle.remaining(now),
            "text_length": len(self.text),
            "decorations": self.compiler.decorations.stats(),
        }

    def destroy(self) -> None:
        self._debounce.cancel()
        self._idle.cancel()
        self.state = CoordinatorState.IDLE
        self.compiler.decorations.clear_all()
