"""Editing session: committed styles, pending edits and their undo history."""

from __future__ import annotations

import logging
from collections import deque

from dialectcss.compiler import Compiler, CompileResult
from dialectcss.config import CompilerConfig
from dialectcss.decoration import DECORATION_RE
from dialectcss.model.rules import RuleMap
from dialectcss.parser import ParseResult

logger = logging.getLogger(__name__)

# selector -> property -> value, None marking a removal
_Pending = dict[str, dict[str, "str | None"]]


class StyleSession:
    """Holds the committed rule map plus pending writes from an editing UI.

    Reads always see the committed map overlaid with pending edits. Every
    write, batch write and reset records a snapshot of the pending edits so it
    can be undone.
    """

    def __init__(self, compiler: Compiler | None = None, config: CompilerConfig | None = None) -> None:
        self.compiler = compiler or Compiler(config)
        self.config = config or self.compiler.config
        self.committed = RuleMap()
        self.decoration_sources: list[str] = []
        self._pending: _Pending = {}
        self._history: deque[_Pending] = deque(maxlen=self.config.history_size)
        self._future: list[_Pending] = []

    # ---- loading ----

    def load(self, text: str) -> ParseResult:
        """Replace the committed state with the rules and decorations of *text*."""
        result = self.compiler.parse(text)
        self.committed = result.rules.copy()
        self.decoration_sources = [m.group(0) for m in DECORATION_RE.finditer(text)]
        self._pending = {}
        self._history.clear()
        self._future.clear()
        logger.info("Loaded %d rule(s)", len(self.committed))
        return result

    # ---- writes ----

    def write(self, selector: str, prop: str, value: str) -> None:
        """Set a pending value; an empty value removes the property."""
        self._checkpoint()
        self._set(selector, prop, value)

    def write_many(self, selector: str, values: dict[str, str]) -> None:
        self._checkpoint()
        for prop, value in values.items():
            self._set(selector, prop, value)

    def _set(self, selector: str, prop: str, value: str) -> None:
        selector, prop = selector.strip(), prop.strip()
        if not selector or not prop:
            raise ValueError("selector and property are required")
        value = (value or "").strip()
        self._pending.setdefault(selector, {})[prop] = value or None

    def reset(self) -> None:
        """Drop all pending edits (undoable)."""
        self._checkpoint()
        self._pending = {}

    # ---- reads ----

    @property
    def pending(self) -> _Pending:
        return {sel: dict(props) for sel, props in self._pending.items()}

    @property
    def has_pending(self) -> bool:
        return any(self._pending.values())

    def merged(self) -> RuleMap:
        result = self.committed.copy()
        for selector, props in self._pending.items():
            for prop, value in props.items():
                if value is None:
                    result.remove_property(selector, prop)
                else:
                    result.set_property(selector, prop, value)
        return result

    def effective_styles(self, selector: str) -> dict[str, str]:
        return self.merged().get(selector) or {}

    def effective_value(self, selector: str, prop: str) -> str | None:
        pending = self._pending.get(selector, {})
        if prop in pending:
            return pending[prop]
        committed = self.committed.get(selector) or {}
        return committed.get(prop)

    # ---- apply / commit ----

    def render(self) -> str:
        return self.compiler.render_localized(self.merged(), self.decoration_sources)

    def apply(self) -> CompileResult:
        """Compile the merged state without committing it."""
        return self.compiler.compile(self.render())

    def commit(self) -> RuleMap:
        self.committed = self.merged()
        self._pending = {}
        self._history.clear()
        self._future.clear()
        return self.committed.copy()

    # ---- history ----

    def _snapshot(self) -> _Pending:
        return {sel: dict(props) for sel, props in self._pending.items()}

    def _checkpoint(self) -> None:
        self._history.append(self._snapshot())
        self._future.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def undo(self) -> bool:
        if not self._history:
            return False
        self._future.append(self._snapshot())
        self._pending = self._history.pop()
        return True

    def redo(self) -> bool:
        if not self._future:
            return False
        self._history.append(self._snapshot())
        self._pending = self._future.pop()
        return True
