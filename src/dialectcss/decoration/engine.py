"""Decoration rule engine: extracts ``@element:name { ... }`` blocks and keeps
synthetic nodes on the page in step with them.

Every call to :meth:`DecorationEngine.process` diffs the new rule table
against the previous one by rule id. Removed rules lose their nodes, added
rules gain one node per matching element, and changed rules are removed and
re-added. Node creation and removal is queued on a :class:`FrameQueue` and
only touches the page when the queue is flushed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from dialectcss.decoration.frames import FrameQueue
from dialectcss.decoration.page import Element, Page
from dialectcss.dictionary import AliasDictionary, default_dictionary
from dialectcss.events import DecorationsReconciled, EventBus
from dialectcss.model.decoration import (
    DecorationRule,
    OverflowMode,
    ReconcileDiff,
    SyntheticNode,
)
from dialectcss.model.diagnostic import Diagnostic, Severity
from dialectcss.parser.localized import DECLARATION_SEPARATORS, split_declaration
from dialectcss.translate import ValueTranslator
from dialectcss.translate.functions import split_top_level

logger = logging.getLogger(__name__)

__all__ = ["DecorationEngine", "ProcessResult", "diff_rules", "DECORATION_RE"]

DECORATION_RE = re.compile(
    r"""
    @([^:：{}()]+)    # element alias or selector
    [：:]
    ([^{]+?)\s*       # decoration name
    \{([^}]*)\}       # body
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of one :meth:`DecorationEngine.process` call."""

    diff: ReconcileDiff
    remainder: str
    rules: tuple[DecorationRule, ...] = ()
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def sources(self) -> list[str]:
        return [rule.source for rule in self.rules]


def diff_rules(
    previous: Mapping[str, DecorationRule], current: Mapping[str, DecorationRule]
) -> ReconcileDiff:
    """Rule ids removed, added and changed between two rule tables."""
    removed = tuple(rid for rid in previous if rid not in current)
    added = tuple(rid for rid in current if rid not in previous)
    changed = tuple(
        rid for rid, rule in current.items()
        if rid in previous and previous[rid].styles != rule.styles
    )
    return ReconcileDiff(added=added, removed=removed, changed=changed)


class DecorationEngine:
    """Owns the decoration rule table and the synthetic nodes built from it.

    ``_nodes`` records every node created for a rule id; ``_membership``
    records which rule ids are materialized on which element handle. The
    membership record only prevents duplicates; the rule table decides what
    should exist.
    """

    def __init__(
        self,
        page: Page | None = None,
        dictionary: AliasDictionary | None = None,
        translator: ValueTranslator | None = None,
        bus: EventBus | None = None,
        frames: FrameQueue | None = None,
    ) -> None:
        self.page = page
        self.dictionary = dictionary or default_dictionary()
        self.translator = translator or ValueTranslator(self.dictionary)
        self.bus = bus
        self.frames = frames or FrameQueue()
        self.rules: dict[str, DecorationRule] = {}
        self._nodes: dict[str, list[tuple[Element, SyntheticNode]]] = {}
        self._membership: dict[str, set[str]] = {}
        self._last_text: str | None = None
        self._last_result: ProcessResult | None = None

    # ---- extraction ----

    @staticmethod
    def has_decoration_syntax(text: str) -> bool:
        return bool(DECORATION_RE.search(text))

    @staticmethod
    def strip(text: str) -> str:
        """*text* with every complete decoration block removed.

        Newlines inside removed blocks are kept so line numbers still match.
        """
        return DECORATION_RE.sub(lambda m: "\n" * m.group(0).count("\n"), text)

    def extract(self, text: str) -> tuple[dict[str, DecorationRule], list[Diagnostic]]:
        rules: dict[str, DecorationRule] = {}
        diagnostics: list[Diagnostic] = []
        for match in DECORATION_RE.finditer(text):
            element_name = match.group(1).strip()
            decoration_name = match.group(2).strip()
            line = text.count("\n", 0, match.start()) + 1
            styles = self._parse_body(match.group(3), line, element_name, diagnostics)
            rule = DecorationRule(
                id=f"{element_name}-{decoration_name}",
                element_name=element_name,
                decoration_name=decoration_name,
                selector=self.resolve_selector(element_name),
                styles=styles,
                source=match.group(0),
            )
            rules[rule.id] = rule
        return rules, diagnostics

    def resolve_selector(self, element_name: str) -> str:
        selector = self.dictionary.resolve_element(element_name)
        if selector != element_name:
            return selector
        if any(ch in element_name for ch in ".#["):
            return element_name
        return f".{element_name}"

    def _parse_body(
        self, body: str, line: int, element_name: str, diagnostics: list[Diagnostic]
    ) -> dict[str, str]:
        styles: dict[str, str] = {}
        for chunk in split_top_level(body, DECLARATION_SEPARATORS + "\n"):
            if not chunk:
                continue
            pair = split_declaration(chunk)
            if pair is None:
                continue
            name, raw = pair
            prop = self.dictionary.resolve_property(name)
            if prop == name and not self.dictionary.looks_like_property(name):
                message = f"Unknown decoration property {name!r}"
                logger.warning("line %d: %s", line, message)
                diagnostics.append(Diagnostic(
                    rule="unknown_decoration_property", severity=Severity.WARNING,
                    message=message, line=line, selector=element_name,
                ))
                continue
            value = self.translator.translate(raw, prop)
            if prop and value:
                styles[prop] = value
        return styles

    # ---- reconciliation ----

    def process(self, text: str) -> ProcessResult:
        """Extract rules from *text* and queue the node changes they imply.

        Processing the same text twice in a row is a no-op.
        """
        if text == self._last_text and self._last_result is not None:
            return ProcessResult(
                ReconcileDiff(), self._last_result.remainder,
                self._last_result.rules, list(self._last_result.diagnostics),
            )
        new_rules, diagnostics = self.extract(text)
        diff = diff_rules(self.rules, new_rules)
        previous = self.rules
        self.rules = new_rules

        for rid in diff.removed:
            self._schedule_remove(previous[rid])
        for rid in diff.changed:
            self._schedule_remove(previous[rid])
            self._schedule_add(rid)
        for rid in diff.added:
            self._schedule_add(rid)

        if not diff.is_empty:
            logger.debug(
                "Decorations reconciled: +%d -%d ~%d",
                len(diff.added), len(diff.removed), len(diff.changed),
            )
            if self.bus is not None:
                self.bus.emit(DecorationsReconciled(diff.added, diff.removed, diff.changed))

        result = ProcessResult(diff, self.strip(text), tuple(new_rules.values()), diagnostics)
        self._last_text = text
        self._last_result = result
        return result

    def _schedule_remove(self, rule: DecorationRule) -> None:
        self.frames.schedule(lambda: self._remove_nodes(rule.id))

    def _schedule_add(self, rule_id: str) -> None:
        self.frames.schedule(lambda: self._materialize_current(rule_id))

    def _materialize_current(self, rule_id: str) -> None:
        # The rule may have been removed again before the frame ran.
        rule = self.rules.get(rule_id)
        if rule is None or self.page is None:
            return
        for element in self.page.query(rule.selector):
            self._attach(rule, element)

    def _remove_nodes(self, rule_id: str) -> None:
        for element, node in self._nodes.pop(rule_id, []):
            element.remove_child(node)
            members = self._membership.get(element.handle)
            if members is not None:
                members.discard(rule_id)
                if not members:
                    del self._membership[element.handle]

    def _attach(self, rule: DecorationRule, element: Element) -> None:
        members = self._membership.setdefault(element.handle, set())
        if rule.id in members:
            return
        node = SyntheticNode(rule.id, rule.decoration_name, rule.class_name, rule.node_styles)
        if rule.overflow_mode is OverflowMode.ALLOW:
            element.style["overflow"] = "visible"
        else:
            if rule.styles.get("position") == "absolute" and \
                    element.style.get("position", "static") == "static":
                element.style["position"] = "relative"
            element.style["overflow"] = "hidden"
        element.append_child(node)
        members.add(rule.id)
        self._nodes.setdefault(rule.id, []).append((element, node))

    # ---- page lifecycle ----

    def process_new_elements(self, elements: Iterable[Element]) -> None:
        """Queue materialization of every current rule on newly appeared elements."""
        elements = list(elements)

        def run() -> None:
            for rule in self.rules.values():
                for element in elements:
                    if element.matches(rule.selector):
                        self._attach(rule, element)

        self.frames.schedule(run)

    def forget_element(self, handle: str) -> None:
        """Drop bookkeeping for an element that left the page."""
        self._membership.pop(handle, None)
        for rule_id in list(self._nodes):
            kept = [(el, node) for el, node in self._nodes[rule_id] if el.handle != handle]
            if kept:
                self._nodes[rule_id] = kept
            else:
                del self._nodes[rule_id]

    def clear_all(self) -> int:
        """Remove every synthetic node and forget all rules immediately."""
        removed = 0
        for rule_id in list(self._nodes):
            removed += len(self._nodes[rule_id])
            self._remove_nodes(rule_id)
        self._membership.clear()
        self.rules = {}
        self.frames.clear()
        self._last_text = None
        self._last_result = None
        if removed:
            logger.info("Cleared %d decoration node(s)", removed)
        return removed

    def node_count(self) -> int:
        return sum(len(entries) for entries in self._nodes.values())

    def nodes_for(self, rule_id: str) -> list[SyntheticNode]:
        return [node for _, node in self._nodes.get(rule_id, [])]

    def stats(self) -> dict[str, int]:
        return {
            "rules": len(self.rules),
            "nodes": self.node_count(),
            "decorated_elements": len(self._membership),
            "pending_operations": self.frames.pending,
        }
