"""dialectcss model layer -- public type re-exports."""

from dialectcss.model.decoration import (
    DecorationRule,
    OverflowMode,
    ReconcileDiff,
    SyntheticNode,
)
from dialectcss.model.diagnostic import Diagnostic, Severity
from dialectcss.model.layout import AnchorPosition, LayoutIntent, LayoutMode
from dialectcss.model.rules import PropertyMap, RuleMap

__all__ = [
    # rules
    "PropertyMap",
    "RuleMap",
    # diagnostics
    "Diagnostic",
    "Severity",
    # layout
    "AnchorPosition",
    "LayoutIntent",
    "LayoutMode",
    # decoration
    "DecorationRule",
    "OverflowMode",
    "ReconcileDiff",
    "SyntheticNode",
]
