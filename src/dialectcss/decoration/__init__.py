from dialectcss.decoration.engine import DECORATION_RE, DecorationEngine, ProcessResult, diff_rules
from dialectcss.decoration.frames import FrameQueue
from dialectcss.decoration.page import Element, InMemoryPage, Page, PageElement

__all__ = [
    "DECORATION_RE",
    "DecorationEngine",
    "Element",
    "FrameQueue",
    "InMemoryPage",
    "Page",
    "PageElement",
    "ProcessResult",
    "diff_rules",
]
