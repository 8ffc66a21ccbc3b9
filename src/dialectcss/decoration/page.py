"""Page collaborator protocols plus an in-memory page for tests and demos."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableMapping, Protocol

from dialectcss.model.decoration import SyntheticNode


class Element(Protocol):
    """A live element decorations can be attached to."""

    handle: str
    style: MutableMapping[str, str]

    def matches(self, selector: str) -> bool: ...

    def append_child(self, node: SyntheticNode) -> None: ...

    def remove_child(self, node: SyntheticNode) -> None: ...


class Page(Protocol):
    def query(self, selector: str) -> list[Element]: ...


@dataclass
class PageElement:
    """In-memory element matched by the literal selectors it was registered with."""

    handle: str
    selectors: frozenset[str] = frozenset()
    style: dict[str, str] = field(default_factory=dict)
    children: list[SyntheticNode] = field(default_factory=list)

    def matches(self, selector: str) -> bool:
        if selector in self.selectors:
            return True
        parts = [part.strip() for part in selector.split(",")]
        return len(parts) > 1 and any(part in self.selectors for part in parts)

    def append_child(self, node: SyntheticNode) -> None:
        self.children.append(node)

    def remove_child(self, node: SyntheticNode) -> None:
        if node in self.children:
            self.children.remove(node)


class InMemoryPage:
    def __init__(self) -> None:
        self._elements: dict[str, PageElement] = {}

    def add(self, handle: str, *selectors: str, style: dict[str, str] | None = None) -> PageElement:
        element = PageElement(handle, frozenset(selectors), dict(style or {}))
        self._elements[handle] = element
        return element

    def remove(self, handle: str) -> PageElement | None:
        return self._elements.pop(handle, None)

    def get(self, handle: str) -> PageElement | None:
        return self._elements.get(handle)

    def query(self, selector: str) -> list[PageElement]:
        return [el for el in self._elements.values() if el.matches(selector)]

    def elements(self) -> list[PageElement]:
        return list(self._elements.values())
