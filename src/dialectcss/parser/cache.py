"""Bounded memo of parse results keyed by a content signature."""

from __future__ import annotations

import hashlib
import logging
from collections import OrderedDict
from typing import Callable

from dialectcss.parser.localized import ParseResult

logger = logging.getLogger(__name__)


def signature(text: str) -> str:
    """Short digest of *text* plus its length."""
    digest = hashlib.blake2b(text.encode("utf-8"), digest_size=8).hexdigest()
    return f"{digest}_{len(text)}"


class ResultCache:
    """Least-recently-used cache of :class:`ParseResult` objects.

    Returned results are copies, so callers may mutate the rule map without
    corrupting later hits.
    """

    def __init__(self, max_size: int = 10) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: OrderedDict[str, ParseResult] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get_or_parse(self, text: str, parse: Callable[[str], ParseResult]) -> ParseResult:
        key = signature(text)
        cached = self._entries.get(key)
        if cached is not None:
            self._entries.move_to_end(key)
            self.hits += 1
            return cached.copy()

        self.misses += 1
        result = parse(text)
        self._entries[key] = result.copy()
        if len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted parse cache entry %s", evicted)
        return result

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and signature(text) in self._entries
