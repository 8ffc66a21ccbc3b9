"""Paint batching: node mutations wait in a queue until the next frame."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable

logger = logging.getLogger(__name__)


class FrameQueue:
    """FIFO of deferred operations applied together by :meth:`flush`.

    Operations are plain callables; each one reads page state when it runs,
    not when it was scheduled.
    """

    def __init__(self) -> None:
        self._ops: deque[Callable[[], None]] = deque()

    def schedule(self, op: Callable[[], None]) -> None:
        self._ops.append(op)

    def flush(self) -> int:
        """Run every queued operation, including ones scheduled during the flush."""
        count = 0
        while self._ops:
            op = self._ops.popleft()
            op()
            count += 1
        if count:
            logger.debug("Flushed %d decoration operation(s)", count)
        return count

    def clear(self) -> None:
        self._ops.clear()

    @property
    def pending(self) -> int:
        return len(self._ops)

    def __len__(self) -> int:
        return len(self._ops)
