from __future__ import annotations
import logging
from collections import deque
from typing import Deque, Iterable, List, Optional

from .config import START_OF_MESSAGE, START_OF_PACKET
from .errors import WindowSizeError

logger = logging.getLogger(__name__)

__all__ = ["START_OF_PACKET", "START_OF_MESSAGE", "find_marker", "find_markers"]


def find_marker(stream: Iterable[str], window_size: int) -> Optional[int]:
    """
    Return the number of characters consumed when the last `window_size`
    characters first become pairwise distinct, or None if that never happens.

    Fixed-size window: a bounded deque evicts the oldest character on admit.
    Complexity: O(n * W) time, O(W) extra space.
    """
    if window_size < 1:
        raise WindowSizeError(f"window_size must be >= 1, got {window_size}")

    window: Deque[str] = deque(maxlen=window_size)
    for pos, ch in enumerate(stream, 1):
        window.append(ch)
        if len(window) == window_size and len(set(window)) == window_size:
            return pos
    return None


def find_markers(text: str, window_size: int) -> List[Optional[int]]:
    """Scan every non-empty line of `text` as its own stream."""
    results: List[Optional[int]] = []
    for line in text.splitlines():
        line = line.rstrip("\r\n")
        if not line:
            continue
        pos = find_marker(line, window_size)
        logger.debug("marker(window=%d) for %d chars -> %s", window_size, len(line), pos)
        results.append(pos)
    return results
