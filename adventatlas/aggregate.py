from __future__ import annotations
import logging
from typing import Iterator, Optional

from .models import DiskReport, Node
from .errors import NoCandidateError

logger = logging.getLogger(__name__)


def compute_sizes(node: Node) -> int:
    """Store the recursive size on every directory below `node` and return it.

    The queries below call it before reading sizes, so trees grown with
    `replay` or `apply_line` never answer from stale values.
    """
    if not node.is_dir:
        return node.size
    # post-order: a directory is summed once all its children are
    stack = [(node, False)]
    while stack:
        n, done = stack.pop()
        if done:
            n.size = sum(c.size for c in n.children)
            continue
        stack.append((n, True))
        stack.extend((c, False) for c in n.children if c.is_dir)
    return node.size


def iter_dirs(node: Node) -> Iterator[Node]:
    """Every directory below `node`, `node` included, depth-first pre-order."""
    stack = [node]
    while stack:
        n = stack.pop()
        if not n.is_dir:
            continue
        yield n
        stack.extend(c for c in reversed(n.children) if c.is_dir)


def sum_of_dirs_at_most(root: Node, threshold: int) -> int:
    compute_sizes(root)
    # nested directories are counted once per ancestor on purpose
    return sum(d.size for d in iter_dirs(root) if d.size <= threshold)


def space_needed(root: Node, capacity: int, required: int) -> int:
    compute_sizes(root)
    free = capacity - root.size
    return max(0, required - free)


def smallest_dir_at_least(root: Node, capacity: int, required: int) -> Node:
    needed = space_needed(root, capacity, required)
    best: Optional[Node] = None
    for d in iter_dirs(root):
        if d.size >= needed and (best is None or d.size < best.size):
            best = d
    if best is None:
        raise NoCandidateError(
            f"no directory frees {needed} bytes (used {root.size} of {capacity})"
        )
    logger.debug("need %d bytes, smallest candidate %s (%d)", needed, best.path, best.size)
    return best


def summarize(root: Node) -> DiskReport:
    files = 0
    dirs = 0
    total = 0
    stack = [root]
    while stack:
        n = stack.pop()
        if n.is_dir:
            dirs += 1
            stack.extend(n.children)
        else:
            files += 1
            total += n.size
    return DiskReport(root=root, files=files, dirs=dirs, bytes_total=total)
