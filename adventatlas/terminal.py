from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .models import (
    CHANGE_DIR, DIR_ENTRY, FILE_ENTRY, LIST, Cursor, Node, TraceLine
)
from .errors import MalformedLineError, NavigationError
from .aggregate import compute_sizes

logger = logging.getLogger(__name__)

ROOT_NAME = "/"


def new_root() -> Node:
    return Node(name=ROOT_NAME, path=ROOT_NAME, is_dir=True, size=0, children=[])


def _join(parent: Node, name: str) -> str:
    return parent.path.rstrip("/") + "/" + name


def parse_trace_line(line: str, lineno: Optional[int] = None) -> TraceLine:
    """Classify one line of the terminal session.

    Accepted forms: ``$ cd WORD``, ``$ ls``, ``dir NAME`` and ``SIZE NAME``.
    """
    tokens = line.split()
    if not tokens:
        raise MalformedLineError(line, lineno)

    if tokens[0] == "$":
        if len(tokens) == 3 and tokens[1] == "cd":
            return TraceLine(CHANGE_DIR, tokens[2])
        if len(tokens) == 2 and tokens[1] == "ls":
            return TraceLine(LIST)
        raise MalformedLineError(line, lineno)

    if len(tokens) != 2:
        raise MalformedLineError(line, lineno)

    head, name = tokens
    if head == "dir":
        return TraceLine(DIR_ENTRY, name)
    if head.isascii() and head.isdigit():
        return TraceLine(FILE_ENTRY, name, int(head))
    raise MalformedLineError(line, lineno)


def apply_line(root: Node, cursor: Cursor, line: TraceLine) -> Cursor:
    """Apply one parsed line to the tree and return the new cursor."""
    cwd = cursor[-1]

    if line.kind == CHANGE_DIR:
        if line.name == ROOT_NAME:
            return (root,)
        if line.name == "..":
            if len(cursor) == 1:
                raise NavigationError("cd .. at the root: no parent directory")
            return cursor[:-1]
        target = cwd.child_dir(line.name)
        if target is None:
            raise NavigationError(f"cd {line.name}: no such directory in {cwd.path}")
        return cursor + (target,)

    if line.kind == DIR_ENTRY:
        if cwd.child_dir(line.name) is None:
            cwd.children.append(Node(name=line.name, path=_join(cwd, line.name),
                                     is_dir=True, size=0, children=[]))
        return cursor

    if line.kind == FILE_ENTRY:
        cwd.children.append(Node(name=line.name, path=_join(cwd, line.name),
                                 is_dir=False, size=line.size, children=[]))
        return cursor

    # LIST only announces the entries that follow
    return cursor


def replay(lines: Iterable[str]) -> Node:
    """Build a tree from raw trace lines, sizes not yet aggregated."""
    root = new_root()
    cursor: Cursor = (root,)
    for lineno, raw in enumerate(lines, 1):
        if not raw.strip():
            continue
        cursor = apply_line(root, cursor, parse_trace_line(raw, lineno))
    return root


def build_tree(text: str) -> Node:
    root = replay(text.splitlines())
    total = compute_sizes(root)
    logger.debug("trace parsed: %d bytes under %s", total, root.path)
    return root


def render_listing(node: Node, sizes: bool = False) -> str:
    """`ls` output for a directory; `sizes` mimics `ls -l`."""
    out: List[str] = []
    for c in node.children:
        if c.is_dir:
            out.append(f"dir {c.name}")
        else:
            out.append(f"{c.name} {c.size}" if sizes else c.name)
    return "\n".join(out)


def render_tree(root: Node, indent: str = "  ") -> str:
    out: List[str] = []
    stack = [(root, 0)]
    while stack:
        n, depth = stack.pop()
        pad = indent * depth
        if n.is_dir:
            out.append(f"{pad}- {n.name} (dir)")
            stack.extend((c, depth + 1) for c in reversed(n.children))
        else:
            out.append(f"{pad}- {n.name} (file, size={n.size})")
    return "\n".join(out)


def find_dir(root: Node, path: str) -> Node:
    """Resolve an absolute path such as ``/a/e`` to a directory of the tree."""
    node = root
    for part in path.strip("/").split("/"):
        if not part:
            continue
        child = node.child_dir(part)
        if child is None:
            raise NavigationError(f"no such directory: {path}")
        node = child
    return node
