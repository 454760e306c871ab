from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

CHANGE_DIR = "cd"
LIST = "ls"
DIR_ENTRY = "dir"
FILE_ENTRY = "file"

@dataclass
class Node:
    name: str
    path: str
    is_dir: bool
    size: int = 0
    children: List["Node"] = field(default_factory=list)

    def child_dir(self, name: str) -> Optional["Node"]:
        for c in self.children:
            if c.is_dir and c.name == name:
                return c
        return None

@dataclass(frozen=True)
class TraceLine:
    kind: str                 # one of CHANGE_DIR, LIST, DIR_ENTRY, FILE_ENTRY
    name: str = ""            # cd target or entry name
    size: int = 0             # only for FILE_ENTRY

# root first, current directory last
Cursor = Tuple[Node, ...]

@dataclass
class DiskReport:
    root: Node
    files: int
    dirs: int
    bytes_total: int
