from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple
from .models import Node

@dataclass
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def short_side(self) -> float:
        return min(self.w, self.h)

@dataclass
class Tile:
    rect: Rect
    node: Node

def _aspect_worst(areas: Sequence[float], side: float) -> float:
    # worst aspect ratio of a strip laid along `side`
    if not areas:
        return float("inf")
    total = sum(areas)
    side2 = side * side
    return max(side2 * max(areas) / (total * total), (total * total) / (side2 * min(areas)))

def _place_strip(areas: Sequence[float], free: Rect) -> Tuple[List[Rect], Rect]:
    total = sum(areas)
    placed: List[Rect] = []
    if free.w >= free.h:
        # column on the left edge
        w = total / free.h if free.h > 0 else 0.0
        y = free.y
        for a in areas:
            h = a / w if w > 0 else 0.0
            placed.append(Rect(free.x, y, w, h))
            y += h
        return placed, Rect(free.x + w, free.y, max(0.0, free.w - w), free.h)
    # row on the top edge
    h = total / free.w if free.w > 0 else 0.0
    x = free.x
    for a in areas:
        w = a / h if h > 0 else 0.0
        placed.append(Rect(x, free.y, w, h))
        x += w
    return placed, Rect(free.x, free.y + h, free.w, max(0.0, free.h - h))

def squarify(nodes: Sequence[Node], x: float, y: float, w: float, h: float) -> List[Tile]:
    """Squarified treemap: biggest entries first, strips grown while the
    worst aspect ratio keeps improving. Zero-sized entries are skipped."""
    items = sorted((n for n in nodes if n.size > 0), key=lambda n: n.size, reverse=True)
    if not items or w <= 0 or h <= 0:
        return []
    total = sum(n.size for n in items)
    scale = (w * h) / total

    tiles: List[Tile] = []
    free = Rect(x, y, w, h)
    strip: List[Node] = []
    for n in items:
        side = free.short_side or 1.0
        cur = [s.size * scale for s in strip]
        if strip and _aspect_worst(cur + [n.size * scale], side) > _aspect_worst(cur, side):
            placed, free = _place_strip(cur, free)
            tiles.extend(Tile(r, s) for r, s in zip(placed, strip))
            strip = []
        strip.append(n)

    placed, free = _place_strip([s.size * scale for s in strip], free)
    tiles.extend(Tile(r, s) for r, s in zip(placed, strip))
    return tiles

def top_children_for_view(node: Node, limit: int = 300) -> List[Node]:
    kids = [c for c in node.children if c.size > 0]
    kids.sort(key=lambda n: n.size, reverse=True)
    return kids[:limit]
