from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, List, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel, QTreeWidget,
    QTreeWidgetItem, QSplitter, QGraphicsView, QGraphicsScene, QGraphicsRectItem,
    QGraphicsTextItem, QMessageBox, QAbstractItemView
)

from .models import Node
from .aggregate import compute_sizes, iter_dirs, smallest_dir_at_least, sum_of_dirs_at_most
from .errors import NoCandidateError
from .inputs import DEMO_PROMPT, get_input
from .terminal import build_tree
from .treemap import squarify, top_children_for_view
from .utils import format_bytes

logger = logging.getLogger(__name__)

APP_NAME = "AdventAtlasPy"

DARK_QSS = r"""
* { font-family: "Segoe UI"; font-size: 12px; }
QMainWindow { background: #0b0e14; }
QWidget { color: #dbe6ff; }
QTreeWidget, QGraphicsView {
    background: #121826;
    border: 1px solid #25314a;
    border-radius: 10px;
}
QHeaderView::section {
    background: #0e1320;
    color: #9fb6ea;
    padding: 6px 8px;
    border: none;
}
"""

SMALL_DIR_COLOR = QColor(56, 209, 197, 235)
CANDIDATE_COLOR = QColor(255, 159, 67, 245)


class TreemapView(QGraphicsView):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRenderHints(QPainter.Antialiasing | QPainter.TextAntialiasing)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)

    def wheelEvent(self, ev):
        if ev.modifiers() & Qt.ControlModifier:
            factor = 1.15 if ev.angleDelta().y() > 0 else 1 / 1.15
            self.scale(factor, factor)
            ev.accept()
            return
        super().wheelEvent(ev)


class TreemapTile(QGraphicsRectItem):
    def __init__(self, x: float, y: float, w: float, h: float, node: Node,
                 pct: float, on_click: Callable[[Node], None]):
        super().__init__(x, y, w, h)
        self.node = node
        self._on_click = on_click
        self._base_pen = QPen(QColor(10, 14, 22, 140), 1)
        self._hover_pen = QPen(QColor(255, 255, 255, 210), 2)
        self.setPen(self._base_pen)
        self.setAcceptHoverEvents(True)
        kind = "dir" if node.is_dir else "file"
        self.setToolTip(f"<b>{node.name}</b> ({kind})<br>{node.size} bytes • {pct:.2f}%<br>{node.path}")

    def hoverEnterEvent(self, ev):
        self.setPen(self._hover_pen)
        self.setZValue(10)
        super().hoverEnterEvent(ev)

    def hoverLeaveEvent(self, ev):
        self.setPen(self._base_pen)
        self.setZValue(0)
        super().hoverLeaveEvent(ev)

    def mousePressEvent(self, ev):
        if ev.button() == Qt.LeftButton:
            self._on_click(self.node)
            ev.accept()
            return
        super().mousePressEvent(ev)


class MainWindow(QMainWindow):
    def __init__(self, root: Node, threshold: int, capacity: int, required: int):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME}: {root.path}")
        self.resize(1200, 760)
        self.root = root
        self.threshold = threshold
        compute_sizes(root)
        self._small = {d.path for d in iter_dirs(root) if d.size <= threshold}
        try:
            self.candidate: Optional[Node] = smallest_dir_at_least(root, capacity, required)
        except NoCandidateError as e:
            logger.warning("%s", e)
            self.candidate = None
        self._path_to_item: Dict[str, QTreeWidgetItem] = {}

        part1 = sum_of_dirs_at_most(root, threshold)
        part2 = f"{self.candidate.path} ({self.candidate.size})" if self.candidate else "none"
        self.summary = QLabel(
            f"Total used: <b>{root.size}</b> ({format_bytes(root.size)}) &nbsp;•&nbsp; "
            f"dirs ≤ {threshold}: <b>{part1}</b> &nbsp;•&nbsp; "
            f"delete to free {required}: <b>{part2}</b>"
        )

        self.tree = QTreeWidget()
        self.tree.setHeaderLabels(["Name", "Size"])
        self.tree.setSelectionMode(QAbstractItemView.SingleSelection)
        self.tree.itemSelectionChanged.connect(self.on_tree_select)

        self.treemap_scene = QGraphicsScene(self)
        self.treemap_view = TreemapView()
        self.treemap_view.setScene(self.treemap_scene)

        split = QSplitter(Qt.Horizontal)
        split.addWidget(self.tree)
        split.addWidget(self.treemap_view)
        split.setStretchFactor(1, 3)

        central = QWidget()
        lay = QVBoxLayout(central)
        lay.addWidget(self.summary)
        lay.addWidget(split, 1)
        self.setCentralWidget(central)

        self.populate_tree(root)
        self._select(root)

    def populate_tree(self, node: Node):
        self.tree.clear()
        self._path_to_item = {}

        stack: List[Tuple[Optional[QTreeWidgetItem], Node]] = [(None, node)]
        while stack:
            parent_item, n = stack.pop()
            it = QTreeWidgetItem([n.name, str(n.size)])
            it.setData(0, Qt.UserRole, n)
            it.setToolTip(0, n.path)
            if parent_item is None:
                self.tree.addTopLevelItem(it)
            else:
                parent_item.addChild(it)
            if n.is_dir:
                it.setForeground(0, QBrush(self.pick_color(n)))
                self._path_to_item[n.path] = it
                # reversed so children are added in listing order
                stack.extend((it, c) for c in reversed(n.children))

        self.tree.expandToDepth(1)

    def pick_color(self, n: Node) -> QColor:
        if self.candidate is not None and n is self.candidate:
            return CANDIDATE_COLOR
        if n.is_dir and n.path in self._small:
            return SMALL_DIR_COLOR
        col = QColor()
        col.setHsv(hash(n.path) % 360, 140 if n.is_dir else 90, 210)
        col.setAlpha(235)
        return col

    def _select(self, node: Node):
        it = self._path_to_item.get(node.path)
        if it:
            self.tree.setCurrentItem(it)
            self.tree.scrollToItem(it, QAbstractItemView.PositionAtCenter)

    def on_tree_select(self):
        items = self.tree.selectedItems()
        if not items:
            return
        n: Node = items[0].data(0, Qt.UserRole)
        if n is not None and n.is_dir:
            self.render_treemap(n)

    def render_treemap(self, node: Node):
        self.treemap_scene.clear()
        vp = self.treemap_view.viewport().size()
        W = max(600, int(vp.width()) - 8)
        H = max(360, int(vp.height()) - 8)
        total = max(1, node.size)

        tiles: List[TreemapTile] = []
        for tile in squarify(top_children_for_view(node), 0, 0, W, H):
            r, child = tile.rect, tile.node
            if r.w < 2 or r.h < 2:
                continue
            pct = child.size * 100.0 / total
            item = TreemapTile(r.x, r.y, r.w, r.h, child, pct, self._select)
            item.setBrush(QBrush(self.pick_color(child)))
            tiles.append(item)
            self.treemap_scene.addItem(item)

            if r.w >= 90 and r.h >= 40:
                label = QGraphicsTextItem()
                label.setDefaultTextColor(QColor("#f4f7ff"))
                label.setTextWidth(r.w - 12)
                label.setHtml(f"<b>{child.name}</b><br>{child.size} • {pct:.1f}%")
                label.setPos(r.x + 6, r.y + 4)
                label.setZValue(20)
                self.treemap_scene.addItem(label)

        self.treemap_scene.setSceneRect(0, 0, W, H)
        self.treemap_view.fitInView(self.treemap_scene.sceneRect(), Qt.KeepAspectRatio)
        logger.debug("treemap of %s: %d tiles", node.path, len(tiles))


def ask_demo_mode_dialog(parent=None) -> bool:
    answer = QMessageBox.question(parent, APP_NAME, DEMO_PROMPT.strip(),
                                  QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
    return answer == QMessageBox.Yes


def run(root: Optional[Node] = None, dirname: Optional[str] = None, *,
        threshold: int, capacity: int, required: int) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setStyleSheet(DARK_QSS)
    if root is None:
        root = build_tree(get_input(dirname, demo=ask_demo_mode_dialog()))
    w = MainWindow(root, threshold, capacity, required)
    w.show()
    return app.exec()
