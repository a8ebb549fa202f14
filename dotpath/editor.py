"""Interaction state for placing dots, drawing lines and finding paths."""

from __future__ import annotations

from enum import Enum
from itertools import pairwise

from .graph import INF, Dot, Graph, GraphFullError, PathResult

DRAW_DOTS = "점 그리기"
DRAW_LINES = "직선 그리기"
FIND_PATH = "최단 경로 찾기"
QUIT = "종료"
MENU_TITLES = (DRAW_DOTS, DRAW_LINES, FIND_PATH, QUIT)


class Mode(Enum):
    """The tool chosen from the menu."""

    NONE = "none"
    DOT = "dot"
    LINE = "line"
    PATH = "path"


class Editor:
    """Turns menu choices and mouse clicks into changes to a graph."""

    def __init__(self, graph: Graph | None = None) -> None:
        self.graph = graph if graph is not None else Graph()
        self.mode = Mode.NONE
        self.quit_requested = False
        self.selected: list[Dot] = []
        self.path: PathResult | None = None
        self.end: int | None = None
        self._pressed = False
        self._handled = False
        self._position = (0, 0)

    def choose(self, title: str) -> None:
        """Act on a menu item; unknown titles are ignored."""
        if title == DRAW_DOTS:
            self.mode = Mode.DOT
        elif title == DRAW_LINES:
            self.mode = Mode.LINE
        elif title == FIND_PATH:
            self.mode = Mode.PATH
            self.path = None
            self.end = None
        elif title == QUIT:
            self.quit_requested = True

    def press(self, x: int, y: int) -> None:
        """Record a mouse press at the given point."""
        self._pressed = True
        self._handled = False
        self._position = (x, y)

    def release(self) -> None:
        """Record that the mouse button was let go."""
        self._pressed = False

    def update(self) -> None:
        """Handle the latest press once, according to the current mode."""
        if not self._pressed or self._handled:
            return
        if self.mode is Mode.DOT:
            try:
                self.graph.add_dot(*self._position)
            except GraphFullError as error:
                print(error)
        elif self.mode in (Mode.LINE, Mode.PATH):
            self._select()
        else:
            return
        self._handled = True

    def _select(self) -> None:
        dot = self.graph.dot_at(*self._position)
        if dot is not None:
            self.selected.append(dot)
        if len(self.selected) == 2:
            first, second = self.selected
            self.selected = []
            if first.idx == second.idx:
                return
            if self.mode is Mode.LINE:
                self.graph.add_line(first.idx, second.idx)
            else:
                self.path = self.graph.shortest_paths(first.idx)
                self.end = second.idx

    def path_length(self) -> int | None:
        """Length of the found path, or None when there is none to show."""
        if self.mode is not Mode.PATH or self.path is None or self.end is None:
            return None
        distance = self.path.distance(self.end)
        return distance if distance < INF else None

    def path_edges(self) -> list[tuple[Dot, Dot]]:
        """Segments of the found path, from the end dot back to the start."""
        if self.mode is not Mode.PATH or self.path is None or self.end is None:
            return []
        backwards = self.path.route(self.end)[::-1]
        return [(self.graph.dots[a], self.graph.dots[b]) for a, b in pairwise(backwards)]