"""Window that lets the user place dots, join them and find shortest paths."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .editor import MENU_TITLES, Editor, Mode
from .graph import DOT_RADIUS, Dot

if TYPE_CHECKING:
    import tkinter

TITLE = "Shortest Path Finder"
WINDOW_SIZE = (1024, 768)
HINT = "Click -> Draw Dot / Select Dot"
MENU_NAME = "기능"
LINE_WIDTH = 5
PATH_WIDTH = 8
FRAME_MS = 16


@dataclass(frozen=True)
class Shape:
    """One drawing instruction: a ``circle``, ``line`` or ``text``.

    For circles ``points`` is the centre and ``size`` the radius; for lines it
    holds both ends and ``size`` is the width; for text it is the lower-left
    anchor of the string.
    """

    kind: str
    points: tuple[float, ...]
    color: str
    size: float = 0
    text: str = ""


def arrow_marker(start: Dot, end: Dot) -> tuple[float, float]:
    """Centre of the direction marker drawn on the rim of ``end``'s circle."""
    dx = end.x - start.x
    dy = end.y - start.y
    distance = math.hypot(dx, dy)
    if distance == 0:
        raise ValueError("a line needs two distinct points")
    return end.x - DOT_RADIUS * dx / distance, end.y - DOT_RADIUS * dy / distance


def build_scene(editor: Editor) -> list[Shape]:
    """Everything to draw for the editor's current state, in drawing order."""
    graph = editor.graph
    scene = [Shape("text", (30, 30), "black", text=HINT)]

    length = editor.path_length()
    if length is not None:
        scene.append(Shape("text", (30, 60), "black", text=f"Path Length : {length}"))

    lines = list(graph.lines())
    scene.extend(
        Shape("line", (a.x, a.y, b.x, b.y), "gray", LINE_WIDTH) for a, b, _ in lines
    )

    selected = {dot.idx for dot in editor.selected}
    for dot in graph.dots:
        color = "red" if dot.idx in selected else "black"
        scene.append(Shape("circle", (dot.x, dot.y), color, DOT_RADIUS))
        offset = DOT_RADIUS // 2 if dot.idx < 10 else DOT_RADIUS
        scene.append(
            Shape(
                "text",
                (dot.x - offset, dot.y - DOT_RADIUS * 1.5),
                color,
                text=str(dot.idx),
            )
        )
    scene.extend(
        Shape("circle", arrow_marker(a, b), "blue", DOT_RADIUS / 2)
        for a, b, _ in lines
    )

    if editor.mode is Mode.PATH:
        scene.extend(
            Shape("line", (a.x, a.y, b.x, b.y), "red", PATH_WIDTH)
            for a, b in editor.path_edges()
        )

    scene.extend(
        Shape("text", ((a.x + b.x) // 2, (a.y + b.y) // 2), "blue", text=str(size))
        for a, b, size in lines
    )
    return scene


class ShortestPathWindow:
    """A canvas with a tool menu, redrawn every frame from an :class:`Editor`."""

    def __init__(self, root: tkinter.Tk) -> None:
        import tkinter as tk

        self.root = root
        self.editor = Editor()
        width, height = WINDOW_SIZE
        root.title(TITLE)
        root.geometry(f"{width}x{height}")

        menubar = tk.Menu(root)
        popup = tk.Menu(menubar, tearoff=False)
        for title in MENU_TITLES:
            popup.add_command(label=title, command=lambda t=title: self.editor.choose(t))
        menubar.add_cascade(label=MENU_NAME, menu=popup)
        root.config(menu=menubar)

        self.canvas = tk.Canvas(
            root, width=width, height=height, background="white", highlightthickness=0
        )
        self.canvas.pack(fill="both", expand=True)
        self.canvas.bind("<ButtonPress-1>", lambda e: self.editor.press(e.x, e.y))
        self.canvas.bind("<ButtonRelease-1>", lambda e: self.editor.release())

    def _render(self) -> None:
        canvas = self.canvas
        canvas.delete("all")
        for shape in build_scene(self.editor):
            if shape.kind == "circle":
                x, y = shape.points
                r = shape.size
                canvas.create_oval(
                    x - r, y - r, x + r, y + r, fill=shape.color, outline=shape.color
                )
            elif shape.kind == "line":
                canvas.create_line(
                    *shape.points, fill=shape.color, width=shape.size, capstyle="round"
                )
            else:
                canvas.create_text(
                    *shape.points,
                    text=shape.text,
                    fill=shape.color,
                    anchor="sw",
                    font=("Courier", 10),
                )

    def _tick(self) -> None:
        self.editor.update()
        if self.editor.quit_requested:
            self.root.destroy()
            return
        self._render()
        self.root.after(FRAME_MS, self._tick)

    def run(self) -> None:
        """Start the frame loop and block until the window closes."""
        self._tick()
        self.root.mainloop()


def main(argv: list[str] | None = None) -> int:
    """Open the editor window."""
    parser = argparse.ArgumentParser(
        prog="dotpath", description="Place dots, join them and find shortest paths."
    )
    parser.parse_args(argv)

    import tkinter as tk

    ShortestPathWindow(tk.Tk()).run()
    return 0