# dotpath

dotpath is a small drawing board for directed graphs. You place dots on a
canvas and join them with one-way lines. Then you pick two dots, and dotpath
draws the shortest route between them and shows its total length.

## Installing

```
pip install .
```

The window uses Tkinter, which comes with most Python installations. The
package needs no other libraries.

## The window

Start the board with:

```
dotpath
```

This opens a 1024×768 window titled "Shortest Path Finder". Its menu, `기능`,
has four entries:

- **점 그리기** (draw dots): every click on the canvas adds a dot at that point.
  A board holds at most 15 dots. A click after that adds nothing, and the
  message `점 개수가 최대입니다.` is printed to standard output.
- **직선 그리기** (draw lines): click one dot, then another. This adds a
  directed line from the first dot to the second. Its length is the distance
  between the two dots, rounded down to a whole number. A small blue marker on
  the rim of the second dot shows the direction. The length is written at the
  line's midpoint. A click that misses every dot selects nothing.
- **최단 경로 찾기** (find shortest path): click a start dot, then an end dot.
  The shortest route along the lines is drawn in red, and
  `Path Length : <n>` appears at the top of the canvas. Nothing is shown when no
  route exists. Choosing this entry again clears the last route.
- **종료** (quit): closes the window.

Clicks do nothing until a tool is chosen. Each dot is labelled with its index.
A selected dot is drawn in red until the second dot of the pair is picked.
Picking the same dot twice does nothing.

## Using it as a library

The graph and the editing logic work without a window.

```python
from dotpath.graph import Graph

graph = Graph(max_dots=15)
graph.add_dot(100, 100)   # dot 0
graph.add_dot(400, 100)   # dot 1
graph.add_dot(400, 500)   # dot 2

graph.add_line(0, 1)      # returns 300
graph.add_line(1, 2)      # returns 400
graph.add_line(0, 2)      # returns 500

print(graph.length(0, 1))        # 300
paths = graph.shortest_paths(0)
print(paths.distance(2))         # 500
print(paths.route(2))            # [0, 2]
```

In `dotpath.graph`:

- `Graph.add_dot(x, y)` returns the new `Dot` (with `x`, `y` and `idx`). On a
  full graph it raises `GraphFullError`.
- `Graph.dot_at(x, y)` returns the first dot whose circle (radius 10) holds the
  point, or `None`.
- `Graph.add_line(start, end)` returns the line's length. A line from a dot to
  itself adds nothing and returns `None`.
- `Graph.length(start, end)` is 0 from a dot to itself and `INF` (9999999) when
  there is no line. An unknown index raises `IndexError`.
- `Graph.lines()` yields `(start_dot, end_dot, length)` for every line, ordered
  by start index, then by end index.
- `Graph.shortest_paths(start)` returns a `PathResult`. Its
  `distance(end)` is `INF` for an unreachable dot. Its `route(end)` is then
  empty.

`dotpath.editor.Editor` wraps a graph the same way the window does:

- `choose(title)` takes one of the menu titles above. After the quit title,
  `quit_requested` is true. Other titles are ignored.
- `press(x, y)`, `release()` and `update()` feed mouse input. Each press is
  handled once, by the next `update()`.
- `mode` holds the current `Mode`, and `selected` holds the dots picked so far.
- `path_length()` returns the last route's length, or `None`.
- `path_edges()` returns its segments as pairs of dots, from the end dot back to
  the start.

`dotpath.app.build_scene(editor)` turns an editor's state into a list of
`Shape` objects (`circle`, `line` or `text`) in drawing order.
`dotpath.app.arrow_marker(start, end)` gives the centre of a line's direction
marker.

## What it does not do

A board lives only as long as its window. Nothing can be saved, loaded or
exported. Dots and lines cannot be moved or removed once placed.

## Running the tests

```
pip install .[test]
pytest
```