import math

import pytest

from dotpath.app import (
    HINT,
    LINE_WIDTH,
    PATH_WIDTH,
    Shape,
    arrow_marker,
    build_scene,
)
from dotpath.editor import DRAW_LINES, FIND_PATH, Editor
from dotpath.graph import DOT_RADIUS, Dot, Graph


def click(editor, dot):
    editor.press(dot.x, dot.y)
    editor.update()
    editor.release()


def texts(scene):
    return [s for s in scene if s.kind == "text"]


def three_dots():
    graph = Graph()
    dots = [graph.add_dot(100, 100), graph.add_dot(200, 100), graph.add_dot(300, 200)]
    return graph, dots


def test_empty_scene_has_only_hint():
    scene = build_scene(Editor())
    assert scene == [Shape("text", (30, 30), "black", text=HINT)]
    assert scene[0].text == "Click -> Draw Dot / Select Dot"


def test_dots_drawn_as_black_circles_with_labels():
    graph, dots = three_dots()
    scene = build_scene(Editor(graph))
    circles = [s for s in scene if s.kind == "circle"]
    assert [c.points for c in circles] == [(d.x, d.y) for d in dots]
    assert all(c.color == "black" and c.size == DOT_RADIUS for c in circles)
    labels = [s.text for s in texts(scene)[1:]]
    assert labels == ["0", "1", "2"]


def test_selected_dot_is_red():
    graph, dots = three_dots()
    editor = Editor(graph)
    editor.choose(DRAW_LINES)
    click(editor, dots[1])
    circles = [s for s in build_scene(editor) if s.kind == "circle"]
    assert [c.color for c in circles] == ["black", "red", "black"]


def test_two_digit_label_shifted_further_left():
    graph = Graph()
    dots = [graph.add_dot(50 * i + 20, 300) for i in range(11)]
    scene = build_scene(Editor(graph))
    labels = {s.text: s for s in texts(scene)[1:]}
    one = dots[1].x - labels["1"].points[0]
    ten = dots[10].x - labels["10"].points[0]
    assert ten > one
    assert labels["10"].points[1] == labels["1"].points[1]


def test_lines_markers_and_lengths():
    graph, dots = three_dots()
    length = graph.add_line(0, 2)
    scene = build_scene(Editor(graph))
    gray = [s for s in scene if s.kind == "line"]
    assert gray == [
        Shape("line", (dots[0].x, dots[0].y, dots[2].x, dots[2].y), "gray", LINE_WIDTH)
    ]
    markers = [s for s in scene if s.kind == "circle" and s.color == "blue"]
    assert len(markers) == 1
    assert markers[0].points == arrow_marker(dots[0], dots[2])
    blue_text = [s for s in texts(scene) if s.color == "blue"]
    assert [s.text for s in blue_text] == [str(length)]


def test_lines_drawn_before_dots_and_lengths_last():
    graph, _ = three_dots()
    graph.add_line(0, 1)
    scene = build_scene(Editor(graph))
    kinds = [s.kind for s in scene]
    assert kinds.index("line") < kinds.index("circle")
    assert scene[-1].kind == "text" and scene[-1].color == "blue"


def test_arrow_marker_horizontal():
    assert arrow_marker(Dot(0, 0, 0), Dot(100, 0, 1)) == pytest.approx((90.0, 0.0))


def test_arrow_marker_vertical():
    assert arrow_marker(Dot(0, 0, 0), Dot(0, 50, 1)) == pytest.approx((0.0, 40.0))


@pytest.mark.parametrize(
    "start,end",
    [((0, 0), (30, 40)), ((200, 100), (100, 300)), ((5, 5), (-70, -12))],
)
def test_arrow_marker_lies_on_rim(start, end):
    a, b = Dot(*start, 0), Dot(*end, 1)
    x, y = arrow_marker(a, b)
    assert math.hypot(x - b.x, y - b.y) == pytest.approx(DOT_RADIUS)
    assert math.hypot(x - a.x, y - a.y) < math.hypot(b.x - a.x, b.y - a.y)


def test_arrow_marker_same_point_rejected():
    with pytest.raises(ValueError):
        arrow_marker(Dot(4, 4, 0), Dot(4, 4, 1))


def test_path_drawn_in_path_mode():
    graph, dots = three_dots()
    graph.add_line(0, 1)
    graph.add_line(1, 2)
    editor = Editor(graph)
    editor.choose(FIND_PATH)
    click(editor, dots[0])
    click(editor, dots[2])
    scene = build_scene(editor)
    expected = graph.length(0, 1) + graph.length(1, 2)
    assert editor.path_length() == expected
    assert Shape("text", (30, 60), "black", text=f"Path Length : {expected}") in scene
    red = [s for s in scene if s.kind == "line" and s.color == "red"]
    assert len(red) == len(editor.path_edges()) == 2
    assert all(s.size == PATH_WIDTH for s in red)


def test_unreachable_path_shows_no_length():
    graph, dots = three_dots()
    graph.add_line(0, 1)
    editor = Editor(graph)
    editor.choose(FIND_PATH)
    click(editor, dots[0])
    click(editor, dots[2])
    scene = build_scene(editor)
    assert not any(s.text.startswith("Path Length") for s in texts(scene))
    assert [s for s in scene if s.kind == "line" and s.color == "red"] == []


def test_path_hidden_outside_path_mode():
    graph, dots = three_dots()
    graph.add_line(0, 2)
    editor = Editor(graph)
    editor.choose(FIND_PATH)
    click(editor, dots[0])
    click(editor, dots[2])
    editor.choose(DRAW_LINES)
    scene = build_scene(editor)
    assert [s for s in scene if s.color == "red"] == []
    assert not any(s.text.startswith("Path Length") for s in texts(scene))