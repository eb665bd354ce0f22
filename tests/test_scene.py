import xml.etree.ElementTree as ET

import pytest

from pointscope.scene import (
    BLACK,
    DARK_GREEN,
    GRAY,
    POINT_CENTRES,
    RED,
    SCENE_HALF,
    Circle,
    Line,
    build_scene,
    chart_series,
    grid_lines,
    load_directory,
    point_circles,
    render_scene_svg,
    scale_multiplier,
)
from pointscope.storage import DataStorage


def _storage(rows):
    storage = DataStorage()
    for row in rows:
        storage.add_row(row)
    return storage


def test_load_directory_skips_zero_and_invalid(tmp_path):
    (tmp_path / "a.txt").write_text("1\n0\n2\n")
    (tmp_path / "b.txt").write_text("3\n\nabc\n")
    (tmp_path / "skip.dat").write_text("9\n")
    storage = load_directory(tmp_path)
    assert list(storage) == [[1.0, 2.0], [3.0]]
    assert storage.max_value == 3.0
    assert storage.min_value == 2.0


def test_scale_multiplier_above_limit_is_one():
    assert scale_multiplier(20.0) == 1


@pytest.mark.parametrize("value", [0.003, 0.5, 1.0, 12.5])
def test_scale_multiplier_invariant(value):
    multiplier = scale_multiplier(value)
    assert value * multiplier > 12.5
    assert value * multiplier / 10 <= 12.5


@pytest.mark.parametrize("value", [0.0, -1.0, float("nan")])
def test_scale_multiplier_rejects_non_positive(value):
    with pytest.raises(ValueError):
        scale_multiplier(value)


def test_grid_lines_layout():
    lines = grid_lines()
    assert len(lines) == 24
    assert all(line.color == GRAY for line in lines[:-2])
    assert lines[-2:] == [
        Line(0, 250, 0, -250, BLACK),
        Line(250, 0, -250, 0, BLACK),
    ]
    for line in lines:
        for coord in (line.x1, line.y1, line.x2, line.y2):
            assert -SCENE_HALF <= coord <= SCENE_HALF


def test_point_circles_colors_and_radius():
    circles = point_circles(10, 20, [1.0, 2.0, 3.0], 10, 3.0, 2.0)
    assert [c.radius for c in circles] == [10.0, 20.0, 30.0]
    assert [c.color for c in circles] == [BLACK, RED, DARK_GREEN]
    assert [c.width for c in circles] == [1, 2, 2]
    assert all((c.x, c.y) == (10, 20) for c in circles)


def test_circle_bounds():
    circle = Circle(5, 5, 2)
    assert circle.bounds == (3, 3, 4, 4)


def test_build_scene_places_circles_at_centres():
    storage = _storage([[1.0, 2.0], [3.0], [0.5, 0.7, 0.9]])
    items = build_scene(storage)
    circles = [item for item in items if isinstance(item, Circle)]
    assert len(circles) == 6
    centres = [(c.x, c.y) for c in circles]
    assert centres[:2] == [POINT_CENTRES[0]] * 2
    assert centres[2] == POINT_CENTRES[1]
    assert centres[3:] == [POINT_CENTRES[2]] * 3
    assert storage.max_value == 3.0
    assert sum(1 for c in circles if c.color == DARK_GREEN) == 1


def test_build_scene_empty_storage_is_grid():
    assert build_scene(DataStorage()) == grid_lines()


def test_build_scene_too_many_points():
    with pytest.raises(ValueError):
        build_scene(_storage([[1.0]] * 5))


def test_chart_series():
    storage = _storage([[1.0, 2.0, 3.0], [4.0, 5.0], [6.0], [7.0], [8.0]])
    series = chart_series(storage)
    assert [s.name for s in series] == [f"Точка {i}" for i in range(1, 6)]
    assert series[0].x == (0.0, 1.0, 2.0)
    assert series[0].y == (1.0, 2.0, 3.0)
    assert series[1].y == (4.0, 5.0)
    assert series[0].color == DARK_GREEN
    assert series[4].color == BLACK
    assert all(len(s.x) == len(s.y) for s in series)


def test_render_scene_svg_round_trip():
    items = build_scene(_storage([[1.0, 2.0], [3.0]]))
    root = ET.fromstring(render_scene_svg(items))
    tags = [child.tag.rsplit("}", 1)[-1] for child in root]
    assert tags.count("line") == 24
    assert tags.count("circle") == 3
    radii = sorted(
        float(child.get("r")) for child in root if child.tag.endswith("circle")
    )
    expected = sorted(c.radius for c in items if isinstance(c, Circle))
    assert radii == expected


def test_render_scene_svg_rejects_unknown_item():
    with pytest.raises(TypeError):
        render_scene_svg(["not an item"])