"""Scene and chart geometry for the stored measurement points."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from pointscope.averaging import list_text_files, parse_number
from pointscope.storage import DataStorage

SCENE_HALF = 250
GRID_STEP = 50
QUADRANT_LIMIT = 12.5

GRAY = "#a0a0a4"
BLACK = "#000000"
DARK_GREEN = "#008000"
RED = "#ff0000"
DARK_RED = "#800000"
DARK_BLUE = "#000080"
DARK_GRAY = "#808080"

POINT_CENTRES: tuple[tuple[int, int], ...] = (
    (-125, -125),
    (125, -125),
    (-125, 125),
    (125, 125),
)

SERIES_COLORS: tuple[str, ...] = (DARK_GREEN, DARK_RED, DARK_BLUE, DARK_GRAY)


@dataclass(frozen=True)
class Line:
    """A straight segment of the scene."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: str = BLACK
    width: int = 1


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    x: float
    y: float
    radius: float
    color: str = BLACK
    width: int = 1

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Left, top, width and height of the bounding box."""
        diameter = self.radius * 2
        return (self.x - self.radius, self.y - self.radius, diameter, diameter)


@dataclass(frozen=True)
class Series:
    """One line of the chart: the values of one point against their index."""

    name: str
    x: tuple[float, ...]
    y: tuple[float, ...]
    color: str


def load_directory(directory: str | Path) -> DataStorage:
    """Read every text file of ``directory`` into one row of nonzero values.

    The maximum and the minimum of row maxima are computed before returning.
    """
    storage = DataStorage()
    for path in list_text_files(directory):
        text = path.read_text(encoding="utf-8", errors="replace")
        values = [v for v in map(parse_number, text.split("\n")) if v != 0]
        storage.add_row(values)
    storage.find_max()
    storage.find_min()
    return storage


def scale_multiplier(max_value: float) -> int:
    """Return the power of ten that lifts ``max_value`` above the quadrant limit."""
    if not max_value > 0:
        raise ValueError(f"maximum value must be positive, got {max_value}")
    multiplier = 1
    while max_value <= QUADRANT_LIMIT:
        max_value *= 10
        multiplier *= 10
    return multiplier


def grid_lines() -> list[Line]:
    """Return the gray grid of the scene followed by the two black axes."""
    lines: list[Line] = []
    for offset in range(-SCENE_HALF, SCENE_HALF + 1, GRID_STEP):
        lines.append(Line(offset, -SCENE_HALF, offset, SCENE_HALF, GRAY))
        lines.append(Line(-SCENE_HALF, offset, SCENE_HALF, offset, GRAY))
    lines.append(Line(0, SCENE_HALF, 0, -SCENE_HALF, BLACK))
    lines.append(Line(SCENE_HALF, 0, -SCENE_HALF, 0, BLACK))
    return lines


def point_circles(
    x: float,
    y: float,
    values: Iterable[float],
    multiplier: float,
    max_value: float,
    min_value: float,
) -> list[Circle]:
    """Draw one concentric circle per value around ``(x, y)``.

    The overall maximum is drawn in dark green, the minimum of row maxima
    in red, both with a wider pen; every other value in black.
    """
    circles = []
    for value in values:
        radius = value * multiplier
        if value == max_value:
            circles.append(Circle(x, y, radius, DARK_GREEN, 2))
        elif value == min_value:
            circles.append(Circle(x, y, radius, RED, 2))
        else:
            circles.append(Circle(x, y, radius))
    return circles


def build_scene(storage: DataStorage) -> list[Line | Circle]:
    """Return the grid and the circles of every stored point, at most four."""
    if len(storage) > len(POINT_CENTRES):
        raise ValueError(
            f"at most {len(POINT_CENTRES)} points can be drawn, got {len(storage)}"
        )
    items: list[Line | Circle] = list(grid_lines())
    if not len(storage):
        return items
    max_value = storage.find_max()
    min_value = storage.find_min()
    multiplier = scale_multiplier(max_value)
    for (x, y), row in zip(POINT_CENTRES, storage):
        items.extend(point_circles(x, y, row, multiplier, max_value, min_value))
    return items


def chart_series(storage: DataStorage) -> list[Series]:
    """Return one chart series per stored row, indexed like the first row."""
    x_points = tuple(float(i) for i in range(len(storage.row(0))))
    series = []
    for index, row in enumerate(storage):
        pairs = list(zip(x_points, row))
        color = SERIES_COLORS[index] if index < len(SERIES_COLORS) else BLACK
        series.append(
            Series(
                name=f"Точка {index + 1}",
                x=tuple(px for px, _ in pairs),
                y=tuple(py for _, py in pairs),
                color=color,
            )
        )
    return series


def _num(value: float) -> str:
    return f"{value:g}"


def render_scene_svg(items: Sequence[Line | Circle] | Iterable[Line | Circle]) -> str:
    """Render scene items as an SVG document covering the scene rectangle."""
    side = 2 * SCENE_HALF
    root = ET.Element(
        "svg",
        {
            "xmlns": "http://www.w3.org/2000/svg",
            "width": str(side),
            "height": str(side),
            "viewBox": f"{-SCENE_HALF} {-SCENE_HALF} {side} {side}",
        },
    )
    for item in items:
        if isinstance(item, Line):
            ET.SubElement(
                root,
                "line",
                {
                    "x1": _num(item.x1),
                    "y1": _num(item.y1),
                    "x2": _num(item.x2),
                    "y2": _num(item.y2),
                    "stroke": item.color,
                    "stroke-width": str(item.width),
                },
            )
        elif isinstance(item, Circle):
            ET.SubElement(
                root,
                "circle",
                {
                    "cx": _num(item.x),
                    "cy": _num(item.y),
                    "r": _num(abs(item.radius)),
                    "fill": "none",
                    "stroke": item.color,
                    "stroke-width": str(item.width),
                },
            )
        else:
            raise TypeError(f"cannot render {type(item).__name__}")
    return ET.tostring(root, encoding="unicode")