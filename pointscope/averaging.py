"""Averaging of raw measurement files into per-point rows."""

from __future__ import annotations

import logging
import math
import shutil
from collections.abc import Iterable
from pathlib import Path

from pointscope.storage import DataStorage

logger = logging.getLogger(__name__)

MIN_POINTS = 1
MAX_POINTS = 4
THRESHOLD = 0.1
OUTPUT_SUBDIR = "2"


def parse_number(text: str) -> float:
    """Parse a decimal number, ignoring surrounding whitespace; 0.0 if invalid."""
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return 0.0
    try:
        return float(stripped)
    except ValueError:
        return 0.0


def list_text_files(directory: str | Path) -> list[Path]:
    """Return the ``*.txt`` files in ``directory``, sorted by name ignoring case."""
    base = Path(directory)
    files = [
        entry
        for entry in base.iterdir()
        if entry.is_file()
        and not entry.name.startswith(".")
        and entry.name.lower().endswith(".txt")
    ]
    return sorted(files, key=lambda entry: (entry.name.lower(), entry.name))


def file_average(path: str | Path) -> float:
    """Average the values of a file that are nonzero and at most the threshold.

    Lines that do not parse count as zero and are skipped. If no value
    qualifies the result is NaN.
    """
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    values = [
        value
        for value in map(parse_number, text.split("\n"))
        if not (value > THRESHOLD or value == 0)
    ]
    if not values:
        return math.nan
    return math.fsum(values) / len(values)


def _format_value(value: float) -> str:
    return f"{value:g}"


def save_row(row: Iterable[float], path: str | Path) -> None:
    """Write one value per line to ``path``."""
    with open(path, "w", encoding="utf-8") as out:
        for value in row:
            out.write(_format_value(value) + "\n")


def average_directory(directory: str | Path, point_count: int) -> DataStorage:
    """Average every text file in ``directory`` and group them into points.

    Files are taken in name order; each point gets an equal, consecutive
    share of them, and each row of the result holds the file averages of
    one point.
    """
    if not MIN_POINTS <= point_count <= MAX_POINTS:
        raise ValueError(
            f"point count must be between {MIN_POINTS} and {MAX_POINTS}, "
            f"got {point_count}"
        )
    files = list_text_files(directory)
    if len(files) % point_count:
        raise ValueError(
            f"{len(files)} files cannot be split evenly into {point_count} points"
        )
    per_point = len(files) // point_count
    storage = DataStorage()
    for point in range(point_count):
        logger.info("processing files for point %d", point + 1)
        averages = []
        for path in files[point * per_point:(point + 1) * per_point]:
            average = file_average(path)
            logger.info("%s: average %g", path, average)
            averages.append(average)
        storage.add_row(averages)
    return storage


def save_points(storage: DataStorage, directory: str | Path) -> Path:
    """Write each row to ``<directory>/2/point_<index>.txt`` and return that folder.

    A previous output folder that already holds text files is replaced.
    """
    target = Path(directory) / OUTPUT_SUBDIR
    if target.is_dir() and list_text_files(target):
        shutil.rmtree(target)
    target.mkdir(exist_ok=True)
    for index, row in enumerate(storage):
        save_row(row, target / f"point_{index}.txt")
    return target