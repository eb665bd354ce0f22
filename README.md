# pointscope

pointscope reads a directory of plain-text measurement files. It can average
them per measurement point, or it can draw the points as concentric circles in
an SVG picture. It uses only the standard library.

Text files are found the same way everywhere. A text file is any regular,
non-hidden file whose name ends in `.txt`, in any letter case. The files are
sorted by name, ignoring letter case. Every line of a file is read as a decimal
number. A line that is empty or cannot be parsed counts as `0`.

## Averaging measurements per point

`pointscope.averaging.average_directory(directory, point_count)` splits the
files evenly among `point_count` points, in name order. `point_count` must be
from 1 to 4. The files for one point must therefore be next to each other in
that order.

For each file, `file_average` takes the mean of the values that are not zero and
not greater than `0.1`. Negative values are included. If no value in a file
qualifies, the average is `nan`. The averages of each point become one row of
the returned `DataStorage`.

```python
from pointscope.averaging import average_directory, save_points

storage = average_directory("measurements", 2)
folder = save_points(storage, "measurements")
# writes measurements/2/point_0.txt, measurements/2/point_1.txt
```

`average_directory` raises `ValueError` in two cases: when the point count is
out of range, and when the number of files cannot be split evenly.
`save_points` writes one value per line. If the `2` subfolder already holds
text files, it replaces the whole folder.

## Drawing the points

`pointscope.scene.load_directory(directory)` turns each text file into one row
of its nonzero values. `build_scene(storage)` returns the items of a 500×500
scene centred on the origin:

- a gray grid with lines every 50 units;
- two black axes;
- for each row, one circle per value, centred in one quadrant (at most four
  rows).

Every radius is multiplied by the same power of ten, chosen so that the largest
value exceeds 12.5. A value equal to the overall maximum is drawn in dark green.
A value equal to the smallest of the per-row maxima is drawn in red. Both use a
pen of width 2.

`build_scene` raises `ValueError` in two cases: when there are more than four
rows, and when the maximum is not positive.

```python
from pointscope.scene import build_scene, chart_series, load_directory, render_scene_svg

storage = load_directory("measurements/2")
svg = render_scene_svg(build_scene(storage))
series = chart_series(storage)
```

`chart_series` returns one `Series` per row. Each series has:

- a name, `Точка 1`, `Точка 2`, and so on;
- x values `0, 1, 2, …`, as many as the first row has values;
- the row's values as y;
- a colour: dark green, dark red, dark blue and dark gray for the first four
  rows, black after that.

`DataStorage` (in `pointscope.storage`) holds the rows. It offers:

- `add_row`, `row(index)`, `len()` and iteration;
- `find_max()`, which returns the largest value;
- `find_min()`, which returns the smallest of the row maxima.

The results are cached in `max_value` and `min_value`.

## Command line

```
pointscope plot DIRECTORY [-o OUTPUT.svg]
pointscope average DIRECTORY [-p POINTS] [--save]
```

- `plot` writes the SVG scene of `DIRECTORY` to `OUTPUT.svg`, or to standard
  output if no file is given.
- `average` prints `point N: …` with the file averages of each point.
- `-p`/`--points` sets the number of points, from 1 to 4. The default is 1.
- `--save` also writes the point files to the `2` subfolder and prints where
  they went.
- `-v`/`--verbose`, placed before the command, logs the files as they are
  processed.

On a file error or invalid input, the command prints a message to standard
error and exits with status 1.

## What it does not do

pointscope has no graphical window. It draws nothing on screen. `chart_series`
only returns the chart data; nothing in the package plots it, and the command
line has no chart output. The scene is available only as SVG text.

## Development

```
pip install -e .[test]
pytest
```