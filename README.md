# barchartrace

Play a bar chart race in your terminal. A data file describes a series of
charts, one for each point in time. Each chart is drawn as coloured
horizontal bars with a labelled axis underneath. The charts are shown one
after another at a fixed frame rate.

## Installation

```
pip install .
```

## Usage

```
bcr <DATA_FILE> [settings.ini] [-b BARS] [-f FPS] [-h]
```

You can also run `python -m barchartrace.cli` with the same arguments.

- `DATA_FILE`: the data file to animate. An argument is taken as the data
  file only if it exists on disk. If no data file is found, a message goes to
  standard error and the run produces no charts.
- `settings.ini`: an optional settings file. The first argument that ends in
  `.ini` is read as settings. If it cannot be opened, a message goes to
  standard error and the defaults are used.
- `-b BARS`: the largest number of bars in one chart. Values of 5 or less are
  ignored.
- `-f FPS`: the frame rate. Values of 0 or less are ignored.
- `-h`: print help and exit with status 1. Help is also printed, with status 1,
  when no arguments are given at all.

A value after `-b` or `-f` that does not start with an integer makes the
command print an error and exit with status 1.

The program reads and processes the data first. It then prints the options in
use and the categories it found, each shown in its colour, and waits for you to
press Enter. After that it plays the animation.

## Data file format

Blank lines are skipped, and leading whitespace on every line is ignored. The
first three lines are the title, the description and the source. Blocks come
after them. Each block starts with a line whose first comma-separated field is
the number of record lines that follow it. A record line has this form:

```
time,label,other,value,category
```

A record is skipped if one of the five fields is missing or empty, or if its
value does not start with an integer. Within each chart the bars are sorted by
value, largest first, and only the allowed number of largest bars is kept.

Every category gets its own colour. If there are more than 14 categories, they
all share one colour and no colour legend is printed under the charts.

## Settings file

Each line holds a `key = value` pair. Keys are not case sensitive, and values
are read as integers.

| key            | meaning                                   | default |
|----------------|-------------------------------------------|---------|
| `defaultbars`  | bars per chart                            | 5       |
| `maxbars`      | stored in `max_configurable_bars`, unused | 15      |
| `defaultfps`   | frame rate                                | 12      |
| `maxfps`       | stored in `max_configurable_fps`, unused  | 45      |
| `barmaxlenght` | length of the longest bar, in blocks      | 50      |
| `nticks`       | ticks on the axis (below 2: no axis)      | 5       |
| `dateidx`      | column of the time stamp                  | 0       |
| `labelidx`     | column of the label                       | 1       |
| `otheridx`     | column of the extra information           | 2       |
| `valueidx`     | column of the value                       | 3       |
| `categoryidx`  | column of the category                    | 4       |

Options given with `-b` and `-f` override the settings file.

## Using it as a library

```python
import io
from barchartrace.animation import AnimationController

out = io.StringIO()
animation = AnimationController(out=out, inp=io.StringIO("\n"), sleep=lambda s: None)
animation.set_filename("data.txt")
animation.set_bars(10)
while not animation.is_over():
    animation.process_events()
    animation.update()
    animation.render()
```

If you leave out `out`, `inp` and `sleep`, the controller uses standard output,
standard input and `time.sleep`.

- `barchartrace.animation` contains `AnimationController`, `Chart` (with
  `no_disorder`, `render` and `render_axis`, which return text), `Bar` and
  `CategoryPalette`.
- `barchartrace.cli` contains `parse_args`, `apply_options`, `help_text` and
  `main`.
- `barchartrace.textcolor.tcolor` wraps text in ANSI colour codes.
- `barchartrace.strutil` contains the string and number helpers that the parser
  and the renderer use.

## Limitations

Output is plain text with ANSI colour codes written to the terminal. The
package has no graphical window, writes no image or video files, and cannot be
paused or controlled while the animation plays.