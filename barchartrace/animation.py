"""Bar chart race: data loading, chart rendering and the animation loop."""

from __future__ import annotations

import math
import re
import sys
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Iterator, TextIO

from .strutil import interpolate_ap, is_equal_to_in_vector, ltrim, rtrim, split, strtolower
from .textcolor import Color, tcolor

__all__ = ["Bar", "CategoryPalette", "Chart", "AnimationController"]

_WHITESPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_BLOCK = "█"

_PALETTE = (
    Color.BLUE, Color.MAGENTA, Color.BLACK, Color.RED, Color.GREEN, Color.YELLOW,
    Color.CYAN, Color.WHITE, Color.BRIGHT_BLACK, Color.BRIGHT_RED, Color.BRIGHT_GREEN,
    Color.BRIGHT_YELLOW, Color.BRIGHT_BLUE, Color.BRIGHT_MAGENTA, Color.BRIGHT_CYAN,
    Color.BRIGHT_WHITE,
)
_MAX_DISTINCT_CATEGORIES = 14

_BANNER = """

    PLEASE STAND BY

>>>>> PROCESSING DATA
"""

_INI_KEYS = {
    "defaultbars": "max_bars_per_chart",
    "maxbars": "max_configurable_bars",
    "defaultfps": "default_fps",
    "maxfps": "max_configurable_fps",
    "barmaxlenght": "bar_max_length",
    "nticks": "n_ticks",
    "dateidx": "time_idx",
    "labelidx": "label_idx",
    "otheridx": "other_idx",
    "valueidx": "value_idx",
    "categoryidx": "category_idx",
}


def _stoi(text: str) -> int:
    """Parse a leading integer, ignoring anything after it."""
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def _stod(text: str) -> float:
    """Parse a leading floating-point number, ignoring anything after it."""
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


@dataclass
class Bar:
    """One entry of a chart: a labelled value at a point in time."""

    time_stamp: str
    label: str
    other_related_info: str
    value: str
    category: str

    @property
    def amount(self) -> float:
        """The bar's value as a number."""
        return _stod(self.value)


class CategoryPalette:
    """Ordered set of categories, each mapped to a terminal colour."""

    def __init__(self) -> None:
        self._categories: dict[str, None] = {}

    def add(self, category: str) -> None:
        """Register *category* if it is not yet known."""
        self._categories.setdefault(category, None)

    def color_for(self, category: str) -> Color:
        """Colour of *category*; a single colour is shared when there are too many."""
        if len(self._categories) > _MAX_DISTINCT_CATEGORIES:
            return _PALETTE[5]
        for position, known in enumerate(self._categories):
            if known == category:
                return _PALETTE[position % len(_PALETTE)]
        return _PALETTE[2]

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)


def _block_count(bar_length: int, value: float, top: float) -> int:
    if top == 0 or not math.isfinite(value) or not math.isfinite(top):
        return 0
    ratio = value / top
    return max(0, math.floor(bar_length * ratio))


@dataclass
class Chart:
    """The bars shown at one time frame."""

    time: str = ""
    bars: list[Bar] = field(default_factory=list)

    def no_disorder(self, max_bars: int) -> None:
        """Sort bars by value, largest first, and keep at most *max_bars*."""
        self.bars.sort(key=lambda bar: bar.amount, reverse=True)
        if max_bars >= 0:
            del self.bars[max_bars:]

    def render(self, bar_length: int, palette: CategoryPalette) -> str:
        """Draw the bars, the largest being *bar_length* blocks long."""
        parts = [f"{self.time}\n\n"]
        top = self.bars[0].amount if self.bars else 0.0
        for bar in self.bars:
            block = tcolor(_BLOCK, palette.color_for(bar.category))
            parts.append(block * _block_count(bar_length, bar.amount, top))
            parts.append(f" {bar.label}({bar.value})\n\n")
        return "".join(parts)

    def render_axis(self, bar_length: int, n_ticks: int) -> str:
        """Draw the horizontal axis with *n_ticks* labelled ticks."""
        if not self.bars:
            raise ValueError("cannot draw an axis for an empty chart")
        top = self.bars[0].amount
        bottom = self.bars[-1].amount
        minimum = int(bar_length * (bottom / top)) if top else 0
        places = interpolate_ap(minimum, bar_length, n_ticks - 2)
        values = interpolate_ap(int(bottom), int(top), n_ticks - 2)

        span = 1.5 * bar_length
        width = max(0, math.ceil(span))
        axis: list[str] = []
        next_tick = 0
        for column in range(width):
            if next_tick < len(places) and column == places[next_tick]:
                next_tick += 1
                axis.append("+")
            elif column == span - 1:
                axis.append("|")
            else:
                axis.append("-")
        rows = ["".join(axis)]

        for tick in reversed(range(len(places))):
            row: list[str] = []
            for column in range(width):
                if column == places[tick]:
                    row.append(str(values[tick]))
                elif is_equal_to_in_vector(column, places, tick):
                    row.append("|")
                else:
                    row.append(" ")
            rows.append("".join(row))
        return "\n".join(rows) + "\n\n"


class _Input(Enum):
    START = auto()
    START_CONFIRMED = auto()


class _State(Enum):
    START = auto()
    PROCESSING = auto()
    PRINTING = auto()
    CONFIRM_START = auto()
    ENDING = auto()
    OVER = auto()


class AnimationController:
    """Runs the load, confirm and play stages of the animation."""

    def __init__(
        self,
        out: TextIO | None = None,
        inp: TextIO | None = None,
        sleep: Callable[[float], object] | None = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._inp = inp if inp is not None else sys.stdin
        self._sleep = sleep if sleep is not None else time.sleep
        self._input = _Input.START
        self._state = _State.START

        self.charts: list[Chart] = []
        self.palette = CategoryPalette()
        self.input_words: list[str] = []
        self.data_file_name = ""
        self.title = ""
        self.description = ""
        self.source = ""

        self.max_bars_per_chart = 5
        self.max_configurable_bars = 15
        self.default_fps = 12
        self.max_configurable_fps = 45
        self.bar_max_length = 50
        self.n_ticks = 5

        self.time_idx = 0
        self.label_idx = 1
        self.other_idx = 2
        self.value_idx = 3
        self.category_idx = 4

    def set_fps(self, fps: int) -> None:
        """Set the frames per second of the animation."""
        self.default_fps = fps

    def set_bars(self, bars: int) -> None:
        """Set how many bars a chart shows at most."""
        self.max_bars_per_chart = bars

    def set_filename(self, filename: str) -> None:
        """Set the path of the data file."""
        self.data_file_name = filename

    def is_over(self) -> bool:
        """Tell whether the animation has finished."""
        return self._state is _State.OVER

    def read_ini(self, filename: str) -> None:
        """Apply the settings found in an ini file."""
        try:
            with open(filename, encoding="utf-8", newline="") as settings:
                text = settings.read()
        except OSError:
            sys.stderr.write("Can't read .ini file. Running program with default settings.\n")
            return
        configs: dict[str, str] = {}
        for line in text.split("\n"):
            words = split(line, "= \t")
            if len(words) >= 2:
                configs[words[0]] = words[1]
        for key, raw in configs.items():
            attribute = _INI_KEYS.get(strtolower(key))
            if attribute is not None:
                setattr(self, attribute, _stoi(raw))

    def read_input(self, delimiter: str = " ") -> bool:
        """Read a line from the user; tell whether it held any words."""
        line = self._inp.readline()
        if line.endswith("\n"):
            line = line[:-1]
        self.input_words = split(strtolower(line), delimiter)
        return bool(self.input_words)

    def validate_bar(self, fields: list[str]) -> bool:
        """Tell whether *fields* describe a usable bar."""
        for index in (self.time_idx, self.label_idx, self.other_idx, self.value_idx, self.category_idx):
            if not 0 <= index < len(fields) or not fields[index]:
                return False
        try:
            _stoi(fields[self.value_idx])
        except ValueError:
            return False
        return True

    def process_events(self) -> None:
        """Wait for the user's confirmation when it is due."""
        if self._state is _State.CONFIRM_START:
            self.read_input()
            self._input = _Input.START_CONFIRMED

    def update(self) -> None:
        """Advance the animation to its next state."""
        if self._state is _State.START:
            self._state = _State.PROCESSING
        elif self._state is _State.PROCESSING:
            self._load()
            self._state = _State.CONFIRM_START
        elif self._state is _State.CONFIRM_START:
            if self._input is _Input.START_CONFIRMED:
                self._state = _State.PRINTING
        elif self._state is _State.PRINTING:
            self._state = _State.OVER

    def render(self) -> None:
        """Write the output of the current state."""
        if self._state is _State.PROCESSING:
            self._out.write(tcolor(_BANNER, Color.BRIGHT_YELLOW))
            self._sleep(0.3)
        elif self._state is _State.CONFIRM_START:
            self._out.write(self._options_text())
        elif self._state is _State.PRINTING:
            self._play()

    def _data_lines(self) -> Iterator[str]:
        try:
            with open(self.data_file_name, encoding="utf-8", newline="") as data:
                text = data.read()
        except OSError:
            return
        for raw in text.split("\n"):
            line = raw.lstrip(_WHITESPACE)
            if line:
                yield line

    def _load(self) -> None:
        lines = self._data_lines()
        line = ""
        for attribute in ("title", "description", "source"):
            line = next(lines, line)
            setattr(self, attribute, ltrim(rtrim(line)))
        for header in lines:
            fields = split(header, ",")
            count = _stoi(fields[0] if fields else "")
            chart = Chart()
            line = header
            for _ in range(count):
                line = next(lines, line)
                fields = split(line, ",")
                if self.validate_bar(fields):
                    bar = Bar(
                        fields[self.time_idx],
                        fields[self.label_idx],
                        fields[self.other_idx],
                        fields[self.value_idx],
                        fields[self.category_idx],
                    )
                    chart.bars.append(bar)
                    self.palette.add(bar.category)
                    chart.time = fields[self.time_idx]
            chart.no_disorder(self.max_bars_per_chart)
            self.charts.append(chart)

    def _options_text(self) -> str:
        pad = " " * 40
        lines = [
            " " * 47 + "RUNNING OPTIONS:",
            "\n" + " " * 38 + "[Collumns Used For Charts Creation]\n",
            f"{pad}Time: {self.time_idx}\n",
            f"{pad}Name: {self.label_idx}\n",
            f"{pad}Other: {self.other_idx}\n",
            f"{pad}Data Value: {self.value_idx}\n",
            f"{pad}Category: {self.category_idx}\n",
            "\n" + " " * 51 + "[Charts]\n",
            f"{pad}Amount of bars(max) per chart: {self.max_bars_per_chart}\n",
            f"{pad}Lenght of the biggest bar(fixed): {self.bar_max_length}\n",
            "\n" + " " * 50 + "[Animation]\n",
            f"{pad}Running FPS: {self.default_fps}\n",
            f"{pad}N_Ticks: {self.n_ticks}\n",
            f"Category amount:{len(self.palette)} ",
            "Category Colors:\n",
        ]
        for position, category in enumerate(self.palette):
            if position % 5 == 0:
                lines.append("\n")
            lines.append(f" {tcolor(category, self.palette.color_for(category))}  | ")
        lines.append("\n")
        lines.append(
            f'>>>> We have "{len(self.charts)}" charts, each with a maximum of '
            f'"{self.max_bars_per_chart}" bars.\n'
        )
        lines.append(">>>>>PRESS ENTER [↵] TO CONTINUE\n")
        return "".join(lines)

    def _play(self) -> None:
        for chart in self.charts:
            if not chart.bars:
                continue
            self._out.write(f"{self.title}\n{self.description}\n")
            self._out.write(chart.render(self.bar_max_length, self.palette))
            if self.n_ticks >= 2:
                self._out.write(chart.render_axis(self.bar_max_length, self.n_ticks))
            if len(self.palette) <= _MAX_DISTINCT_CATEGORIES:
                for category in self.palette:
                    self._out.write(f"{tcolor(_BLOCK, self.palette.color_for(category))} {category} ")
            self._out.write("\n\n")
            self._sleep((1000 // self.default_fps) / 1000)