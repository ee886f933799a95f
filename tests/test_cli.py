import io
import time

import pytest

from barchartrace.animation import AnimationController
from barchartrace.cli import ArgumentOptions, apply_options, help_text, main, parse_args

DATA = """Race Title
A description
Some source
2
2000,Alpha,x,10,cat1
2000,Beta,y,5,cat2
"""


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(DATA, encoding="utf-8")
    return str(path)


def test_no_arguments_is_invalid():
    options = parse_args([])
    assert options.is_all_invalid is True
    assert options.text_file is None


def test_bars_must_exceed_five():
    assert parse_args(["-b", "3"]).bar_argument is None
    assert parse_args(["-b", "5"]).bar_argument is None
    assert parse_args(["-b", "10"]).bar_argument == 10


def test_fps_must_be_positive():
    assert parse_args(["-f", "0"]).fps_argument is None
    assert parse_args(["-f", "24"]).fps_argument == 24


def test_missing_value_after_flag_is_ignored():
    options = parse_args(["-b"])
    assert options.bar_argument is None
    assert options.is_all_invalid is False


def test_non_numeric_value_raises():
    with pytest.raises(ValueError):
        parse_args(["-f", "abc"])


def test_help_stops_parsing():
    options = parse_args(["-h", "-b", "10"])
    assert options.send_help is True
    assert options.bar_argument is None


def test_first_ini_file_wins():
    options = parse_args(["a.ini", "b.ini"])
    assert options.ini_file == "a.ini"


def test_data_file_must_exist(tmp_path, data_file):
    missing = str(tmp_path / "nope.txt")
    assert parse_args([missing]).text_file is None
    assert parse_args([data_file]).text_file == data_file


def test_help_text_mentions_flags():
    text = help_text()
    assert "-b <interger>" in text
    assert "-f <interger>" in text


@pytest.mark.parametrize(
    "options", [ArgumentOptions(is_all_invalid=True), ArgumentOptions(send_help=True)]
)
def test_apply_options_exits_with_help(options, capsys):
    with pytest.raises(SystemExit) as info:
        apply_options(options, AnimationController())
    assert info.value.code == 1
    assert "Bar Chart Race" in capsys.readouterr().out


def test_apply_options_configures_animation(data_file, tmp_path):
    ini = tmp_path / "settings.ini"
    ini.write_text("NTicks = 3\nDefaultFPS = 7\n", encoding="utf-8")
    animation = AnimationController()
    options = ArgumentOptions(
        bar_argument=8, fps_argument=20, ini_file=str(ini), text_file=data_file
    )
    apply_options(options, animation)
    assert animation.data_file_name == data_file
    assert animation.n_ticks == 3
    assert animation.max_bars_per_chart == 8
    assert animation.default_fps == 20


def test_apply_options_reports_missing_data_file(capsys):
    animation = AnimationController()
    apply_options(ArgumentOptions(bar_argument=9), animation)
    assert "Data file not found" in capsys.readouterr().err
    assert animation.max_bars_per_chart == 9


def test_main_runs_animation(data_file, monkeypatch, capsys):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([data_file]) == 0
    out = capsys.readouterr().out
    assert "Race Title" in out
    assert "Alpha(10)" in out
    assert out.index("Alpha(10)") < out.index("Beta(5)")


def test_main_rejects_bad_number(capsys):
    assert main(["-b", "xyz"]) == 1
    assert "xyz" in capsys.readouterr().err