import os
import sys
import tempfile

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src", "py")))

from PIL import Image

from grid_map import GridMap
from make_gif import make_gif, render_frame, sample_frames
from simulator import run_case
from sweep_io import write_run_output


def test_sample_frames_short_run():
    assert sample_frames(10, 60) == list(range(10))


def test_sample_frames_keeps_last():
    indices = sample_frames(100, 30)
    assert indices[0] == 0
    assert indices[-1] == 99
    assert len(indices) <= 35


def test_make_gif_writes_animation():
    output = run_case(GridMap(["...", "x.."]))
    fd, json_path = tempfile.mkstemp(suffix=".json")
    os.close(fd)
    fd, gif_path = tempfile.mkstemp(suffix=".gif")
    os.close(fd)
    try:
        write_run_output(output, json_path)
        count = make_gif(json_path, gif_path, max_frames=60, frame_duration=50, title="test")
        assert count == len(output["poses"])
        with Image.open(gif_path) as img:
            assert img.format == "GIF"
    finally:
        os.unlink(json_path)
        os.unlink(gif_path)


def test_sample_frames_rejects_zero():
    with pytest.raises(ValueError):
        sample_frames(5, 0)


def test_render_frame_honours_open_char():
    grid = ["ooo", "o#o"]
    custom = render_frame(grid, set(), (0, 0, 0), 0, "t", open_char="o")
    default = render_frame(grid, set(), (0, 0, 0), 0, "t")
    assert list(custom.getdata()) != list(default.getdata())


def test_make_gif_custom_open_char():
    output = run_case(GridMap(["ooo", "o#o"], open_char="o"))
    fd, json_path = tempfile.mkstemp(suffix=".json")
    os.close(fd)
    fd, gif_path = tempfile.mkstemp(suffix=".gif")
    os.close(fd)
    try:
        write_run_output(output, json_path)
        count = make_gif(json_path, gif_path, title="custom")
        assert count == len(output["poses"])
    finally:
        os.unlink(json_path)
        os.unlink(gif_path)
