import pytest

from terminal_hanoi.render import BLOCK, box_width, render_cell, render_frame, render_layer
from terminal_hanoi.tower import Peg, Tower


def test_box_width_formula():
    assert box_width(0) == 6
    assert box_width(1) == 8
    assert box_width(6) == 18


@pytest.mark.parametrize("height", [0, 1, 6])
def test_cells_have_box_width(height):
    width = box_width(height)
    assert len(render_cell(None, width)) == width
    for disk in range(1, height + 1):
        assert len(render_cell(disk, width)) == width


def test_cell_is_centered():
    assert render_cell(2, 10) == "   " + BLOCK * 4 + "   "
    assert render_cell(None, 4) == "    "


def test_odd_padding_drops_remainder():
    assert render_cell(1, 5) == " " + BLOCK * 2 + " "


def test_height_one_round_trip():
    tower = Tower(1)
    blank = " " * 8
    block = "   " + BLOCK * 2 + "   "
    assert render_frame(tower) == block + blank + blank + "\n"
    tower.move_disk(Peg.LEFT, Peg.RIGHT)
    assert render_frame(tower) == blank + blank + block + "\n"


def test_height_zero_frame_is_empty():
    assert render_frame(Tower(0)) == ""


def test_frame_lists_top_layer_first():
    tower = Tower(3)
    lines = render_frame(tower).splitlines()
    assert len(lines) == 3
    assert lines[0].count(BLOCK) == 2
    assert lines[-1].count(BLOCK) == 6
    assert all(len(line) == box_width(3) * 3 for line in lines)


def test_layer_spans_pegs():
    tower = Tower(2)
    tower.move_disk(Peg.LEFT, Peg.MIDDLE)
    width = box_width(2)
    line = render_layer(tower, 0)
    assert line.endswith("\n")
    left, middle, right = line[:width], line[width:2 * width], line[2 * width:-1]
    assert left.count(BLOCK) == 4
    assert middle.count(BLOCK) == 2
    assert right == " " * width
