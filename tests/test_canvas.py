import pytest

from ascii_galaxy.constants import GRADIENT
from ascii_galaxy.ui.canvas import Canvas, gradient_index, star_glyph
from ascii_galaxy.ui.hud import compose_frame, status_line


@pytest.mark.parametrize(
    "brightness, glyph",
    [(1.0, "*"), (0.71, "*"), (0.7, "+"), (0.5, "+"), (0.4, "."), (0.25, "."), (0.2, None), (0.0, None)],
)
def test_star_glyph_thresholds(brightness, glyph):
    assert star_glyph(brightness) == glyph


def test_gradient_index_is_monotonic():
    levels = [0.11 + i * 0.05 for i in range(100)]
    indices = [gradient_index(level) for level in levels]
    assert indices == sorted(indices)
    assert all(0 <= i < len(GRADIENT) for i in indices)


def test_gradient_saturates_at_densest_glyph():
    assert gradient_index(3.0) == len(GRADIENT) - 1
    assert gradient_index(250.0) == len(GRADIENT) - 1


def test_blank_canvas():
    canvas = Canvas(5, 3)
    assert canvas.rows() == ["     "] * 3


@pytest.mark.parametrize("x, y", [(-1.5, 0.0), (5.0, 0.0), (0.0, 3.0), (2.0, -7.0), (99.0, 99.0)])
def test_out_of_bounds_writes_are_dropped(x, y):
    canvas = Canvas(5, 3)
    assert canvas.put(x, y, "*") is False
    assert canvas.accumulate(x, y, 1.0) is False
    canvas.apply_intensity()
    assert canvas.rows() == ["     "] * 3


def test_positions_are_truncated_to_cells():
    canvas = Canvas(5, 3)
    assert canvas.put(3.99, 1.2, "+")
    assert canvas.rows()[1] == "   + "


def test_overlapping_particles_accumulate():
    canvas = Canvas(10, 10)
    canvas.accumulate(4.2, 6.7, 0.4)
    canvas.accumulate(4.8, 6.1, 0.4)

    assert canvas.intensity[6][4] == pytest.approx(0.8)
    canvas.apply_intensity()
    assert canvas.cells[6][4] == GRADIENT[2]


def test_faint_intensity_leaves_cell_alone():
    canvas = Canvas(3, 1)
    canvas.put(1.0, 0.0, ".")
    canvas.accumulate(1.0, 0.0, 0.1)
    canvas.apply_intensity()
    assert canvas.rows() == [" . "]


def test_intensity_overwrites_star_glyph():
    canvas = Canvas(3, 1)
    canvas.put(1.0, 0.0, "*")
    canvas.accumulate(1.0, 0.0, 1.0)
    canvas.apply_intensity()
    assert canvas.rows() == [" " + GRADIENT[3] + " "]


def test_core_stamp_overwrites_everything():
    canvas = Canvas(7, 3)
    for col in range(7):
        canvas.accumulate(col, 1, 5.0)
    canvas.apply_intensity()

    assert canvas.stamp_core(3.5, 1.5)
    assert canvas.rows()[1] == "@@(@)@@"


@pytest.mark.parametrize(
    "width, x, y, drawn",
    [(3, 1.5, 0.0, True), (2, 1.0, 0.0, False), (5, 0.0, 0.0, False), (5, 4.0, 0.0, False), (5, 2.0, 1.0, False)],
)
def test_core_stamp_needs_room_for_both_neighbours(width, x, y, drawn):
    canvas = Canvas(width, 1)
    assert canvas.stamp_core(x, y) is drawn
    if not drawn:
        assert canvas.rows() == [" " * width]


def test_status_line_truncates_seconds():
    assert status_line(0.0) == " Time: 0s"
    assert status_line(12.97) == " Time: 12s"


def test_compose_frame():
    assert compose_frame(["ab", "cd"], 3.2) == "ab\ncd\n\n Time: 3s"
