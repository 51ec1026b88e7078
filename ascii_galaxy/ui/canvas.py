"""Character canvas: a glyph grid with a parallel intensity accumulator."""

from __future__ import annotations

from ..constants import (
    BLANK,
    CORE_GLYPHS,
    GRADIENT,
    INTENSITY_SCALE,
    INTENSITY_THRESHOLD,
    STAR_GLYPHS,
)


def star_glyph(brightness: float) -> str | None:
    """Glyph for a star of the given brightness, or None if too dim to draw."""
    for threshold, glyph in STAR_GLYPHS:
        if brightness > threshold:
            return glyph
    return None


def gradient_index(intensity: float) -> int:
    """Index into GRADIENT for an accumulated cell intensity.

    The sum is not clamped before scaling, so dense cells saturate at the
    last glyph.
    """
    index = int(intensity * INTENSITY_SCALE)
    return max(0, min(index, len(GRADIENT) - 1))


class Canvas:
    """One frame's worth of drawing surface, rebuilt every render."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells: list[list[str]] = [[BLANK] * width for _ in range(height)]
        self.intensity: list[list[float]] = [[0.0] * width for _ in range(height)]

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def put(self, x: float, y: float, glyph: str) -> bool:
        """Write a glyph at a continuous position; off-grid positions are dropped.

        Returns whether the write landed on the grid.
        """
        col, row = int(x), int(y)
        if not self.in_bounds(col, row):
            return False
        self.cells[row][col] = glyph
        return True

    def accumulate(self, x: float, y: float, amount: float) -> bool:
        """Add brightness to the intensity cell under a continuous position.

        Returns whether the position was on the grid.
        """
        col, row = int(x), int(y)
        if not self.in_bounds(col, row):
            return False
        self.intensity[row][col] += amount
        return True

    def apply_intensity(self) -> None:
        """Turn accumulated intensity into gradient glyphs, over whatever is there."""
        for cells, levels in zip(self.cells, self.intensity):
            for col, level in enumerate(levels):
                if level > INTENSITY_THRESHOLD:
                    cells[col] = GRADIENT[gradient_index(level)]

    def stamp_core(self, x: float, y: float) -> bool:
        """Draw the three-cell core motif centred on the given position.

        Returns False, drawing nothing, when the motif does not fit.
        """
        col, row = int(x), int(y)
        if not (0 < col < self.width - 1 and 0 <= row < self.height):
            return False
        left, middle, right = CORE_GLYPHS
        self.cells[row][col - 1] = left
        self.cells[row][col] = middle
        self.cells[row][col + 1] = right
        return True

    def rows(self) -> list[str]:
        return ["".join(cells) for cells in self.cells]
