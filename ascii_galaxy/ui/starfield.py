"""Twinkling background star field."""

from __future__ import annotations

import random

from ..constants import (
    NUM_BACKGROUND_STARS,
    STAR_MAX_SPEED,
    STAR_MIN_BRIGHTNESS,
    STAR_MIN_SPEED,
    TWO_PI,
)
from ..models.bodies import Star
from ..models.vector import Vec2
from .canvas import Canvas, star_glyph


class StarField:
    """Stars scattered uniformly across the grid, drawn beneath the galaxy."""

    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random,
        count: int = NUM_BACKGROUND_STARS,
    ) -> None:
        self.stars: list[Star] = []
        for _ in range(count):
            self.stars.append(
                Star(
                    position=Vec2(rng.uniform(0, width), rng.uniform(0, height)),
                    phase=rng.uniform(0, TWO_PI),
                    speed=rng.uniform(STAR_MIN_SPEED, STAR_MAX_SPEED),
                    base_brightness=rng.uniform(STAR_MIN_BRIGHTNESS, 1.0),
                )
            )

    def update(self, dt: float) -> None:
        for star in self.stars:
            star.update(dt)

    def draw(self, canvas: Canvas) -> None:
        for star in self.stars:
            glyph = star_glyph(star.brightness())
            if glyph is not None:
                canvas.put(star.position.x, star.position.y, glyph)
