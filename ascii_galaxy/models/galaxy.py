"""Spiral galaxy simulation and its rasterisation onto a character grid."""

from __future__ import annotations

import logging
import math
import random
from typing import Protocol

from ..constants import (
    ARM_ANGLE_JITTER,
    ARM_INNER_RADIUS,
    ARM_ORBIT_SPEED,
    ARM_OUTER_RADIUS,
    ARM_WINDING,
    ASPECT_RATIO,
    CORE_MAX_RADIUS,
    CORE_MIN_BRIGHTNESS,
    CORE_MIN_RADIUS,
    CORE_ORBIT_SPEED,
    CORE_PARTICLES,
    NUM_ARMS,
    NUM_BACKGROUND_STARS,
    PARTICLES_PER_ARM,
    RANDOM_SEED,
    TWO_PI,
)
from ..ui.canvas import Canvas
from ..ui.hud import compose_frame
from ..ui.starfield import StarField
from .bodies import Particle, Star, wrap_angle
from .vector import Vec2

logger = logging.getLogger(__name__)


class FrameSink(Protocol):
    """Anything that can take a finished frame in one write."""

    def write_frame(self, text: str) -> None: ...


class Galaxy:
    """Two-armed spiral galaxy with a core bulge and a twinkling backdrop.

    Motion is purely kinematic: every particle keeps its orbit radius and
    angular velocity for the life of the galaxy, and nothing interacts.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random | None = None,
        *,
        num_stars: int = NUM_BACKGROUND_STARS,
    ) -> None:
        self.width = width
        self.height = height
        self.center = Vec2(width / 2.0, height / 2.0)
        self.aspect_ratio = ASPECT_RATIO
        self.time = 0.0
        self.rng = rng if rng is not None else random.Random(RANDOM_SEED)

        self.particles: list[Particle] = []
        self._init_spiral_arms()
        self._init_core()
        self.starfield = StarField(width, height, self.rng, count=num_stars)

        logger.debug(
            f"Galaxy {width}x{height} generated: "
            f"{len(self.particles)} particles, {len(self.stars)} stars"
        )

    @property
    def stars(self) -> list[Star]:
        return self.starfield.stars

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def _init_spiral_arms(self) -> None:
        rng = self.rng
        for arm in range(NUM_ARMS):
            arm_offset = arm * math.pi
            for i in range(PARTICLES_PER_ARM):
                t = i / PARTICLES_PER_ARM
                base_radius = ARM_INNER_RADIUS + t * (ARM_OUTER_RADIUS - ARM_INNER_RADIUS)
                spiral_angle = arm_offset + t * ARM_WINDING

                # Outer particles scatter more
                radius = base_radius + rng.uniform(-1.0, 1.0) * (0.5 + t * 1.5)
                angle = spiral_angle + rng.uniform(-ARM_ANGLE_JITTER, ARM_ANGLE_JITTER)

                self.particles.append(
                    Particle(
                        radius=radius,
                        angle=wrap_angle(angle % TWO_PI),
                        angular_velocity=ARM_ORBIT_SPEED / math.sqrt(radius),
                        brightness=0.3 + 0.7 * (1.0 - t * 0.6),
                    )
                )

    def _init_core(self) -> None:
        rng = self.rng
        for _ in range(CORE_PARTICLES):
            radius = rng.uniform(CORE_MIN_RADIUS, CORE_MAX_RADIUS)
            angle = rng.uniform(0, TWO_PI)
            self.particles.append(
                Particle(
                    radius=radius,
                    angle=wrap_angle(angle),
                    angular_velocity=CORE_ORBIT_SPEED / math.sqrt(radius + 0.5),
                    brightness=CORE_MIN_BRIGHTNESS + rng.uniform(0, 1.0 - CORE_MIN_BRIGHTNESS),
                )
            )

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        self.time += dt
        for particle in self.particles:
            particle.update(dt)
        self.starfield.update(dt)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def rasterize(self) -> list[str]:
        """Draw the current state into fresh buffers and return the grid rows."""
        canvas = Canvas(self.width, self.height)
        self.starfield.draw(canvas)
        for particle in self.particles:
            pos = particle.project(self.center, self.aspect_ratio)
            canvas.accumulate(pos.x, pos.y, particle.brightness)
        canvas.apply_intensity()
        canvas.stamp_core(self.center.x, self.center.y)
        return canvas.rows()

    def frame(self, elapsed: float = 0.0) -> str:
        """Full text block for one frame, footer included."""
        return compose_frame(self.rasterize(), elapsed)

    def render(self, out: FrameSink, elapsed: float = 0.0) -> None:
        out.write_frame(self.frame(elapsed))
