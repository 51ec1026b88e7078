"""Orbiting particles and twinkling background stars."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import TWINKLE_FLOOR, TWO_PI
from .vector import Vec2


def wrap_angle(angle: float) -> float:
    """Bring an angle back into [0, 2π) with at most one turn of correction."""
    if angle >= TWO_PI:
        angle -= TWO_PI
    if angle < 0:
        angle += TWO_PI
        # -ε + 2π rounds to exactly 2π
        if angle >= TWO_PI:
            angle = 0.0
    return angle


@dataclass
class Particle:
    """A point on a fixed circular orbit around the galaxy centre."""

    radius: float
    angle: float  # Radians, kept in [0, 2π)
    angular_velocity: float  # Radians per simulated time unit
    brightness: float  # 0.0–1.0

    def update(self, dt: float) -> None:
        self.angle = wrap_angle(self.angle + self.angular_velocity * dt)

    def project(self, center: Vec2, aspect_ratio: float) -> Vec2:
        """Screen-space position; x is stretched so orbits look circular."""
        return Vec2(
            center.x + self.radius * math.cos(self.angle) * aspect_ratio,
            center.y + self.radius * math.sin(self.angle),
        )


@dataclass
class Star:
    """A fixed background star whose brightness oscillates with its phase."""

    position: Vec2
    phase: float  # Radians, kept in [0, 2π)
    speed: float  # Phase advance per simulated time unit
    base_brightness: float  # 0.0–1.0

    def update(self, dt: float) -> None:
        self.phase = wrap_angle(self.phase + self.speed * dt)

    def brightness(self) -> float:
        """Current brightness, between 30% and 100% of the base brightness."""
        wave = 0.5 + 0.5 * math.sin(self.phase)
        return self.base_brightness * (TWINKLE_FLOOR + (1.0 - TWINKLE_FLOOR) * wave)
