"""A small mutable 2D vector."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPSILON = 0.0001
_DEG_TO_RAD = 0.01745329


@dataclass
class Vec2:
    """A 2D vector where an angle of 0 degrees points up, towards (0, -1)."""

    x: float = 0.0
    y: float = 0.0

    def face_angle(self, degrees: float) -> None:
        """Turn the vector to face ``degrees`` while keeping its magnitude."""
        mag = self.magnitude()
        rad = degrees * _DEG_TO_RAD
        self.x = math.sin(rad) * mag
        self.y = -math.cos(rad) * mag
        if abs(self.x) < EPSILON:
            self.x = 0.0
        if abs(self.y) < EPSILON:
            self.y = 0.0

    def angle_facing(self) -> float:
        """Return the angle in degrees the vector faces; up is 0."""
        if self.x == 0:
            if self.y == 0:
                return math.nan
            ratio = math.copysign(math.inf, self.y) * math.copysign(1.0, self.x)
        else:
            ratio = self.y / self.x
        angle = math.atan(ratio) / _DEG_TO_RAD + 90
        if self.x < 0:
            angle += 180
        if abs(angle) < EPSILON:
            angle = 0.0
        return angle

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> None:
        """Scale the vector in place to unit length."""
        normal = self.normalized()
        self.x, self.y = normal.x, normal.y

    def normalized(self) -> Vec2:
        """Return a unit-length copy; a zero vector gives NaN components."""
        mag = self.magnitude()
        if mag == 0:
            return Vec2(math.nan, math.nan)
        return Vec2(self.x / mag, self.y / mag)

    def __str__(self) -> str:
        return f"({self.x:.6f}, {self.y:.6f})"

    def __iadd__(self, other):
        if isinstance(other, Vec2):
            self.x += other.x
            self.y += other.y
        elif isinstance(other, (int, float)):
            self.x += other
            self.y += other
        else:
            return NotImplemented
        return self

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, (int, float)):
            return Vec2(other + self.x, other + self.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return Vec2(other * self.x, other * self.y)
        return NotImplemented