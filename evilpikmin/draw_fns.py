"""Pixel-level circle drawing."""

from __future__ import annotations

import math
import os
from typing import Iterator, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

Point = Tuple[float, float]


def _outline_points(x: float, y: float, radius: float) -> Iterator[Point]:
    diameter = radius * 2
    px = radius - 1
    py = 0.0
    tx = 1.0
    ty = 1.0
    error = tx - diameter
    while px >= py:
        # One point per octant.
        yield x + px, y - py
        yield x + px, y + py
        yield x - px, y - py
        yield x - px, y + py
        yield x + py, y - px
        yield x + py, y + px
        yield x - py, y - px
        yield x - py, y + px
        if error <= 0:
            py += 1
            error += ty
            ty += 2
        if error > 0:
            px -= 1
            tx += 2
            error += tx - diameter


def _filled_points(x: float, y: float, radius: float) -> Iterator[Point]:
    span = math.ceil(radius * 2) if radius > 0 else 0
    for w in range(span):
        dx = int(radius - w)
        for h in range(span):
            dy = int(radius - h)
            if dx * dx + dy * dy <= radius * radius:
                yield x + dx, y + dy


def _plot(surface: pygame.Surface, points: Iterator[Point], color) -> None:
    for px, py in points:
        surface.set_at((math.floor(px), math.floor(py)), color)


def render_circle(surface: pygame.Surface, x: float, y: float, radius: float, color) -> None:
    """Draw a one-pixel circle outline centred on ``(x, y)``."""
    _plot(surface, _outline_points(x, y, radius), color)


def render_filled_circle(
    surface: pygame.Surface, x: float, y: float, radius: float, color
) -> None:
    """Draw a filled disc centred on ``(x, y)``."""
    _plot(surface, _filled_points(x, y, radius), color)