"""Finding things to pursue, and steering towards them."""

from __future__ import annotations

import math

import pygame

from evilpikmin.components import (
    Persuing,
    Position,
    Scannable,
    ScanningFor,
    Transform,
    Wandering,
)
from evilpikmin.draw_fns import render_circle
from evilpikmin.system import System
from evilpikmin.vec2 import Vec2

PURSUIT_SPEED = 50
UNLIMITED_RANGE = -1

_DEBUG_COLOR = (0, 0, 0, 255)


def _match(scanning: ScanningFor, scan_value: int):
    """Return ``(priority, max_range)`` if ``scan_value`` is sought, else None."""
    for priority, (value, max_range) in enumerate(
        zip(scanning.sought_scan_values, scanning.max_range)
    ):
        if value == -1:
            return None
        if scan_value == value:
            return priority, max_range
    return None


class ScanningSystem(System):
    """Targets the closest scannable of the highest priority.

    The order of values in ``ScanningFor`` is the priority order.
    """

    def update(self, dt: float, ecs) -> None:
        scannables = list(ecs.component_array(Scannable))

        for entity in sorted(self.registered_entities):
            target = self._choose_target(entity, ecs, scannables)
            if target is None:
                ecs.remove_component(entity, Persuing)
                continue
            if not ecs.has_component(entity, Persuing):
                ecs.add_component(entity, Persuing(0, 0))
                ecs.remove_component(entity, Wandering)
            pursuing = ecs.component(entity, Persuing)
            pursuing.desired_x, pursuing.desired_y = target

        for entity, pursuing in ecs.component_array(Persuing):
            if not (
                ecs.has_component(entity, Position)
                and ecs.has_component(entity, Transform)
            ):
                continue
            pos = ecs.component(entity, Position)
            diff = Vec2(pos.x, pos.y) - Vec2(pursuing.desired_x, pursuing.desired_y)
            direction = diff.normalized() if diff.magnitude() else Vec2(0, 0)
            trans = ecs.component(entity, Transform)
            trans.vel_x = -direction.x * PURSUIT_SPEED
            trans.vel_y = -direction.y * PURSUIT_SPEED

    @staticmethod
    def _choose_target(entity: int, ecs, scannables):
        scanning = ecs.component(entity, ScanningFor)
        pos = ecs.component(entity, Position)
        best = None
        best_priority = math.inf
        best_dist = math.inf
        for other, scannable in scannables:
            if other == entity:
                continue
            match = _match(scanning, scannable.scan_value)
            if match is None or not ecs.has_component(other, Position):
                continue
            priority, max_range = match
            other_pos = ecs.component(other, Position)
            dist = (other_pos.x - pos.x) ** 2 + (other_pos.y - pos.y) ** 2
            if max_range != UNLIMITED_RANGE and dist > max_range * max_range:
                continue
            if priority > best_priority:
                continue
            if priority == best_priority and dist > best_dist:
                continue
            best = (other_pos.x, other_pos.y)
            best_priority = priority
            best_dist = dist
        return best

    def debug_draw(self, surface: pygame.Surface, ecs) -> None:
        """Draw scan ranges and lines to pursuit targets."""
        for entity, scanning in ecs.component_array(ScanningFor):
            if not ecs.has_component(entity, Position):
                continue
            pos = ecs.component(entity, Position)
            for max_range in scanning.max_range:
                if max_range == UNLIMITED_RANGE:
                    break
                render_circle(surface, pos.x, pos.y, max_range, _DEBUG_COLOR)

        for entity, pursuing in ecs.component_array(Persuing):
            if not ecs.has_component(entity, Position):
                continue
            pos = ecs.component(entity, Position)
            pygame.draw.line(
                surface,
                _DEBUG_COLOR,
                (pos.x, pos.y),
                (pursuing.desired_x, pursuing.desired_y),
            )