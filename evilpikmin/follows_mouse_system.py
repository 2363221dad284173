"""Entities that follow the mouse pointer."""

from __future__ import annotations

from typing import Tuple

from evilpikmin.collisions import Collider, update_collider_position
from evilpikmin.components import FollowsMouse, Position
from evilpikmin.system import System

SNAP_TO_MOUSE = -1


class FollowsMouseSystem(System):
    """Moves followers onto the mouse; only snapping followers move so far."""

    def update(self, dt: float, ecs, grid, mouse_pos: Tuple[float, float]) -> None:
        mouse_x, mouse_y = mouse_pos
        for entity in sorted(self.registered_entities):
            position = ecs.component(entity, Position)
            follows = ecs.component(entity, FollowsMouse)
            if follows.speed == SNAP_TO_MOUSE:
                position.x = mouse_x
                position.y = mouse_y

            if ecs.has_component(entity, Collider):
                collider = ecs.component(entity, Collider)
                update_collider_position(collider, position.x, position.y)
                grid.update_entity(entity, position, collider)