"""Moving entities by their velocity."""

from __future__ import annotations

from evilpikmin.collisions import Collider, update_collider_position
from evilpikmin.components import Carryable, Position, Transform
from evilpikmin.system import System


def _speed_multiplier(carry: Carryable) -> float:
    if carry.carrier_effort < carry.min_weight:
        return 1.0
    if carry.weight <= 0:
        return 1.0
    return min(carry.carrier_effort / carry.weight, 1.0)


class TransformSystem(System):
    """Applies velocities and keeps colliders and the grid in step."""

    def update(self, dt: float, grid, ecs) -> None:
        for entity in sorted(self.registered_entities):
            position = ecs.component(entity, Position)
            trans = ecs.component(entity, Transform)

            multiplier = 1.0
            if ecs.has_component(entity, Carryable):
                multiplier = _speed_multiplier(ecs.component(entity, Carryable))

            position.x += trans.vel_x * multiplier * dt
            position.y += trans.vel_y * multiplier * dt

            if ecs.has_component(entity, Collider):
                collider = ecs.component(entity, Collider)
                update_collider_position(collider, position.x, position.y)
                grid.update_entity(entity, position, collider)