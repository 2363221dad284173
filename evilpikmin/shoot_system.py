"""Shooters firing rocks at their target."""

from __future__ import annotations

from evilpikmin.anim import NotMovingAnim
from evilpikmin.collisions import Collider, CollisionCircle, CollisionIdentifier
from evilpikmin.components import (
    Damager,
    DamageType,
    Position,
    Shooter,
    Transform,
    Visible,
)
from evilpikmin.system import System
from evilpikmin.textures import TextureStore
from evilpikmin.vec2 import Vec2

PROJECTILE_SPEED = 200
PROJECTILE_RADIUS = 3
PROJECTILE_DAMAGE = 1


class ShootSystem(System):
    """Counts down each shooter's timer and fires a rock when it runs out."""

    def update(self, dt: float, ecs, grid) -> None:
        self.update_shooters(dt, ecs, grid)

    def update_shooters(self, dt: float, ecs, grid) -> None:
        store = TextureStore.instance()
        for shooter_id in sorted(self.registered_entities):
            shooter = ecs.component(shooter_id, Shooter)
            shooter.shoot_timer -= dt
            if shooter.shoot_timer > 0:
                continue
            shooter.shoot_timer = shooter.shoot_interval
            origin = ecs.component(shooter_id, Position)
            self._fire(ecs, store, origin, shooter.target_pos)

    @staticmethod
    def _fire(ecs, store, origin: Position, target: Vec2) -> int:
        heading = target - Vec2(origin.x, origin.y)
        direction = heading.normalized() if heading.magnitude() else Vec2(0, 0)

        projectile = ecs.add_entity()
        ecs.add_component(
            projectile, Visible(store.get("rock"), NotMovingAnim.ROCK, -1, (0, 0))
        )
        ecs.add_component(projectile, Position(origin.x, origin.y, 0))
        ecs.add_component(
            projectile,
            Transform(direction.x * PROJECTILE_SPEED, direction.y * PROJECTILE_SPEED, 0),
        )
        ecs.add_component(
            projectile,
            Collider(
                CollisionCircle(origin.x, origin.y, PROJECTILE_RADIUS),
                CollisionIdentifier.HAND,
            ),
        )
        ecs.add_component(
            projectile, Damager(PROJECTILE_DAMAGE, DamageType.LIGHT_SQUISH, False)
        )
        return projectile