"""Applying damage from damagers that touch damageable entities."""

from __future__ import annotations

from evilpikmin.collisions import Collider
from evilpikmin.components import Damageable, Damager
from evilpikmin.system import System


class DamageSystem(System):
    """Damagers touching a damageable hurt it and are destroyed."""

    def update(self, dt: float, ecs, grid) -> None:
        for target in sorted(self.registered_entities):
            if target not in self.registered_entities:
                continue
            if not ecs.has_component(target, Collider):
                continue
            health = ecs.component(target, Damageable)
            hits = grid.get_collisions(ecs.component(target, Collider), ecs)
            for damager in sorted(hits):
                if damager == target or not ecs.has_component(damager, Damager):
                    continue
                blow = ecs.component(damager, Damager)
                if not health.accepts(blow.damage_type):
                    continue
                health.hp -= blow.damage
                blow.damaged_this_frame = True
                grid.remove_entity(damager)
                ecs.remove_entity(damager)