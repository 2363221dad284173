"""Entering and leaving guy states by adding and removing components."""

from __future__ import annotations

import logging

from evilpikmin.anim import GuyAnim
from evilpikmin.collisions import Collider
from evilpikmin.components import (
    Collided,
    GuyBrain,
    GuyState,
    Transform,
    Visible,
    Wandering,
)
from evilpikmin.rng import rand_range
from evilpikmin.textures import TextureStore
from evilpikmin.vec2 import Vec2

logger = logging.getLogger(__name__)


def enter_wandering(guy: int, ecs) -> Wandering:
    """Start the guy wandering in a random direction; return its wander data."""
    angle = rand_range(0, 359)
    speed = rand_range(20, 49)
    direction = Vec2(1, 0)
    direction.face_angle(angle)
    timer = rand_range(2, 11) / 2.0

    if ecs.has_component(guy, Wandering):
        logger.warning("Entity [%d] is being given Wandering but already has it", guy)
    else:
        ecs.add_component(guy, Wandering(timer, speed, direction))

    ecs.component(guy, GuyBrain).cur_state = GuyState.WANDERING
    return ecs.component(guy, Wandering)


def die(guy: int, ecs, grid) -> None:
    """Play the squish animation and strip everything that lets the guy act."""
    vis = ecs.component(guy, Visible)
    vis.frame = GuyAnim.SQUISH1
    vis.anim_timer = 0
    vis.texture = TextureStore.instance().get("squish_sheet")

    ecs.component(guy, GuyBrain).die_timer = 1
    ecs.remove_component(guy, Transform)
    ecs.remove_component(guy, Wandering)
    ecs.remove_component(guy, Collider)
    grid.remove_entity(guy)
    ecs.remove_component(guy, Collided)


def stop_being_guy(guy: int, ecs) -> None:
    """Strip every guy-brain component."""
    ecs.remove_component(guy, GuyBrain)
    ecs.remove_component(guy, Wandering)