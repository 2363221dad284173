"""Creating guys and scrap at random places."""

from __future__ import annotations

import logging

from evilpikmin.anim import GuyAnim, NotMovingAnim
from evilpikmin.collisions import Collider, CollisionCircle, CollisionIdentifier
from evilpikmin.components import (
    Carryable,
    GuyBrain,
    HandsFree,
    Position,
    Resource,
    ResourceType,
    Scannable,
    ScanningFor,
    ScanValue,
    Transform,
    Visible,
)
from evilpikmin.config import GUY_SCAN_RANGE, WINDOW_HEIGHT, WINDOW_WIDTH
from evilpikmin.rng import rand_range
from evilpikmin.textures import TextureStore

logger = logging.getLogger(__name__)


def add_guy(ecs, grid) -> int:
    """Spawn a guy at a random spot, scanning for scrap; return its entity."""
    store = TextureStore.instance()
    visible = Visible(store.get("guy_sheet"), GuyAnim.NORM, 0, (0, 0))
    x = float(rand_range(0, WINDOW_WIDTH))
    y = float(rand_range(0, WINDOW_HEIGHT))
    position = Position(x, y, 0)
    collider = Collider(CollisionCircle(x, y, 6), CollisionIdentifier.GUY)

    guy = ecs.add_entity()
    ecs.add_component(guy, visible)
    ecs.add_component(guy, position)
    ecs.add_component(guy, Transform())
    ecs.add_component(guy, collider)
    ecs.add_component(guy, GuyBrain())
    ecs.add_component(guy, HandsFree())
    ecs.add_component(
        guy,
        ScanningFor(
            (ScanValue.CARRIED_SCRAP, ScanValue.SCRAP_METAL),
            (GUY_SCAN_RANGE, GUY_SCAN_RANGE),
        ),
    )
    grid.update_entity(guy, position, collider)
    return guy


def add_scrap(ecs, grid) -> int:
    """Spawn a carryable piece of scrap metal at a random spot; return its entity."""
    store = TextureStore.instance()
    visible = Visible(store.get("scrap_sheet"), NotMovingAnim.SCRAP)
    x = float(rand_range(0, WINDOW_WIDTH))
    y = float(rand_range(0, WINDOW_HEIGHT))
    position = Position(x, y)
    carry_data = Carryable(
        carriers_count=0, carrier_effort=0, carrier_limit=5, weight=125, min_weight=51
    )

    scrap = ecs.add_entity()
    logger.info("Added scrap %d", scrap)

    collider = Collider(CollisionCircle(x, y, 8), CollisionIdentifier.RESOURCE)
    ecs.add_component(scrap, Resource(ResourceType.SCRAP_METAL, 1))
    ecs.add_component(scrap, visible)
    ecs.add_component(scrap, position)
    ecs.add_component(scrap, Scannable(ScanValue.SCRAP_METAL))
    ecs.add_component(scrap, carry_data)
    ecs.add_component(scrap, collider)
    grid.update_entity(scrap, position, collider)
    return scrap