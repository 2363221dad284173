"""Guys picking up carryable things and forming a hivemind around them."""

from __future__ import annotations

from typing import Iterable

from evilpikmin.collisions import Collider
from evilpikmin.components import (
    Carrier,
    Carryable,
    CompSig,
    GuyBrain,
    GuyState,
    HandsFree,
    HivemindBrain,
    HivemindParticipant,
    Persuing,
    Position,
    Scannable,
    ScanningFor,
    ScanValue,
    Transform,
)
from evilpikmin.config import GUY_CARRY_STRENGTH, GUY_SCAN_RANGE
from evilpikmin.ecs import make_signature
from evilpikmin.system import System
from evilpikmin.vec2 import Vec2

CARRIED_HEIGHT = 5

_FREE_GUY = make_signature(CompSig.HANDSFREE, CompSig.GUY_BRAIN)


def strip_invalid_carrieds(ecs) -> None:
    """Forget carried entities that are no longer carryable.

    The pass stops at the first carrier that carries nothing.
    """
    for _, carrier in ecs.component_array(Carrier):
        if carrier.carried_entity is None:
            return
        if not ecs.has_component(carrier.carried_entity, Carryable):
            carrier.carried_entity = None


def _start_hivemind(pickup: int, ecs) -> None:
    ecs.add_component(pickup, HivemindBrain())
    if not ecs.has_component(pickup, ScanningFor):
        ecs.add_component(
            pickup,
            ScanningFor(
                (
                    ScanValue.BUILDSITE_WANT_SCRAP,
                    ScanValue.CARRIED_SCRAP,
                    ScanValue.SCRAP_METAL,
                    ScanValue.CARRIED_SCRAP_FULL,
                ),
                (GUY_SCAN_RANGE,) * 4,
            ),
        )
    if not ecs.has_component(pickup, Transform):
        ecs.add_component(pickup, Transform())
    if not ecs.has_component(pickup, GuyBrain):
        ecs.add_component(pickup, GuyBrain(GuyState.SEEKING, 0))
    if ecs.has_component(pickup, Scannable):
        ecs.component(pickup, Scannable).scan_value = ScanValue.CARRIED_SCRAP


def _join(guy: int, pickup: int, ecs) -> None:
    brain = ecs.component(pickup, HivemindBrain)
    carry = ecs.component(pickup, Carryable)
    if guy in brain.entities or carry.carriers_count >= carry.carrier_limit:
        return

    ecs.remove_component(guy, ScanningFor)
    ecs.remove_component(guy, Persuing)
    ecs.remove_component(guy, HandsFree)
    brain.entities.append(guy)

    guy_pos = ecs.component(guy, Position)
    pickup_pos = ecs.component(pickup, Position)
    pickup_pos.z = CARRIED_HEIGHT
    offset = Vec2(guy_pos.x, guy_pos.y) - Vec2(pickup_pos.x, pickup_pos.y)
    ecs.add_component(guy, HivemindParticipant(offset))

    carry.carriers_count += 1
    carry.carrier_effort += GUY_CARRY_STRENGTH

    if ecs.has_component(guy, Transform):
        trans = ecs.component(guy, Transform)
        trans.vel_x = trans.vel_y = trans.vel_z = 0

    if carry.carriers_count == carry.carrier_limit and ecs.has_component(
        pickup, Scannable
    ):
        ecs.component(pickup, Scannable).scan_value = ScanValue.CARRIED_SCRAP_FULL


def process_pickup(entities: Iterable[int], ecs, grid) -> None:
    """Let every free guy touching a carryable in ``entities`` start carrying it."""
    for pickup in sorted(entities):
        if not ecs.has_component(pickup, Collider):
            continue
        touching = grid.get_collisions(ecs.component(pickup, Collider), ecs)
        for guy in sorted(touching):
            if guy == pickup or not ecs.has_components(guy, _FREE_GUY):
                continue
            if not ecs.has_component(pickup, HivemindBrain):
                _start_hivemind(pickup, ecs)
            _join(guy, pickup, ecs)


class CarrySystem(System):
    """Runs pickups for carryable entities with colliders."""

    def update(self, dt: float, ecs, grid) -> None:
        strip_invalid_carrieds(ecs)
        process_pickup(list(self.registered_entities), ecs, grid)