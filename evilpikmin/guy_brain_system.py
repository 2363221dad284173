"""Decision making for guys: picking a state and wandering about."""

from __future__ import annotations

import math

from evilpikmin.components import (
    Collided,
    CollisionType,
    CompSig,
    Identifier,
    Position,
    Transform,
    Wandering,
)
from evilpikmin.config import WINDOW_HEIGHT, WINDOW_WIDTH
from evilpikmin.ecs import make_signature
from evilpikmin.guy_sm import die, enter_wandering
from evilpikmin.rng import rand_range
from evilpikmin.system import System
from evilpikmin.vec2 import Vec2

EDGE_MARGIN = 5
AWAY_SPREAD = 60

_SKIP_PROCESSING = make_signature(CompSig.HV_PARTICIPANT)
_PREOCCUPIED = make_signature(CompSig.PERSUING, CompSig.CARRIER)


def _edge_turn_range(position: Position, direction: Vec2) -> tuple:
    """Angle range to turn to when about to walk off the window, else (0, 0)."""
    angle_min = angle_max = 0
    if position.y < EDGE_MARGIN and direction.y < 0:
        angle_min, angle_max = 90, 270
    elif position.y > WINDOW_HEIGHT - EDGE_MARGIN and direction.y > 0:
        angle_min, angle_max = -90, 90
    if position.x < EDGE_MARGIN and direction.x < 0:
        angle_min, angle_max = 0, 180
    elif position.x > WINDOW_WIDTH - EDGE_MARGIN and direction.x > 0:
        angle_min, angle_max = 180, 360
    return angle_min, angle_max


def wander(dt: float, ecs) -> None:
    """Walk every wandering entity, picking a new heading when its timer runs out."""
    for entity, data in ecs.component_array(Wandering):
        if not (
            ecs.has_component(entity, Transform)
            and ecs.has_component(entity, Position)
        ):
            continue
        trans = ecs.component(entity, Transform)
        position = ecs.component(entity, Position)

        data.timer -= dt
        trans.vel_x = data.dir.x * data.speed
        trans.vel_y = data.dir.y * data.speed

        if data.timer < 0:
            direction = Vec2(1, 0)
            direction.face_angle(rand_range(0, 360))
            data.dir = direction
            data.speed = rand_range(20, 50)
            data.timer = rand_range(2, 6) / 2.0

        angle_min, angle_max = _edge_turn_range(position, data.dir)
        # A range summing to zero (the bottom edge) leaves the heading alone.
        if angle_min + angle_max != 0:
            direction = Vec2(0, -1)
            direction.face_angle(rand_range(angle_min, angle_max))
            data.dir = direction


class GuyBrainSystem(System):
    """Puts idle guys into the wandering state and moves wanderers."""

    def update(self, dt: float, ecs, grid) -> None:
        for guy in sorted(self.registered_entities):
            if ecs.signature(guy) & _SKIP_PROCESSING:
                continue
            if ecs.has_any_components(guy, _PREOCCUPIED):
                continue
            if not ecs.has_component(guy, Wandering):
                enter_wandering(guy, ecs)
        wander(dt, ecs)

    def handle_collisions(self, dt: float, ecs, grid) -> None:
        """React to each guy's recorded collisions."""
        for guy in sorted(self.registered_entities):
            if not ecs.has_component(guy, Collided):
                continue
            collided = ecs.component(guy, Collided)
            for col in list(collided.collisions):
                if col.type is CollisionType.IDENTIFIER:
                    if col.identifier is Identifier.SCRAP_METAL:
                        col.type = CollisionType.PICK_ME_UP
                    continue
                if col.type is CollisionType.SQUISH:
                    die(guy, ecs, grid)
                    break
                if col.type is CollisionType.GO_SOMEWHERE_ELSE:
                    if len(collided.collisions) > 1:
                        continue
                    self._walk_away(guy, ecs, col)

    @staticmethod
    def _walk_away(guy: int, ecs, col) -> None:
        wandering = enter_wandering(guy, ecs)
        position = ecs.component(guy, Position)
        away = Vec2(position.x, position.y) - Vec2(col.away_from_x, col.away_from_y)
        angle_away = away.angle_facing()
        if math.isnan(angle_away):
            angle_away = 0.0
        direction = Vec2(1, 0)
        direction.face_angle(
            rand_range(angle_away - AWAY_SPREAD, angle_away + AWAY_SPREAD)
        )
        wandering.dir = direction