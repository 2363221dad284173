"""The main play state: a base, the player's hand, guys and scrap."""

from __future__ import annotations

import logging
from typing import Tuple

import pygame

from evilpikmin.anim import ToolAnim
from evilpikmin.build_system import BuildSystem
from evilpikmin.carry_system import CarrySystem
from evilpikmin.collision_grid import CollisionGrid
from evilpikmin.collisions import Collider, CollisionCircle, CollisionIdentifier
from evilpikmin.components import (
    Buildable,
    Carrier,
    Carryable,
    Collided,
    CompSig,
    Damageable,
    Damager,
    DamageType,
    Decoration,
    FollowsMouse,
    GuyBrain,
    HandsFree,
    HivemindBrain,
    HivemindParticipant,
    Persuing,
    Position,
    Projectile,
    Resource,
    Scannable,
    ScanningFor,
    Shooter,
    SortedVisible,
    Transform,
    Visible,
    Wandering,
)
from evilpikmin.config import WINDOW_HEIGHT, WINDOW_WIDTH
from evilpikmin.damage_system import DamageSystem
from evilpikmin.draw_fns import render_circle
from evilpikmin.draw_system import DrawSystem
from evilpikmin.ecs import ECS
from evilpikmin.follows_mouse_system import FollowsMouseSystem
from evilpikmin.game_state import GameState
from evilpikmin.guy_brain_system import GuyBrainSystem
from evilpikmin.hivemind_system import HivemindBrainSystem
from evilpikmin.scanning_system import ScanningSystem
from evilpikmin.shoot_system import ShootSystem
from evilpikmin.spawners import add_guy, add_scrap
from evilpikmin.textures import TextureStore
from evilpikmin.transform_system import TransformSystem

logger = logging.getLogger(__name__)

BASE_RADIUS = 50
BASE_HP = 100
HAND_HEIGHT = 50
HAND_OFFSET = (-16, -16)
HAND_CLICK_RADIUS = 16
STARTING_GUYS = 1
STARTING_SCRAP = 60
# Entity inspected when a key is pressed.
DEBUG_ENTITY = 2

_LINE_COLOR = (0, 0, 0, 255)

_COMPONENTS = (
    (Position, CompSig.POSITION),
    (Visible, CompSig.VISIBLE),
    (Decoration, CompSig.DECORATION),
    (SortedVisible, CompSig.SORTEDVISIBLE),
    (Transform, CompSig.TRANSFORM),
    (FollowsMouse, CompSig.FOLLOWS_MOUSE),
    (Collider, CompSig.COLLIDER),
    (Collided, CompSig.COLLIDED),
    (ScanningFor, CompSig.SCANNING_FOR),
    (Scannable, CompSig.SCANNABLE),
    (Persuing, CompSig.PERSUING),
    (Carrier, CompSig.CARRIER),
    (Carryable, CompSig.CARRYABLE),
    (Buildable, CompSig.BUILDABLE),
    (Resource, CompSig.RESOURCE),
    (GuyBrain, CompSig.GUY_BRAIN),
    (Wandering, CompSig.GUY_WANDERING),
    (HivemindBrain, CompSig.HV_BRAIN),
    (HivemindParticipant, CompSig.HV_PARTICIPANT),
    (HandsFree, CompSig.HANDSFREE),
    (Shooter, CompSig.SHOOTER),
    (Projectile, CompSig.PROJECTILE),
    (Damageable, CompSig.DAMAGEABLE),
    (Damager, CompSig.DAMAGER),
)


class MainState(GameState):
    """Runs every system over one ECS world and one collision grid."""

    def __init__(self) -> None:
        self.main_ecs = ECS()
        self.main_grid = CollisionGrid()
        self.mouse_pos: Tuple[float, float] = (0.0, 0.0)
        self.load_ecs()

        ecs = self.main_ecs
        store = TextureStore.instance()

        base_x = WINDOW_WIDTH / 2
        base_y = WINDOW_HEIGHT / 2
        self.main_base = ecs.add_entity()
        ecs.add_component(self.main_base, Position(base_x, base_y))
        ecs.add_component(
            self.main_base,
            Collider(CollisionCircle(base_x, base_y, BASE_RADIUS), CollisionIdentifier.HAND),
        )
        ecs.add_component(
            self.main_base, Damageable(BASE_HP, frozenset({DamageType.LIGHT_SQUISH}))
        )

        self.tool_hand = ecs.add_entity()
        ecs.add_component(self.tool_hand, Position(0, 0, HAND_HEIGHT))
        ecs.add_component(
            self.tool_hand,
            SortedVisible(store.get("tool_hand"), ToolAnim.HAND_NORM, 0, HAND_OFFSET),
        )
        ecs.add_component(self.tool_hand, FollowsMouse(-1))

        for _ in range(STARTING_GUYS):
            add_guy(ecs, self.main_grid)
        for _ in range(STARTING_SCRAP):
            add_scrap(ecs, self.main_grid)

    def load_ecs(self) -> None:
        """Register every system and component type."""
        ecs = self.main_ecs
        # Needing both kinds of visible means hardly anything joins this system.
        self.sys_draw = ecs.register_system(
            DrawSystem, [CompSig.POSITION, CompSig.VISIBLE, CompSig.SORTEDVISIBLE]
        )
        self.sys_transform = ecs.register_system(
            TransformSystem, [CompSig.TRANSFORM, CompSig.POSITION]
        )
        self.sys_scanning = ecs.register_system(
            ScanningSystem, [CompSig.SCANNING_FOR, CompSig.POSITION, CompSig.TRANSFORM]
        )
        self.sys_follows_mouse = ecs.register_system(
            FollowsMouseSystem, [CompSig.FOLLOWS_MOUSE, CompSig.POSITION]
        )
        self.sys_guy_brain = ecs.register_system(
            GuyBrainSystem, [CompSig.GUY_BRAIN, CompSig.POSITION, CompSig.VISIBLE]
        )
        self.sys_hivemind_brain = ecs.register_system(
            HivemindBrainSystem, [CompSig.HV_BRAIN]
        )
        self.sys_carry = ecs.register_system(
            CarrySystem, [CompSig.CARRYABLE, CompSig.COLLIDER]
        )
        self.sys_build = ecs.register_system(BuildSystem, [CompSig.BUILDABLE])
        self.sys_shoot = ecs.register_system(ShootSystem, [CompSig.SHOOTER])
        # Colliders are checked by the damage system itself.
        self.sys_damage = ecs.register_system(DamageSystem, [CompSig.DAMAGEABLE])

        for component_type, index in _COMPONENTS:
            ecs.register_component(component_type, index)

    def update(self, dt: float) -> None:
        ecs, grid = self.main_ecs, self.main_grid
        self.sys_guy_brain.update(dt, ecs, grid)
        self.sys_carry.update(dt, ecs, grid)
        self.sys_build.update(dt, ecs, grid)
        self.sys_transform.update(dt, grid, ecs)
        self.sys_scanning.update(dt, ecs)
        self.sys_follows_mouse.update(dt, ecs, grid, self.mouse_pos)
        self.sys_draw.update(dt, ecs)
        self.sys_hivemind_brain.update(dt, ecs, grid)
        self.sys_damage.update(dt, ecs, grid)
        self.sys_shoot.update(dt, ecs, grid)
        # A click's collider only lasts for the frame it was made in.
        ecs.remove_component(self.tool_hand, Collider)

    def draw(self, surface: pygame.Surface) -> None:
        self.sys_draw.draw(surface, self.main_ecs)
        render_circle(
            surface, WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2, BASE_RADIUS, _LINE_COLOR
        )
        self.main_grid.draw_grid(surface)

    def handle_click(self, x: float, y: float, button: int) -> None:
        """Give the hand a collider at the click point for this frame."""
        logger.debug("Clicked: %d", button)
        if self.main_ecs.has_component(self.tool_hand, Collider):
            logger.warning("Hand [%d] already has a collider this frame", self.tool_hand)
            return
        self.main_ecs.add_component(
            self.tool_hand,
            Collider(CollisionCircle(x, y, HAND_CLICK_RADIUS), CollisionIdentifier.HAND),
        )

    def handle_keydown(self, key: int) -> str:
        """Log and return the state of the debug entity."""
        text = self.main_ecs.describe_entity(DEBUG_ENTITY)
        logger.info("%s", text)
        return text

    def handle_mousemove(self, x: float, y: float) -> None:
        self.mouse_pos = (float(x), float(y))

    def leave_state(self) -> None:
        pass

    def enter_state(self) -> None:
        pass