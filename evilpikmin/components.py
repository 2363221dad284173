"""Component data types attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from evilpikmin.anim import AnimFrame
from evilpikmin.config import MAX_COLLISIONS_PER_ENTITY
from evilpikmin.vec2 import Vec2

MAX_SCAN_VALUES = 4
MAX_BUILDABLE_STAGES = 4
NUM_DAMAGE_TYPES = 3
MAX_ENTITIES_IN_HIVEMIND = 10


class CompSig(IntEnum):
    """Signature bit index of each component type."""

    EXISTS = 0
    POSITION = 1
    VISIBLE = 2
    DECORATION = 3
    SORTED_VISIBLE = 4
    TRANSFORM = 5
    FOLLOWS_MOUSE = 6
    SCANNING_FOR = 7
    SCANNABLE = 8
    CARRIER = 9
    CARRYABLE = 10
    PERSUING = 11
    COLLIDER = 12
    COLLIDED = 13
    BUILDABLE = 14
    RESOURCE = 15
    GUY_BRAIN = 16
    GUY_WANDERING = 17
    HV_BRAIN = 18
    HV_PARTICIPANT = 19
    HANDSFREE = 20
    SHOOTER = 21
    PROJECTILE = 22
    DAMAGEABLE = 23
    DAMAGER = 24


class CollisionType(IntEnum):
    IDENTIFIER = 0
    SQUISH = 1
    EXPLOSION = 2
    FOUND_SOUGHT = 3
    GO_SOMEWHERE_ELSE = 4
    PICK_ME_UP = 5
    NO_OP = 6


class Identifier(IntEnum):
    SCRAP_METAL = 0


@dataclass
class Collision:
    """A collision event; which fields matter depends on ``type``.

    ``entity`` is the sought, picked-up or identified entity, ``strength``
    belongs to squish and explosion, ``away_from_x``/``away_from_y`` to
    go-somewhere-else.
    """

    type: CollisionType
    entity: Optional[int] = None
    identifier: Optional[Identifier] = None
    strength: int = 0
    away_from_x: int = 0
    away_from_y: int = 0


@dataclass
class FollowsMouse:
    speed: int  # -1 snaps straight to the mouse


@dataclass
class Position:
    x: float
    y: float
    z: float = 0.0


@dataclass
class Transform:
    vel_x: float = 0.0
    vel_y: float = 0.0
    vel_z: float = 0.0


class ScanValue(IntEnum):
    SCRAP_METAL = 0
    BUILD_SITE = 1
    BUILDSITE_WANT_SCRAP = 3
    CARRIED_SCRAP = 16
    CARRIED_SCRAP_FULL = 17


@dataclass
class ScanningFor:
    """Scan values in priority order, with the range each is sought at.

    Both are padded to ``MAX_SCAN_VALUES``: values with -1, ranges with 0.
    """

    sought_scan_values: tuple = ()
    max_range: tuple = ()

    def __post_init__(self) -> None:
        values = list(self.sought_scan_values)
        ranges = list(self.max_range)
        if len(values) > MAX_SCAN_VALUES or len(ranges) > MAX_SCAN_VALUES:
            raise ValueError(f"at most {MAX_SCAN_VALUES} scan values are allowed")
        self.sought_scan_values = tuple(values + [-1] * (MAX_SCAN_VALUES - len(values)))
        self.max_range = tuple(ranges + [0.0] * (MAX_SCAN_VALUES - len(ranges)))


@dataclass
class Scannable:
    scan_value: int


@dataclass
class Persuing:
    desired_x: float = 0.0
    desired_y: float = 0.0


@dataclass
class Collided:
    collisions: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.collisions) > MAX_COLLISIONS_PER_ENTITY:
            raise ValueError(
                f"at most {MAX_COLLISIONS_PER_ENTITY} collisions per entity"
            )


@dataclass
class HandsFree:
    pass


@dataclass
class _Sprite:
    texture: Any
    frame: AnimFrame
    anim_timer: float = 0.0
    offset: tuple = (0, 0)  # shift on top of the frame's own offset


@dataclass
class Visible(_Sprite):
    """Drawn in storage order."""


@dataclass
class SortedVisible(_Sprite):
    """Drawn after visibles, sorted by height."""


@dataclass
class Decoration(_Sprite):
    """Drawn before the guys."""


class ResourceType(IntEnum):
    SCRAP_METAL = 0


@dataclass
class Resource:
    type: ResourceType
    value: int


class StructureType(IntEnum):
    TOWER = 0


@dataclass
class Buildable:
    stage_frames: list
    points_required: list
    desired_resource: ResourceType = ResourceType.SCRAP_METAL
    target_structure_type: StructureType = StructureType.TOWER
    cur_stage: int = 0
    cur_build_points: int = 0
    full: bool = False

    def __post_init__(self) -> None:
        if len(self.stage_frames) > MAX_BUILDABLE_STAGES:
            raise ValueError(f"at most {MAX_BUILDABLE_STAGES} build stages")
        if len(self.points_required) != len(self.stage_frames):
            raise ValueError("each build stage needs a points requirement")

    @property
    def num_stages(self) -> int:
        return len(self.stage_frames)


class ProjectileType(IntEnum):
    ROCK = 0


@dataclass
class Shooter:
    projectile_type: ProjectileType
    shoot_interval: float
    shoot_timer: float
    target_pos: Vec2 = field(default_factory=Vec2)


@dataclass
class Projectile:
    damage: int


@dataclass
class Carrier:
    carried_entity: Optional[int] = None
    contributing_effort: int = 0


@dataclass
class Carryable:
    carriers_count: int = 0
    carrier_effort: int = 0  # total effort of carriers; more moves faster
    carrier_limit: int = 0
    weight: int = 0
    min_weight: int = 0  # effort needed to move at all


class GuyState(IntEnum):
    SEEKING = 0
    WANDERING = 1
    CARRYING = 2


@dataclass
class GuyBrain:
    cur_state: GuyState = GuyState.SEEKING
    die_timer: float = 0.0


class DamageType(IntEnum):
    LIGHT_SQUISH = 0
    HEAVY_SQUISH = 1
    FIRE = 2


@dataclass
class Damageable:
    hp: int
    valid_damage_types: frozenset = frozenset()

    def __post_init__(self) -> None:
        self.valid_damage_types = frozenset(
            DamageType(t) for t in self.valid_damage_types
        )

    def accepts(self, damage_type) -> bool:
        return DamageType(damage_type) in self.valid_damage_types


@dataclass
class Damager:
    damage: int
    damage_type: DamageType
    damaged_this_frame: bool = False


@dataclass
class Wandering:
    timer: float = 0.0
    speed: int = 10
    dir: Vec2 = field(default_factory=Vec2)


@dataclass
class HivemindBrain:
    """Owning this makes an entity a hivemind for the listed entities."""

    entities: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.entities) > MAX_ENTITIES_IN_HIVEMIND:
            raise ValueError(
                f"at most {MAX_ENTITIES_IN_HIVEMIND} entities per hivemind"
            )


@dataclass
class HivemindParticipant:
    offset: Vec2 = field(default_factory=Vec2)  # from the hivemind's position