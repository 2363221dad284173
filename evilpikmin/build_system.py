"""Turning touching resources into build sites and feeding build sites."""

from __future__ import annotations

import logging

from evilpikmin.anim import BuildsiteAnim
from evilpikmin.collisions import Collider, CollisionIdentifier
from evilpikmin.component_fns import advance_build_stage, clean_remove, remove_hivemind
from evilpikmin.components import (
    Buildable,
    Carryable,
    HandsFree,
    HivemindBrain,
    Persuing,
    Position,
    ProjectileType,
    Resource,
    ResourceType,
    Scannable,
    ScanningFor,
    ScanValue,
    Shooter,
    SortedVisible,
    StructureType,
    Transform,
    Visible,
)
from evilpikmin.config import GUY_SCAN_RANGE, WINDOW_HEIGHT, WINDOW_WIDTH
from evilpikmin.guy_sm import stop_being_guy
from evilpikmin.system import System
from evilpikmin.textures import TextureStore
from evilpikmin.vec2 import Vec2

logger = logging.getLogger(__name__)

TOWER_STAGE_POINTS = (0, 1, 1, 0)
TOWER_SHOOT_INTERVAL = 10
TOWER_FIRST_SHOT = 2


def is_carried(entity: int, ecs) -> bool:
    """Whether at least one guy is carrying ``entity``."""
    return (
        ecs.has_component(entity, Carryable)
        and ecs.component(entity, Carryable).carriers_count > 0
    )


def handle_resource_collision(resource: int, ecs) -> None:
    """Release the guys carrying ``resource`` so they go back to scanning."""
    if not ecs.has_component(resource, HivemindBrain):
        return
    brain = ecs.component(resource, HivemindBrain)
    for member in list(brain.entities):
        if not ecs.exists(member):
            continue
        if not ecs.has_component(member, ScanningFor):
            ecs.add_component(
                member,
                ScanningFor(
                    (ScanValue.CARRIED_SCRAP, ScanValue.SCRAP_METAL),
                    (GUY_SCAN_RANGE, GUY_SCAN_RANGE),
                ),
            )
        if not ecs.has_component(member, HandsFree):
            ecs.add_component(member, HandsFree())
    remove_hivemind(resource, ecs)


def _tower_buildable() -> Buildable:
    return Buildable(
        stage_frames=[
            BuildsiteAnim.BUILD1,
            BuildsiteAnim.BUILD2,
            BuildsiteAnim.BUILD3,
            BuildsiteAnim.BUILD4,
        ],
        points_required=list(TOWER_STAGE_POINTS),
        desired_resource=ResourceType.SCRAP_METAL,
        target_structure_type=StructureType.TOWER,
    )


def _become_buildsite(resource: int, ecs) -> None:
    handle_resource_collision(resource, ecs)
    ecs.remove_component(resource, Resource)
    ecs.remove_component(resource, Carryable)
    if ecs.has_component(resource, Position):
        ecs.component(resource, Position).z = 0
    stop_being_guy(resource, ecs)
    ecs.remove_component(resource, ScanningFor)
    ecs.remove_component(resource, Persuing)
    ecs.remove_component(resource, Transform)

    buildable = _tower_buildable()
    ecs.add_component(resource, buildable)

    frame = buildable.stage_frames[0]
    texture = TextureStore.instance().get("tower")
    offset = (0, 0)
    if ecs.has_component(resource, Visible):
        visible = ecs.component(resource, Visible)
        visible.texture = texture
        visible.frame = frame
        offset = visible.offset
    if not ecs.has_component(resource, SortedVisible):
        ecs.add_component(
            resource, SortedVisible(texture, frame, frame.duration, offset)
        )
    ecs.remove_component(resource, Visible)

    if ecs.has_component(resource, Scannable):
        ecs.component(resource, Scannable).scan_value = ScanValue.BUILDSITE_WANT_SCRAP


def check_resources(ecs, grid) -> None:
    """Merge two touching resources: one is removed, the other becomes a site."""
    resources = ecs.component_array(Resource)
    index = 0
    while index < len(resources):
        resource = resources.entity_at(index)
        index += 1
        if not ecs.has_component(resource, Collider):
            continue
        touching = grid.test_entity_for_collisions(
            resource, ecs, CollisionIdentifier.RESOURCE
        )
        for other in sorted(touching):
            if not ecs.has_component(other, Resource):
                continue
            handle_resource_collision(other, ecs)
            if is_carried(other, ecs):
                logger.info(
                    "[%d] collided with also carried resource [%d]", resource, other
                )
            clean_remove(other, ecs, grid)
            _become_buildsite(resource, ecs)
            break


def check_buildsites(ecs, grid) -> None:
    """Feed resources touching a build site into it, advancing its stages."""
    for site, buildable in ecs.component_array(Buildable):
        if not ecs.has_component(site, Collider):
            continue
        hits = grid.get_collisions(ecs.component(site, Collider), ecs)
        if buildable.full:
            continue
        for other in sorted(hits):
            if not ecs.has_component(other, Resource):
                continue
            resource = ecs.component(other, Resource)
            if resource.type != buildable.desired_resource:
                return
            buildable.cur_build_points += resource.value
            handle_resource_collision(other, ecs)
            clean_remove(other, ecs, grid)

            required = buildable.points_required[buildable.cur_stage]
            if buildable.cur_build_points < required:
                continue
            advance_build_stage(ecs, buildable, site)
            if buildable.full:
                ecs.remove_component(site, Scannable)
                ecs.add_component(
                    site,
                    Shooter(
                        ProjectileType.ROCK,
                        TOWER_SHOOT_INTERVAL,
                        TOWER_FIRST_SHOT,
                        Vec2(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2),
                    ),
                )
                break


class BuildSystem(System):
    """Creates build sites from resources and feeds resources into them."""

    def update(self, dt: float, ecs, grid) -> None:
        check_resources(ecs, grid)
        check_buildsites(ecs, grid)