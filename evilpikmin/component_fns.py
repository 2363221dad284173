"""Helpers that change several interlinked components at once."""

from __future__ import annotations

from typing import Optional

from evilpikmin.components import (
    Buildable,
    HivemindBrain,
    HivemindParticipant,
    SortedVisible,
    Visible,
)


def clean_remove(entity: int, ecs, grid: Optional[object] = None) -> None:
    """Remove ``entity``, releasing its hivemind and grid cells first."""
    if grid is not None:
        grid.remove_entity(entity)
    if ecs.has_component(entity, HivemindBrain):
        remove_hivemind(entity, ecs)
    ecs.remove_entity(entity)


def remove_hivemind(entity: int, ecs) -> None:
    """Dissolve the hivemind on ``entity``, freeing every participant."""
    brain = ecs.component(entity, HivemindBrain)
    for member in list(brain.entities):
        ecs.remove_component(member, HivemindParticipant)
    ecs.remove_component(entity, HivemindBrain)


def advance_build_stage(ecs, buildable: Buildable, entity: int) -> None:
    """Move the build site on to its next stage and show that stage's frame."""
    buildable.cur_stage += 1
    buildable.cur_build_points = 0
    frame = buildable.stage_frames[buildable.cur_stage]
    if ecs.has_component(entity, Visible):
        ecs.component(entity, Visible).frame = frame
    if ecs.has_component(entity, SortedVisible):
        ecs.component(entity, SortedVisible).frame = frame
    if buildable.cur_stage == buildable.num_stages - 1:
        buildable.full = True