"""Keeping hivemind participants attached to their hivemind."""

from __future__ import annotations

from evilpikmin.components import HivemindBrain, HivemindParticipant, Position
from evilpikmin.system import System


def strip_nonexistent_participants(ecs) -> None:
    """Drop participants that no longer exist from every hivemind.

    A dropped slot is filled by the last participant.
    """
    for _, brain in ecs.component_array(HivemindBrain):
        members = brain.entities
        index = 0
        while index < len(members):
            if ecs.exists(members[index]):
                index += 1
            else:
                members[index] = members[-1]
                members.pop()


class HivemindBrainSystem(System):
    """Moves each participant to its hivemind's position plus its offset."""

    def update(self, dt: float, ecs, grid) -> None:
        strip_nonexistent_participants(ecs)
        for hivemind, brain in ecs.component_array(HivemindBrain):
            if not ecs.has_component(hivemind, Position):
                continue
            hv_pos = ecs.component(hivemind, Position)
            for member in brain.entities:
                if not (
                    ecs.has_component(member, Position)
                    and ecs.has_component(member, HivemindParticipant)
                ):
                    continue
                position = ecs.component(member, Position)
                offset = ecs.component(member, HivemindParticipant).offset
                position.x = hv_pos.x + offset.x
                position.y = hv_pos.y + offset.y