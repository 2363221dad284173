"""Animating and drawing sprites."""

from __future__ import annotations

import logging
import math
from typing import Tuple

import pygame

from evilpikmin.anim import PERMANENT, AnimFrame
from evilpikmin.components import Position, SortedVisible, Visible
from evilpikmin.draw_fns import render_filled_circle
from evilpikmin.system import System

logger = logging.getLogger(__name__)

SHADOW_COLOR = (0, 0, 0, 128)
MIN_SHADOW_RADIUS = 10
LOCKED = -1


def compare_visibles_by_position(v1, v2, e1: int, e2: int, ecs) -> int:
    """Return 1 when ``e1`` sits higher than ``e2``, else 0."""
    p1 = ecs.component(e1, Position)
    p2 = ecs.component(e2, Position)
    return 1 if p1.z > p2.z else 0


def update_anim_timer(dt: float, visible) -> None:
    """Advance a sprite's animation by ``dt``, moving at most one frame on."""
    frame = visible.frame
    if visible.anim_timer == LOCKED or frame.duration == PERMANENT:
        return
    visible.anim_timer += dt
    if visible.anim_timer <= frame.duration:
        return
    visible.anim_timer -= frame.duration
    if frame.next_frame is not None:
        visible.frame = frame.next_frame
    else:
        logger.warning("Animation timer ran out but no next frame! Locking.")
        visible.anim_timer = LOCKED


def render_component(
    surface: pygame.Surface,
    texture,
    frame: AnimFrame,
    position: Position,
    offset: Tuple[int, int],
) -> None:
    """Draw one sprite, with a shadow underneath when it is off the ground."""
    if position.z > 0:
        radius = max(int(frame.rect.w / 1.5 - position.z * 5), MIN_SHADOW_RADIUS)
        render_filled_circle(surface, position.x, position.y, radius, SHADOW_COLOR)

    if texture is None:
        return
    target = (
        math.floor(position.x + offset[0] + frame.offset_x),
        math.floor(position.y + offset[1] + frame.offset_y - position.z),
    )
    source = pygame.Rect(frame.rect.x, frame.rect.y, frame.rect.w, frame.rect.h)
    surface.blit(texture, target, source)


class DrawSystem(System):
    """Draws visibles in storage order, then sorted visibles by height."""

    def update(self, dt: float, ecs) -> None:
        for _, visible in ecs.component_array(Visible):
            update_anim_timer(dt, visible)
        ecs.component_array(SortedVisible).insertion_sort(
            compare_visibles_by_position, ecs
        )

    def draw(self, surface: pygame.Surface, ecs) -> None:
        for sprite_type in (Visible, SortedVisible):
            for entity, sprite in ecs.component_array(sprite_type):
                render_component(
                    surface,
                    sprite.texture,
                    sprite.frame,
                    ecs.component(entity, Position),
                    sprite.offset,
                )