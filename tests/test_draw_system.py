import pygame
import pytest

from evilpikmin.anim import AnimFrame, FrameRect, GuyAnim, NotMovingAnim
from evilpikmin.components import CompSig, Position, SortedVisible, Visible
from evilpikmin.draw_system import (
    DrawSystem,
    compare_visibles_by_position,
    render_component,
    update_anim_timer,
)
from evilpikmin.ecs import ECS

WHITE = (255, 255, 255)
RED = (255, 0, 0)


def make_world():
    ecs = ECS()
    ecs.register_component(Position, CompSig.POSITION)
    ecs.register_component(Visible, CompSig.VISIBLE)
    ecs.register_component(SortedVisible, CompSig.SORTED_VISIBLE)
    system = ecs.register_system(
        DrawSystem, [CompSig.POSITION, CompSig.VISIBLE, CompSig.SORTED_VISIBLE]
    )
    return ecs, system


def add_sorted(ecs, z):
    ent = ecs.add_entity()
    ecs.add_component(ent, Position(0, 0, z))
    ecs.add_component(ent, SortedVisible(None, NotMovingAnim.TOWER))
    return ent


def test_compare_by_height():
    ecs, _ = make_world()
    high = add_sorted(ecs, 5)
    low = add_sorted(ecs, 1)
    assert compare_visibles_by_position(None, None, high, low, ecs) == 1
    assert compare_visibles_by_position(None, None, low, high, ecs) == 0
    assert compare_visibles_by_position(None, None, low, low, ecs) == 0


def test_anim_advances_to_next_frame():
    vis = Visible(None, GuyAnim.NORM, 0)
    update_anim_timer(0.35, vis)
    assert vis.frame is GuyAnim.NORM2
    assert vis.anim_timer == pytest.approx(0.35 - GuyAnim.NORM.duration)


def test_permanent_frame_stays():
    vis = Visible(None, NotMovingAnim.SCRAP, 0)
    update_anim_timer(5.0, vis)
    assert vis.frame is NotMovingAnim.SCRAP
    assert vis.anim_timer == 0


def test_end_of_chain_locks_timer():
    last = AnimFrame(FrameRect(0, 0, 1, 1), 0.1, None)
    vis = Visible(None, last, 0)
    update_anim_timer(0.2, vis)
    assert vis.anim_timer == -1
    assert vis.frame is last
    update_anim_timer(5.0, vis)
    assert vis.anim_timer == -1


def test_update_advances_visibles():
    ecs, system = make_world()
    ent = ecs.add_entity()
    ecs.add_component(ent, Position(0, 0))
    ecs.add_component(ent, Visible(None, GuyAnim.NORM, 0))
    system.update(0.35, ecs)
    assert ecs.component(ent, Visible).frame is GuyAnim.NORM2


def test_update_keeps_ascending_order():
    ecs, system = make_world()
    ents = [add_sorted(ecs, z) for z in (0, 1, 2)]
    system.update(0.1, ecs)
    array = ecs.component_array(SortedVisible)
    assert [array.entity_at(i) for i in range(3)] == ents


def test_update_moves_high_entity_back():
    ecs, system = make_world()
    e0, e1, e2 = (add_sorted(ecs, z) for z in (5, 1, 0))
    system.update(0.1, ecs)
    array = ecs.component_array(SortedVisible)
    assert [array.entity_at(i) for i in range(3)] == [e1, e0, e2]


def test_draw_blits_texture_with_offset():
    ecs, system = make_world()
    texture = pygame.Surface((16, 16))
    texture.fill(RED)
    frame = AnimFrame(FrameRect(0, 0, 16, 16), -1, None, 0, 0)
    ent = ecs.add_entity()
    ecs.add_component(ent, Position(10, 10, 0))
    ecs.add_component(ent, Visible(texture, frame, 0, (5, 0)))
    surface = pygame.Surface((64, 64))
    surface.fill(WHITE)
    system.draw(surface, ecs)
    assert tuple(surface.get_at((15, 10)))[:3] == RED
    assert tuple(surface.get_at((30, 25)))[:3] == RED
    assert tuple(surface.get_at((14, 10)))[:3] == WHITE
    assert tuple(surface.get_at((31, 26)))[:3] == WHITE


def test_shadow_drawn_when_airborne():
    surface = pygame.Surface((64, 64))
    surface.fill(WHITE)
    frame = AnimFrame(FrameRect(0, 0, 16, 16), -1, None, 0, 0)
    render_component(surface, None, frame, Position(32, 32, 1), (0, 0))
    assert tuple(surface.get_at((32, 32)))[:3] != WHITE
    assert tuple(surface.get_at((0, 0)))[:3] == WHITE


def test_no_shadow_on_ground():
    surface = pygame.Surface((64, 64))
    surface.fill(WHITE)
    frame = AnimFrame(FrameRect(0, 0, 16, 16), -1, None, 0, 0)
    render_component(surface, None, frame, Position(32, 32, 0), (0, 0))
    assert tuple(surface.get_at((32, 32)))[:3] == WHITE