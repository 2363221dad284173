import pygame
import pytest

from evilpikmin.components import (
    CompSig,
    Persuing,
    Position,
    Scannable,
    ScanningFor,
    ScanValue,
    Transform,
    Wandering,
)
from evilpikmin.ecs import ECS
from evilpikmin.scanning_system import PURSUIT_SPEED, ScanningSystem
from evilpikmin.vec2 import Vec2


def make_world():
    ecs = ECS()
    for comp, sig in [
        (Position, CompSig.POSITION),
        (Transform, CompSig.TRANSFORM),
        (ScanningFor, CompSig.SCANNING_FOR),
        (Scannable, CompSig.SCANNABLE),
        (Persuing, CompSig.PERSUING),
        (Wandering, CompSig.GUY_WANDERING),
    ]:
        ecs.register_component(comp, sig)
    system = ecs.register_system(
        ScanningSystem, [CompSig.SCANNING_FOR, CompSig.POSITION, CompSig.TRANSFORM]
    )
    return ecs, system


def add_scanner(ecs, values, ranges, x=0.0, y=0.0):
    ent = ecs.add_entity()
    ecs.add_component(ent, Position(x, y))
    ecs.add_component(ent, Transform())
    ecs.add_component(ent, ScanningFor(values, ranges))
    return ent


def add_target(ecs, value, x, y):
    ent = ecs.add_entity()
    ecs.add_component(ent, Position(x, y))
    ecs.add_component(ent, Scannable(value))
    return ent


def desired(ecs, ent):
    p = ecs.component(ent, Persuing)
    return (p.desired_x, p.desired_y)


def test_picks_nearest_and_steers_towards_it():
    ecs, system = make_world()
    scanner = add_scanner(ecs, (ScanValue.SCRAP_METAL,), (100,))
    add_target(ecs, ScanValue.SCRAP_METAL, 30, 0)
    add_target(ecs, ScanValue.SCRAP_METAL, 10, 0)
    system.update(0.1, ecs)
    assert desired(ecs, scanner) == (10, 0)
    trans = ecs.component(scanner, Transform)
    assert trans.vel_x == pytest.approx(PURSUIT_SPEED)
    assert trans.vel_y == pytest.approx(0)


def test_priority_beats_distance():
    ecs, system = make_world()
    scanner = add_scanner(
        ecs, (ScanValue.CARRIED_SCRAP, ScanValue.SCRAP_METAL), (100, 100)
    )
    add_target(ecs, ScanValue.SCRAP_METAL, 10, 0)
    add_target(ecs, ScanValue.CARRIED_SCRAP, 50, 0)
    system.update(0.1, ecs)
    assert desired(ecs, scanner) == (50, 0)


def test_out_of_range_drops_pursuit():
    ecs, system = make_world()
    scanner = add_scanner(ecs, (ScanValue.SCRAP_METAL,), (100,))
    ecs.add_component(scanner, Persuing(5, 5))
    add_target(ecs, ScanValue.SCRAP_METAL, 500, 0)
    system.update(0.1, ecs)
    assert not ecs.has_component(scanner, Persuing)


def test_unlimited_range_finds_far_target():
    ecs, system = make_world()
    scanner = add_scanner(ecs, (ScanValue.SCRAP_METAL,), (-1,))
    add_target(ecs, ScanValue.SCRAP_METAL, 1000, 0)
    system.update(0.1, ecs)
    assert desired(ecs, scanner) == (1000, 0)


def test_unsought_value_ignored():
    ecs, system = make_world()
    scanner = add_scanner(ecs, (ScanValue.SCRAP_METAL,), (100,))
    add_target(ecs, ScanValue.BUILD_SITE, 10, 0)
    system.update(0.1, ecs)
    assert not ecs.has_component(scanner, Persuing)


def test_finding_target_stops_wandering():
    ecs, system = make_world()
    scanner = add_scanner(ecs, (ScanValue.SCRAP_METAL,), (100,))
    ecs.add_component(scanner, Wandering(1.0, 10, Vec2(1, 0)))
    add_target(ecs, ScanValue.SCRAP_METAL, 10, 10)
    system.update(0.1, ecs)
    assert not ecs.has_component(scanner, Wandering)
    assert ecs.has_component(scanner, Persuing)


def test_does_not_target_itself():
    ecs, system = make_world()
    scanner = add_scanner(ecs, (ScanValue.SCRAP_METAL,), (100,))
    ecs.add_component(scanner, Scannable(ScanValue.SCRAP_METAL))
    system.update(0.1, ecs)
    assert not ecs.has_component(scanner, Persuing)


def test_debug_draw_draws_pursuit_line():
    ecs, system = make_world()
    scanner = add_scanner(ecs, (ScanValue.SCRAP_METAL,), (-1,), x=10, y=80)
    ecs.add_component(scanner, Persuing(90, 80))
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    system.debug_draw(surface, ecs)
    assert tuple(surface.get_at((50, 80)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((50, 20)))[:3] == (255, 255, 255)