import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from evilpikmin.collision_grid import (
    COLLISION_CELL_SIZE,
    CollisionGrid,
    cell_id,
    cell_row_col,
)
from evilpikmin.collisions import (
    Collider,
    CollisionCircle,
    CollisionIdentifier,
    CollisionRect,
)
from evilpikmin.components import CompSig, Position
from evilpikmin.config import WINDOW_HEIGHT, WINDOW_WIDTH
from evilpikmin.ecs import ECS


@pytest.fixture
def ecs():
    world = ECS()
    world.register_component(Position, CompSig.POSITION)
    world.register_component(Collider, CompSig.COLLIDER)
    return world


@pytest.fixture
def grid():
    return CollisionGrid()


def place(ecs, grid, x, y, radius=5, identifier=CollisionIdentifier.GUY):
    ent = ecs.add_entity()
    pos = Position(x, y)
    col = Collider(CollisionCircle(x, y, radius), identifier)
    ecs.add_component(ent, pos)
    ecs.add_component(ent, col)
    grid.update_entity(ent, pos, col)
    return ent


@pytest.mark.parametrize("row", range(0, 8))
@pytest.mark.parametrize("col", range(0, 16))
def test_cell_id_round_trip(row, col):
    assert cell_row_col(cell_id(row, col)) == (row, col)


def test_cell_id_packs_row_above_four_bits():
    assert cell_id(0, 0) == 0
    assert cell_id(1, 0) == 16


def test_registered_cells_cover_window(grid):
    assert cell_id(0, 0) in grid.registered_cells
    max_row = WINDOW_HEIGHT // COLLISION_CELL_SIZE
    max_col = WINDOW_WIDTH // COLLISION_CELL_SIZE
    assert cell_id(max_row, max_col) in grid.registered_cells
    for cell in grid.registered_cells:
        row, col = cell_row_col(cell)
        assert 0 <= row <= max_row
        assert 0 <= col <= max_col


def test_update_entity_puts_entity_in_cell_of_position(ecs, grid):
    ent = place(ecs, grid, 150, 250)
    assert grid.cells_for_entity(ent) == {cell_id(2, 1)}
    assert ent in grid.cells[cell_id(2, 1)]


def test_update_entity_leaves_old_cell(ecs, grid):
    ent = place(ecs, grid, 50, 50)
    old = grid.cells_for_entity(ent)
    pos = Position(450, 350)
    grid.update_entity(ent, pos, ecs.component(ent, Collider))
    new = grid.cells_for_entity(ent)
    assert len(new) == 1
    assert new != old
    for cell in old:
        assert ent not in grid.cells[cell]


def test_remove_entity_clears_cells(ecs, grid):
    ent = place(ecs, grid, 60, 60)
    probe = Collider(CollisionCircle(60, 60, 3))
    assert ent in grid.get_collisions(probe, ecs)
    grid.remove_entity(ent)
    assert grid.cells_for_entity(ent) == set()
    assert grid.get_collisions(probe, ecs) == set()


def test_overlapping_cells_contains_centre_cell(grid):
    collider = Collider(CollisionCircle(350, 250, 10))
    cells = grid.overlapping_cells(collider)
    assert cell_id(2, 3) in cells


def test_overlapping_cells_for_rect_is_origin_block(grid):
    collider = Collider(CollisionRect(500, 500, 10, 10))
    expected = {cell_id(r, c) for r in (0, 1) for c in (0, 1)}
    assert grid.overlapping_cells(collider) == expected


def test_get_collisions_finds_only_overlapping(ecs, grid):
    near = place(ecs, grid, 60, 60)
    place(ecs, grid, 300, 300)
    assert grid.get_collisions(Collider(CollisionCircle(60, 60, 3)), ecs) == {near}


def test_get_collisions_crosses_cell_boundary(ecs, grid):
    ent = place(ecs, grid, 105, 50)
    probe = Collider(CollisionCircle(95, 50, 10))
    assert ent in grid.get_collisions(probe, ecs)


def test_entity_collisions_filter_identifier_and_self(ecs, grid):
    a = place(ecs, grid, 120, 120, identifier=CollisionIdentifier.GUY)
    b = place(ecs, grid, 123, 120, identifier=CollisionIdentifier.RESOURCE)
    c = place(ecs, grid, 126, 120, identifier=CollisionIdentifier.GUY)
    place(ecs, grid, 500, 500, identifier=CollisionIdentifier.RESOURCE)
    assert grid.test_entity_for_collisions(a, ecs, CollisionIdentifier.RESOURCE) == {b}
    assert grid.test_entity_for_collisions(a, ecs, CollisionIdentifier.GUY) == {c}
    assert grid.test_entity_for_all_collisions(a, ecs) == {b, c}


def test_entity_without_collider_raises(ecs, grid):
    ent = ecs.add_entity()
    with pytest.raises(KeyError):
        grid.test_entity_for_all_collisions(ent, ecs)


def test_describe_entity_unknown(grid):
    assert grid.describe_entity(5) == "[5] ColGrid - Inhabits no cells"


def test_describe_entity_and_cell(ecs, grid):
    ent = place(ecs, grid, 10, 10)
    assert grid.describe_entity(ent) == f"[{ent}] ColGrid - Inhabits Cell 0 (0, 0) "
    assert grid.describe_cell(0) == f"Cell 0 (0, 0) : {ent}, "
    grid.remove_entity(ent)
    assert grid.describe_entity(ent) == f"[{ent}] ColGrid - Inhabits "


def test_describe_lists_every_registered_cell(grid):
    assert len(grid.describe().splitlines()) == len(grid.registered_cells)


def test_draw_grid_outlines_cells(grid):
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((255, 255, 255))
    grid.draw_grid(surface)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert tuple(surface.get_at((COLLISION_CELL_SIZE, 50))) == (255, 0, 0, 255)
    assert tuple(surface.get_at((50, 50))) == (255, 255, 255, 255)