"""Spatial grid that narrows down which colliders need testing."""

from __future__ import annotations

import os
from typing import Dict, Set, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from evilpikmin.collisions import (  # noqa: E402
    Collider,
    CollisionIdentifier,
    CollisionShapeType,
    collision,
)
from evilpikmin.components import Position  # noqa: E402
from evilpikmin.config import WINDOW_HEIGHT, WINDOW_WIDTH  # noqa: E402

COLLISION_CELL_SIZE = 100

_GRID_COLOR = (255, 0, 0, 255)


def cell_id(row: int, col: int) -> int:
    """Pack a row and column into a cell id; the column takes the low 4 bits."""
    return (row << 4) + col


def cell_row_col(cell: int) -> Tuple[int, int]:
    """Unpack a cell id into ``(row, col)``."""
    row = cell >> 4
    return row, cell - (row << 4)


def _describe_cell_id(cell: int) -> str:
    row, col = cell_row_col(cell)
    return f"Cell {cell} ({row}, {col}) "


class CollisionGrid:
    """Buckets entities into square cells by position."""

    def __init__(self) -> None:
        self.cells: Dict[int, Set[int]] = {}
        self.inhabited_cells: Dict[int, Set[int]] = {}
        cols = WINDOW_WIDTH // COLLISION_CELL_SIZE + 1
        rows = WINDOW_HEIGHT // COLLISION_CELL_SIZE + 1
        self.registered_cells: Set[int] = {
            cell_id(row, col) for col in range(cols) for row in range(rows)
        }

    def _forget(self, entity: int) -> None:
        for cell in self.inhabited_cells.get(entity, set()):
            self.cells.get(cell, set()).discard(entity)
        self.inhabited_cells[entity] = set()

    def update_entity(self, entity: int, position: Position, collider: Collider) -> None:
        """Move ``entity`` into the cell that holds ``position``."""
        self._forget(entity)
        col = int(position.x / COLLISION_CELL_SIZE)
        row = int(position.y / COLLISION_CELL_SIZE)
        new_cell = cell_id(row, col)
        self.inhabited_cells[entity].add(new_cell)
        self.cells.setdefault(new_cell, set()).add(entity)

    def remove_entity(self, entity: int) -> None:
        """Take ``entity`` out of every cell it inhabits."""
        self._forget(entity)

    def cells_for_entity(self, entity: int) -> Set[int]:
        return set(self.inhabited_cells.get(entity, set()))

    def overlapping_cells(self, collider: Collider) -> Set[int]:
        """Cells touched by the collider's bounding box, plus one cell margin."""
        x = y = w = h = 0
        if collider.shape_type is CollisionShapeType.CIRCLE:
            circle = collider.shape
            x = int(circle.x - circle.radius)
            y = int(circle.y - circle.radius)
            w = int(circle.radius * 2)
            h = int(circle.radius * 2)
        init_col = int(x / COLLISION_CELL_SIZE)
        init_row = int(y / COLLISION_CELL_SIZE)
        extra_right = int(w / COLLISION_CELL_SIZE) + 1
        extra_down = int(h / COLLISION_CELL_SIZE) + 1
        return {
            cell_id(row, col)
            for col in range(init_col, init_col + extra_right + 1)
            for row in range(init_row, init_row + extra_down + 1)
        }

    def get_collisions(self, collider: Collider, ecs) -> Set[int]:
        """Every entity whose collider overlaps ``collider``.

        An entity's own collider collides with itself here.
        """
        hits: Set[int] = set()
        for cell in sorted(self.overlapping_cells(collider)):
            for entity in sorted(self.cells.get(cell, set())):
                if collision(ecs.component(entity, Collider), collider):
                    hits.add(entity)
        return hits

    def _entity_hits(self, entity: int, ecs, identifier) -> Set[int]:
        own = ecs.component(entity, Collider)
        hits: Set[int] = set()
        for cell in sorted(self.cells_for_entity(entity)):
            for other in sorted(self.cells.get(cell, set())):
                if other == entity:
                    continue
                other_col = ecs.component(other, Collider)
                if identifier is not None and other_col.identifier != identifier:
                    continue
                if collision(other_col, own):
                    hits.add(other)
        return hits

    def test_entity_for_collisions(
        self, entity: int, ecs, identifier: CollisionIdentifier
    ) -> Set[int]:
        """Entities sharing a cell with ``entity`` that overlap it and carry ``identifier``."""
        return self._entity_hits(entity, ecs, identifier)

    def test_entity_for_all_collisions(self, entity: int, ecs) -> Set[int]:
        """Entities sharing a cell with ``entity`` that overlap it."""
        return self._entity_hits(entity, ecs, None)

    def describe_cell(self, cell: int) -> str:
        members = "".join(f"{e}, " for e in sorted(self.cells.get(cell, set())))
        return f"{_describe_cell_id(cell)}: {members}"

    def describe(self) -> str:
        return "\n".join(self.describe_cell(cell) for cell in sorted(self.registered_cells))

    def describe_entity(self, entity: int) -> str:
        text = f"[{entity}] ColGrid - "
        if entity not in self.inhabited_cells:
            return text + "Inhabits no cells"
        cells = "".join(
            _describe_cell_id(cell) for cell in sorted(self.inhabited_cells[entity])
        )
        return text + "Inhabits " + cells

    def draw_grid(self, surface: pygame.Surface) -> None:
        """Outline every registered cell in red."""
        for cell in sorted(self.registered_cells):
            row, col = cell_row_col(cell)
            rect = pygame.Rect(
                col * COLLISION_CELL_SIZE,
                row * COLLISION_CELL_SIZE,
                COLLISION_CELL_SIZE,
                COLLISION_CELL_SIZE,
            )
            pygame.draw.rect(surface, _GRID_COLOR, rect, 1)