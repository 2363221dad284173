"""Game states and the manager that holds the active one."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import pygame


class GameState(ABC):
    """One screen of the game: it is updated, drawn and fed input events."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the state onto ``surface``."""

    def handle_click(self, x: float, y: float, button: int) -> None:
        """React to a mouse button press; ignored by default."""

    def handle_keydown(self, key: int) -> None:
        """React to a key press; ignored by default."""

    def handle_mousemove(self, x: float, y: float) -> None:
        """React to the mouse moving; ignored by default."""

    @abstractmethod
    def leave_state(self) -> None:
        """Called when the state stops being the active one."""

    @abstractmethod
    def enter_state(self) -> None:
        """Called when the state becomes the active one."""


@dataclass
class StateManager:
    """Holds the currently active game state."""

    current_state: Optional[GameState] = None