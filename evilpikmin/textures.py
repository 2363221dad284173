"""Named texture storage."""

from __future__ import annotations

import logging
import os
from typing import ClassVar, Dict, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

logger = logging.getLogger(__name__)


class TextureStore:
    """Textures loaded from BMP files, looked up by name."""

    _shared: ClassVar[Optional[TextureStore]] = None

    def __init__(self) -> None:
        self.textures: Dict[str, pygame.Surface] = {}

    @classmethod
    def instance(cls) -> TextureStore:
        """Return the store shared by the whole game."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def load_texture(self, filename: str, texture_name: str) -> bool:
        """Load ``filename`` under ``texture_name``; return whether it worked."""
        logger.info("...loading '%s' under '%s'", filename, texture_name)
        try:
            surface = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            logger.error("......Error loading surface: %s", exc)
            return False
        self.textures[texture_name] = surface
        return True

    def get(self, texture_name: str) -> Optional[pygame.Surface]:
        """Return the named texture, or None if it was never loaded."""
        return self.textures.get(texture_name)

    def destroy_textures(self) -> None:
        """Forget every loaded texture."""
        logger.info("Destroying Textures...")
        for name in self.textures:
            logger.info("...%s", name)
        self.textures.clear()