"""The window, the main loop and the command-line entry point."""

from __future__ import annotations

import argparse
import logging
import os
import random
import time
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from evilpikmin.config import GRAPHICS_PATH, WINDOW_HEIGHT, WINDOW_WIDTH  # noqa: E402
from evilpikmin.game_state import StateManager  # noqa: E402
from evilpikmin.main_state import MainState  # noqa: E402
from evilpikmin.textures import TextureStore  # noqa: E402

logger = logging.getLogger(__name__)

WINDOW_TITLE = "The Evil Pikmin..."
BACKGROUND = (255, 255, 255)

TEXTURE_FILES = (
    ("guy_sheet.bmp", "guy_sheet"),
    ("scrap.bmp", "scrap_sheet"),
    ("squish.bmp", "squish_sheet"),
    ("hand_sheet.bmp", "tool_hand"),
    ("tower.bmp", "tower"),
    ("rock.bmp", "rock"),
)


def load_textures(store, graphics_path: str) -> None:
    """Load every sprite sheet from ``graphics_path`` into ``store``."""
    for filename, name in TEXTURE_FILES:
        store.load_texture(os.path.join(graphics_path, filename), name)


class Engine:
    """Opens the window and drives the active game state."""

    def __init__(self, graphics_path: str = GRAPHICS_PATH) -> None:
        self.graphics_path = graphics_path
        self.state_manager = StateManager()
        pygame.init()

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run until the window closes or ``max_frames`` frames; return frames run."""
        store = TextureStore.instance()
        if not pygame.get_init():
            pygame.init()
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        load_textures(store, self.graphics_path)

        self.state_manager.current_state = MainState()
        state = self.state_manager.current_state

        frames = 0
        now = time.perf_counter()
        running = True
        try:
            while running and (max_frames is None or frames < max_frames):
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        state.handle_click(event.pos[0], event.pos[1], event.button)
                    elif event.type == pygame.KEYDOWN:
                        state.handle_keydown(event.key)
                    elif event.type == pygame.MOUSEMOTION:
                        state.handle_mousemove(event.pos[0], event.pos[1])

                last, now = now, time.perf_counter()
                state.update(now - last)

                window.fill(BACKGROUND)
                state.draw(window)
                pygame.display.flip()
                frames += 1
        finally:
            store.destroy_textures()
            pygame.quit()
        return frames


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="evilpikmin", description=WINDOW_TITLE)
    parser.add_argument(
        "--graphics-path", default=GRAPHICS_PATH, help="directory holding the sprite sheets"
    )
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)

    random.seed()
    print(f"Graphics Path: {args.graphics_path}")
    Engine(args.graphics_path).run(args.frames)
    return 0