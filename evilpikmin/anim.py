"""Animation frames and the sprite sheets' frame tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

PERMANENT = -1.0


@dataclass(frozen=True)
class FrameRect:
    """Source rectangle on a sprite sheet."""

    x: float
    y: float
    w: float
    h: float


@dataclass
class AnimFrame:
    """One frame of an animation; a duration of -1 means it never advances."""

    rect: FrameRect
    duration: float
    next_frame: Optional[AnimFrame] = field(default=None, compare=False, repr=False)
    offset_x: int = 0
    offset_y: int = 0


class BuildsiteAnim:
    """Tower build-site stages (tower.bmp)."""

    BUILD4 = AnimFrame(FrameRect(3 * 32, 0, 32, 64), PERMANENT, None, -16, -64)
    BUILD3 = AnimFrame(FrameRect(2 * 32, 0, 32, 64), PERMANENT, BUILD4, -16, -64)
    BUILD2 = AnimFrame(FrameRect(1 * 32, 0, 32, 64), PERMANENT, BUILD3, -16, -64)
    BUILD1 = AnimFrame(FrameRect(0, 0, 32, 64), PERMANENT, BUILD2, -16, -64)


class GuyAnim:
    """Guy frames: walking (guy_sheet.bmp) and squish (squish.bmp)."""

    NORM = AnimFrame(FrameRect(0, 0, 16, 16), 0.3, None, -7, -11)
    NORM2 = AnimFrame(FrameRect(16, 0, 16, 16), 0.3, NORM, -7, -11)

    SQUISH6 = AnimFrame(FrameRect(6 * 16, 0, 16, 16), PERMANENT, None)
    SQUISH5 = AnimFrame(FrameRect(5 * 16, 0, 16, 16), 0.035, SQUISH6)
    SQUISH4 = AnimFrame(FrameRect(4 * 16, 0, 16, 16), 0.035, SQUISH5)
    SQUISH3 = AnimFrame(FrameRect(3 * 16, 0, 16, 16), 0.035, SQUISH4)
    SQUISH2 = AnimFrame(FrameRect(2 * 16, 0, 16, 16), 0.035, SQUISH3)
    SQUISH1 = AnimFrame(FrameRect(1 * 16, 0, 16, 16), 0.035, SQUISH2)
    SQUISH0 = AnimFrame(FrameRect(0, 0, 16, 16), 0.035, SQUISH1)


GuyAnim.NORM.next_frame = GuyAnim.NORM2


class NotMovingAnim:
    """Frames for things that never change."""

    SCRAP = AnimFrame(FrameRect(16, 0, 16, 16), PERMANENT, None, -8, -8)
    TOWER = AnimFrame(FrameRect(0, 0, 32, 64), PERMANENT, None, 0, 0)
    ROCK = AnimFrame(FrameRect(0, 0, 8, 8), PERMANENT, None, -4, -4)


class ToolAnim:
    """Hand tool frames (hand_sheet.bmp)."""

    HAND_NORM = AnimFrame(FrameRect(32, 0, 32, 32), PERMANENT, None, 0, 0)
    HAND_SPLAT = AnimFrame(FrameRect(0, 32, 32, 32), 1, HAND_NORM, 0, 0)