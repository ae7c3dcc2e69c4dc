"""Map board coordinates onto a pixel canvas.

The canvas is split evenly into ``width`` x ``height`` tiles and each entity is
centered in its tile. Translations use a centered origin with y pointing up;
``screen_rect`` converts to the top-left, y-down convention of pygame.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from wrapsnake.entities import RenderItem

logger = logging.getLogger(__name__)

Resolution = Tuple[float, float]


@dataclass
class Sprite:
    item: RenderItem
    center: Tuple[float, float]
    scale: Tuple[float, float]


def convert(pos: float, bound_window: float, bound_game: float) -> float:
    tile_size = bound_window / bound_game
    return pos / bound_game * bound_window - (bound_window / 2.0) + (tile_size / 2.0)


def scale(size: float, bound_game: float, bound_window: float) -> float:
    return size / bound_game * bound_window


def layout(
    items: Iterable[RenderItem],
    board: Tuple[int, int],
    resolution: Optional[Resolution],
) -> List[Sprite]:
    """Place every render item on the canvas.

    Without a resolution there is nothing to lay out against; the frame is
    skipped with a warning.
    """
    if resolution is None:
        logger.warning("Could not get window resolution")
        return []
    board_w, board_h = board
    win_w, win_h = resolution
    sprites = []
    for item in items:
        sprites.append(
            Sprite(
                item=item,
                center=(
                    convert(item.position.x, win_w, board_w),
                    convert(item.position.y, win_h, board_h),
                ),
                scale=(
                    scale(item.size, board_w, win_w),
                    scale(item.size, board_h, win_h),
                ),
            )
        )
    return sprites


def screen_rect(sprite: Sprite, resolution: Resolution) -> Tuple[int, int, int, int]:
    win_w, win_h = resolution
    w, h = sprite.scale
    cx = sprite.center[0] + win_w / 2.0
    cy = win_h / 2.0 - sprite.center[1]
    return round(cx - w / 2.0), round(cy - h / 2.0), round(w), round(h)
