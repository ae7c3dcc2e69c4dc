import logging

import pytest

from wrapsnake.entities import RenderItem
from wrapsnake.grid import Position
from wrapsnake.layout import convert, layout, scale, screen_rect


def test_convert_centers_tiles():
    assert convert(0, 500, 10) == pytest.approx(-225.0)
    assert convert(9, 500, 10) == pytest.approx(225.0)


def test_scale():
    assert scale(0.8, 10, 500) == pytest.approx(40.0)
    assert scale(0.65, 10, 500) == pytest.approx(32.5)


def test_layout_and_screen_rect():
    item = RenderItem(entity=0, kind="head", position=Position(0, 0), size=0.8)
    (sprite,) = layout([item], (10, 10), (500, 500))
    assert sprite.center == pytest.approx((-225.0, -225.0))
    # y points up on the board, down on screen
    assert screen_rect(sprite, (500, 500)) == (5, 455, 40, 40)


def test_layout_without_resolution_is_skipped(caplog):
    item = RenderItem(entity=0, kind="food", position=Position(1, 1), size=0.8)
    with caplog.at_level(logging.WARNING):
        assert layout([item], (10, 10), None) == []
    assert "Could not get window resolution" in caplog.text
