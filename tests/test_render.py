"""Renderer caching: text surfaces are only built when something changed."""

import sys
import os

import pygame
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pong.game_engine import GameEngine
from pong.render import Renderer


class RecordingFont:
    """Wraps a pygame font and remembers every string it renders."""

    def __init__(self, font):
        self.font = font
        self.texts = []

    def render(self, text, antialias, color):
        self.texts.append(text)
        return self.font.render(text, antialias, color)


@pytest.fixture
def renderer():
    pygame.font.init()
    r = Renderer(pygame.Surface((800, 600)))
    yield r
    pygame.font.quit()


class TestTextCaching:

    def test_static_text_rendered_once(self, renderer):
        snap = GameEngine().snapshot()
        renderer.render(snap)
        renderer.font = RecordingFont(renderer.font)

        for _ in range(3):
            renderer.render(snap)

        assert renderer.font.texts == []

    def test_scores_rendered_on_refresh(self, renderer):
        renderer.render(GameEngine().snapshot())
        renderer.font = RecordingFont(renderer.font)

        renderer.refresh_scores(2, 5)

        assert renderer.font.texts == ["2", "5"]
