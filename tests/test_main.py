"""Host-side glue: key mapping and command line flags."""

import sys
import os
from collections import defaultdict

import pygame

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from main import parse_args, read_inputs
from pong.game_engine import InputState


class TestReadInputs:

    def test_maps_keys_to_flags(self):
        keys = defaultdict(bool, {pygame.K_w: True, pygame.K_DOWN: True})
        assert read_inputs(keys) == InputState(left_up=True, right_down=True)

    def test_no_keys(self):
        assert read_inputs(defaultdict(bool)) == InputState()


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.fps == 60
        assert args.seed is None
        assert not args.debug

    def test_flags(self):
        args = parse_args(["--seed", "4", "--debug", "--fps", "30"])
        assert (args.seed, args.debug, args.fps) == (4, True, 30)
