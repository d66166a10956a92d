import argparse
import logging
import random
import sys

import pygame

from pong.game_engine import GameEngine, InputState
from pong.logging_config import setup_logging
from pong.render import Renderer

logger = logging.getLogger("pong.main")

# Screen dimensions
WIDTH, HEIGHT = 800, 600


def read_inputs(keys) -> InputState:
    # Key-down polling, not edge triggered
    return InputState(
        left_up=bool(keys[pygame.K_w]),
        left_down=bool(keys[pygame.K_s]),
        right_up=bool(keys[pygame.K_UP]),
        right_down=bool(keys[pygame.K_DOWN]),
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Ping Pong")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Seed for serve randomness")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
    except pygame.error:
        logger.exception("Could not open the game window")
        return 1
    pygame.display.set_caption("Ping Pong")

    clock = pygame.time.Clock()
    engine = GameEngine(rng=random.Random(args.seed))
    renderer = Renderer(screen)

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0  # seconds since last frame

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key == pygame.K_r:
                    engine.reset()
                    renderer.refresh_scores(engine.left_score, engine.right_score)

        events = engine.step(dt, read_inputs(pygame.key.get_pressed()))
        if events.paddle_hit:
            logger.debug("Paddle hit")
        if events.score:
            renderer.refresh_scores(engine.left_score, engine.right_score)

        renderer.render(engine.snapshot(), clock.get_fps())
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
