import enum
import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .ball import Ball
from .paddle import Paddle
from .settings import PongConfig

logger = logging.getLogger(__name__)

LEFT = -1
RIGHT = 1


class ScoreEvent(enum.Enum):
    LEFT_SCORED = "left"    # ball left through the right edge
    RIGHT_SCORED = "right"  # ball left through the left edge


@dataclass(frozen=True)
class InputState:
    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False


@dataclass(frozen=True)
class StepEvents:
    """What happened during one step. Audio and score text key off this."""
    score: Optional[ScoreEvent] = None
    left_paddle_hit: bool = False
    right_paddle_hit: bool = False
    wall_bounce: bool = False

    @property
    def paddle_hit(self) -> bool:
        return self.left_paddle_hit or self.right_paddle_hit

    @property
    def point_scored(self) -> bool:
        return self.score is not None


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer each frame."""
    ball_pos: Tuple[float, float]
    ball_radius: float
    left_pad_pos: Tuple[float, float]
    right_pad_pos: Tuple[float, float]
    pad_size: Tuple[float, float]
    frame_position: Tuple[float, float]
    frame_size: Tuple[float, float]
    frame_thickness: float
    left_score: int
    right_score: int


# ----------------- Game Engine -----------------
class GameEngine:
    def __init__(self, config: Optional[PongConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or PongConfig()
        self.rng = rng or random.Random()

        cfg = self.config
        # Entities
        self.ball = Ball(0.0, 0.0, cfg.ball_radius, cfg.ball_speed_initial)
        self.left_paddle = Paddle(cfg.left_pad_x, 0.0, cfg.pad_width, cfg.pad_height)
        self.right_paddle = Paddle(cfg.right_pad_x, 0.0, cfg.pad_width, cfg.pad_height)

        self.paddle_speed = cfg.pad_speed_initial
        self.left_score = 0
        self.right_score = 0

        self._on_paddle_hit = None
        self._on_wall_bounce = None
        self._on_point_scored = None

    def set_callbacks(self, on_paddle_hit: Optional[Callable[[int], None]] = None,
                      on_wall_bounce: Optional[Callable[[], None]] = None,
                      on_point_scored: Optional[Callable[[ScoreEvent], None]] = None):
        self._on_paddle_hit = on_paddle_hit
        self._on_wall_bounce = on_wall_bounce
        self._on_point_scored = on_point_scored

    # ---------- Helpers ----------
    def reset(self):
        """Start the session over: scores, speeds and positions."""
        cfg = self.config
        self.ball = Ball(0.0, 0.0, cfg.ball_radius, cfg.ball_speed_initial)
        self.left_paddle.y = 0.0
        self.right_paddle.y = 0.0
        self.paddle_speed = cfg.pad_speed_initial
        self.left_score = 0
        self.right_score = 0
        logger.info("Session reset")

    def _ramp_speed(self):
        cfg = self.config
        if self.ball.speed < cfg.ball_speed_max:
            self.ball.speed = min(self.ball.speed + cfg.ball_speed_increment, cfg.ball_speed_max)
            self.paddle_speed = min(self.paddle_speed + cfg.pad_speed_increment, cfg.pad_speed_max)

    def _serve(self):
        cfg = self.config
        self.ball.reset(cfg.ball_speed_initial, cfg.reset_x_range, cfg.reset_y_range, rng=self.rng)
        self.paddle_speed = cfg.pad_speed_initial

    def _check_score(self) -> Optional[ScoreEvent]:
        cfg = self.config
        if self.ball.x >= cfg.right:
            self.left_score += 1
            event = ScoreEvent.LEFT_SCORED
        elif self.ball.x <= cfg.left:
            self.right_score += 1
            event = ScoreEvent.RIGHT_SCORED
        else:
            return None
        logger.info("%s, score %d:%d", event.name, self.left_score, self.right_score)
        self._serve()
        return event

    # ---------- Update ----------
    def step(self, dt: float, inputs: Optional[InputState] = None) -> StepEvents:
        if not math.isfinite(dt) or dt < 0:
            logger.debug("Invalid dt %r clamped to 0", dt)
            dt = 0.0
        inputs = inputs or InputState()
        cfg = self.config

        self._ramp_speed()
        self.ball.advance(dt)

        # Collisions
        wall = self.ball.wall_bounce(cfg.top, cfg.bottom)
        right_hit = self.right_paddle.intercepts(self.ball, RIGHT) and self.ball.bounce_x(RIGHT)
        left_hit = self.left_paddle.intercepts(self.ball, LEFT) and self.ball.bounce_x(LEFT)

        # Paddles
        self.left_paddle.move(inputs.left_up, inputs.left_down, self.paddle_speed)
        self.left_paddle.clamp(cfg.top, cfg.bottom)
        self.right_paddle.move(inputs.right_up, inputs.right_down, self.paddle_speed)
        self.right_paddle.clamp(cfg.top, cfg.bottom)

        score = self._check_score()

        if wall and self._on_wall_bounce:
            self._on_wall_bounce()
        if self._on_paddle_hit:
            if left_hit:
                self._on_paddle_hit(LEFT)
            if right_hit:
                self._on_paddle_hit(RIGHT)
        if score and self._on_point_scored:
            self._on_point_scored(score)

        return StepEvents(score=score, left_paddle_hit=left_hit,
                          right_paddle_hit=right_hit, wall_bounce=wall)

    # ---------- Render ----------
    def snapshot(self) -> Snapshot:
        cfg = self.config
        return Snapshot(
            ball_pos=(self.ball.x, self.ball.y),
            ball_radius=self.ball.radius,
            left_pad_pos=(self.left_paddle.x, self.left_paddle.y),
            right_pad_pos=(self.right_paddle.x, self.right_paddle.y),
            pad_size=(cfg.pad_width, cfg.pad_height),
            frame_position=cfg.frame_position,
            frame_size=(cfg.frame_width, cfg.frame_height),
            frame_thickness=cfg.frame_thickness,
            left_score=self.left_score,
            right_score=self.right_score,
        )
