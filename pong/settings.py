"""
Default tuning for the simulation. Everything the engine needs to know about
sizes and speeds lives here so it can be tweaked in one place.
"""
from dataclasses import dataclass
from typing import Tuple

# Ball (pixels, pixels/sec)
BALL_SPEED_INITIAL = 450.0
BALL_SPEED_MAX = 900.0
BALL_SPEED_INCREMENT = 1.0  # per step, not per second
BALL_SIZE = 32.0            # diameter

# Playfield
FRAME_WIDTH = 700.0
FRAME_HEIGHT = 450.0
FRAME_THICKNESS = 5.0
FRAME_POSITION = (0.0, -25.0)

# Paddles
PAD_WIDTH = 10.0
PAD_HEIGHT = 80.0
PAD_INSET = 20.0            # distance from the side edge to the paddle center
PAD_SPEED_INITIAL = 10.0    # pixels per step

# Reset jitter around the center
RESET_X_RANGE = (-10.0, 10.0)
RESET_Y_RANGE = (-100.0, 100.0)


@dataclass(frozen=True)
class PongConfig:
    frame_width: float = FRAME_WIDTH
    frame_height: float = FRAME_HEIGHT
    frame_thickness: float = FRAME_THICKNESS
    frame_position: Tuple[float, float] = FRAME_POSITION

    ball_size: float = BALL_SIZE
    ball_speed_initial: float = BALL_SPEED_INITIAL
    ball_speed_max: float = BALL_SPEED_MAX
    ball_speed_increment: float = BALL_SPEED_INCREMENT

    pad_width: float = PAD_WIDTH
    pad_height: float = PAD_HEIGHT
    pad_inset: float = PAD_INSET
    pad_speed_initial: float = PAD_SPEED_INITIAL

    reset_x_range: Tuple[float, float] = RESET_X_RANGE
    reset_y_range: Tuple[float, float] = RESET_Y_RANGE

    def __post_init__(self):
        for name in ("frame_width", "frame_height", "ball_size", "ball_speed_initial",
                     "ball_speed_increment", "pad_width", "pad_height", "pad_speed_initial"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.ball_speed_max < self.ball_speed_initial:
            raise ValueError("ball_speed_max must not be below ball_speed_initial")
        if self.pad_height > self.frame_height:
            raise ValueError("pad_height must fit inside the playfield")
        if self.pad_speed_max > self.frame_height:
            raise ValueError("paddle speed would exceed the playfield height at max ball speed")
        for name in ("reset_x_range", "reset_y_range"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"{name} must be (low, high), got {(lo, hi)!r}")

    @property
    def ball_radius(self) -> float:
        return self.ball_size / 2.0

    @property
    def center(self) -> Tuple[float, float]:
        return self.frame_position

    @property
    def ramp_steps(self) -> float:
        # Number of steps the ball needs to go from initial to max speed
        return (self.ball_speed_max - self.ball_speed_initial) / self.ball_speed_increment

    @property
    def pad_speed_max(self) -> float:
        return self.pad_speed_initial * self.ball_speed_max / self.ball_speed_initial

    @property
    def pad_speed_increment(self) -> float:
        if self.ramp_steps == 0:
            return 0.0
        return (self.pad_speed_max - self.pad_speed_initial) / self.ramp_steps

    # ---------- Playfield edges ----------
    @property
    def left(self) -> float:
        return self.frame_position[0] - self.frame_width / 2.0

    @property
    def right(self) -> float:
        return self.frame_position[0] + self.frame_width / 2.0

    @property
    def top(self) -> float:
        return self.frame_position[1] + self.frame_height / 2.0

    @property
    def bottom(self) -> float:
        return self.frame_position[1] - self.frame_height / 2.0

    @property
    def left_pad_x(self) -> float:
        return self.left + self.pad_inset

    @property
    def right_pad_x(self) -> float:
        return self.right - self.pad_inset
