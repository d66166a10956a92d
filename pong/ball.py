import random


class Ball:
    def __init__(self, x, y, radius, speed, dx=1, dy=1):
        self.x = float(x)
        self.y = float(y)
        self.radius = radius
        # Direction is a sign per axis, the magnitude lives in speed
        self.dx = dx
        self.dy = dy
        self.speed = float(speed)  # pixels/sec

    @property
    def left(self):
        return self.x - self.radius

    @property
    def right(self):
        return self.x + self.radius

    @property
    def top(self):
        return self.y + self.radius

    @property
    def bottom(self):
        return self.y - self.radius

    def advance(self, dt: float):
        self.x += self.dx * self.speed * dt
        self.y += self.dy * self.speed * dt

    def wall_bounce(self, top: float, bottom: float) -> bool:
        """Flip dy when the ball touches a wall it is still moving into."""
        if self.top >= top:
            if self.dy > 0:
                self.dy = -self.dy
                return True
        elif self.bottom <= bottom:
            if self.dy < 0:
                self.dy = -self.dy
                return True
        return False

    def bounce_x(self, toward: int) -> bool:
        # Only while heading toward the paddle, so one approach gives one flip
        if self.dx == toward:
            self.dx = -self.dx
            return True
        return False

    def reset(self, speed: float, x_range, y_range, rng=None):
        rng = rng or random
        self.x = rng.uniform(*x_range)
        self.y = rng.uniform(*y_range)
        self.dx = rng.choice((-1, 1))
        self.dy = rng.choice((-1, 1))
        self.speed = float(speed)
