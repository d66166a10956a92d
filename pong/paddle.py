class Paddle:
    def __init__(self, x, y, width, height):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height

    @property
    def top(self):
        return self.y + self.height / 2.0

    @property
    def bottom(self):
        return self.y - self.height / 2.0

    def move(self, up: bool, down: bool, speed: float):
        # Up wins when both keys are held
        if up:
            self.y += speed
        elif down:
            self.y -= speed

    def clamp(self, top: float, bottom: float):
        """Keep the whole paddle between the walls."""
        half = self.height / 2.0
        self.y = max(bottom + half, min(self.y, top - half))

    def overlaps_vertically(self, ball) -> bool:
        return ball.bottom <= self.top and ball.top >= self.bottom

    def intercepts(self, ball, side: int) -> bool:
        """
        side: -1 for the left paddle, +1 for the right one.
        The hit band runs from the paddle's inner face to its center line.
        """
        if side > 0:
            in_band = ball.right >= self.x - self.width / 2.0 and ball.left <= self.x
        else:
            in_band = ball.left <= self.x + self.width / 2.0 and ball.right >= self.x
        return in_band and self.overlaps_vertically(ball)
