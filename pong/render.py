import pygame

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
BACKGROUND = (8, 8, 8)


class Renderer:
    """Draws a Snapshot. World origin is the window center, y points up."""

    def __init__(self, screen):
        self.screen = screen
        self.width, self.height = screen.get_size()
        self.font = pygame.font.SysFont("Arial", 64)
        self.small_font = pygame.font.SysFont("Arial", 16)
        self._score_surfaces = None
        self._colon = self.font.render(":", True, WHITE)

    def to_screen(self, x, y):
        return self.width / 2.0 + x, self.height / 2.0 - y

    def _rect(self, cx, cy, w, h):
        sx, sy = self.to_screen(cx, cy)
        return pygame.Rect(int(sx - w / 2), int(sy - h / 2), int(w), int(h))

    def refresh_scores(self, left_score: int, right_score: int):
        # Only called on scoring events, the surfaces are reused otherwise
        self._score_surfaces = (
            self.font.render(str(left_score), True, WHITE),
            self.font.render(str(right_score), True, WHITE),
        )

    def render(self, snap, fps: float = 0.0):
        if self._score_surfaces is None:
            self.refresh_scores(snap.left_score, snap.right_score)

        self.screen.fill(BACKGROUND)

        # Frame: white border behind a black field
        fx, fy = snap.frame_position
        fw, fh = snap.frame_size
        pygame.draw.rect(self.screen, WHITE, self._rect(fx, fy, fw, fh + 2 * snap.frame_thickness))
        pygame.draw.rect(self.screen, BLACK, self._rect(fx, fy, fw, fh))

        pw, ph = snap.pad_size
        pygame.draw.rect(self.screen, GREEN, self._rect(*snap.left_pad_pos, pw, ph))
        pygame.draw.rect(self.screen, GREEN, self._rect(*snap.right_pad_pos, pw, ph))

        bx, by = self.to_screen(*snap.ball_pos)
        pygame.draw.circle(self.screen, WHITE, (int(bx), int(by)), int(snap.ball_radius))

        # HUD
        left_text, right_text = self._score_surfaces
        center_x, _ = self.to_screen(fx, fy)
        self.screen.blit(self._colon, self._colon.get_rect(midtop=(center_x, 10)))
        self.screen.blit(left_text, left_text.get_rect(topright=(center_x - 20, 10)))
        self.screen.blit(right_text, right_text.get_rect(topleft=(center_x + 20, 10)))

        fps_text = self.small_font.render(f"FPS: {fps:.2f}", True, WHITE)
        self.screen.blit(fps_text, fps_text.get_rect(bottomleft=(15, self.height - 15)))
