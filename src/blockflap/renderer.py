"""
renderer.py: Draws the game onto a fixed 128x128 pygame surface.
"""

import pygame

from .constants import (
    BACKGROUND_COLOR, BLOCK_COLOR, COLORS, FONT_SIZE, GAME_OVER_POS,
    GAME_OVER_TEXT, HITBOX_COLOR, PIPE_COLOR, SCORE_POS, SCREEN_HEIGHT,
    SCREEN_WIDTH, TEXT_COLOR
)
from .data_models import GameSession


class Renderer:
    """
    Owns the logical-resolution surface. The client scales it to the window
    without smoothing.
    """

    def __init__(self, debug_hitbox: bool = False):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.palette = [pygame.Color(c) for c in COLORS]
        self.font = pygame.font.Font(None, FONT_SIZE)
        self.debug_hitbox = debug_hitbox

    def clear(self):
        self.surface.fill(self.palette[BACKGROUND_COLOR])

    def draw_world(self, session: GameSession):
        """Block, pipes and score."""
        screen = self.surface
        player = session.player

        pygame.draw.rect(screen, self.palette[BLOCK_COLOR],
                         (int(player.x), int(player.y), player.size, player.size))

        pipe_color = self.palette[PIPE_COLOR]
        for pipe in session.pipes:
            top_height = int(pipe.gap_top)
            if top_height > 0:
                pygame.draw.rect(screen, pipe_color, (int(pipe.x), 0, pipe.width, top_height))
            pygame.draw.rect(screen, pipe_color,
                             (int(pipe.x), int(pipe.gap_bottom), pipe.width, SCREEN_HEIGHT))

            if self.debug_hitbox:
                pygame.draw.rect(screen, pygame.Color(HITBOX_COLOR),
                                 (int(pipe.x), int(pipe.gap_top), pipe.width, pipe.half_gap * 2), 1)

        self._draw_text(str(session.score), SCORE_POS)

    def draw_game_over(self):
        self._draw_text(GAME_OVER_TEXT, GAME_OVER_POS)

    def _draw_text(self, text: str, baseline_pos: tuple[int, int]):
        # Positions are baselines; pygame blits from the top-left corner.
        x, y = baseline_pos
        surf = self.font.render(text, False, self.palette[TEXT_COLOR])
        self.surface.blit(surf, (x, y - self.font.get_ascent()))

    def present(self, window: pygame.Surface):
        """Nearest-neighbour upscale of the logical surface onto the window."""
        window.blit(pygame.transform.scale(self.surface, window.get_size()), (0, 0))
