"""
physics_core.py: The deterministic kinematic functions, collision and scoring logic.
"""

from typing import Callable

from .constants import (
    GRAVITY, JUMP, SCREEN_HEIGHT, SOUND_HIT
)
from .data_models import GameSession, Pipe, Player

SoundTrigger = Callable[[str], None]


class PhysicsCore:
    """
    Per-frame physics and rules for a single block.
    """

    GRAVITY = GRAVITY
    JUMP = JUMP
    SCREEN_HEIGHT = SCREEN_HEIGHT

    def apply_gravity_and_movement(self, y: float, velocity: float, flap: bool = False) -> tuple[float, float]:
        """
        Calculates new position and velocity after one frame.
        A flap sets the velocity to JUMP and skips gravity for that frame.
        """
        if flap:
            velocity = self.flap()
        else:
            velocity += self.GRAVITY
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity right after a flap."""
        return self.JUMP

    def step_player(self, player: Player):
        """Advances the block one frame, consuming any pending flap."""
        flap = player.pending_flap
        player.pending_flap = False
        player.y, player.velocity = self.apply_gravity_and_movement(
            player.y, player.velocity, flap)

    def hits_pipe(self, player: Player, pipe: Pipe) -> bool:
        """True when the block is outside the gap while overlapping the pipe horizontally."""
        outside_gap = player.y < pipe.gap_top or player.bottom > pipe.gap_bottom
        overlaps = pipe.x < player.x + player.size and pipe.right > player.x
        return outside_gap and overlaps

    def out_of_bounds(self, y: float) -> bool:
        """Floor/ceiling check. The edges themselves are still in bounds."""
        return y > self.SCREEN_HEIGHT or y < 0

    def passes(self, player: Player, pipe: Pipe) -> bool:
        # Exact match on purpose: a pipe that skips the block's x never scores.
        return pipe.x == player.x

    def resolve_frame(self, session: GameSession, trigger: SoundTrigger):
        """
        Applies collision, boundary and scoring rules to the session.
        Every pipe is checked every frame; the hit sound fires once per hit found.
        """
        player = session.player

        for pipe in session.pipes:
            if self.hits_pipe(player, pipe):
                session.game_over = True
                trigger(SOUND_HIT)

            if self.passes(player, pipe):
                session.score += 1

        if self.out_of_bounds(player.y):
            session.game_over = True
            trigger(SOUND_HIT)
