"""
physics_engine.py: Pipe scrolling, retirement and spawning.
"""

import logging
import random
from dataclasses import dataclass, field

from .constants import BLOCK_X, FLIGHT_SPEED, INIT_GAP_Y, PIPE_WIDTH, SCREEN_WIDTH
from .data_models import Pipe, PipeQueue

logger = logging.getLogger(__name__)

@dataclass
class PipeEngine:
    """
    Moves the pipes and swaps the oldest one for a fresh one once it has
    scrolled fully past the left edge.
    """
    rng: random.Random = field(default_factory=random.Random)
    spawned: int = 0

    def _spawn_pipe(self) -> Pipe:
        """Generates a new pipe at the right edge with a random gap."""
        gap_y = BLOCK_X + self.rng.random() * INIT_GAP_Y
        self.spawned += 1
        return Pipe(x=float(SCREEN_WIDTH), gap_y=gap_y)

    def step_pipes(self, pipes: PipeQueue) -> bool:
        """
        Scrolls every pipe by FLIGHT_SPEED.
        Returns True when the front pipe was retired and replaced.
        """
        for pipe in pipes:
            pipe.x -= FLIGHT_SPEED

        if pipes.front().x < -PIPE_WIDTH:
            pipes.pop_front()
            pipe = self._spawn_pipe()
            pipes.push_back(pipe)
            logger.debug("Spawned pipe #%d with gap at %.2f", self.spawned, pipe.gap_y)
            return True
        return False
