"""
game_loop.py: Frame orchestration and the Running / GameOver state machine.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .constants import SOUND_FLAP
from .data_models import GameSession
from .physics_core import PhysicsCore, SoundTrigger
from .physics_engine import PipeEngine

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]
Scheduler = Callable[[FrameCallback], None]


class GameState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameLoop:
    """
    Owns the session and runs one frame at a time.

    Each frame: clear -> block physics -> pipes -> collision/score -> draw,
    then either asks `schedule` for the next frame or draws GAME OVER and
    stops. Nothing is scheduled while the game is over; `restart()` is the
    only way back.
    """

    def __init__(self, renderer, trigger: SoundTrigger, schedule: Scheduler,
                 session: Optional[GameSession] = None,
                 physics: Optional[PhysicsCore] = None,
                 pipe_engine: Optional[PipeEngine] = None):
        self.renderer = renderer
        self.trigger = trigger
        self.schedule = schedule
        self.session = session or GameSession.new()
        self.physics = physics or PhysicsCore()
        self.pipe_engine = pipe_engine or PipeEngine()
        self.frames = 0

    @property
    def state(self) -> GameState:
        return GameState.GAME_OVER if self.session.game_over else GameState.RUNNING

    def start(self):
        """Runs the first frame; later frames are driven by the scheduler."""
        logger.info("Game started")
        self.frame()

    def frame(self):
        """One synchronous simulate-then-render pass."""
        session = self.session
        assert len(session.pipes) == 1, "exactly one pipe must be in flight"
        self.frames += 1

        self.renderer.clear()

        # 1. Block
        self.physics.step_player(session.player)

        # 2. Pipes
        self.pipe_engine.step_pipes(session.pipes)

        # 3. Rules
        self.physics.resolve_frame(session, self.trigger)

        # 4. Draw, then continue or halt
        self.renderer.draw_world(session)
        if session.game_over:
            self.renderer.draw_game_over()
            logger.info("Game over after %d frames. Score: %d", self.frames, session.score)
        else:
            self.schedule(self.frame)

    def on_action(self):
        """The one game key: flap while running, restart once it is over."""
        if self.session.game_over:
            self.restart()
        else:
            self.session.player.pending_flap = True
            self.trigger(SOUND_FLAP)

    def restart(self):
        """Resets the session and runs a frame straight away."""
        assert self.session.game_over, "restart is only valid after a game over"
        self.session.reset()
        self.frames = 0
        logger.info("Game restarted")
        self.frame()
