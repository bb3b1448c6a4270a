#!/usr/bin/env python3
"""
flappy_client.py

pygame window, input dispatch and the per-refresh frame scheduler.
The game itself lives in GameLoop; this module only drives it.
"""

import argparse
import logging
import random
from typing import Optional

import pygame

from .audio import SoundBoard
from .constants import (
    DEFAULT_FPS, DEFAULT_SCALE, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
)
from .game_loop import FrameCallback, GameLoop
from .physics_engine import PipeEngine
from .renderer import Renderer

logger = logging.getLogger(__name__)


class FlappyClient:
    def __init__(self, scale: int = DEFAULT_SCALE, fps: int = DEFAULT_FPS,
                 seed: Optional[int] = None, mute: bool = False,
                 debug_hitbox: bool = False):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale))
        pygame.display.set_caption(WINDOW_TITLE)

        self.sounds = SoundBoard()
        if mute:
            logger.warning("Audio muted, sound effects are disabled")
        else:
            self.sounds.init()

        self.renderer = Renderer(debug_hitbox=debug_hitbox)
        self.game = GameLoop(
            renderer=self.renderer,
            trigger=self.sounds.trigger,
            schedule=self.request_frame,
            pipe_engine=PipeEngine(rng=random.Random(seed)),
        )

        # Time Management
        self.clock = pygame.time.Clock()
        self.fps = fps
        self._pending_frame: Optional[FrameCallback] = None

    def request_frame(self, callback: FrameCallback):
        """Runs `callback` once, before the next refresh is presented."""
        self._pending_frame = callback

    def handle_event(self, event) -> bool:
        """Dispatches one pygame event. Returns False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.game.on_action()
        return True

    def run(self):
        """The main client execution loop."""
        self.game.start()

        running = True
        while running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False

            callback, self._pending_frame = self._pending_frame, None
            if callback is not None:
                callback()

            self.renderer.present(self.screen)
            pygame.display.flip()

        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockflap", description="Fly a block through the pipes. SPACE flaps / restarts.")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help="window pixels per game pixel (default: %(default)s)")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS,
                        help="frames per second (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for pipe gap placement")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument("--debug-hitbox", action="store_true",
                        help="outline each pipe's gap")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.scale < 1 or args.fps < 1:
        raise SystemExit("--scale and --fps must be positive")

    client = FlappyClient(scale=args.scale, fps=args.fps, seed=args.seed,
                          mute=args.mute, debug_hitbox=args.debug_hitbox)
    client.run()


if __name__ == "__main__":
    main()
