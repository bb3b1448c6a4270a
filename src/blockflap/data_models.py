"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from .constants import (
    BLOCK_SIZE, BLOCK_X, GAP_HEIGHT, INIT_GAP_Y, PIPE_WIDTH,
    RESTART_VELOCITY, SCREEN_WIDTH
)

@dataclass
class Player:
    """The block. Only y and velocity change during a session."""
    y: float = INIT_GAP_Y
    velocity: float = 0.0
    pending_flap: bool = False             # Did the player press flap since the last frame?

    # Fixed for the whole session
    x: int = field(default=BLOCK_X, init=False)
    size: int = field(default=BLOCK_SIZE, init=False)

    @property
    def bottom(self) -> float:
        return self.y + self.size

@dataclass
class Pipe:
    """A pipe pair with a passable gap centered on gap_y."""
    x: float
    gap_y: float
    width: int = field(default=PIPE_WIDTH, init=False)
    half_gap: int = field(default=GAP_HEIGHT, init=False)

    @property
    def gap_top(self) -> float:
        return self.gap_y - self.half_gap

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.half_gap

    @property
    def right(self) -> float:
        return self.x + self.width


class PipeQueue:
    """
    Fixed-capacity FIFO of in-flight pipes.
    Front is the oldest (leftmost) pipe. Capacity is 1 in this game.
    """

    def __init__(self, capacity: int = 1):
        assert capacity > 0, "pipe queue needs room for at least one pipe"
        self.capacity = capacity
        self._pipes: List[Pipe] = []

    def __len__(self) -> int:
        return len(self._pipes)

    def __iter__(self) -> Iterator[Pipe]:
        return iter(list(self._pipes))

    def front(self) -> Pipe:
        assert self._pipes, "pipe queue is empty"
        return self._pipes[0]

    def push_back(self, pipe: Pipe):
        assert len(self._pipes) < self.capacity, "pipe queue is full"
        self._pipes.append(pipe)

    def pop_front(self) -> Pipe:
        assert self._pipes, "pipe queue is empty"
        return self._pipes.pop(0)

    def clear(self):
        self._pipes.clear()


def initial_pipe() -> Pipe:
    """The pipe every session starts with, at the right edge."""
    return Pipe(x=float(SCREEN_WIDTH), gap_y=float(INIT_GAP_Y))


@dataclass
class GameSession:
    """Everything one game owns: the block, the pipes, score and the terminal flag."""
    player: Player = field(default_factory=Player)
    pipes: PipeQueue = field(default_factory=PipeQueue)
    score: int = 0
    game_over: bool = False

    @classmethod
    def new(cls) -> "GameSession":
        """A session in its start-up configuration."""
        session = cls()
        session.pipes.push_back(initial_pipe())
        return session

    def reset(self):
        """
        Puts the session back into play after a game over.
        The block keeps a small upward nudge instead of starting at rest.
        """
        self.player.y = INIT_GAP_Y
        self.player.velocity = RESTART_VELOCITY
        self.player.pending_flap = False
        self.pipes.clear()
        self.pipes.push_back(initial_pipe())
        self.score = 0
        self.game_over = False
