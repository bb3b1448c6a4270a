"""
Tests for frame orchestration and the Running / GameOver state machine.
"""

import pytest

from conftest import FixedRandom, Floating

from blockflap.constants import (
    BLOCK_X, GRAVITY, INIT_GAP_Y, JUMP, RESTART_VELOCITY, SCREEN_WIDTH,
    SOUND_FLAP, SOUND_HIT
)
from blockflap.game_loop import GameLoop, GameState
from blockflap.physics_engine import PipeEngine


@pytest.fixture
def loop(renderer, sounds, scheduled, session):
    return GameLoop(renderer=renderer, trigger=sounds.append,
                    schedule=scheduled.append, session=session)


@pytest.fixture
def floating_loop(renderer, sounds, scheduled, session):
    return GameLoop(renderer=renderer, trigger=sounds.append,
                    schedule=scheduled.append, session=session,
                    physics=Floating(), pipe_engine=PipeEngine(rng=FixedRandom()))


def run_scheduled(scheduled, limit):
    """Drives the loop the way the client does, one callback per refresh."""
    ran = 0
    while scheduled and ran < limit:
        scheduled.pop(0)()
        ran += 1
    return ran


class TestFrame:
    """A single frame while running."""

    def test_start_schedules_next_frame(self, loop, scheduled):
        loop.start()
        assert scheduled == [loop.frame]
        assert loop.state is GameState.RUNNING

    def test_frame_order(self, loop, renderer, session):
        loop.frame()

        assert renderer.calls == ["clear", "world"]
        assert renderer.drawn_y == [pytest.approx(INIT_GAP_Y + GRAVITY)]
        assert session.pipes.front().x == SCREEN_WIDTH - 2

    def test_one_frame_per_schedule(self, loop, scheduled):
        loop.start()
        run_scheduled(scheduled, 10)
        assert loop.frames == 11
        assert len(scheduled) == 1


class TestGameOver:
    """Running -> GameOver and the halt that follows."""

    def test_out_of_bounds_halts(self, loop, renderer, sounds, scheduled, session):
        session.player.y = 200

        loop.frame()

        assert loop.state is GameState.GAME_OVER
        assert renderer.calls == ["clear", "world", "game_over"]
        assert sounds == [SOUND_HIT]
        assert scheduled == []

    def test_falling_block_eventually_stops_the_loop(self, loop, scheduled):
        loop.start()
        run_scheduled(scheduled, 1000)

        assert loop.state is GameState.GAME_OVER
        assert scheduled == []
        assert loop.frames < 1000

    def test_action_restarts(self, loop, session, scheduled, sounds):
        session.player.y = 200
        session.score = 5
        loop.frame()
        sounds.clear()

        loop.on_action()

        assert loop.state is GameState.RUNNING
        assert session.score == 0
        assert len(session.pipes) == 1
        assert session.pipes.front().gap_y == INIT_GAP_Y
        # The restart frame already ran once.
        assert session.pipes.front().x == SCREEN_WIDTH - 2
        assert session.player.velocity == pytest.approx(RESTART_VELOCITY + GRAVITY)
        assert session.player.y == pytest.approx(INIT_GAP_Y + RESTART_VELOCITY + GRAVITY)
        assert scheduled == [loop.frame]
        assert sounds == []

    def test_restart_while_running_is_a_defect(self, loop):
        with pytest.raises(AssertionError):
            loop.restart()


class TestInput:
    """The single game key while running."""

    def test_action_flaps(self, loop, session, sounds):
        loop.on_action()

        assert session.player.pending_flap
        assert sounds == [SOUND_FLAP]

        loop.frame()
        assert session.player.velocity == JUMP
        assert not session.player.pending_flap

    def test_repeated_actions_flap_once_per_frame(self, loop, session, sounds):
        loop.on_action()
        loop.on_action()
        loop.frame()

        assert session.player.velocity == JUMP
        assert sounds == [SOUND_FLAP, SOUND_FLAP]


class TestScoring:
    """Score through the full loop with a hovering block."""

    def test_scores_once_per_pipe(self, floating_loop, session, scheduled):
        floating_loop.start()
        frames_to_block = int((SCREEN_WIDTH - BLOCK_X) / 2)

        run_scheduled(scheduled, frames_to_block - 2)
        assert session.score == 0

        run_scheduled(scheduled, 1)
        assert session.pipes.front().x == BLOCK_X
        assert session.score == 1

        run_scheduled(scheduled, 20)
        assert session.score == 1

    def test_second_pipe_scores(self, floating_loop, session, scheduled):
        floating_loop.start()
        run_scheduled(scheduled, 125)

        assert not session.game_over
        assert session.score == 2
