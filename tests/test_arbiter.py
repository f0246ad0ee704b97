"""
Tests for the direction arbiter: immediate turns, one queued turn per tick,
and reversal prevention.
"""

from smoothsnake.arbiter import DirectionArbiter, is_perpendicular
from smoothsnake.config import UP, DOWN, LEFT, RIGHT
from smoothsnake.game import tick


class TestDirectionHelpers:

    def test_is_perpendicular(self):
        assert is_perpendicular(UP, LEFT)
        assert is_perpendicular(RIGHT, DOWN)
        assert not is_perpendicular(UP, DOWN)
        assert not is_perpendicular(RIGHT, RIGHT)


class TestDirectionArbiter:
    """Tests for DirectionArbiter.request / commit / reset."""

    def test_starts_moving_right(self):
        arb = DirectionArbiter()
        assert arb.active == RIGHT
        assert arb.last_used == RIGHT
        assert arb.queued is None

    def test_perpendicular_request_applies_immediately(self):
        arb = DirectionArbiter()
        assert arb.request(UP)
        assert arb.active == UP
        assert arb.last_used is None

    def test_repeating_the_turn_does_not_apply_twice(self):
        arb = DirectionArbiter()
        arb.request(UP)
        assert not arb.request(UP)
        assert arb.active == UP
        assert arb.queued is None

    def test_second_turn_in_same_tick_is_queued(self):
        arb = DirectionArbiter()
        arb.request(UP)
        assert arb.request(LEFT)
        assert arb.active == UP
        assert arb.queued == LEFT

        arb.commit()
        assert arb.last_used == UP
        assert arb.active == LEFT
        assert arb.queued is None

    def test_later_queued_turn_overwrites_earlier_one(self):
        arb = DirectionArbiter()
        arb.request(UP)
        arb.request(LEFT)
        arb.request(RIGHT)
        assert arb.queued == RIGHT

    def test_reversal_is_ignored(self):
        arb = DirectionArbiter()
        assert not arb.request(LEFT)
        assert arb.active == RIGHT
        assert arb.last_used == RIGHT

    def test_reversal_is_ignored_after_a_turn(self):
        arb = DirectionArbiter()
        arb.request(UP)
        assert not arb.request(DOWN)
        assert arb.active == UP
        assert arb.queued is None

    def test_reversal_of_last_used_is_ignored_even_after_queue_applied(self):
        arb = DirectionArbiter()
        arb.request(UP)
        arb.request(LEFT)
        arb.commit()
        # moved UP last tick, now heading LEFT; DOWN would reverse the last move
        assert not arb.request(DOWN)
        assert arb.active == LEFT

    def test_queueing_disabled_drops_second_turn(self):
        arb = DirectionArbiter(queueing=False)
        arb.request(UP)
        assert not arb.request(LEFT)
        assert arb.queued is None

    def test_reset(self):
        arb = DirectionArbiter()
        arb.request(UP)
        arb.request(LEFT)
        arb.reset()
        assert (arb.active, arb.last_used, arb.queued) == (RIGHT, RIGHT, None)


class TestArbiterWithTicks:
    """Turns feeding into real ticks."""

    def test_up_then_left_within_one_tick(self, state):
        state.apple = (0, 0)
        state.arbiter.request(UP)
        state.arbiter.request(LEFT)

        tick(state, 100)
        assert state.snake[0] == (12, 11)
        tick(state, 200)
        assert state.snake[0] == (11, 11)

    def test_quick_reversal_cannot_kill_the_snake(self, state):
        state.apple = (0, 0)
        state.arbiter.request(UP)
        state.arbiter.request(LEFT)
        state.arbiter.request(DOWN)

        result = tick(state, 100)
        assert not result.collided
        assert state.snake[0] == (12, 11)
