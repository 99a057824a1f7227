"""Tests for models module."""

import numpy as np
import pytest

from montyhall_sim.models import (
    Door,
    DoorAlreadyOpenError,
    DoorNotOpenError,
    Game,
    GameError,
    GameFinishedError,
    GameNotFinishedError,
    GamePhaseError,
)


class SequenceRng:
    """Stand-in generator returning a fixed sequence of draws."""

    def __init__(self, values):
        self.values = list(values)

    def integers(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


def test_door_starts_closed():
    """Test a new door is closed."""
    door = Door(is_winning=True)

    assert not door.is_open()


def test_door_open_returns_winning_flag():
    """Test opening a door reveals whether it wins."""
    assert Door(is_winning=True).open() is True
    assert Door(is_winning=False).open() is False


def test_door_open_twice():
    """Test re-opening a door fails."""
    door = Door()
    door.open()

    with pytest.raises(DoorAlreadyOpenError):
        door.open()


def test_door_winning_requires_open():
    """Test no peeking at a closed door."""
    door = Door(is_winning=True)

    with pytest.raises(DoorNotOpenError):
        door.winning()

    door.open()
    assert door.winning() is True


def test_door_flag_hidden_while_closed():
    """Test the prize flag cannot be read or changed on a closed door."""
    game = Game(3, rng=np.random.default_rng(0))

    for door in game.doors:
        assert not hasattr(door, "is_winning")
        with pytest.raises(DoorNotOpenError):
            door.winning()
        with pytest.raises(AttributeError):
            door.is_winning = True

    flags = [door.open() for door in game.doors]
    assert sum(flags) == 1


def test_errors_share_base_class():
    """Test all state machine errors derive from GameError."""
    for error in (
        DoorAlreadyOpenError,
        DoorNotOpenError,
        GameNotFinishedError,
        GameFinishedError,
        GamePhaseError,
    ):
        assert issubclass(error, GameError)


@pytest.mark.parametrize("door_count", [2, 3, 4, 10])
def test_game_has_exactly_one_winner(door_count):
    """Test exactly one door wins, checked by opening them all."""
    rng = np.random.default_rng(42)
    for _ in range(20):
        game = Game(door_count, rng=rng)
        flags = [door.open() for door in game.doors]

        assert sum(flags) == 1
        assert flags.index(True) == game.winning_index


def test_game_winning_index_from_rng():
    """Test the winning door is drawn from the injected generator."""
    game = Game(3, rng=SequenceRng([1]))

    assert game.winning_index == 1
    assert game.doors[1].open() is True


def test_game_initial_state():
    """Test a new game has all doors closed and no guesses."""
    game = Game(4, rng=np.random.default_rng(0))

    assert game.n_doors() == 4
    assert game.guess_count == 0
    assert game.final_answer_index is None
    assert not game.finished
    assert game.closed_doors() == [0, 1, 2, 3]
    assert game.open_doors() == []


def test_game_too_few_doors():
    """Test games need at least two doors."""
    with pytest.raises(ValueError, match="at least 2 doors"):
        Game(1)


def test_game_winning_index_out_of_range():
    """Test forcing an impossible winning door."""
    with pytest.raises(ValueError, match="winning_index"):
        Game(3, winning_index=3)


@pytest.mark.parametrize("door_count", [2, 3, 5, 8])
def test_host_reveal_leaves_winner_and_one_loser(door_count):
    """Test two doors stay closed, one of them the winner, for any pick."""
    rng = np.random.default_rng(7)
    for choice in range(door_count):
        for _ in range(10):
            game = Game(door_count, rng=rng)
            game.host_reveal(choice)
            closed = game.closed_doors()

            assert len(closed) == 2
            assert game.winning_index in closed
            assert choice in closed
            assert game.guess_count == 1


def test_host_reveal_does_not_open_choice():
    """Test the tentative pick itself is never opened."""
    game = Game(5, rng=np.random.default_rng(3), winning_index=2)
    opened = game.host_reveal(4)

    assert not game.is_open(4)
    assert opened == [0, 1, 3]
    assert game.open_doors() == opened


def test_scenario_loser_pick_then_switch_wins():
    """Test the three door walk-through where switching wins."""
    game = Game(3, rng=SequenceRng([1]))
    game.host_reveal(0)

    assert game.closed_doors() == [0, 1]
    assert game.open_doors() == [2]

    assert game.final_answer(1) is True
    assert game.final_answer_index == 1
    assert game.won() is True


def test_scenario_loser_pick_then_stay_loses():
    """Test the three door walk-through where staying loses."""
    game = Game(3, rng=SequenceRng([1]))
    game.host_reveal(0)
    game.final_answer(0)

    assert game.won() is False


def test_host_reveal_withholds_random_loser_uniformly():
    """Test a winning pick leaves each loser closed equally often."""
    rng = np.random.default_rng(42)
    door_count = 5
    trials = 4000
    counts = np.zeros(door_count)

    for _ in range(trials):
        game = Game(door_count, rng=rng, winning_index=0)
        game.host_reveal(0)
        closed = game.closed_doors()
        assert closed[0] == 0
        counts[closed[1]] += 1

    assert counts[0] == 0
    freqs = counts[1:] / trials
    np.testing.assert_allclose(freqs, 1 / (door_count - 1), atol=0.03)


def test_final_answer_on_host_opened_door():
    """Test re-picking a door the host opened fails."""
    game = Game(3, winning_index=1)
    game.host_reveal(0)

    with pytest.raises(DoorAlreadyOpenError):
        game.final_answer(2)


def test_third_step_fails():
    """Test any step after the final answer fails."""
    game = Game(3, winning_index=0)
    game.host_reveal(1)
    game.final_answer(0)

    with pytest.raises(GameFinishedError):
        game.final_answer(1)
    with pytest.raises(GameFinishedError):
        game.host_reveal(1)
    with pytest.raises(GameFinishedError):
        game.open(1)


def test_steps_out_of_order():
    """Test the final answer cannot precede the host reveal."""
    game = Game(3, winning_index=0)

    with pytest.raises(GamePhaseError):
        game.final_answer(0)

    game.host_reveal(0)
    with pytest.raises(GamePhaseError, match="already revealed"):
        game.host_reveal(0)


def test_won_before_finished():
    """Test the outcome is hidden until both steps are made."""
    game = Game(3, winning_index=2)

    with pytest.raises(GameNotFinishedError):
        game.won()

    game.host_reveal(2)
    with pytest.raises(GameNotFinishedError):
        game.won()


def test_open_dispatches_steps():
    """Test the generic open call walks the two steps in order."""
    game = Game(3, rng=SequenceRng([2]))
    game.open(0)

    assert game.closed_doors() == [0, 2]

    game.open(2)
    assert game.finished
    assert game.won() is True


def test_choice_out_of_range():
    """Test door indices are validated."""
    game = Game(3, winning_index=0)

    with pytest.raises(ValueError, match="Door index"):
        game.host_reveal(3)
    with pytest.raises(ValueError, match="Door index"):
        game.host_reveal(-1)
