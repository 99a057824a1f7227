"""Data models for the Monty Hall Simulator.

Contains the Door and Game state machines and the errors raised when they are
driven out of order.
"""

from __future__ import annotations

import numpy as np

from montyhall_sim.sampling import make_rng, uniform_choice, uniform_index


class GameError(Exception):
    """Base class for misuse of a Door or Game."""


class DoorAlreadyOpenError(GameError):
    """Raised when opening a door that is already open."""


class DoorNotOpenError(GameError):
    """Raised when asking a closed door whether it is winning."""


class GameNotFinishedError(GameError):
    """Raised when asking for the outcome before both steps are made."""


class GameFinishedError(GameError):
    """Raised on any step after the final answer."""


class GamePhaseError(GameError):
    """Raised when the host reveal and final answer are called out of order."""


class Door:
    """A single door hiding either the prize or nothing.

    The prize flag is fixed at creation and only readable once opened.
    """

    __slots__ = ("_winning", "_open")

    def __init__(self, is_winning: bool = False) -> None:
        self._winning = bool(is_winning)
        self._open = False

    def __repr__(self) -> str:
        return f"Door(open={self._open})"

    def is_open(self) -> bool:
        return self._open

    def open(self) -> bool:
        """Open the door and return whether it is the winner."""
        if self._open:
            raise DoorAlreadyOpenError("Door is already open")

        self._open = True
        return self._winning

    def winning(self) -> bool:
        """Return the winning flag of an opened door."""
        # no peeking
        if not self._open:
            raise DoorNotOpenError("Door must be opened before checking it")
        return self._winning


class Game:
    """One round of the puzzle: a host reveal followed by a final answer.

    The round moves through ``guess_count`` 0 -> 1 -> 2. The first step takes
    the player's tentative pick and opens every losing door except one, the
    second opens the player's final pick.
    """

    def __init__(
        self,
        door_count: int = 3,
        rng: np.random.Generator | None = None,
        winning_index: int | None = None,
    ) -> None:
        if door_count < 2:
            raise ValueError(f"Game needs at least 2 doors, got {door_count}")

        self.rng = rng if rng is not None else make_rng()
        self._door_count = door_count

        if winning_index is None:
            winning_index = uniform_index(self.rng, door_count)
        elif not 0 <= winning_index < door_count:
            raise ValueError(
                f"winning_index must be in [0, {door_count}), got {winning_index}"
            )
        self._winning_index = winning_index

        self.doors = [Door(is_winning=(i == winning_index)) for i in range(door_count)]
        self.guess_count = 0
        self.final_answer_index: int | None = None

    def n_doors(self) -> int:
        return self._door_count

    @property
    def winning_index(self) -> int:
        return self._winning_index

    @property
    def finished(self) -> bool:
        return self.guess_count == 2

    def is_open(self, door: int) -> bool:
        return self.doors[door].is_open()

    def closed_doors(self) -> list[int]:
        """Indices of doors still closed, in door order."""
        return [i for i, door in enumerate(self.doors) if not door.is_open()]

    def open_doors(self) -> list[int]:
        """Indices of doors already opened, in door order."""
        return [i for i, door in enumerate(self.doors) if door.is_open()]

    def losing_doors(self) -> list[int]:
        return [i for i in range(self._door_count) if i != self._winning_index]

    def host_reveal(self, choice: int) -> list[int]:
        """Open every losing door except one, given the tentative pick.

        If the pick is a loser it stays closed. If the pick is the winner, a
        random loser stays closed instead. Either way the winner and exactly
        one loser remain closed.

        Returns:
            Indices opened by the host
        """
        if self.finished:
            raise GameFinishedError("Game is already finished")
        if self.guess_count != 0:
            raise GamePhaseError("Host has already revealed")
        self._check_choice(choice)

        candidates = self.losing_doors()
        if choice in candidates:
            candidates.remove(choice)
        else:
            candidates.remove(uniform_choice(self.rng, candidates))

        for door in candidates:
            self.doors[door].open()

        self.guess_count += 1
        return candidates

    def final_answer(self, choice: int) -> bool:
        """Open the final pick and lock it in as the answer."""
        if self.finished:
            raise GameFinishedError("Game is already finished")
        if self.guess_count != 1:
            raise GamePhaseError("Host must reveal before the final answer")
        self._check_choice(choice)

        is_winning = self.doors[choice].open()
        self.final_answer_index = choice
        self.guess_count += 1
        return is_winning

    def open(self, choice: int) -> None:
        """Advance the round by one step, whichever step is next."""
        if self.guess_count == 0:
            self.host_reveal(choice)
        elif self.guess_count == 1:
            self.final_answer(choice)
        else:
            raise GameFinishedError("Game is already finished")

    def won(self) -> bool:
        if not self.finished:
            raise GameNotFinishedError("Both steps must be made before scoring")
        return self.doors[self.final_answer_index].winning()

    def _check_choice(self, choice: int) -> None:
        if not 0 <= choice < self._door_count:
            raise ValueError(
                f"Door index must be in [0, {self._door_count}), got {choice}"
            )
