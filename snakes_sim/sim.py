"""Single-player game engine — rolls, turns, and per-game statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from snakes_sim.board import Board
from snakes_sim.dice import Die
from snakes_sim.luck import compute_luck

logger = logging.getLogger(__name__)


class DoesNotTerminateError(RuntimeError):
    """Raised when a game runs past its ``max_turns`` cap without winning."""


# ── Structured types ────────────────────────────────────────────────

@dataclass
class RollResult:
    """What one die roll did, after every snake and ladder was followed."""

    die_value: int
    climb_distance: int = 0
    slide_distance: int = 0


@dataclass
class TurnResult:
    """Record of a whole turn, including any re-rolls."""

    turn_number: int
    start_position: int
    end_position: int
    die_values: list[int] = field(default_factory=list)
    climb_distance: int = 0
    slide_distance: int = 0
    won: bool = False


# ── Observer ────────────────────────────────────────────────────────

class TurnObserver(Protocol):
    """Receives a TurnResult after every turn."""

    def on_turn(self, result: TurnResult) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects turns into a list."""

    turns: list[TurnResult] = field(default_factory=list)

    def on_turn(self, result: TurnResult) -> None:
        self.turns.append(result)


class LogObserver:
    """Writes one debug line per turn, for `-v` runs."""

    def on_turn(self, result: TurnResult) -> None:
        logger.debug(
            f"Turn {result.turn_number}: rolled {result.die_values}, "
            f"{result.start_position} -> {result.end_position}"
            + (" (won)" if result.won else "")
        )


# ── Engine ──────────────────────────────────────────────────────────

class Sim:
    """Play one game on *board* with *die* until the last square is reached.

    All statistics are plain public attributes, readable once ``run()``
    returns. *max_turns* is off by default; boards that can't be won
    then loop forever.
    """

    def __init__(
        self,
        board: Board,
        die: Die,
        observer: TurnObserver | None = None,
        max_turns: int | None = None,
    ):
        self.board = board
        self.die = die
        self.observer = observer
        self.max_turns = max_turns
        self.position = 0
        self.luck = compute_luck(board)
        self.lucky_spaces, self.unlucky_spaces = self.luck

        # stats
        self.turn_count = 0
        self.roll_count = 0
        self.climb_count = 0
        self.slide_count = 0
        self.climb_distance = 0
        self.slide_distance = 0
        self.biggest_climb = 0
        self.biggest_slide = 0
        self.longest_turn: list[int] = []
        self.lucky_rolls = 0
        self.unlucky_rolls = 0

    def has_won(self) -> bool:
        return self.position == self.board.size

    def run(self) -> None:
        """Take turns until has_won()."""
        while not self.has_won():
            if self.max_turns is not None and self.turn_count >= self.max_turns:
                raise DoesNotTerminateError(
                    f"No win after {self.turn_count} turns (stuck on square {self.position})"
                )
            self.turn()
        logger.debug(f"Won in {self.turn_count} turns / {self.roll_count} rolls")

    def turn(self) -> TurnResult:
        """Roll once, and keep rolling on the top face. Stop as soon as we've won."""
        self.turn_count += 1
        result = TurnResult(
            turn_number=self.turn_count,
            start_position=self.position,
            end_position=self.position,
        )

        while not self.has_won():
            roll = self.roll()
            result.climb_distance += roll.climb_distance
            result.slide_distance += roll.slide_distance
            result.die_values.append(roll.die_value)
            if roll.die_value < self.die.size:
                break

        result.end_position = self.position
        result.won = self.has_won()

        self.biggest_climb = max(self.biggest_climb, result.climb_distance)
        self.biggest_slide = max(self.biggest_slide, result.slide_distance)
        # Lists compare lexicographically: [6, 5] < [6, 6, 2] < [6, 6, 3]
        if result.die_values > self.longest_turn:
            self.longest_turn = list(result.die_values)

        if self.observer is not None:
            self.observer.on_turn(result)
        return result

    def roll(self) -> RollResult:
        """Roll the die once and resolve the consequences."""
        return self.roll_resolve(self.die.roll())

    def roll_resolve(self, die_value: int) -> RollResult:
        """Try to move forwards *die_value* squares."""
        self.roll_count += 1
        rolled_position = self.position + die_value

        # Overshoot → stay put. Also covers any roll after winning.
        if rolled_position > self.board.size:
            logger.debug(f"Rolled {die_value} on {self.position}: overshoot")
            return RollResult(die_value=die_value)

        self.position = rolled_position
        self._follow_routes()
        if self.position > rolled_position:
            climb, slide = self.position - rolled_position, 0
        else:
            climb, slide = 0, rolled_position - self.position

        # Luck is judged on the square we landed on, not where the routes took us
        outcome = self.luck.classify(rolled_position)
        if outcome == "unlucky":
            self.unlucky_rolls += 1
        elif outcome == "lucky":
            self.lucky_rolls += 1

        logger.debug(
            f"Rolled {die_value}: landed on {rolled_position}, now on {self.position}"
        )
        return RollResult(die_value=die_value, climb_distance=climb, slide_distance=slide)

    def _follow_routes(self) -> None:
        """Follow snakes and ladders from the current position, however many chain."""
        square = self.position
        while square in self.board.routes:
            dest = self.board.routes[square]
            if dest > square:
                self.climb_count += 1
                self.climb_distance += dest - square
            else:
                self.slide_count += 1
                self.slide_distance += square - dest
            square = dest
        # Only the final square is ever visible as the position
        self.position = square
