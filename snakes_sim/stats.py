"""Run batches of games and summarise them as min/avg/max statistics."""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from typing import Sequence

from snakes_sim.board import Board
from snakes_sim.dice import DIE_SIZE, RandomDie
from snakes_sim.sim import Sim, TurnObserver

logger = logging.getLogger(__name__)


def min_avg_max(sequence: Sequence[int]) -> tuple[int, float, int] | None:
    """Return ``(min, mean, max)``, or None when there is no data."""
    if not sequence:
        return None
    return min(sequence), sum(sequence) / len(sequence), max(sequence)


@dataclass(frozen=True)
class MultiSimResult:
    """Summary of a finished batch of games."""

    games: int
    min_rolls: int
    avg_rolls: float
    max_rolls: int
    min_climb: int  # total distance
    avg_climb: float
    max_climb: int
    min_slide: int
    avg_slide: float
    max_slide: int
    # Greatest climb/slide in a single turn, including re-rolls and chains
    biggest_turn_climb: int
    biggest_turn_slide: int
    longest_turn: tuple[int, ...]  # e.g. (6, 5) < (6, 6, 2) < (6, 6, 3)
    min_lucky_rolls: int
    avg_lucky_rolls: float
    max_lucky_rolls: int
    min_unlucky_rolls: int
    avg_unlucky_rolls: float
    max_unlucky_rolls: int

    @classmethod
    def from_sims(cls, sims: Sequence[Sim]) -> MultiSimResult:
        if not sims:
            raise ValueError("cannot summarise an empty batch")

        def reduce(attr: str) -> tuple[int, float, int]:
            return min_avg_max([getattr(s, attr) for s in sims])

        min_rolls, avg_rolls, max_rolls = reduce("roll_count")
        min_climb, avg_climb, max_climb = reduce("climb_distance")
        min_slide, avg_slide, max_slide = reduce("slide_distance")
        min_lucky, avg_lucky, max_lucky = reduce("lucky_rolls")
        min_unlucky, avg_unlucky, max_unlucky = reduce("unlucky_rolls")

        return cls(
            games=len(sims),
            min_rolls=min_rolls,
            avg_rolls=avg_rolls,
            max_rolls=max_rolls,
            min_climb=min_climb,
            avg_climb=avg_climb,
            max_climb=max_climb,
            min_slide=min_slide,
            avg_slide=avg_slide,
            max_slide=max_slide,
            biggest_turn_climb=max(s.biggest_climb for s in sims),
            biggest_turn_slide=max(s.biggest_slide for s in sims),
            longest_turn=tuple(max(s.longest_turn for s in sims)),
            min_lucky_rolls=min_lucky,
            avg_lucky_rolls=avg_lucky,
            max_lucky_rolls=max_lucky,
            min_unlucky_rolls=min_unlucky,
            avg_unlucky_rolls=avg_unlucky,
            max_unlucky_rolls=max_unlucky,
        )

    def as_dict(self) -> dict:
        return asdict(self)


def run_sims(
    board: Board,
    count: int,
    seed: int | None = None,
    max_turns: int | None = None,
    die_size: int = DIE_SIZE,
    observer: TurnObserver | None = None,
) -> list[Sim]:
    """Play *count* independent games on *board* and return the finished Sims.

    Every game gets its own die. With *seed* set, game ``i`` is seeded
    with ``seed + i`` so a batch can be replayed exactly.
    """
    if count < 1:
        raise ValueError(f"Batch size must be at least 1, got {count}")

    sims: list[Sim] = []
    for i in range(count):
        rng = random.Random(seed + i) if seed is not None else random.Random()
        sim = Sim(
            board, RandomDie(size=die_size, rng=rng),
            observer=observer, max_turns=max_turns,
        )
        sim.run()
        logger.debug(f"Game {i + 1}: {sim.turn_count} turns, {sim.roll_count} rolls")
        sims.append(sim)

    logger.info(f"Finished {count} games on a {board.size}-square board")
    return sims


def run_batch(
    board: Board,
    count: int,
    seed: int | None = None,
    max_turns: int | None = None,
    die_size: int = DIE_SIZE,
    observer: TurnObserver | None = None,
) -> MultiSimResult:
    """Play *count* games on *board* and summarise them."""
    sims = run_sims(
        board, count, seed=seed, max_turns=max_turns,
        die_size=die_size, observer=observer,
    )
    return MultiSimResult.from_sims(sims)
