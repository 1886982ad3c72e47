"""Which squares count as lucky or unlucky to land on.

A roll is (un)lucky iff the square it lands on (before any snake or
ladder is followed) is an (un)lucky square:

- unlucky: the head of a snake
- lucky: the foot of a ladder, a square within two of a snake head
  (a near miss), or the winning square

A square can be both (e.g. a snake head next to another snake head);
unlucky wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from snakes_sim.board import Board

NEAR_MISS_OFFSETS = (-2, -1, 1, 2)


@dataclass(frozen=True)
class LuckSets:
    lucky: frozenset[int]
    unlucky: frozenset[int]

    def __iter__(self):
        # Allows ``lucky, unlucky = compute_luck(board)``
        return iter((self.lucky, self.unlucky))

    def classify(self, square: int) -> str | None:
        """Return "unlucky", "lucky" or None for a landing square."""
        if square in self.unlucky:
            return "unlucky"
        if square in self.lucky:
            return "lucky"
        return None


def _is_snake_head(board: Board, square: int) -> bool:
    return board.routes.get(square, square) < square


def compute_luck(board: Board) -> LuckSets:
    lucky: set[int] = set()
    unlucky: set[int] = set()

    for square in range(board.size):
        dest = board.routes.get(square, square)
        if dest > square:
            lucky.add(square)
        elif dest < square:
            unlucky.add(square)

        for offset in NEAR_MISS_OFFSETS:
            other = square + offset
            if other <= 0:
                continue
            if _is_snake_head(board, other):
                lucky.add(square)
                break

    lucky.add(board.size)
    return LuckSets(lucky=frozenset(lucky), unlucky=frozenset(unlucky))
