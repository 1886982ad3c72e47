"""Board geometry and route validation for Snakes & Ladders."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# fmt: off
CANON_ROUTES: dict[int, int] = {
    # Snakes (go DOWN)
    27:  5,  40:  3,  43: 18,  54: 31,
    66: 45,  76: 58,  89: 53,  99: 41,
    # Ladders (go UP)
     4: 25,  13: 46,  33: 49,  42: 63,
    50: 69,  62: 81,  74: 92,
}
# fmt: on


class BadRouteError(ValueError):
    """A board or route definition that can't be played on."""

    def __init__(self, message: str, square: int | None = None, kind: str = "route"):
        super().__init__(message)
        self.square = square
        self.kind = kind  # "start" | "end" | "self_loop" | "size" | "cycle"


@dataclass(frozen=True)
class Board:
    """Immutable board: the winning square plus every snake and ladder.

    *routes* maps a start square to its destination. Chains (A→B, B→C)
    are allowed and get followed to the end; cycles are rejected.
    """

    size: int
    routes: Mapping[int, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise BadRouteError(
                f"Illegal board size: {self.size}", square=self.size, kind="size",
            )
        routes = dict(self.routes)
        for start, end in sorted(routes.items()):
            if start <= 0 or start >= self.size:
                raise BadRouteError(
                    f"Illegal snake/ladder start position: {start}",
                    square=start, kind="start",
                )
            if end < 0 or end > self.size:
                raise BadRouteError(
                    f"Illegal snake/ladder end position: {end}",
                    square=end, kind="end",
                )
            if start == end:
                raise BadRouteError(
                    f"Snake or ladder links to itself on square {start}",
                    square=start, kind="self_loop",
                )
        _check_no_cycles(routes)
        object.__setattr__(self, "routes", MappingProxyType(routes))

    def __reduce__(self):
        return (Board, (self.size, dict(self.routes)))

    def route_dest(self, square: int) -> int | None:
        return self.routes.get(square)

    def is_ladder(self, square: int) -> bool:
        dest = self.routes.get(square)
        return dest is not None and dest > square

    def is_snake(self, square: int) -> bool:
        dest = self.routes.get(square)
        return dest is not None and dest < square

    @property
    def snakes(self) -> dict[int, int]:
        return {sq: dest for sq, dest in self.routes.items() if dest < sq}

    @property
    def ladders(self) -> dict[int, int]:
        return {sq: dest for sq, dest in self.routes.items() if dest > sq}


def _check_no_cycles(routes: dict[int, int]) -> None:
    """Raise if following routes from any square could loop forever."""
    for start in sorted(routes):
        seen = {start}
        square = routes[start]
        while square in routes:
            if square in seen:
                raise BadRouteError(
                    f"Snakes and ladders form a loop through square {square}",
                    square=square, kind="cycle",
                )
            seen.add(square)
            square = routes[square]


def blank(size: int) -> Board:
    """A board with no snakes or ladders."""
    return Board(size, {})


def canon_board() -> Board:
    """The 100-square reference board."""
    return Board(100, CANON_ROUTES)
