"""Load a board and iteration count from a JSON config file.

Expected shape::

    {
        "iterations": 1000,
        "size": 100,
        "snakes":  [[27, 5], [40, 3], ...],
        "ladders": [[4, 25], [13, 46], ...]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from snakes_sim.board import Board

DEFAULT_CONFIG = Path("config.json")


class ConfigError(ValueError):
    """The config file is malformed or breaks the snakes-down/ladders-up rule."""


@dataclass
class SimConfig:
    board: Board
    iterations: int


def _pairs(raw: dict, key: str) -> list[tuple[int, int]]:
    value = raw.get(key, [])
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list of [from, to] pairs")
    pairs = []
    for item in value:
        if (
            not isinstance(item, (list, tuple))
            or len(item) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in item)
        ):
            raise ConfigError(f"Bad entry in '{key}': {item!r}")
        pairs.append((item[0], item[1]))
    return pairs


def _positive_int(raw: dict, key: str) -> int:
    if key not in raw:
        raise ConfigError(f"Missing required key '{key}'")
    value = raw[key]
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def parse_config(raw: dict) -> SimConfig:
    """Validate a decoded config dict and build the Board.

    Raises ConfigError for convention breaches; BadRouteError from the
    Board itself propagates unchanged.
    """
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a JSON object")

    iterations = _positive_int(raw, "iterations")
    size = _positive_int(raw, "size")
    snakes = _pairs(raw, "snakes")
    ladders = _pairs(raw, "ladders")

    if any(start < end for start, end in snakes):
        raise ConfigError("Some snake(s) are going upwards!")
    if any(start > end for start, end in ladders):
        raise ConfigError("Some ladder(s) are going downwards!")

    routes: dict[int, int] = {}
    for start, end in snakes + ladders:
        if start in routes:
            raise ConfigError(f"Duplicate snake or ladder from square {start}")
        routes[start] = end

    return SimConfig(board=Board(size, routes), iterations=iterations)


def load_config(path: Path | str = DEFAULT_CONFIG) -> SimConfig:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc
    return parse_config(raw)
