"""CLI entry point: python -m snakes_sim {run,chart,luck}."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from snakes_sim.board import BadRouteError
from snakes_sim.chart import make_rolls_chart
from snakes_sim.config import DEFAULT_CONFIG, ConfigError, SimConfig, load_config
from snakes_sim.luck import compute_luck
from snakes_sim.sim import DoesNotTerminateError, LogObserver
from snakes_sim.stats import MultiSimResult, run_sims

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load(args: argparse.Namespace) -> SimConfig:
    path = Path(args.config)
    try:
        cfg = load_config(path)
    except FileNotFoundError:
        print(f"No config found at {path}.", file=sys.stderr)
        sys.exit(1)
    except OSError as exc:
        print(f"Can't read config {path}: {exc.strerror or exc}", file=sys.stderr)
        sys.exit(1)
    except (ConfigError, BadRouteError) as exc:
        print(f"Bad config {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    logger.info(f"Loaded {cfg.board.size}-square board from {path}")
    return cfg


def _play(args: argparse.Namespace, cfg: SimConfig) -> list:
    iterations = args.iterations if args.iterations is not None else cfg.iterations
    if iterations < 1:
        print(f"Need at least one game, got {iterations}.", file=sys.stderr)
        sys.exit(1)
    try:
        return run_sims(
            cfg.board, iterations,
            seed=args.seed, max_turns=args.max_turns,
            observer=LogObserver() if args.verbose else None,
        )
    except DoesNotTerminateError as exc:
        print(f"Board can't be won: {exc}", file=sys.stderr)
        sys.exit(1)


def _print_summary(result: MultiSimResult) -> None:
    rows = [
        ("Rolls", result.min_rolls, result.avg_rolls, result.max_rolls),
        ("Climb distance", result.min_climb, result.avg_climb, result.max_climb),
        ("Slide distance", result.min_slide, result.avg_slide, result.max_slide),
        ("Lucky rolls", result.min_lucky_rolls, result.avg_lucky_rolls, result.max_lucky_rolls),
        ("Unlucky rolls", result.min_unlucky_rolls, result.avg_unlucky_rolls, result.max_unlucky_rolls),
    ]
    print(f"\nResults over {result.games} games")
    print("=" * 52)
    print(f"  {'':20s} {'min':>8s} {'avg':>10s} {'max':>8s}")
    for label, lo, avg, hi in rows:
        print(f"  {label:20s} {lo:8d} {avg:10.2f} {hi:8d}")
    print("-" * 52)
    print(f"  Biggest climb in one turn: {result.biggest_turn_climb}")
    print(f"  Biggest slide in one turn: {result.biggest_turn_slide}")
    print(f"  Longest turn: {list(result.longest_turn)}")


# ── run ──────────────────────────────────────────────────────────────

def cmd_run(args: argparse.Namespace) -> None:
    """Simulate a batch of games and print summary statistics."""
    cfg = _load(args)
    result = MultiSimResult.from_sims(_play(args, cfg))
    if args.json:
        print(json.dumps(result.as_dict(), indent=2))
    else:
        _print_summary(result)


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Simulate a batch of games and chart the rolls needed to win."""
    cfg = _load(args)
    sims = _play(args, cfg)
    out = args.output or "rolls_histogram.png"
    make_rolls_chart([s.roll_count for s in sims], output_path=out)
    print(f"Chart saved to {out}")


# ── luck ─────────────────────────────────────────────────────────────

def cmd_luck(args: argparse.Namespace) -> None:
    """Print which squares count as lucky and unlucky on this board."""
    cfg = _load(args)
    luck = compute_luck(cfg.board)
    print(f"Lucky squares:   {sorted(luck.lucky)}")
    print(f"Unlucky squares: {sorted(luck.unlucky)}")


# ── main ─────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_sim",
        description="Snakes & Ladders batch simulator",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    def add_config(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--config", "-c", default=str(DEFAULT_CONFIG),
            help=f"Board config JSON (default {DEFAULT_CONFIG})",
        )

    def add_batch(p: argparse.ArgumentParser) -> None:
        p.add_argument("--iterations", "-n", type=int, help="Games to play (overrides config)")
        p.add_argument("--seed", type=int, help="Seed for reproducible batches")
        p.add_argument("--max-turns", type=int, help="Give up on a game after this many turns")

    p_run = sub.add_parser("run", help="Simulate games and print statistics")
    add_config(p_run)
    add_batch(p_run)
    p_run.add_argument("--json", action="store_true", help="Print results as JSON")

    p_chart = sub.add_parser("chart", help="Histogram of rolls to win")
    add_config(p_chart)
    add_batch(p_chart)
    p_chart.add_argument("--output", "-o", help="Output PNG path")

    p_luck = sub.add_parser("luck", help="List lucky and unlucky squares")
    add_config(p_luck)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "run":
        cmd_run(args)
    elif args.command == "chart":
        cmd_chart(args)
    elif args.command == "luck":
        cmd_luck(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
