"""Command-line driver for scripted games and benchmarks."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-engine",
        description="Run scripted snake games and measure engine throughput.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Play a command script headlessly.")
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    run_p.add_argument("--width", type=int, default=None)
    run_p.add_argument("--height", type=int, default=None)
    run_p.add_argument(
        "--seed", type=int, nargs=2, default=None, metavar=("WORD0", "WORD1"),
        help="Two 16-bit seed words.",
    )
    run_p.add_argument(
        "--script", type=str, default="",
        help="Commands: U/D/L/R turn, '.' ticks, '!' restarts.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput.",
    )
    bench_p.add_argument("--games", type=int, default=100)
    bench_p.add_argument("--width", type=int, default=20)
    bench_p.add_argument("--height", type=int, default=16)
    bench_p.add_argument("--max-ticks", type=int, default=1_000)
    bench_p.add_argument(
        "--seed", type=int, nargs=2, default=[1, 2], metavar=("WORD0", "WORD1"),
    )

    return parser


def _run_game(args: argparse.Namespace) -> int:
    from snake_engine.config import GameConfig
    from snake_engine.session import GameSession, parse_script

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for name in ("width", "height", "seed"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig.from_dict(d)

    session = GameSession(config.build_engine())
    state = session.run(parse_script(args.script))
    print(json.dumps(state, indent=2))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_engine.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.games,
        width=args.width,
        height=args.height,
        max_ticks=args.max_ticks,
        seed=tuple(args.seed),
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-engine`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_game,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
