from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from mocell.algorithm import MOCell, MOCellConfig
from mocell.foundation.exceptions import MOCellError
from mocell.foundation.logging import configure_mocell_logging
from mocell.problem.tsp import TSPProblem

_logger = logging.getLogger(__name__)


def _probability(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a float in [0, 1], got '{raw}'") from exc
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f"expected a float in [0, 1], got {value}")
    return value


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{raw}'") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mocell",
        description="Run the cellular MOEA on a bi-objective travelling salesman instance.",
    )
    parser.add_argument("--cities", type=_positive_int, default=12, help="Number of cities on the circle instance.")
    parser.add_argument("--max-edge", type=float, default=None, help="Optional bound on any single edge length.")
    parser.add_argument("--pop-size", type=_positive_int, default=49, help="Grid capacity.")
    parser.add_argument("--archive-size", type=_positive_int, default=50, help="Archive capacity.")
    parser.add_argument("--max-evaluations", type=_positive_int, default=5000, help="Evaluation budget.")
    parser.add_argument("--feedback", type=int, default=10, help="Archive members copied back per generation.")
    parser.add_argument("--crossover-prob", type=_probability, default=0.9, help="PMX probability.")
    parser.add_argument("--mutation-prob", type=_probability, default=None, help="Swap mutation probability (default 1/n).")
    parser.add_argument("--neighborhood", type=int, choices=(4, 8), default=8, help="Neighbourhood size.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generation.")
    return parser


def _front_payload(result: dict[str, Any]) -> dict[str, Any]:
    return {
        "evaluations": result["evaluations"],
        "generations": result["generations"],
        "front": [
            {
                "objectives": member.objectives.tolist(),
                "constraint_violation": member.constraint_violation,
                "tour": member.variables.tolist(),
            }
            for member in result["archive"]
        ],
    }


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cities < 3:
        parser.error("--cities must be at least 3.")
    configure_mocell_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    problem = TSPProblem(n_cities=args.cities, max_edge=args.max_edge)
    mutation_prob = args.mutation_prob if args.mutation_prob is not None else 1.0 / problem.n_var
    try:
        cfg = (
            MOCellConfig()
            .pop_size(args.pop_size)
            .archive_size(args.archive_size)
            .max_evaluations(args.max_evaluations)
            .feedback(args.feedback)
            .crossover("pmx", prob=args.crossover_prob)
            .mutation("swap", prob=mutation_prob)
            .selection("tournament")
            .neighborhood(args.neighborhood)
            .fixed()
        )
        result = MOCell(cfg).run(problem, seed=args.seed)
    except MOCellError as exc:
        _logger.error("%s", exc)
        return 2

    json.dump(_front_payload(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
