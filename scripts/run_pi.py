"""Command line harness for the Monte Carlo pi estimators."""

import argparse
import json
import logging
import math
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "simulation_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from pi_estimation import RunConfig, render_report, run_estimates
from pi_estimation.models import METHODS
from pi_estimation.prng import DEFAULT_SEED

logger = logging.getLogger(__name__)


def _to_json(result: dict) -> str:
    """Dump the report as strict JSON, undefined estimates become null."""

    def _clean(entry: dict) -> dict:
        return {
            key: None if isinstance(value, float) and math.isnan(value) else value
            for key, value in entry.items()
        }

    payload = dict(result, estimates=[_clean(entry) for entry in result["estimates"]])
    return json.dumps(payload, indent=2, allow_nan=False)


def _parse_trial_list(value: str) -> tuple[int, ...]:
    """Parse a CLI `n=100,1000` style option into an ordered tuple of trial counts."""

    if "=" in value:
        key, _, payload = value.partition("=")
        if key.strip().lower() not in {"n", "trials"}:
            raise argparse.ArgumentTypeError(
                f"Expected prefix 'n=' or 'trials=', received '{value}'."
            )
    else:
        payload = value

    parts = [part.strip() for part in payload.split(",") if part.strip()]
    if not parts:
        raise argparse.ArgumentTypeError("Trial list cannot be empty.")

    try:
        trials = tuple(int(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Trial list must contain integers.") from exc

    if any(n < 0 for n in trials):
        raise argparse.ArgumentTypeError("Trial counts must be non-negative integers.")

    return trials


def _parse_method_list(value: str) -> tuple[str, ...]:
    methods = tuple(part.strip().lower() for part in value.split(",") if part.strip())
    if not methods:
        raise argparse.ArgumentTypeError("Method list cannot be empty.")
    unknown = [name for name in methods if name not in METHODS]
    if unknown:
        raise argparse.ArgumentTypeError(
            "Unknown method(s): %s. Choose from %s"
            % (", ".join(unknown), ", ".join(METHODS))
        )
    if len(set(methods)) != len(methods):
        raise argparse.ArgumentTypeError("Each method may only be listed once.")
    return methods


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate pi with three Monte Carlo methods")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=DEFAULT_SEED,
        help="Engine seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--trials",
        metavar="n=list",
        type=_parse_trial_list,
        default=(100, 1000, 10000, 100000),
        help="Comma-separated sample sizes, run in order (e.g. n=100,1000)",
    )
    parser.add_argument(
        "--methods",
        type=_parse_method_list,
        default=("circle", "coprime", "buffon"),
        help="Comma-separated methods, run in order (circle, coprime, buffon)",
    )
    parser.add_argument("--json", action="store_true", help="Print the JSON report instead of tables")
    parser.add_argument("--verbose", action="store_true", help="Log every estimate to stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "simulation_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = RunConfig(seed=args.seed, trial_counts=args.trials, methods=args.methods)
    result = run_estimates(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(_to_json(result))
        logger.info("Report written to %s", log_path)

    if args.json:
        print(_to_json(result))
    else:
        print(render_report(result), end="")


if __name__ == "__main__":
    main()
