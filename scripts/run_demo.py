"""Command line harness for the staterandom demo report."""

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "demo_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from staterandom import DemoConfig, run_demo
from staterandom.demo import MODES
from staterandom.logger import setup_logger


def _parse_seed(value: str) -> int:
    """Accept decimal, 0x-prefixed hex and negative seeds."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x-prefixed hex), received '{value}'."
        ) from exc


def _parse_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError as exc:  # pragma: no cover - argparse surface ensures message
        raise argparse.ArgumentTypeError("Count must be an integer.") from exc
    if count < 0:
        raise argparse.ArgumentTypeError("Count must be zero or a positive integer.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the staterandom demo in mutable and pure mode"
    )
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=17,
        help="Seed of the id stream (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--tf-seed",
        dest="tf_seed",
        type=_parse_seed,
        default=22,
        help="Seed of the 't'/'f' stream",
    )
    parser.add_argument(
        "--byte-seed",
        dest="byte_seed",
        type=_parse_seed,
        default=37,
        help="Seed of the byte/bool stream",
    )
    parser.add_argument(
        "--count",
        type=_parse_count,
        default=3,
        help="Raw outputs and Baz records to generate per mode",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="both",
        help="Which generator mode(s) to run; 'both' also checks they agree",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
        default=None,
        help="Override the STATERANDOM_LOG_LEVEL environment variable",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "demo_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logger = setup_logger(level=args.log_level)

    cfg = DemoConfig(
        id_seed=args.seed,
        tf_seed=args.tf_seed,
        byte_seed=args.byte_seed,
        count=args.count,
        mode=args.mode,
    )
    try:
        result = run_demo(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("report written to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
