"""
Command-line interface for the promo version checker.
"""

import argparse
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path
from typing import Dict, List

import pandas as pd
from tqdm import tqdm

from .comparators import comparator_names, get_comparator
from .config import CheckerConfig
from .models import ModuleDescriptor, Status
from .orchestrator import CheckOrchestrator
from .reporting import export_results_csv, print_summary, results_frame, save_results_json


logger = logging.getLogger(__name__)

INPUT_COLUMNS = ("module_id", "current_version", "manifest_url")


def _load_input_csv(path: Path) -> List[Dict[str, str]]:
    """Read module rows from a CSV file with module_id, current_version, manifest_url."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [col for col in INPUT_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")
    return df.to_dict(orient="records")


def _parse_module_arg(value: str) -> Dict[str, str]:
    """Parse ``ID=VERSION=URL`` (URL may be empty) into a module row."""
    parts = value.split("=", 2)
    if len(parts) != 3 or not parts[0] or not parts[1]:
        raise argparse.ArgumentTypeError(
            f"Invalid module {value!r}, expected ID=VERSION=URL"
        )
    return dict(zip(INPUT_COLUMNS, parts))


def _build_modules(rows: List[Dict[str, str]]) -> List[ModuleDescriptor]:
    return [
        ModuleDescriptor(
            module_id=row["module_id"].strip(),
            current_version=row["current_version"].strip(),
            manifest_url=row["manifest_url"].strip() or None,
        )
        for row in rows
    ]


def _wait_for_results(
    orchestrator: CheckOrchestrator,
    modules: List[ModuleDescriptor],
    poll_interval: float,
) -> None:
    """Poll the result store until every dispatched module has left PENDING."""
    dispatched = [module for module in modules if module.manifest_url]
    with tqdm(total=len(dispatched), desc="Checking versions", unit="module") as pbar:
        done = 0
        while done < len(dispatched):
            time.sleep(poll_interval)
            finished = sum(
                1 for module in dispatched
                if orchestrator.get(module).status is not Status.PENDING
            )
            pbar.update(finished - done)
            done = finished


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Check installed modules against their update manifests"
    )

    parser.add_argument(
        "--game-version",
        required=True,
        help="Game version whose promotions apply (e.g. 1.20.1)"
    )

    parser.add_argument(
        "--module",
        action="append",
        default=[],
        type=_parse_module_arg,
        metavar="ID=VERSION=URL",
        help="Module to check; may be repeated"
    )

    parser.add_argument(
        "--input-csv",
        type=Path,
        default=None,
        help="CSV file with module_id, current_version and manifest_url columns"
    )

    parser.add_argument(
        "--comparator",
        choices=comparator_names(),
        default="loose",
        help="Version ordering to use. Default: loose"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds. Default: 15"
    )

    parser.add_argument(
        "--max-redirects",
        type=int,
        default=None,
        help="Maximum redirect hops per manifest. Default: 20"
    )

    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Number of concurrent checks. Default: 8"
    )

    parser.add_argument(
        "--poll-interval",
        type=float,
        default=0.2,
        help="Seconds between result polls. Default: 0.2"
    )

    parser.add_argument(
        "--output-dir",
        default="./output",
        help="Output directory for results. Default: ./output"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity. Default: INFO"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rows = list(args.module)
    if args.input_csv is not None:
        try:
            rows.extend(_load_input_csv(args.input_csv))
        except (OSError, ValueError) as e:
            parser.error(f"Cannot read {args.input_csv}: {e}")
    if not rows:
        parser.error("No modules given, use --module or --input-csv")

    for name, value in (("--timeout", args.timeout), ("--max-workers", args.max_workers)):
        if value is not None and value <= 0:
            parser.error(f"{name} must be positive")
    if args.max_redirects is not None and args.max_redirects < 0:
        parser.error("--max-redirects must not be negative")

    config = CheckerConfig.from_env()
    overrides = {
        "timeout_secs": args.timeout,
        "max_redirects": args.max_redirects,
        "max_workers": args.max_workers,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    modules = _build_modules(rows)
    comparator = get_comparator(args.comparator)

    with CheckOrchestrator(config=config) as orchestrator:
        orchestrator.start_check(modules, args.game_version, comparator)
        _wait_for_results(orchestrator, modules, args.poll_interval)
        frame = results_frame(modules, orchestrator.store)

    print_summary(frame, args.game_version)

    output_dir = Path(args.output_dir)
    name = f"version_check_{args.game_version}"
    json_file = save_results_json(frame, output_dir, name)
    csv_file = export_results_csv(frame, output_dir, name)
    logger.info("Results saved to: %s", json_file)
    logger.info("CSV saved to: %s", csv_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
