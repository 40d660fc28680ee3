"""CLI entry point.

This script validates an uploaded CSV against its job type's template and, if
it passes, writes the harvest script for that session.

Examples:
    python run_harvest.py --job csvGrant --file grants.csv --session abc123 --out harvest.sh
    python run_harvest.py --job csvPerson --file people.csv --session abc123 --harvester-root /opt/harvester

Roots default to HARVESTER_ROOT / FILE_HARVEST_ROOT from the environment or a
local .env file. The generated script is written but never executed.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from harvest_engine.catalog import JOB_TYPES
from harvest_engine.config import HarvestSettings
from harvest_engine.jobs.csv_file import job_for_key
from harvest_engine.logging_setup import configure_logging


EXIT_OK = 0
EXIT_INVALID_FILE = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Validate a CSV upload and render its harvest script.")
    p.add_argument("--job", type=str, required=True, help=f"Job type key ({', '.join(j.key for j in JOB_TYPES)}).")
    p.add_argument("--file", type=str, required=True, help="Uploaded CSV file to validate.")
    p.add_argument("--session", type=str, required=True, help="Session id used to place uploads and output.")
    p.add_argument("--out", type=str, default=None, help="Write the script here instead of stdout.")
    p.add_argument("--harvester-root", type=str, default=None, help="Overrides HARVESTER_ROOT.")
    p.add_argument("--file-harvest-root", type=str, default=None, help="Overrides FILE_HARVEST_ROOT.")
    p.add_argument("--log-level", type=str, default="INFO", help="Logging level (default INFO).")
    return p.parse_args(argv)


def load_settings(args: argparse.Namespace) -> HarvestSettings:
    if args.harvester_root:
        return HarvestSettings(
            harvester_root=args.harvester_root,
            file_harvest_root=args.file_harvest_root or args.harvester_root,
        )
    settings = HarvestSettings.from_env()
    if args.file_harvest_root:
        settings = HarvestSettings(
            harvester_root=settings.harvester_root,
            file_harvest_root=args.file_harvest_root,
        )
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        configure_logging(args.log_level)
        settings = load_settings(args)
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        job = job_for_key(args.job, args.session, settings)
    except ValueError as exc:
        print(f"Invalid session: {exc}", file=sys.stderr)
        return EXIT_USAGE
    if job is None:
        print(f"Unknown job type: {args.job}", file=sys.stderr)
        return EXIT_USAGE

    message = job.validate_upload(args.file)
    if message is not None:
        print(message, file=sys.stderr)
        return EXIT_INVALID_FILE

    script = job.get_script()
    if script is None:
        print(f"Script template unavailable: {job.script_file_path}", file=sys.stderr)
        return EXIT_USAGE

    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" so the template's own line endings are written unchanged
        with open(out_path, "w", encoding="utf-8", newline="") as fh:
            fh.write(script)
        print(f"Wrote {job.job_type.friendly_name} harvest script to: {out_path}")
    else:
        sys.stdout.write(script)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
