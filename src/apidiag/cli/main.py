# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""apidiag CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ..config import ProbeSettings, load_probe_settings
from ..errors import ConfigError
from ..http import create_default_transport
from ..log import setup_logging
from ..models import ProbeOptions, ProbeResult, RunSummary, load_endpoints, now_iso
from ..report import to_csv, to_html, write_file_safe
from ..runtime import ApiDiagnosis

logger = logging.getLogger("apidiag")

DEFAULT_CONFIG = "config/test_endpoints.json"


def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return parsed


def _non_negative_int(value: str) -> int:
    parsed = int(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Probe API endpoints and diagnose common failure patterns")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="JSON file holding the endpoint list")
    parser.add_argument("--concurrency", type=_positive_int, help="Endpoints probed simultaneously")
    parser.add_argument("--retries", type=_non_negative_int, help="Retries after a failed attempt")
    parser.add_argument("--timeout", type=_positive_int, help="Per-attempt timeout in milliseconds")
    parser.add_argument("--output-dir", "--outputDir", dest="output_dir", default="output", help="Report directory")
    parser.add_argument("--csv", default="report.csv", help="CSV report file name")
    parser.add_argument("--html", default="report.html", help="HTML report file name")
    parser.add_argument("--ua", dest="user_agent", help="User-Agent sent with every probe")
    parser.add_argument("--json", action="store_true", help="Also print results as JSON on stdout")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: APIDIAG_LOG_LEVEL or INFO)")
    return parser


def resolve_options(args: argparse.Namespace, settings: ProbeSettings) -> ProbeOptions:
    """CLI flags win over environment-backed settings."""
    return ProbeOptions.from_settings(settings).merged(
        concurrency=args.concurrency,
        retries=args.retries,
        timeout_ms=args.timeout,
        user_agent=args.user_agent,
    )


def _print_json(results: Sequence[ProbeResult]) -> None:
    json.dump([result.to_dict() for result in results], sys.stdout, indent=2)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings = load_probe_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    options = resolve_options(args, settings)

    try:
        endpoints = load_endpoints(args.config)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Probing %s endpoints...", len(endpoints))
    diagnosis = ApiDiagnosis(create_default_transport(settings), settings=settings, options=options)
    results = diagnosis.run_sync(endpoints)
    logger.info(RunSummary.from_results(results).line())

    output_dir = Path(args.output_dir)
    csv_path = write_file_safe(output_dir / args.csv, to_csv(results))
    html_path = write_file_safe(output_dir / args.html, to_html(results, generated_at=now_iso()))
    logger.info("Wrote CSV -> %s", csv_path.resolve())
    logger.info("Wrote HTML -> %s", html_path.resolve())

    if args.json:
        _print_json(results)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
