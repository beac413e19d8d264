"""assetcheckのコマンドラインインターフェース。"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from assetcheck.config import VerifierConfig
from assetcheck.logs import setup_logging
from assetcheck.models.report import VerificationReport
from assetcheck.reconciler import verify_directories

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def build_parser(defaults: VerifierConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assetcheck",
        description="Verify entity asset directories against their manifest.json.",
    )
    parser.add_argument(
        "-d",
        "--directory",
        dest="directories",
        action="extend",
        nargs="+",
        type=Path,
        required=True,
        metavar="DIR",
        help="Base directory containing a manifest (repeatable).",
    )
    parser.add_argument(
        "--delete-unexpected",
        action=argparse.BooleanOptionalAction,
        default=defaults.delete_unexpected,
        help="Delete files that no entity accounts for instead of reporting them.",
    )
    parser.add_argument(
        "--show-warnings",
        action=argparse.BooleanOptionalAction,
        default=defaults.show_warnings,
        help="Print warnings after errors.",
    )
    parser.add_argument(
        "--exit-on-error",
        action=argparse.BooleanOptionalAction,
        default=defaults.exit_on_error,
        help="Exit with status 1 when any directory has errors.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=defaults.log_level.upper(),
        help="Log level for stderr.",
    )
    return parser


def print_report(report: VerificationReport, show_warnings: bool) -> None:
    print(f"===== ERRORS ({len(report.errors)}) =====")
    for error in report.errors:
        print(error)

    if show_warnings:
        print(f"===== WARNINGS ({len(report.warnings)}) =====")
        for warning in report.warnings:
            print(warning)


def run(argv: Sequence[str] | None = None) -> int:
    """CLIを実行し、終了コードを返す。"""
    defaults = VerifierConfig()
    args = build_parser(defaults).parse_args(argv)

    config = defaults.model_copy(
        update={
            "delete_unexpected": args.delete_unexpected,
            "show_warnings": args.show_warnings,
            "exit_on_error": args.exit_on_error,
            "log_level": args.log_level,
        }
    )
    setup_logging(config.log_level)

    summary = verify_directories(args.directories, config)
    for result in summary.results:
        print_report(result.report, config.show_warnings)

    if summary.has_errors and config.exit_on_error:
        return 1
    return 0


def main() -> None:
    sys.exit(run())
