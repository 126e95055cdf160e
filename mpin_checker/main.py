# -*- coding: utf-8 -*-
"""
MPIN強度チェッカー - コマンドラインエントリーポイント

check    : 1件のMPINを判定してレポートを表示します
selftest : 組み込みのテストケースを実行して結果の一覧を表示します

終了コード: 0 = STRONG / 既知の不一致以外は全件合格, 1 = WEAK / 想定外の失敗あり, 2 = 入力形式エラー
"""

import argparse
import json
import logging
import re
import sys
from typing import List, Optional

from mpin_checker.core.config_loader import ConfigLoader
from mpin_checker.core.demographic_matcher import Demographics
from mpin_checker.core.i18n_manager import I18nManager
from mpin_checker.core.pin_validator import MPINValidator
from mpin_checker.core.scoring_policy import ScoringPolicy
from mpin_checker.core.self_test import SelfTestReport, run_self_test
from mpin_checker.core.validation_result import ValidationResult, score_band

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WEAK = 1
EXIT_USAGE = 2

PIN_RE = re.compile(r"^(?:[0-9]{4}|[0-9]{6})$")
DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def pin_arg(value: str) -> str:
    # 長さと数字のチェックは呼び出し側（ここ）の責務
    if not PIN_RE.match(value):
        raise argparse.ArgumentTypeError("MPIN must be 4 or 6 digits")
    return value


def date_arg(value: str) -> str:
    # 形式のみ確認し、暦としての妥当性は見ない
    if not DATE_RE.match(value):
        raise argparse.ArgumentTypeError("date must be in YYYY-MM-DD format")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="mpin-checker",
        description="MPIN strength analysis using common-PIN, pattern and demographic checks",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--lang", default=None, help="Message language (e.g. EN, JP)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Evaluate a single MPIN")
    check_parser.add_argument("pin", type=pin_arg, help="4 or 6 digit MPIN")
    check_parser.add_argument("--dob", type=date_arg, help="Your date of birth (YYYY-MM-DD)")
    check_parser.add_argument("--spouse-dob", type=date_arg, help="Spouse's date of birth (YYYY-MM-DD)")
    check_parser.add_argument("--anniversary", type=date_arg, help="Wedding anniversary (YYYY-MM-DD)")
    check_parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")

    subparsers.add_parser("selftest", help="Run the built-in test cases")

    return parser.parse_args(argv)


def configure_logging(config: dict, verbose: bool = False):
    level_name = str((config.get("logging") or {}).get("level", "WARNING")).upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def format_report(result: ValidationResult, i18n: I18nManager) -> str:
    band = score_band(result.security_score)
    none = i18n.get("report.none")
    lines = [
        i18n.get("report.title"),
        i18n.get("report.strength", strength=result.strength.value),
        i18n.get("report.score", score=result.security_score, band=i18n.get(f"band.{band}")),
        i18n.get("report.reasons"),
    ]

    if result.weakness_reasons:
        for code in result.weakness_reasons:
            lines.append(f"  - {i18n.describe_reason(code)} ({code})")
    else:
        lines.append(f"  {none}")

    lines.append(i18n.get("report.patterns"))
    if result.detected_patterns:
        for label in result.detected_patterns:
            lines.append(f"  - {i18n.describe_pattern(label)}")
    else:
        lines.append(f"  {none}")

    if not result.is_strong:
        lines.append(i18n.get("report.recommendations"))
        for tip in i18n.get_list("recommendations"):
            lines.append(f"  - {tip}")

    return "\n".join(lines)


def format_self_test(report: SelfTestReport, i18n: I18nManager) -> str:
    lines = [
        i18n.get("selftest.header"),
        f"{'#':<4} | {'PIN':<8} | {'Expected':<10} | {'Actual':<10} | {'Status':<6} | Reasons",
        "-" * 78,
    ]
    for o in report.outcomes:
        if o.passed:
            status = "PASS"
        elif o.case.known_mismatch:
            status = "KNOWN"
        else:
            status = "FAIL"
        reasons = ", ".join(o.actual.weakness_reasons) or i18n.get("report.none")
        lines.append(
            f"{o.case_id:<4} | {o.case.pin:<8} | {o.case.expected_strength.value:<10} | "
            f"{o.actual.strength.value:<10} | {status:<6} | {reasons}"
        )
        if not o.passed:
            expected = ", ".join(o.case.expected_reasons) or i18n.get("report.none")
            lines.append(f"       -> expected reasons: {expected}")

    lines.append("")
    lines.append(i18n.get(
        "selftest.summary",
        total=report.total, passed=report.passed, failed=report.failed, rate=report.success_rate,
    ))
    if report.all_passed:
        lines.append(i18n.get("selftest.all_passed"))
    elif not report.unexpected_failures:
        lines.append(i18n.get("selftest.known_only"))
    else:
        lines.append(i18n.get("selftest.some_failed"))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Application Entry Point
    """
    args = parse_args(argv)

    config = ConfigLoader().config
    configure_logging(config, args.verbose)

    policy = ScoringPolicy.from_config(config.get("scoring"))
    logger.debug("Scoring policy: %s", policy)
    validator = MPINValidator(policy)
    i18n = I18nManager(args.lang)

    if args.command == "selftest":
        report = run_self_test(validator=validator.validate)
        print(format_self_test(report, i18n))
        return EXIT_WEAK if report.unexpected_failures else EXIT_OK

    demographics = Demographics(
        dob=args.dob,
        spouse_dob=args.spouse_dob,
        anniversary=args.anniversary,
    )
    result = validator.validate(args.pin, demographics)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        print(format_report(result, i18n))

    return EXIT_OK if result.is_strong else EXIT_WEAK


if __name__ == "__main__":
    sys.exit(main())
