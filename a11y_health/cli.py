"""
Command-line interface.

    a11y-health https://example.com https://example.com/about -l AA -f console json

Exit code is 1 when any issue is found or the run fails, 0 when clean.
"""

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from a11y_health import __version__
from a11y_health.constants import CHECKER_DESCRIPTIONS
from a11y_health.exceptions import ConfigurationError, HealthCheckError
from a11y_health.models.config import HealthCheckConfig, build_config, load_config_file
from a11y_health.models.issues import CheckType
from a11y_health.services.health_checker import AccessibilityHealthChecker
from a11y_health.utils.logging import setup_logging
from a11y_health.utils.urls import is_valid_url, normalize_url

logger = logging.getLogger(__name__)

CHECK_TYPE_VALUES = [check_type.value for check_type in CheckType]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="a11y-health",
        description="Audit rendered web pages for WCAG accessibility issues"
    )
    parser.add_argument("urls", nargs="*", help="URLs to check for accessibility issues")
    parser.add_argument("-l", "--level", help="WCAG compliance level (A, AA, AAA)")
    parser.add_argument("-f", "--format", nargs="+", dest="formats",
                        help="Output formats (console, json, html)")
    parser.add_argument("-o", "--output", help="Output directory for reports")
    parser.add_argument("-c", "--concurrent", type=int, help="Number of concurrent checks")
    parser.add_argument("-t", "--timeout", type=int, help="Timeout per page in milliseconds")
    parser.add_argument("--headless", choices=["true", "false"], help="Run browser in headless mode")
    parser.add_argument("--viewport", help="Browser viewport size (e.g., 1920x1080)")
    parser.add_argument("--contrast", type=float, help="Color contrast ratio threshold")
    parser.add_argument("--heading-jump", type=int, help="Maximum heading level jump")
    parser.add_argument("--user-agent", help="Override the browser user agent")
    parser.add_argument("--disable", nargs="+", metavar="CHECKER", help="Disable specific checkers")
    parser.add_argument("--enable-only", nargs="+", metavar="CHECKER",
                        help="Enable only specific checkers")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--list-checkers", action="store_true",
                        help="List all available accessibility checkers")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _validate_checkers(names: Sequence[str]) -> List[str]:
    for name in names:
        if name not in CHECK_TYPE_VALUES:
            raise ConfigurationError(
                f"Invalid checker: {name}. Available: {', '.join(CHECK_TYPE_VALUES)}"
            )
    return list(names)


def overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate command-line flags into a partial config mapping."""
    overrides: Dict[str, Any] = {}

    if args.level:
        overrides["wcagLevel"] = args.level.upper()

    output: Dict[str, Any] = {}
    if args.formats:
        output["format"] = args.formats
    if args.output:
        output["outputDir"] = args.output
    if args.verbose:
        output["verbose"] = True
    if output:
        overrides["output"] = output

    if args.concurrent is not None:
        overrides["concurrent"] = args.concurrent
    if args.timeout is not None:
        overrides["timeout"] = args.timeout

    browser: Dict[str, Any] = {}
    if args.headless is not None:
        browser["headless"] = args.headless == "true"
    if args.viewport:
        width, sep, height = args.viewport.lower().partition("x")
        if not sep or not width.isdigit() or not height.isdigit():
            raise ConfigurationError('Viewport must be in format "1920x1080"')
        browser["viewport"] = {"width": int(width), "height": int(height)}
    if args.user_agent:
        browser["userAgent"] = args.user_agent
    if browser:
        overrides["browser"] = browser

    thresholds: Dict[str, Any] = {}
    if args.contrast is not None:
        thresholds["colorContrastRatio"] = args.contrast
    if args.heading_jump is not None:
        thresholds["maxHeadingJump"] = args.heading_jump
    if thresholds:
        overrides["thresholds"] = thresholds

    if args.enable_only:
        overrides["checks"] = {"enabled": _validate_checkers(args.enable_only), "disabled": []}
    elif args.disable:
        disabled = _validate_checkers(args.disable)
        overrides["checks"] = {
            "enabled": [value for value in CHECK_TYPE_VALUES if value not in disabled],
            "disabled": disabled,
        }

    return overrides


def parse_configuration(args: argparse.Namespace) -> HealthCheckConfig:
    """Config file first, command-line flags on top."""
    file_config = load_config_file(args.config) if args.config else None
    return build_config(file_config, overrides_from_args(args))


def validate_urls(urls: Sequence[str]) -> List[str]:
    if not urls:
        raise ConfigurationError("At least one URL is required")

    valid = []
    for url in urls:
        candidate = url if is_valid_url(url) else normalize_url(url)
        if not is_valid_url(candidate):
            raise ConfigurationError(f"Invalid URL: {url}")
        valid.append(candidate)
    return valid


def list_checkers() -> None:
    print("Available Accessibility Checkers:\n")
    for check_type, description in CHECKER_DESCRIPTIONS.items():
        print(f"  {check_type.value:<20} {description}")
    print("\nUse --disable or --enable-only to control which checkers run.")


async def run(urls: Sequence[str], config: HealthCheckConfig) -> int:
    checker = AccessibilityHealthChecker(config)
    report = await checker.check_urls(urls)

    if config.output.verbose or "console" not in [fmt.value for fmt in config.output.format]:
        print("\nQuick Summary:")
        print(f"  {report.summary.total_pages} pages checked")
        print(f"  {report.summary.total_issues} issues found")
        print(f"  Overall score: {report.summary.overall_score}/100")

    return 1 if report.summary.total_issues > 0 else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_checkers:
        list_checkers()
        return 0

    setup_logging(level="DEBUG" if args.verbose else None)

    try:
        urls = validate_urls(args.urls)
        config = parse_configuration(args)
        logger.info(f"Checking {len(urls)} URL{'s' if len(urls) != 1 else ''}")
        return asyncio.run(run(urls, config))
    except HealthCheckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Accessibility check failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
