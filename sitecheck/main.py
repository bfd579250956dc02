"""
Main entry point and CLI for sitecheck.

Provides a command-line interface that launches a browser, loads a page and
verifies its title contains the expected text.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from dotenv import load_dotenv
from selenium.common.exceptions import WebDriverException

from sitecheck.browser_automation.browser_session import BrowserSession
from sitecheck.browser_automation.lifecycle import open_browser_session
from sitecheck.config.check_config import CheckSettings, SUPPORTED_BROWSERS, get_check_settings
from sitecheck.driver_provisioning.driver_installer import DriverInstaller
from sitecheck.error_handling.error_handler import ErrorHandler
from sitecheck.error_handling.errors import BrowserCheckError, BrowserSessionError
from sitecheck.title_check import TitleVerifier


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ENVIRONMENT = 2
EXIT_INTERRUPTED = 130


def apply_overrides(settings: CheckSettings, args: argparse.Namespace) -> CheckSettings:
    """
    Apply command-line overrides on top of environment settings.

    The given settings are left untouched.

    Args:
        settings: Settings loaded from the environment
        args: Parsed command-line arguments

    Returns:
        New validated CheckSettings instance
    """
    browser_changes = {}
    driver_changes = {}
    target_changes = {}

    if args.browser is not None:
        browser_changes["browser"] = args.browser
    if args.headless:
        browser_changes["headless"] = True
    if args.page_load_timeout is not None:
        browser_changes["page_load_timeout_seconds"] = args.page_load_timeout
    if args.driver_path is not None:
        driver_changes["driver_path"] = args.driver_path
    if args.no_driver_manager:
        driver_changes["use_driver_manager"] = False
    if args.url is not None:
        target_changes["url"] = args.url
    if args.expect is not None:
        target_changes["expected_title_substring"] = args.expect

    return CheckSettings(
        browser_config=replace(
            settings.browser_config,
            browser_args=list(settings.browser_config.browser_args),
            **browser_changes
        ),
        driver_config=replace(settings.driver_config, **driver_changes),
        target_config=replace(settings.target_config, **target_changes),
    )


def run_title_check(
    settings: CheckSettings,
    as_json: bool = False,
    verbose: bool = False
) -> int:
    """
    Execute one title check.

    A browser that fails to quit after the title was read is reported as a
    warning; the check result still decides the exit code.

    Args:
        settings: Validated check settings
        as_json: Print the result as JSON instead of a summary line
        verbose: Enable verbose logging output

    Returns:
        Exit code (0 title matched, 1 mismatch, 2 environment or navigation
        failure, 130 interrupted)
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    error_handler = ErrorHandler()
    target = settings.target_config
    result = None

    try:
        logger.info(f"Checking {target.url} for title text {target.expected_title_substring!r}")

        installer = DriverInstaller.from_settings(settings)
        driver_path = installer.install()

        start_time = datetime.now()

        try:
            with open_browser_session(
                lambda: BrowserSession.launch(settings.browser_config, driver_path)
            ) as session:
                result = TitleVerifier(error_handler).check(
                    session, target.url, target.expected_title_substring
                )
        except BrowserSessionError as e:
            if result is None:
                raise
            error_handler.log_failure("quit", e, browser=settings.browser_config.browser)
            print(f"Warning: {e}", file=sys.stderr)

        elapsed_time = (datetime.now() - start_time).total_seconds()
        logger.info(f"Check completed in {elapsed_time:.2f} seconds")

        if as_json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print(result.summary())

        return EXIT_OK if result.passed else EXIT_MISMATCH

    except KeyboardInterrupt:
        logger.info("Check interrupted by user")
        print("\nCheck interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED

    except (BrowserCheckError, WebDriverException) as e:
        description = error_handler.describe_failure(e)
        print(f"Error: {e}", file=sys.stderr)
        for suggestion in description['recovery_suggestions']:
            print(f"  - {suggestion}", file=sys.stderr)
        return EXIT_ENVIRONMENT


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="sitecheck",
        description="Open a page in a real browser and verify its title",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check the default page (https://www.github.com contains "GitHub")
  sitecheck

  # Check another page
  sitecheck --url https://www.python.org --expect Python

  # Use Firefox without a display
  sitecheck --browser firefox --headless
        """
    )

    parser.add_argument("--url", default=None, help="Page to load")
    parser.add_argument("--expect", default=None, help="Text the page title must contain")
    parser.add_argument(
        "--browser",
        choices=SUPPORTED_BROWSERS,
        default=None,
        help="Browser backend to launch (default: chrome)"
    )
    parser.add_argument("--headless", action="store_true", help="Run the browser without a window")
    parser.add_argument(
        "--page-load-timeout",
        type=float,
        default=None,
        help="Seconds to wait for the page to load (default: driver default)"
    )
    parser.add_argument("--driver-path", default=None, help="Use this driver executable")
    parser.add_argument(
        "--no-driver-manager",
        action="store_true",
        help="Do not download drivers; let selenium locate them"
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging output")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        settings = apply_overrides(get_check_settings(), args)
    except BrowserCheckError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ENVIRONMENT

    return run_title_check(settings, as_json=args.json, verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())
