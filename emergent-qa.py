#!/usr/bin/env python3
import argparse
import os
import sys

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright
from pydantic import ValidationError

from emergent_qa.browser.driver import Driver
from emergent_qa.utils.config import find_config_file, load_config

SCENARIO_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "tests", "e2e")


def check_playwright_browsers(browser_name):
    """Launch and close the Playwright browser behind ``browser_name``."""
    name, browser_type, channel = Driver.resolve_browser(browser_name)
    launch_options = {"headless": True}
    if channel:
        launch_options["channel"] = channel
    try:
        with sync_playwright() as p:
            browser = getattr(p, browser_type).launch(**launch_options)
            browser.close()
        print(f"✅ Playwright browser available for {name} ({browser_type})")
        return True
    except PlaywrightError as e:
        print(f"⚠️ Playwright browser unavailable for {name}: {e}")
        print("Install it with: playwright install")
        return False


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Emergent.sh E2E test entry point; unknown arguments are passed to pytest"
    )
    parser.add_argument("--config", "-c", help="YAML configuration file path (optional, default auto-search config/config.yaml)")
    return parser.parse_known_args(argv)


def main(argv=None):
    args, pytest_args = parse_args(argv)

    try:
        config_path = find_config_file(args.config)
        config = load_config(config_path)
    except FileNotFoundError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"[ERROR] Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    if not check_playwright_browsers(config.browser):
        sys.exit(1)

    command = [SCENARIO_DIR, "--run-e2e"]
    if config_path:
        command += ["--config", config_path]
    command += pytest_args
    print(f"🚀 Running: pytest {' '.join(command)}")
    sys.exit(pytest.main(command))


if __name__ == "__main__":
    main()
