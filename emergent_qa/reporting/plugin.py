"""pytest wiring for the reporting listener.

Scenarios marked ``e2e`` get a report entry when their setup starts and an
outcome from the setup or call report. The HTML report is written once when
the session finishes.
"""

import logging
import os
from typing import Optional

import pytest

from emergent_qa.data.test_structures import ScenarioEntry
from emergent_qa.reporting.listener import ReportingListener, ScreenshotSource
from emergent_qa.utils.config import SuiteConfig, load_config

E2E_ENV_FLAG = "EMERGENT_RUN_E2E"

SUITE_CONFIG_KEY = pytest.StashKey[SuiteConfig]()
ENTRY_KEY = pytest.StashKey[ScenarioEntry]()
SCREENSHOT_SOURCE_KEY = pytest.StashKey[ScreenshotSource]()

FEATURE_MARKERS = {
    "e2e": "browser scenarios against the live product; run with --run-e2e",
    "auth": "login, sign-up and password reset scenarios",
    "projects": "project creation scenarios",
    "ai": "AI agent prompt scenarios",
    "codegen": "code generation scenarios",
    "deployment": "deployment scenarios",
    "settings": "project settings scenarios",
    "testing": "testing tab scenarios",
}


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("emergent-qa")
    group.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help=f"Run browser scenarios marked e2e (or set {E2E_ENV_FLAG}=true)",
    )
    group.addoption(
        "--config",
        action="store",
        dest="suite_config",
        default=None,
        help="Path to the suite config.yaml",
    )
    group.addoption(
        "--report-dir",
        action="store",
        default=None,
        help="Directory for the HTML report (overrides report.path)",
    )


def pytest_configure(config: pytest.Config) -> None:
    for name, description in FEATURE_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def e2e_enabled(config: pytest.Config) -> bool:
    return config.getoption("--run-e2e") or os.getenv(E2E_ENV_FLAG, "").lower() == "true"


def pytest_collection_modifyitems(config: pytest.Config, items) -> None:
    if e2e_enabled(config):
        return
    skip_e2e = pytest.mark.skip(reason=f"needs --run-e2e or {E2E_ENV_FLAG}=true")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


def get_suite_config(config: pytest.Config) -> SuiteConfig:
    """Suite configuration for this pytest run, loaded on first use."""
    if SUITE_CONFIG_KEY not in config.stash:
        overrides = {
            "base.url": config.getoption("--url", default=None),
            "report.path": config.getoption("--report-dir", default=None),
        }
        config.stash[SUITE_CONFIG_KEY] = load_config(config.getoption("suite_config", default=None), overrides)
    return config.stash[SUITE_CONFIG_KEY]


def _is_reported(item: pytest.Item) -> bool:
    return item.get_closest_marker("e2e") is not None and e2e_enabled(item.config)


@pytest.fixture
def reporting_listener(pytestconfig: pytest.Config) -> ReportingListener:
    """The run's reporting listener, for scenarios that add log lines."""
    return ReportingListener.get_instance(get_suite_config(pytestconfig))


def attach_screenshot_source(item: pytest.Item, source: ScreenshotSource) -> None:
    """Let failure screenshots of ``item`` be taken from ``source``."""
    item.stash[SCREENSHOT_SOURCE_KEY] = source


def scenario_entry_for(item: pytest.Item) -> Optional[ScenarioEntry]:
    return item.stash.get(ENTRY_KEY, None)


def _skip_reason(report: pytest.TestReport) -> str:
    if isinstance(report.longrepr, tuple):
        return str(report.longrepr[2])
    return str(report.longrepr or "")


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item: pytest.Item) -> None:
    if not _is_reported(item):
        return
    listener = ReportingListener.get_instance(get_suite_config(item.config))
    description = ""
    function = getattr(item, "function", None)
    if function is not None and function.__doc__:
        description = function.__doc__.strip().splitlines()[0]
    item.stash[ENTRY_KEY] = listener.start_scenario(item.nodeid, description)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call):
    """Record the scenario outcome from its setup or call report."""
    outcome = yield
    report = outcome.get_result()

    entry = scenario_entry_for(item)
    if entry is None or entry.finished or report.when == "teardown":
        return
    if report.when == "setup" and report.passed:
        return

    listener = ReportingListener.get_instance()
    if report.skipped:
        listener.on_skip(entry, _skip_reason(report))
    elif report.failed:
        listener.on_fail(entry, report.longreprtext, item.stash.get(SCREENSHOT_SOURCE_KEY, None))
    else:
        listener.on_pass(entry)


def pytest_sessionfinish(session: pytest.Session, exitstatus) -> None:
    if ReportingListener.has_instance():
        report_path = ReportingListener.get_instance().flush()
        logging.info(f"Test report: {report_path}")
