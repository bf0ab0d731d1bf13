from typing import Generator

import pytest

from emergent_qa.browser.session import BrowserSession
from emergent_qa.reporting.plugin import get_suite_config
from emergent_qa.utils.config import SuiteConfig
from emergent_qa.utils.get_log import GetLog


@pytest.fixture(scope='session')
def suite_config(pytestconfig: pytest.Config) -> SuiteConfig:
    config = get_suite_config(pytestconfig)
    GetLog.get_log(log_dir=config.log_path, level=config.log_level)
    return config


@pytest.fixture(scope='class')
def browser_session(suite_config: SuiteConfig) -> Generator[BrowserSession, None, None]:
    """One browser per test class, closed after the class whatever the
    outcome."""
    session = BrowserSession(suite_config)
    try:
        session.initialize()
        yield session
    finally:
        session.close()
