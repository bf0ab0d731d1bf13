import logging
import os
import threading
import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from playwright.sync_api import BrowserContext, Page

from emergent_qa.actions.action_handler import to_ms
from emergent_qa.browser.config import DEFAULT_CONFIG
from emergent_qa.browser.driver import Driver
from emergent_qa.utils.config import SuiteConfig


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    CLOSED = "closed"


class SessionError(RuntimeError):
    """Raised when a session is used outside the state that allows it."""


class BrowserSession:
    """One browser, context and page driven by a single test class.

    The session moves ``UNINITIALIZED -> ACTIVE -> CLOSED``. ``close()`` is
    valid from any state and may be called repeatedly.
    """

    def __init__(self, config: SuiteConfig, session_id: str = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.config = config
        self.browser_config = {
            **DEFAULT_CONFIG,
            "browser": config.browser,
            "headless": config.headless,
            "viewport": {"width": config.window_width, "height": config.window_height},
        }
        self.driver: Optional[Driver] = None
        self.script_timeout = config.script_timeout
        self.state = SessionState.UNINITIALIZED
        self._lock = threading.Lock()

    @property
    def default_timeout(self) -> float:
        return self.config.default_timeout

    def initialize(self) -> "BrowserSession":
        """Launch the configured browser and apply the session timeouts."""
        with self._lock:
            if self.state is SessionState.CLOSED:
                raise SessionError("Browser session is closed")
            if self.state is SessionState.ACTIVE:
                return self

            logging.info(f"Initializing browser session {self.session_id} with config: {self.browser_config}")
            try:
                self.driver = Driver.getInstance(browser_config=self.browser_config)
                page = self.driver.get_page()
                page.set_default_timeout(to_ms(self.config.implicit_wait))
                page.set_default_navigation_timeout(to_ms(self.config.page_load_timeout))
            except Exception as e:
                logging.error(f"Failed to initialize browser session {self.session_id}: {e}")
                self._cleanup()
                self.state = SessionState.CLOSED
                raise

            self.state = SessionState.ACTIVE
            logging.info(f"Browser session {self.session_id} is active")
            return self

    def _require_active(self):
        if self.state is not SessionState.ACTIVE:
            raise SessionError(f"Browser session {self.session_id} is {self.state.value}, expected active")

    def navigate_to(self, url: str):
        """Navigate to URL and wait until the document has loaded."""
        self._require_active()
        logging.info(f"Session {self.session_id} navigating to: {url}")
        self.driver.get_page().goto(url, wait_until="load")

    def navigate_to_base_url(self):
        self.navigate_to(self.config.base_url)

    def reset_state(self):
        """Clear cookies so the next scenario starts signed out."""
        self._require_active()
        logging.info(f"Session {self.session_id} clearing cookies")
        self.driver.get_context().clear_cookies()

    def get_page(self) -> Page:
        """Return current page via Driver."""
        self._require_active()
        return self.driver.get_page()

    def get_context(self) -> BrowserContext:
        self._require_active()
        return self.driver.get_context()

    def is_closed(self) -> bool:
        return self.state is SessionState.CLOSED

    def capture_screenshot(self, name: str, directory: str = None) -> str:
        """Save a full-page screenshot as ``<name>_<timestamp>.png``.

        Returns:
            str: path of the written file
        """
        self._require_active()
        directory = directory or self.config.screenshot_path
        os.makedirs(directory, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(directory, f"{name}_{timestamp}.png")
        self.driver.get_page().screenshot(path=path, full_page=True)
        logging.info(f"Screenshot saved: {path}")
        return path

    def _cleanup(self):
        try:
            if self.driver and not self.driver.is_closed():
                self.driver.close_browser()
        except Exception as e:
            logging.error(f"Error during cleanup: {e}")
        finally:
            self.driver = None

    def close(self):
        """Close browser session."""
        with self._lock:
            if self.state is SessionState.CLOSED:
                return

            logging.info(f"Closing browser session {self.session_id}")
            self.state = SessionState.CLOSED
            self._cleanup()
            logging.info(f"Browser session {self.session_id} closed")

    def __enter__(self):
        return self.initialize()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
