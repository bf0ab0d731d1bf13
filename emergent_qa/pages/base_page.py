import logging
from typing import TYPE_CHECKING, List, Optional, Tuple, Type, TypeVar

from playwright.sync_api import Error as PlaywrightError

from emergent_qa.actions.action_handler import ActionHandler, Element, ElementNotReady, Readiness
from emergent_qa.actions.locators import Locator

if TYPE_CHECKING:
    from emergent_qa.browser.session import BrowserSession

P = TypeVar("P", bound="BasePage")


class BasePage:
    """Shared contract of every page object.

    Action methods (``enter_*``, ``click_*``, ``select_*``) raise
    ``ElementNotReady`` when their element does not become ready. Query
    methods (``get_*``, ``is_*``) never raise for a missing element; they
    log the failure and return an empty value.

    A page object holds no state besides its session, so every query reads
    the live page.
    """

    # Elements that identify the screen; checked by is_loaded()
    LOADED_LOCATORS: Tuple[Locator, ...] = ()
    # Seconds to wait for the defining elements; None uses the session default
    LOAD_TIMEOUT: Optional[float] = None

    def __init__(self, session: "BrowserSession"):
        self.session = session
        self.actions = ActionHandler(session.get_page(), session.default_timeout)

    @property
    def name(self) -> str:
        return type(self).__name__

    def is_loaded(self) -> bool:
        """Whether every defining element is visible within the default timeout."""
        try:
            self.wait_for_page_to_load()
            return True
        except (ElementNotReady, PlaywrightError) as e:
            self._log_query_failure("is_loaded", e)
            return False

    def wait_for_page_to_load(self: P) -> P:
        """Block until the page's defining elements are visible.

        Raises:
            ElementNotReady: a defining element did not appear in time
        """
        for locator in self.LOADED_LOCATORS:
            self.actions.wait_until_ready(locator, Readiness.VISIBLE, self.LOAD_TIMEOUT)
        logging.info(f"{self.name} loaded")
        return self

    def current_url(self) -> str:
        return self.actions.current_url()

    def page_title(self) -> str:
        try:
            return self.actions.page_title()
        except PlaywrightError as e:
            logging.error(f"{self.name}: failed to read page title: {e}")
            return ""

    def navigate_to(self, path: str = ""):
        """Open ``path`` relative to the configured base URL."""
        url = self.session.config.base_url.rstrip("/") + "/" + path.lstrip("/")
        logging.info(f"{self.name}: navigating to {url}")
        self.session.navigate_to(url)

    # -- actions ---------------------------------------------------------

    def _wait(
        self, locator: Locator, readiness: Readiness = Readiness.VISIBLE, timeout: Optional[float] = None
    ) -> Element:
        return self.actions.wait_until_ready(locator, readiness, self.LOAD_TIMEOUT if timeout is None else timeout)

    def _type(self, locator: Locator, value: str, label: str):
        logging.info(f"{self.name}: entering {label}")
        self._wait(locator).set_text(value)

    def _click(self, locator: Locator, label: str):
        logging.info(f"{self.name}: clicking {label}")
        self._wait(locator, Readiness.CLICKABLE).click()

    def _select(self, locator: Locator, option: str, label: str):
        logging.info(f"{self.name}: selecting '{option}' in {label}")
        self._wait(locator).select_option(option)

    def _check(self, locator: Locator, label: str):
        element = self._wait(locator, Readiness.CLICKABLE)
        if element.is_selected():
            logging.info(f"{self.name}: {label} already checked")
            return
        logging.info(f"{self.name}: checking {label}")
        element.click()

    def _open(self, page_cls: Type[P]) -> P:
        """Page object for the screen a navigating action leads to."""
        logging.info(f"{self.name}: navigated to {page_cls.__name__}")
        return page_cls(self.session)

    # -- queries ---------------------------------------------------------

    def _log_query_failure(self, label: str, error: Exception):
        if isinstance(error, ElementNotReady) and error.found:
            logging.warning(f"{self.name}: {label} found but not {error.readiness.value}: {error}")
        else:
            logging.error(f"{self.name}: {label} not found: {error}")

    def _read_text(self, locator: Locator, label: str, timeout: Optional[float] = None) -> str:
        try:
            return self._wait(locator, timeout=timeout).get_text()
        except (ElementNotReady, PlaywrightError) as e:
            self._log_query_failure(label, e)
            return ""

    def _read_value(self, locator: Locator, label: str) -> str:
        try:
            return self._wait(locator).get_value()
        except (ElementNotReady, PlaywrightError) as e:
            self._log_query_failure(label, e)
            return ""

    def _read_attribute(self, locator: Locator, name: str, label: str) -> str:
        try:
            return self._wait(locator).get_attribute(name) or ""
        except (ElementNotReady, PlaywrightError) as e:
            self._log_query_failure(label, e)
            return ""

    def _is_displayed(self, locator: Locator, label: str, timeout: Optional[float] = None) -> bool:
        try:
            return self._wait(locator, timeout=timeout).is_displayed()
        except (ElementNotReady, PlaywrightError) as e:
            self._log_query_failure(label, e)
            return False

    def _read_all_texts(self, locator: Locator, label: str) -> List[str]:
        try:
            return [element.get_text() for element in self.actions.find_all(locator)]
        except PlaywrightError as e:
            self._log_query_failure(label, e)
            return []

    def _count(self, locator: Locator, label: str) -> int:
        try:
            return self.actions.count(locator)
        except PlaywrightError as e:
            self._log_query_failure(label, e)
            return 0
