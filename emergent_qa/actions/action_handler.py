import logging
import time
from enum import Enum
from typing import Any, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from emergent_qa.actions.locators import Locator

# Interval between enabledness checks while waiting for a clickable element
POLL_INTERVAL = 0.1


class Readiness(str, Enum):
    PRESENT = 'present'
    VISIBLE = 'visible'
    CLICKABLE = 'clickable'


class ElementNotReady(Exception):
    """Raised when an element does not reach the requested readiness in
    time."""

    def __init__(self, locator: Locator, readiness: Readiness, timeout: float, found: bool = False):
        self.locator = locator
        self.readiness = readiness
        self.timeout = timeout
        self.found = found
        if found:
            detail = f'found but not {readiness.value}'
        else:
            detail = 'not found'
        super().__init__(f'Element [{locator}] {detail} after {timeout}s')


def to_ms(seconds: float) -> float:
    # Playwright treats a timeout of 0 as "no timeout"
    return max(seconds * 1000, 1)


class Element:
    """Handle to a resolved element; every call re-queries the live DOM."""

    def __init__(self, handle: PlaywrightLocator, locator: Locator):
        self._handle = handle
        self.locator = locator

    def click(self) -> None:
        self._handle.click()

    def set_text(self, value: str) -> None:
        self._handle.clear()
        self._handle.fill(value)

    def get_text(self) -> str:
        return self._handle.inner_text()

    def get_attribute(self, name: str) -> Optional[str]:
        return self._handle.get_attribute(name)

    def get_value(self) -> str:
        """Current value of an input, textarea or select."""
        return self._handle.input_value()

    def is_displayed(self) -> bool:
        return self._handle.is_visible()

    def is_selected(self) -> bool:
        return self._handle.is_checked()

    def check(self) -> None:
        self._handle.check()

    def select_option(self, label: str) -> None:
        self._handle.select_option(label=label)

    def hover(self) -> None:
        self._handle.hover()

    def scroll_into_view(self) -> None:
        self._handle.scroll_into_view_if_needed()

    def js_click(self) -> None:
        """Click through JavaScript, for elements covered by overlays."""
        self._handle.evaluate('el => el.click()')


class ActionHandler:
    def __init__(self, page: Page, default_timeout: float = 30):
        self.page = page
        self.default_timeout = default_timeout

    def wait_until_ready(
        self, locator: Locator, readiness: Readiness = Readiness.VISIBLE, timeout: Optional[float] = None
    ) -> Element:
        """Block until the element behind ``locator`` satisfies ``readiness``.

        Args:
            locator: element to resolve; the first match is used
            readiness: present in the DOM, visible, or visible and enabled
            timeout: seconds to wait, ``None`` for the default timeout; a
                value of 0 or less checks once without waiting

        Returns:
            Element: handle to the ready element

        Raises:
            ElementNotReady: the element did not become ready in time
        """
        if timeout is None:
            timeout = self.default_timeout
        target = self.page.locator(locator.selector).first

        if timeout <= 0:
            if self._is_ready(target, readiness):
                return Element(target, locator)
            raise self._not_ready(locator, readiness, timeout)

        deadline = time.monotonic() + timeout
        state = 'attached' if readiness is Readiness.PRESENT else 'visible'
        try:
            target.wait_for(state=state, timeout=to_ms(timeout))
            if readiness is Readiness.CLICKABLE:
                while not target.is_enabled(timeout=to_ms(deadline - time.monotonic())):
                    if time.monotonic() >= deadline:
                        raise self._not_ready(locator, readiness, timeout)
                    time.sleep(min(POLL_INTERVAL, max(deadline - time.monotonic(), 0)))
        except PlaywrightTimeoutError as e:
            raise self._not_ready(locator, readiness, timeout) from e

        return Element(target, locator)

    def _is_ready(self, target: PlaywrightLocator, readiness: Readiness) -> bool:
        if readiness is Readiness.PRESENT:
            return target.count() > 0
        if not target.is_visible():
            return False
        if readiness is Readiness.CLICKABLE:
            return target.is_enabled(timeout=to_ms(0))
        return True

    def _not_ready(self, locator: Locator, readiness: Readiness, timeout: float) -> ElementNotReady:
        return ElementNotReady(locator, readiness, timeout, found=self.is_present(locator))

    def wait_until_gone(self, locator: Locator, timeout: Optional[float] = None) -> None:
        """Block until the element is hidden or detached.

        Raises:
            ElementNotReady: the element was still visible when the timeout
                elapsed
        """
        if timeout is None:
            timeout = self.default_timeout
        try:
            self.page.locator(locator.selector).first.wait_for(state='hidden', timeout=to_ms(timeout))
        except PlaywrightTimeoutError as e:
            raise ElementNotReady(locator, Readiness.VISIBLE, timeout, found=True) from e

    def is_present(self, locator: Locator) -> bool:
        try:
            return self.page.locator(locator.selector).count() > 0
        except PlaywrightError as e:
            logging.debug(f'Presence check failed for [{locator}]: {e}')
            return False

    def count(self, locator: Locator) -> int:
        return self.page.locator(locator.selector).count()

    def find_all(self, locator: Locator) -> List[Element]:
        """All elements currently matching ``locator``, without waiting."""
        matches = self.page.locator(locator.selector)
        return [Element(matches.nth(i), locator) for i in range(matches.count())]

    def go_to_page(self, url: str) -> None:
        logging.debug(f'Navigating to {url}')
        self.page.goto(url, wait_until='domcontentloaded')

    def refresh(self) -> None:
        self.page.reload(wait_until='domcontentloaded')

    def wait_for_document_ready(self, timeout: Optional[float] = None) -> None:
        if timeout is None:
            timeout = self.default_timeout
        self.page.wait_for_function("document.readyState === 'complete'", timeout=to_ms(timeout))

    def execute_script(self, script: str, arg: Any = None) -> Any:
        return self.page.evaluate(script, arg)

    def scroll_to_top(self) -> None:
        self.page.evaluate('window.scrollTo(0, 0)')

    def scroll_to_bottom(self) -> None:
        self.page.evaluate('window.scrollTo(0, document.body.scrollHeight)')

    def current_url(self) -> str:
        return self.page.url

    def page_title(self) -> str:
        return self.page.title()
