import logging
import time
from typing import TYPE_CHECKING, Optional

from playwright.sync_api import Error as PlaywrightError

from emergent_qa.actions.action_handler import ElementNotReady, Readiness
from emergent_qa.actions.locators import by_xpath
from emergent_qa.data.constants import TEST_RUN_TIMEOUT
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.project_details_page import ProjectDetailsPage

# Seconds between result count checks
RESULT_POLL_INTERVAL = 0.5


class TestingPage(BasePage):
    __test__ = False

    TITLE = by_xpath("//h1[contains(text(), 'Testing')]")
    RUN_ALL_TESTS_BUTTON = by_xpath("//button[contains(text(), 'Run All Tests')]")
    CREATE_TEST_BUTTON = by_xpath("//button[contains(text(), 'Create Test')]")
    TEST_RESULTS = by_xpath("//div[contains(@class, 'test-result')]")
    TEST_STATUS = by_xpath("//div[contains(@class, 'test-status')]")
    BACK_TO_PROJECT_BUTTON = by_xpath("//button[contains(text(), 'Back to Project')]")
    TEST_PROMPT_INPUT = by_xpath("//textarea[@placeholder='Enter test description']")
    CREATE_TEST_PROMPT_BUTTON = by_xpath("//button[contains(text(), 'Create')]")
    PROGRESS_INDICATOR = by_xpath("//div[contains(@class, 'progress-indicator')]")

    LOADED_LOCATORS = (TITLE, RUN_ALL_TESTS_BUTTON, CREATE_TEST_BUTTON)

    def click_run_all_tests(self) -> "TestingPage":
        self._click(self.RUN_ALL_TESTS_BUTTON, "run all tests button")
        return self

    def click_create_test(self) -> "TestingPage":
        self._click(self.CREATE_TEST_BUTTON, "create test button")
        return self

    def enter_test_prompt(self, prompt: str) -> "TestingPage":
        self._type(self.TEST_PROMPT_INPUT, prompt, "test prompt")
        return self

    def click_create_test_prompt(self) -> "TestingPage":
        self._click(self.CREATE_TEST_PROMPT_BUTTON, "create test prompt button")
        return self

    def create_test(self, prompt: str) -> "TestingPage":
        logging.info(f"Creating test case: {prompt}")
        return self.click_create_test().enter_test_prompt(prompt).click_create_test_prompt()

    def get_test_results(self) -> str:
        """Text of every listed test result, one per line."""
        return "".join(f"{text}\n" for text in self._read_all_texts(self.TEST_RESULTS, "test results"))

    def get_test_result_count(self) -> int:
        return self._count(self.TEST_RESULTS, "test results")

    def wait_for_test_results(self, min_count: int = 1, timeout: Optional[float] = None) -> int:
        """Block until at least ``min_count`` test results are listed.

        Returns:
            int: the number of listed results

        Raises:
            ElementNotReady: fewer results were listed when the timeout elapsed
        """
        if timeout is None:
            timeout = self.actions.default_timeout
        deadline = time.monotonic() + timeout
        while True:
            count = self.get_test_result_count()
            if count >= min_count:
                return count
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise ElementNotReady(self.TEST_RESULTS, Readiness.PRESENT, timeout, found=count > 0)
            time.sleep(min(RESULT_POLL_INTERVAL, remaining))

    def get_test_status(self) -> str:
        return self._read_text(self.TEST_STATUS, "test status")

    def wait_for_tests_to_complete(self, timeout: float = TEST_RUN_TIMEOUT) -> "TestingPage":
        """Wait for the progress indicator to disappear; a run still going
        after ``timeout`` seconds is only logged."""
        try:
            self.actions.wait_until_gone(self.PROGRESS_INDICATOR, timeout)
        except (ElementNotReady, PlaywrightError) as e:
            logging.error(f"Tests did not complete within {timeout}s: {e}")
        return self

    def is_testing_title_displayed(self) -> bool:
        return self._is_displayed(self.TITLE, "testing title")

    def click_back_to_project(self) -> "ProjectDetailsPage":
        from emergent_qa.pages.project_details_page import ProjectDetailsPage

        self._click(self.BACK_TO_PROJECT_BUTTON, "back to project button")
        return self._open(ProjectDetailsPage)
