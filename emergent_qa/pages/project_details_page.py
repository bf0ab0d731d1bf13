import logging
from typing import TYPE_CHECKING

from emergent_qa.actions.action_handler import Readiness
from emergent_qa.actions.locators import by_xpath
from emergent_qa.data.constants import AI_RESPONSE_TIMEOUT
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.dashboard_page import DashboardPage
    from emergent_qa.pages.deployment_page import DeploymentPage
    from emergent_qa.pages.project_settings_page import ProjectSettingsPage
    from emergent_qa.pages.testing_page import TestingPage


class ProjectDetailsPage(BasePage):
    PROJECT_TITLE = by_xpath("//h1[@class='project-title']")
    PROJECT_DESCRIPTION = by_xpath("//div[@class='project-description']")
    BACK_TO_DASHBOARD_BUTTON = by_xpath("//button[contains(text(), 'Back to Dashboard')]")
    PROMPT_INPUT = by_xpath("//textarea[@placeholder='Enter your prompt here']")
    SEND_PROMPT_BUTTON = by_xpath("//button[contains(text(), 'Send')]")
    AI_RESPONSE = by_xpath("//div[contains(@class, 'ai-response')]")
    ERROR_MESSAGE = by_xpath("//div[contains(@class, 'error-message')]")
    CODE_PREVIEW = by_xpath("//div[contains(@class, 'code-preview')]")
    DEPLOY_BUTTON = by_xpath("//button[contains(text(), 'Deploy')]")
    TEST_BUTTON = by_xpath("//button[contains(text(), 'Test')]")
    SETTINGS_BUTTON = by_xpath("//button[contains(text(), 'Settings')]")

    LOADED_LOCATORS = (PROJECT_TITLE, PROMPT_INPUT, SEND_PROMPT_BUTTON)

    def get_project_title(self) -> str:
        return self._read_text(self.PROJECT_TITLE, "project title")

    def get_project_description(self) -> str:
        return self._read_text(self.PROJECT_DESCRIPTION, "project description")

    def click_back_to_dashboard(self) -> "DashboardPage":
        from emergent_qa.pages.dashboard_page import DashboardPage

        self._click(self.BACK_TO_DASHBOARD_BUTTON, "back to dashboard button")
        return self._open(DashboardPage)

    def enter_prompt(self, prompt: str) -> "ProjectDetailsPage":
        self._type(self.PROMPT_INPUT, prompt, "prompt")
        return self

    def click_send_prompt(self) -> "ProjectDetailsPage":
        self._click(self.SEND_PROMPT_BUTTON, "send prompt button")
        return self

    def send_prompt(self, prompt: str) -> "ProjectDetailsPage":
        logging.info(f"Sending prompt: {prompt}")
        return self.enter_prompt(prompt).click_send_prompt()

    def wait_for_ai_response(self, timeout: float = AI_RESPONSE_TIMEOUT) -> str:
        """Block until the AI response is visible and return its text.

        Raises:
            ElementNotReady: no response appeared within ``timeout`` seconds
        """
        text = self._wait(self.AI_RESPONSE, Readiness.VISIBLE, timeout).get_text()
        logging.info(f"AI response received ({len(text)} characters)")
        return text

    def get_ai_response(self) -> str:
        return self._read_text(self.AI_RESPONSE, "AI response")

    def get_code_preview(self) -> str:
        return self._read_text(self.CODE_PREVIEW, "code preview")

    def is_code_preview_displayed(self) -> bool:
        return self._is_displayed(self.CODE_PREVIEW, "code preview")

    def is_prompt_input_displayed(self) -> bool:
        return self._is_displayed(self.PROMPT_INPUT, "prompt input")

    def is_error_message_displayed(self) -> bool:
        return self._is_displayed(self.ERROR_MESSAGE, "error message")

    def get_error_message(self) -> str:
        return self._read_text(self.ERROR_MESSAGE, "error message")

    def click_deploy(self) -> "DeploymentPage":
        from emergent_qa.pages.deployment_page import DeploymentPage

        self._click(self.DEPLOY_BUTTON, "deploy button")
        return self._open(DeploymentPage)

    def click_test(self) -> "TestingPage":
        from emergent_qa.pages.testing_page import TestingPage

        self._click(self.TEST_BUTTON, "test button")
        return self._open(TestingPage)

    def click_settings(self) -> "ProjectSettingsPage":
        from emergent_qa.pages.project_settings_page import ProjectSettingsPage

        self._click(self.SETTINGS_BUTTON, "settings button")
        return self._open(ProjectSettingsPage)
