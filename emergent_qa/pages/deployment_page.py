import logging
from typing import TYPE_CHECKING

from playwright.sync_api import Error as PlaywrightError

from emergent_qa.actions.action_handler import ElementNotReady
from emergent_qa.actions.locators import by_xpath
from emergent_qa.data.constants import DEPLOYMENT_TIMEOUT
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.project_details_page import ProjectDetailsPage


class DeploymentPage(BasePage):
    TITLE = by_xpath("//h1[contains(text(), 'Deployment')]")
    DEPLOY_BUTTON = by_xpath("//button[contains(text(), 'Deploy')]")
    ENVIRONMENT_DROPDOWN = by_xpath("//select[@id='environment']")
    DEPLOYMENT_STATUS = by_xpath("//div[contains(@class, 'deployment-status')]")
    DEPLOYMENT_LOGS = by_xpath("//div[contains(@class, 'deployment-logs')]")
    BACK_TO_PROJECT_BUTTON = by_xpath("//button[contains(text(), 'Back to Project')]")
    PROGRESS_INDICATOR = by_xpath("//div[contains(@class, 'progress-indicator')]")
    DEPLOYMENT_URL_LINK = by_xpath("//a[contains(@class, 'deployment-url')]")

    LOADED_LOCATORS = (TITLE, DEPLOY_BUTTON)

    def select_environment(self, environment: str) -> "DeploymentPage":
        self._select(self.ENVIRONMENT_DROPDOWN, environment, "environment dropdown")
        return self

    def click_deploy(self) -> "DeploymentPage":
        self._click(self.DEPLOY_BUTTON, "deploy button")
        return self

    def deploy(self, environment: str) -> "DeploymentPage":
        logging.info(f"Deploying to {environment}")
        return self.select_environment(environment).click_deploy()

    def wait_for_deployment_to_complete(self, timeout: float = DEPLOYMENT_TIMEOUT) -> "DeploymentPage":
        """Wait for the progress indicator to disappear.

        A deployment still running after ``timeout`` seconds is logged and
        does not raise; callers check the status afterwards.
        """
        try:
            self.actions.wait_until_gone(self.PROGRESS_INDICATOR, timeout)
            logging.info("Deployment finished")
        except (ElementNotReady, PlaywrightError) as e:
            logging.error(f"Deployment did not complete within {timeout}s: {e}")
        return self

    def get_deployment_status(self) -> str:
        return self._read_text(self.DEPLOYMENT_STATUS, "deployment status")

    def get_deployment_logs(self) -> str:
        return self._read_text(self.DEPLOYMENT_LOGS, "deployment logs")

    def get_deployment_url(self) -> str:
        return self._read_attribute(self.DEPLOYMENT_URL_LINK, "href", "deployment URL")

    def click_back_to_project(self) -> "ProjectDetailsPage":
        from emergent_qa.pages.project_details_page import ProjectDetailsPage

        self._click(self.BACK_TO_PROJECT_BUTTON, "back to project button")
        return self._open(ProjectDetailsPage)
