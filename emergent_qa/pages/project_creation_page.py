import logging
from typing import TYPE_CHECKING, Optional

from emergent_qa.actions.action_handler import Readiness
from emergent_qa.actions.locators import by_id, by_xpath
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.dashboard_page import DashboardPage
    from emergent_qa.pages.project_details_page import ProjectDetailsPage


class ProjectCreationPage(BasePage):
    PROJECT_NAME_FIELD = by_id("projectName")
    PROJECT_DESCRIPTION_FIELD = by_id("projectDescription")
    CREATE_BUTTON = by_xpath("//button[contains(text(), 'Create')]")
    CANCEL_BUTTON = by_xpath("//button[contains(text(), 'Cancel')]")
    TEMPLATE_OPTIONS = by_xpath("//div[contains(@class, 'template-option')]")
    # Parameterised by the template name
    TEMPLATE_OPTION = by_xpath("//div[contains(@class, 'template-option') and contains(., %s)]")
    ERROR_MESSAGE = by_xpath("//div[contains(@class, 'error-message')]")
    TITLE = by_xpath("//h1[contains(text(), 'Create Project')]")

    LOADED_LOCATORS = (TITLE, PROJECT_NAME_FIELD, PROJECT_DESCRIPTION_FIELD, CREATE_BUTTON)

    def enter_project_name(self, name: str) -> "ProjectCreationPage":
        logging.info(f"Project name: {name}")
        self._type(self.PROJECT_NAME_FIELD, name, "project name")
        return self

    def enter_project_description(self, description: str) -> "ProjectCreationPage":
        self._type(self.PROJECT_DESCRIPTION_FIELD, description, "project description")
        return self

    def select_template(self, name: str) -> "ProjectCreationPage":
        self._click(self.TEMPLATE_OPTION.format(name), f"template '{name}'")
        return self

    def click_create(self) -> "ProjectDetailsPage":
        from emergent_qa.pages.project_details_page import ProjectDetailsPage

        self._click(self.CREATE_BUTTON, "create button")
        return self._open(ProjectDetailsPage)

    def click_create_expecting_error(self) -> "ProjectCreationPage":
        """Submit the form and wait for the validation error.

        Raises:
            ElementNotReady: no error message appeared
        """
        self._click(self.CREATE_BUTTON, "create button")
        self._wait(self.ERROR_MESSAGE, Readiness.VISIBLE)
        return self

    def click_cancel(self) -> "DashboardPage":
        from emergent_qa.pages.dashboard_page import DashboardPage

        self._click(self.CANCEL_BUTTON, "cancel button")
        return self._open(DashboardPage)

    def fill_form(self, name: str, description: str, template: Optional[str] = None) -> "ProjectCreationPage":
        self.enter_project_name(name).enter_project_description(description)
        if template:
            self.select_template(template)
        return self

    def create_project(self, name: str, description: str, template: Optional[str] = None) -> "ProjectDetailsPage":
        """Fill the form and submit it; the template is skipped when empty."""
        return self.fill_form(name, description, template).click_create()

    def get_error_message(self) -> str:
        return self._read_text(self.ERROR_MESSAGE, "error message")

    def is_error_message_displayed(self) -> bool:
        return self._is_displayed(self.ERROR_MESSAGE, "error message")
