import logging
from typing import TYPE_CHECKING, Optional

from emergent_qa.actions.action_handler import Readiness
from emergent_qa.actions.locators import by_id, by_xpath
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.dashboard_page import DashboardPage
    from emergent_qa.pages.project_details_page import ProjectDetailsPage


class ProjectSettingsPage(BasePage):
    TITLE = by_xpath("//h1[contains(text(), 'Project Settings')]")
    PROJECT_NAME_FIELD = by_id("projectName")
    PROJECT_DESCRIPTION_FIELD = by_id("projectDescription")
    SAVE_CHANGES_BUTTON = by_xpath("//button[contains(text(), 'Save Changes')]")
    DELETE_PROJECT_BUTTON = by_xpath("//button[contains(text(), 'Delete Project')]")
    CONFIRM_DELETE_BUTTON = by_xpath("//button[contains(text(), 'Confirm Delete')]")
    CANCEL_DELETE_BUTTON = by_xpath("//button[contains(text(), 'Cancel')]")
    BACK_TO_PROJECT_BUTTON = by_xpath("//button[contains(text(), 'Back to Project')]")
    SUCCESS_MESSAGE = by_xpath("//div[contains(@class, 'success-message')]")
    ERROR_MESSAGE = by_xpath("//div[contains(@class, 'error-message')]")

    LOADED_LOCATORS = (TITLE, PROJECT_NAME_FIELD, PROJECT_DESCRIPTION_FIELD, SAVE_CHANGES_BUTTON)

    def get_project_name(self) -> str:
        return self._read_value(self.PROJECT_NAME_FIELD, "project name")

    def get_project_description(self) -> str:
        return self._read_value(self.PROJECT_DESCRIPTION_FIELD, "project description")

    def enter_project_name(self, name: str) -> "ProjectSettingsPage":
        self._type(self.PROJECT_NAME_FIELD, name, "project name")
        return self

    def enter_project_description(self, description: str) -> "ProjectSettingsPage":
        self._type(self.PROJECT_DESCRIPTION_FIELD, description, "project description")
        return self

    def click_save_changes(self) -> "ProjectSettingsPage":
        self._click(self.SAVE_CHANGES_BUTTON, "save changes button")
        return self

    def update_project_settings(self, name: str, description: str) -> "ProjectSettingsPage":
        logging.info(f"Updating project settings: name='{name}'")
        return self.enter_project_name(name).enter_project_description(description).click_save_changes()

    def click_delete_project(self) -> "ProjectSettingsPage":
        self._click(self.DELETE_PROJECT_BUTTON, "delete project button")
        return self

    def click_confirm_delete(self) -> "DashboardPage":
        from emergent_qa.pages.dashboard_page import DashboardPage

        self._click(self.CONFIRM_DELETE_BUTTON, "confirm delete button")
        return self._open(DashboardPage)

    def click_cancel_delete(self) -> "ProjectSettingsPage":
        self._click(self.CANCEL_DELETE_BUTTON, "cancel delete button")
        return self

    def delete_project(self) -> "DashboardPage":
        return self.click_delete_project().click_confirm_delete()

    def get_success_message(self) -> str:
        return self._read_text(self.SUCCESS_MESSAGE, "success message")

    def get_error_message(self) -> str:
        return self._read_text(self.ERROR_MESSAGE, "error message")

    def wait_for_success_message(self, timeout: Optional[float] = None) -> str:
        """Block until the success message is visible and return it.

        Raises:
            ElementNotReady: no success message appeared
        """
        return self._wait(self.SUCCESS_MESSAGE, Readiness.VISIBLE, timeout).get_text()

    def wait_for_error_message(self, timeout: Optional[float] = None) -> str:
        """Block until the error message is visible and return it.

        Raises:
            ElementNotReady: no error message appeared
        """
        return self._wait(self.ERROR_MESSAGE, Readiness.VISIBLE, timeout).get_text()

    def is_settings_title_displayed(self) -> bool:
        return self._is_displayed(self.TITLE, "settings title")

    def click_back_to_project(self) -> "ProjectDetailsPage":
        from emergent_qa.pages.project_details_page import ProjectDetailsPage

        self._click(self.BACK_TO_PROJECT_BUTTON, "back to project button")
        return self._open(ProjectDetailsPage)
