import logging
from typing import TYPE_CHECKING, List

from emergent_qa.actions.locators import by_xpath
from emergent_qa.data.constants import DASHBOARD_PATH
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.home_page import HomePage
    from emergent_qa.pages.project_creation_page import ProjectCreationPage
    from emergent_qa.pages.project_details_page import ProjectDetailsPage


class DashboardPage(BasePage):
    CREATE_PROJECT_BUTTON = by_xpath("//button[contains(text(), 'Create Project')]")
    PROJECT_CARDS = by_xpath("//div[contains(@class, 'project-card')]")
    USER_PROFILE_MENU = by_xpath("//div[contains(@class, 'user-profile')]")
    LOGOUT_OPTION = by_xpath("//button[contains(text(), 'Logout')]")
    TITLE = by_xpath("//h1[contains(text(), 'Dashboard')]")
    SEARCH_BOX = by_xpath("//input[@placeholder='Search projects']")
    # Parameterised by the project name
    OPEN_PROJECT_BUTTON = by_xpath(
        "//div[contains(@class, 'project-card') and contains(., %s)]//button[contains(text(), 'Open')]"
    )

    LOADED_LOCATORS = (TITLE, CREATE_PROJECT_BUTTON)

    def navigate_to_dashboard(self) -> "DashboardPage":
        self.navigate_to(DASHBOARD_PATH)
        return self

    def click_create_project(self) -> "ProjectCreationPage":
        from emergent_qa.pages.project_creation_page import ProjectCreationPage

        self._click(self.CREATE_PROJECT_BUTTON, "create project button")
        return self._open(ProjectCreationPage)

    def get_project_names(self) -> List[str]:
        """Titles of the listed projects, taken from the first line of each
        project card."""
        names = []
        for text in self._read_all_texts(self.PROJECT_CARDS, "project cards"):
            lines = [line.strip() for line in text.splitlines() if line.strip()]
            if lines:
                names.append(lines[0])
        return names

    def get_project_count(self) -> int:
        return self._count(self.PROJECT_CARDS, "project cards")

    def is_project_in_list(self, name: str) -> bool:
        found = name in self.get_project_names()
        logging.info(f"Project '{name}' {'is' if found else 'is not'} listed on the dashboard")
        return found

    def open_project(self, name: str) -> "ProjectDetailsPage":
        from emergent_qa.pages.project_details_page import ProjectDetailsPage

        self._click(self.OPEN_PROJECT_BUTTON.format(name), f"open button of project '{name}'")
        return self._open(ProjectDetailsPage)

    def search_project(self, term: str) -> "DashboardPage":
        self._type(self.SEARCH_BOX, term, f"search term '{term}'")
        return self

    def click_user_profile_menu(self) -> "DashboardPage":
        self._click(self.USER_PROFILE_MENU, "user profile menu")
        return self

    def click_logout_option(self) -> "HomePage":
        from emergent_qa.pages.home_page import HomePage

        self._click(self.LOGOUT_OPTION, "logout option")
        return self._open(HomePage)

    def logout(self) -> "HomePage":
        return self.click_user_profile_menu().click_logout_option()

    def is_user_logged_in(self) -> bool:
        return self._is_displayed(self.USER_PROFILE_MENU, "user profile menu")
