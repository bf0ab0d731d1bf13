import pytest
from scenario_base import ScenarioBase

from emergent_qa.data import constants, generators, providers

pytestmark = [pytest.mark.e2e, pytest.mark.projects]


class TestProjectCreation(ScenarioBase):
    reset_cookies = True

    @pytest.fixture(autouse=True)
    def _logged_in(self, _scenario_setup):
        self.dashboard_page = self.login_with_default_credentials()
        assert self.dashboard_page.is_loaded(), 'Dashboard page did not load'

    def test_successful_project_creation(self):
        """Create a project with a random name and description."""
        name = generators.random_project_name()
        description = generators.random_project_description()

        creation_page = self.dashboard_page.click_create_project()
        assert creation_page.is_loaded(), 'Project creation page did not load'
        details_page = creation_page.enter_project_name(name).enter_project_description(description).click_create()

        assert details_page.is_loaded(), 'Project details page did not load after project creation'
        assert details_page.get_project_title() == name, 'Project title does not match the entered name'
        assert details_page.get_project_description() == description, 'Project description does not match'

    def test_project_creation_with_empty_name(self):
        """Submit the creation form without a name."""
        creation_page = self.dashboard_page.click_create_project()
        assert creation_page.is_loaded(), 'Project creation page did not load'

        creation_page.enter_project_name('').enter_project_description(generators.random_project_description())
        creation_page.click_create_expecting_error()

        assert creation_page.is_error_message_displayed(), 'Error message not displayed for empty project name'
        error = creation_page.get_error_message()
        if constants.ERROR_EMPTY_PROJECT_NAME not in error:
            self.log_step(f'Unexpected empty name error text: {error}')
        assert error, 'Error message is empty'

    @pytest.mark.parametrize('template', providers.project_templates())
    def test_project_creation_with_template(self, template: str):
        """Create a project from each template."""
        name = generators.random_project_name()
        creation_page = self.dashboard_page.click_create_project()
        assert creation_page.is_loaded(), 'Project creation page did not load'

        details_page = creation_page.create_project(name, generators.random_project_description(), template)

        assert details_page.is_loaded(), 'Project details page did not load after project creation'
        assert details_page.get_project_title() == name, 'Project title does not match the entered name'

    def test_project_creation_with_duplicate_name(self):
        """Create two projects with the same name.

        The name is generated rather than the literal "Test Project", so the
        first creation succeeds on an account that already holds a project of
        that name from an earlier run.
        """
        name = generators.random_project_name()
        creation_page = self.dashboard_page.click_create_project()
        details_page = creation_page.create_project(name, generators.random_project_description())
        assert details_page.is_loaded(), 'Project details page did not load after first project creation'

        dashboard = details_page.click_back_to_dashboard()
        assert dashboard.is_loaded(), 'Dashboard page did not load after navigating back'

        creation_page = dashboard.click_create_project()
        assert creation_page.is_loaded(), 'Project creation page did not load for second attempt'
        creation_page.fill_form(name, generators.random_project_description())
        creation_page.click_create_expecting_error()

        assert creation_page.is_error_message_displayed(), 'Error message not displayed for duplicate project name'
        error = creation_page.get_error_message()
        if constants.ERROR_DUPLICATE_PROJECT not in error:
            self.log_step(f'Unexpected duplicate name error text: {error}')
        assert error, 'Error message is empty'

    def test_cancel_project_creation(self):
        """Fill the creation form and cancel it."""
        name = generators.random_project_name()
        creation_page = self.dashboard_page.click_create_project()
        assert creation_page.is_loaded(), 'Project creation page did not load'

        creation_page.fill_form(name, generators.random_project_description())
        dashboard = creation_page.click_cancel()

        assert dashboard.is_loaded(), 'Dashboard page did not load after canceling project creation'
        assert not dashboard.is_project_in_list(name), 'Cancelled project appears on the dashboard'
