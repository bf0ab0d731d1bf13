import time

import pytest
from fakes import FakeElement, FakePage, FakeSession

from emergent_qa.actions.action_handler import ElementNotReady
from emergent_qa.pages import (
    DashboardPage,
    DeploymentPage,
    HomePage,
    LoginPage,
    ProjectCreationPage,
    ProjectDetailsPage,
    ProjectSettingsPage,
    SignUpPage,
    TestingPage,
)
from emergent_qa.utils.config import SuiteConfig


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture
def session(page) -> FakeSession:
    return FakeSession(page)


def add_all(page: FakePage, page_cls):
    for locator in page_cls.LOADED_LOCATORS:
        page.add(locator)


class TestLoading:
    def test_is_loaded_when_defining_elements_visible(self, page, session):
        add_all(page, LoginPage)

        assert LoginPage(session).is_loaded() is True

    def test_is_loaded_false_when_element_missing(self, page, session):
        page.add(LoginPage.EMAIL_FIELD)

        assert LoginPage(session).is_loaded() is False

    def test_wait_for_page_to_load_raises(self, session):
        with pytest.raises(ElementNotReady):
            DashboardPage(session).wait_for_page_to_load()

    def test_wait_for_page_to_load_returns_page(self, page, session):
        add_all(page, DashboardPage)
        dashboard = DashboardPage(session)

        assert dashboard.wait_for_page_to_load() is dashboard


def configured(page: FakePage, default_timeout: float) -> FakeSession:
    return FakeSession(page, SuiteConfig(**{'default.timeout': default_timeout}))


class TestTimeouts:
    def test_actions_wait_the_configured_default(self, page):
        page.add(LoginPage.EMAIL_FIELD)

        LoginPage(configured(page, 5)).enter_email('user@example.com')

        assert page.waits[-1] == (LoginPage.EMAIL_FIELD.selector, 'visible', 5000)

    def test_is_loaded_waits_the_configured_default(self, page):
        add_all(page, LoginPage)

        assert LoginPage(configured(page, 7)).is_loaded() is True
        assert {timeout for _, _, timeout in page.waits} == {7000}

    def test_queries_wait_the_configured_default(self, page):
        page.add(LoginPage.ERROR_MESSAGE, FakeElement(text='Invalid email or password'))

        LoginPage(configured(page, 4)).get_error_message()

        assert page.waits[-1][2] == 4000

    def test_explicit_timeout_wins(self, page):
        page.add(ProjectDetailsPage.AI_RESPONSE, FakeElement(text='Done'))

        ProjectDetailsPage(configured(page, 5)).wait_for_ai_response(timeout=2)

        assert page.waits[-1][2] == 2000

    def test_class_load_timeout_wins(self, page):
        class SlowLoginPage(LoginPage):
            LOAD_TIMEOUT = 3

        add_all(page, SlowLoginPage)

        assert SlowLoginPage(configured(page, 5)).is_loaded() is True
        assert {timeout for _, _, timeout in page.waits} == {3000}

    def test_late_field_is_filled_once_it_appears(self, page):
        field = page.add(LoginPage.EMAIL_FIELD, FakeElement(appears_after=0.3))

        start = time.monotonic()
        LoginPage(configured(page, 5)).enter_email('user@example.com')
        elapsed = time.monotonic() - start

        assert 0.2 <= elapsed < 2
        assert field.value == 'user@example.com'

    def test_missing_field_fails_after_the_configured_default(self, page):
        start = time.monotonic()
        with pytest.raises(ElementNotReady) as exc_info:
            LoginPage(configured(page, 0.3)).enter_email('user@example.com')
        elapsed = time.monotonic() - start

        assert 0.3 <= elapsed < 1.5
        assert exc_info.value.timeout == 0.3

    def test_is_loaded_false_within_the_configured_default(self, page):
        start = time.monotonic()

        assert DashboardPage(configured(page, 0.3)).is_loaded() is False
        assert time.monotonic() - start < 1.5


class TestQueries:
    def test_missing_elements_give_empty_values(self, session):
        settings = ProjectSettingsPage(session)
        dashboard = DashboardPage(session)
        testing = TestingPage(session)

        assert settings.get_project_name() == ''
        assert settings.get_error_message() == ''
        assert settings.is_settings_title_displayed() is False
        assert dashboard.get_project_names() == []
        assert dashboard.get_project_count() == 0
        assert testing.get_test_results() == ''
        assert DeploymentPage(session).get_deployment_url() == ''

    def test_hidden_element_is_not_displayed(self, page, session):
        page.add(LoginPage.ERROR_MESSAGE, FakeElement(text='Invalid', visible=False))

        assert LoginPage(session).is_error_message_displayed() is False

    def test_queries_do_not_change_the_page(self, page, session):
        page.add(LoginPage.ERROR_MESSAGE, FakeElement(text='Invalid email or password'))
        login = LoginPage(session)

        first = login.get_error_message()
        second = login.get_error_message()

        assert first == second == 'Invalid email or password'
        assert page.clicked == []
        assert page.typed == []

    def test_project_names_use_first_card_line(self, page, session):
        page.add(
            DashboardPage.PROJECT_CARDS,
            FakeElement(text='Alpha\nCreated today\nOpen'),
            FakeElement(text='\n  Beta  \nOpen'),
        )
        dashboard = DashboardPage(session)

        assert dashboard.get_project_names() == ['Alpha', 'Beta']
        assert dashboard.get_project_count() == 2
        assert dashboard.is_project_in_list('Beta') is True
        assert dashboard.is_project_in_list('Alph') is False

    def test_test_results_one_per_line(self, page, session):
        page.add(TestingPage.TEST_RESULTS, FakeElement(text='first passed'), FakeElement(text='second failed'))

        assert TestingPage(session).get_test_results() == 'first passed\nsecond failed\n'

    def test_settings_fields_read_values(self, page, session):
        page.add(ProjectSettingsPage.PROJECT_NAME_FIELD, FakeElement(value='My Project'))
        page.add(ProjectSettingsPage.PROJECT_DESCRIPTION_FIELD, FakeElement(value='About it'))
        settings = ProjectSettingsPage(session)

        assert settings.get_project_name() == 'My Project'
        assert settings.get_project_description() == 'About it'

    def test_deployment_url_from_href(self, page, session):
        page.add(DeploymentPage.DEPLOYMENT_URL_LINK, FakeElement(attrs={'href': 'https://dev.app.example.com'}))

        assert DeploymentPage(session).get_deployment_url() == 'https://dev.app.example.com'


class TestActions:
    def test_missing_element_raises(self, session):
        with pytest.raises(ElementNotReady):
            LoginPage(session).enter_email('user@example.com')

    def test_disabled_button_raises(self, page, session):
        page.add(LoginPage.LOGIN_BUTTON, FakeElement(enabled=False))

        with pytest.raises(ElementNotReady) as exc_info:
            LoginPage(session).click_login()

        assert exc_info.value.found is True

    def test_field_actions_chain(self, page, session):
        add_all(page, SignUpPage)
        page.add(SignUpPage.TERMS_CHECKBOX)
        sign_up = SignUpPage(session)

        result = sign_up.fill_form('New User', 'new@example.com', 'Password123!', 'Password123!')

        assert result is sign_up
        assert page.typed == [
            (SignUpPage.NAME_FIELD.selector, 'New User'),
            (SignUpPage.EMAIL_FIELD.selector, 'new@example.com'),
            (SignUpPage.PASSWORD_FIELD.selector, 'Password123!'),
            (SignUpPage.CONFIRM_PASSWORD_FIELD.selector, 'Password123!'),
        ]

    def test_check_terms_leaves_ticked_box(self, page, session):
        checkbox = page.add(SignUpPage.TERMS_CHECKBOX)
        checkbox.on_click = lambda: setattr(checkbox, 'checked', not checkbox.checked)
        sign_up = SignUpPage(session)

        sign_up.check_terms().check_terms()

        assert checkbox.checked is True
        assert checkbox.clicks == 1

    def test_login_runs_steps_in_order(self, page, session):
        add_all(page, LoginPage)
        login = LoginPage(session)

        dashboard = login.login('user@example.com', 'secret')

        assert isinstance(dashboard, DashboardPage)
        assert [selector for selector, _ in page.typed] == [
            LoginPage.EMAIL_FIELD.selector,
            LoginPage.PASSWORD_FIELD.selector,
        ]
        assert page.clicked == [LoginPage.LOGIN_BUTTON.selector]

    def test_login_stops_at_failing_step(self, page, session):
        page.add(LoginPage.EMAIL_FIELD)
        page.add(LoginPage.LOGIN_BUTTON)

        with pytest.raises(ElementNotReady):
            LoginPage(session).login('user@example.com', 'secret')

        assert page.clicked == []

    def test_login_expecting_error_waits_for_message(self, page, session):
        add_all(page, LoginPage)
        login = LoginPage(session)

        with pytest.raises(ElementNotReady):
            login.click_login_expecting_error()

        page.add(LoginPage.ERROR_MESSAGE, FakeElement(text='Invalid email or password'))
        assert login.click_login_expecting_error() is login

    def test_create_project_skips_empty_template(self, page, session):
        add_all(page, ProjectCreationPage)

        details = ProjectCreationPage(session).create_project('Demo', 'Description', '')

        assert isinstance(details, ProjectDetailsPage)
        assert page.clicked == [ProjectCreationPage.CREATE_BUTTON.selector]

    def test_create_project_selects_template(self, page, session):
        add_all(page, ProjectCreationPage)
        option = ProjectCreationPage.TEMPLATE_OPTION.format('Web App')
        page.add(option)

        ProjectCreationPage(session).create_project('Demo', 'Description', 'Web App')

        assert page.clicked == [option.selector, ProjectCreationPage.CREATE_BUTTON.selector]

    def test_deploy_selects_environment(self, page, session):
        select = page.add(DeploymentPage.ENVIRONMENT_DROPDOWN)
        page.add(DeploymentPage.DEPLOY_BUTTON)

        deployment = DeploymentPage(session)

        assert deployment.deploy('Staging') is deployment
        assert select.value == 'Staging'

    def test_wait_for_deployment_does_not_raise(self, page, session):
        page.add(DeploymentPage.PROGRESS_INDICATOR)

        deployment = DeploymentPage(session)

        assert deployment.wait_for_deployment_to_complete(timeout=0.1) is deployment

    def test_wait_for_ai_response_raises(self, session):
        with pytest.raises(ElementNotReady):
            ProjectDetailsPage(session).wait_for_ai_response(timeout=0.1)

    def test_wait_for_ai_response_returns_text(self, page, session):
        page.add(ProjectDetailsPage.AI_RESPONSE, FakeElement(text='Here is your app'))

        assert ProjectDetailsPage(session).wait_for_ai_response(timeout=1) == 'Here is your app'

    def test_wait_for_test_results(self, page, session):
        page.add(TestingPage.TEST_RESULTS, FakeElement(text='one'))
        testing = TestingPage(session)

        assert testing.wait_for_test_results(1, timeout=1) == 1
        with pytest.raises(ElementNotReady) as exc_info:
            testing.wait_for_test_results(2, timeout=0.2)
        assert exc_info.value.found is True


class TestNavigation:
    def test_links_return_target_pages(self, page, session):
        page.add(HomePage.LOGIN_LINK)
        page.add(HomePage.SIGN_UP_LINK)
        page.add(ProjectDetailsPage.DEPLOY_BUTTON)
        page.add(ProjectDetailsPage.TEST_BUTTON)
        page.add(ProjectDetailsPage.SETTINGS_BUTTON)
        home = HomePage(session)
        details = ProjectDetailsPage(session)

        assert isinstance(home.click_login(), LoginPage)
        assert isinstance(home.click_sign_up(), SignUpPage)
        assert isinstance(details.click_deploy(), DeploymentPage)
        assert isinstance(details.click_test(), TestingPage)
        assert isinstance(details.click_settings(), ProjectSettingsPage)

    def test_logout_opens_profile_menu_first(self, page, session):
        page.add(DashboardPage.USER_PROFILE_MENU)
        page.add(DashboardPage.LOGOUT_OPTION)

        home = DashboardPage(session).logout()

        assert isinstance(home, HomePage)
        assert page.clicked == [DashboardPage.USER_PROFILE_MENU.selector, DashboardPage.LOGOUT_OPTION.selector]

    def test_delete_project_confirms(self, page, session):
        page.add(ProjectSettingsPage.DELETE_PROJECT_BUTTON)
        page.add(ProjectSettingsPage.CONFIRM_DELETE_BUTTON)

        dashboard = ProjectSettingsPage(session).delete_project()

        assert isinstance(dashboard, DashboardPage)
        assert page.clicked == [
            ProjectSettingsPage.DELETE_PROJECT_BUTTON.selector,
            ProjectSettingsPage.CONFIRM_DELETE_BUTTON.selector,
        ]

    def test_open_project_targets_named_card(self, page, session):
        button = DashboardPage.OPEN_PROJECT_BUTTON.format('Alpha')
        page.add(button)

        assert isinstance(DashboardPage(session).open_project('Alpha'), ProjectDetailsPage)
        assert page.clicked == [button.selector]

    def test_navigate_to_joins_base_url(self, page, session):
        LoginPage(session).navigate_to_login()
        DashboardPage(session).navigate_to_dashboard()

        assert page.visited == ['https://emergent.sh/login', 'https://emergent.sh/dashboard']

    def test_home_goes_to_base_url(self, page, session):
        HomePage(session).navigate_to_home()

        assert page.visited == ['https://emergent.sh']
