import logging
from typing import TYPE_CHECKING

from emergent_qa.actions.action_handler import Readiness
from emergent_qa.actions.locators import by_id, by_xpath
from emergent_qa.data.constants import SIGNUP_PATH
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.dashboard_page import DashboardPage
    from emergent_qa.pages.login_page import LoginPage


class SignUpPage(BasePage):
    NAME_FIELD = by_id("name")
    EMAIL_FIELD = by_id("email")
    PASSWORD_FIELD = by_id("password")
    CONFIRM_PASSWORD_FIELD = by_id("confirmPassword")
    SIGN_UP_BUTTON = by_xpath("//button[contains(text(), 'Sign up')]")
    ERROR_MESSAGE = by_xpath("//div[contains(@class, 'error-message')]")
    LOGIN_LINK = by_xpath("//a[contains(text(), 'Log in')]")
    TERMS_CHECKBOX = by_xpath("//input[@type='checkbox']")

    LOADED_LOCATORS = (NAME_FIELD, EMAIL_FIELD, PASSWORD_FIELD, CONFIRM_PASSWORD_FIELD, SIGN_UP_BUTTON)

    def navigate_to_sign_up(self) -> "SignUpPage":
        self.navigate_to(SIGNUP_PATH)
        return self

    def enter_name(self, name: str) -> "SignUpPage":
        self._type(self.NAME_FIELD, name, "name")
        return self

    def enter_email(self, email: str) -> "SignUpPage":
        logging.info(f"Sign up email: {email}")
        self._type(self.EMAIL_FIELD, email, "email")
        return self

    def enter_password(self, password: str) -> "SignUpPage":
        self._type(self.PASSWORD_FIELD, password, "password")
        return self

    def enter_confirm_password(self, password: str) -> "SignUpPage":
        self._type(self.CONFIRM_PASSWORD_FIELD, password, "confirm password")
        return self

    def check_terms(self) -> "SignUpPage":
        """Tick the terms checkbox; a ticked box is left as it is."""
        self._check(self.TERMS_CHECKBOX, "terms checkbox")
        return self

    def click_sign_up(self) -> "DashboardPage":
        from emergent_qa.pages.dashboard_page import DashboardPage

        self._click(self.SIGN_UP_BUTTON, "sign up button")
        return self._open(DashboardPage)

    def click_sign_up_expecting_error(self) -> "SignUpPage":
        """Submit the form and wait for the validation error.

        Raises:
            ElementNotReady: no error message appeared
        """
        self._click(self.SIGN_UP_BUTTON, "sign up button")
        self._wait(self.ERROR_MESSAGE, Readiness.VISIBLE)
        return self

    def fill_form(self, name: str, email: str, password: str, confirm_password: str) -> "SignUpPage":
        return (
            self.enter_name(name)
            .enter_email(email)
            .enter_password(password)
            .enter_confirm_password(confirm_password)
            .check_terms()
        )

    def sign_up(self, name: str, email: str, password: str, confirm_password: str) -> "DashboardPage":
        logging.info(f"Signing up with email: {email}")
        return self.fill_form(name, email, password, confirm_password).click_sign_up()

    def get_error_message(self) -> str:
        return self._read_text(self.ERROR_MESSAGE, "error message")

    def is_error_message_displayed(self) -> bool:
        return self._is_displayed(self.ERROR_MESSAGE, "error message")

    def click_login(self) -> "LoginPage":
        from emergent_qa.pages.login_page import LoginPage

        self._click(self.LOGIN_LINK, "login link")
        return self._open(LoginPage)
