import logging
from typing import TYPE_CHECKING

from emergent_qa.actions.action_handler import Readiness
from emergent_qa.actions.locators import by_id, by_xpath
from emergent_qa.data.constants import LOGIN_PATH
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.dashboard_page import DashboardPage
    from emergent_qa.pages.forgot_password_page import ForgotPasswordPage
    from emergent_qa.pages.sign_up_page import SignUpPage


class LoginPage(BasePage):
    EMAIL_FIELD = by_id("email")
    PASSWORD_FIELD = by_id("password")
    LOGIN_BUTTON = by_xpath("//button[contains(text(), 'Log in')]")
    ERROR_MESSAGE = by_xpath("//div[contains(@class, 'error-message')]")
    SIGN_UP_LINK = by_xpath("//a[contains(text(), 'Sign up')]")
    FORGOT_PASSWORD_LINK = by_xpath("//a[contains(text(), 'Forgot Password')]")

    LOADED_LOCATORS = (EMAIL_FIELD, PASSWORD_FIELD, LOGIN_BUTTON)

    def navigate_to_login(self) -> "LoginPage":
        self.navigate_to(LOGIN_PATH)
        return self

    def enter_email(self, email: str) -> "LoginPage":
        logging.info(f"Login email: {email}")
        self._type(self.EMAIL_FIELD, email, "email")
        return self

    def enter_password(self, password: str) -> "LoginPage":
        self._type(self.PASSWORD_FIELD, password, "password")
        return self

    def click_login(self) -> "DashboardPage":
        from emergent_qa.pages.dashboard_page import DashboardPage

        self._click(self.LOGIN_BUTTON, "login button")
        return self._open(DashboardPage)

    def click_login_expecting_error(self) -> "LoginPage":
        """Submit the form and wait for the validation error.

        Raises:
            ElementNotReady: no error message appeared
        """
        self._click(self.LOGIN_BUTTON, "login button")
        self._wait(self.ERROR_MESSAGE, Readiness.VISIBLE)
        return self

    def login(self, email: str, password: str) -> "DashboardPage":
        logging.info(f"Logging in with email: {email}")
        return self.enter_email(email).enter_password(password).click_login()

    def get_error_message(self) -> str:
        return self._read_text(self.ERROR_MESSAGE, "error message")

    def is_error_message_displayed(self) -> bool:
        return self._is_displayed(self.ERROR_MESSAGE, "error message")

    def click_sign_up(self) -> "SignUpPage":
        from emergent_qa.pages.sign_up_page import SignUpPage

        self._click(self.SIGN_UP_LINK, "sign up link")
        return self._open(SignUpPage)

    def click_forgot_password(self) -> "ForgotPasswordPage":
        from emergent_qa.pages.forgot_password_page import ForgotPasswordPage

        self._click(self.FORGOT_PASSWORD_LINK, "forgot password link")
        return self._open(ForgotPasswordPage)
