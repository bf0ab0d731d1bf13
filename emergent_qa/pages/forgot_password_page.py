from typing import TYPE_CHECKING

from emergent_qa.actions.locators import by_id, by_xpath
from emergent_qa.data.constants import FORGOT_PASSWORD_PATH
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.login_page import LoginPage


class ForgotPasswordPage(BasePage):
    EMAIL_FIELD = by_id("email")
    RESET_PASSWORD_BUTTON = by_xpath("//button[contains(text(), 'Reset Password')]")
    SUCCESS_MESSAGE = by_xpath("//div[contains(@class, 'success-message')]")
    ERROR_MESSAGE = by_xpath("//div[contains(@class, 'error-message')]")
    BACK_TO_LOGIN_LINK = by_xpath("//a[contains(text(), 'Back to Login')]")
    TITLE = by_xpath("//h1[contains(text(), 'Forgot Password')]")

    LOADED_LOCATORS = (TITLE, EMAIL_FIELD, RESET_PASSWORD_BUTTON)

    def navigate_to_forgot_password(self) -> "ForgotPasswordPage":
        self.navigate_to(FORGOT_PASSWORD_PATH)
        return self

    def enter_email(self, email: str) -> "ForgotPasswordPage":
        self._type(self.EMAIL_FIELD, email, "email")
        return self

    def click_reset_password(self) -> "ForgotPasswordPage":
        self._click(self.RESET_PASSWORD_BUTTON, "reset password button")
        return self

    def reset_password(self, email: str) -> "ForgotPasswordPage":
        return self.enter_email(email).click_reset_password()

    def get_success_message(self) -> str:
        return self._read_text(self.SUCCESS_MESSAGE, "success message")

    def is_success_message_displayed(self) -> bool:
        return self._is_displayed(self.SUCCESS_MESSAGE, "success message")

    def get_error_message(self) -> str:
        return self._read_text(self.ERROR_MESSAGE, "error message")

    def click_back_to_login(self) -> "LoginPage":
        from emergent_qa.pages.login_page import LoginPage

        self._click(self.BACK_TO_LOGIN_LINK, "back to login link")
        return self._open(LoginPage)
