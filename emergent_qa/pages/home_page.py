import logging
from typing import TYPE_CHECKING

from emergent_qa.actions.locators import by_xpath
from emergent_qa.pages.base_page import BasePage

if TYPE_CHECKING:
    from emergent_qa.pages.forgot_password_page import ForgotPasswordPage
    from emergent_qa.pages.login_page import LoginPage
    from emergent_qa.pages.sign_up_page import SignUpPage


class HomePage(BasePage):
    SIGN_UP_LINK = by_xpath("//a[contains(text(), \"Don't have an account\")]")
    LOGIN_LINK = by_xpath("//a[contains(text(), 'Log in with email')]")
    FORGOT_PASSWORD_LINK = by_xpath("//a[contains(text(), 'Forgot Password')]")

    LOADED_LOCATORS = (SIGN_UP_LINK, LOGIN_LINK)

    def navigate_to_home(self) -> "HomePage":
        logging.info("Navigating to home page")
        self.session.navigate_to_base_url()
        return self

    def click_sign_up(self) -> "SignUpPage":
        from emergent_qa.pages.sign_up_page import SignUpPage

        self._click(self.SIGN_UP_LINK, "sign up link")
        return self._open(SignUpPage)

    def click_login(self) -> "LoginPage":
        from emergent_qa.pages.login_page import LoginPage

        self._click(self.LOGIN_LINK, "login link")
        return self._open(LoginPage)

    def click_forgot_password(self) -> "ForgotPasswordPage":
        from emergent_qa.pages.forgot_password_page import ForgotPasswordPage

        self._click(self.FORGOT_PASSWORD_LINK, "forgot password link")
        return self._open(ForgotPasswordPage)

    def is_login_link_displayed(self) -> bool:
        return self._is_displayed(self.LOGIN_LINK, "login link")
