from .base_page import BasePage
from .dashboard_page import DashboardPage
from .deployment_page import DeploymentPage
from .forgot_password_page import ForgotPasswordPage
from .home_page import HomePage
from .login_page import LoginPage
from .project_creation_page import ProjectCreationPage
from .project_details_page import ProjectDetailsPage
from .project_settings_page import ProjectSettingsPage
from .sign_up_page import SignUpPage
from .testing_page import TestingPage

__all__ = [
    "BasePage",
    "HomePage",
    "LoginPage",
    "SignUpPage",
    "ForgotPasswordPage",
    "DashboardPage",
    "ProjectCreationPage",
    "ProjectDetailsPage",
    "DeploymentPage",
    "ProjectSettingsPage",
    "TestingPage",
]
