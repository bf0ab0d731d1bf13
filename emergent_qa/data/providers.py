"""Tabular scenario inputs.

Every provider returns the same tuple of immutable rows on each call; the
rows are built once at import time. Single-column providers return plain
strings.
"""

from typing import NamedTuple, Tuple

from emergent_qa.data import constants as c


class LoginRow(NamedTuple):
    email: str
    password: str
    expected_success: bool


class SignUpRow(NamedTuple):
    name: str
    email: str
    password: str
    confirm_password: str
    expected_success: bool


class ProjectRow(NamedTuple):
    name: str
    description: str
    template: str
    expected_success: bool


class PromptRow(NamedTuple):
    prompt: str
    expected_keyword: str


class TechnologyRow(NamedTuple):
    technology: str
    prompt: str
    expected_keywords: Tuple[str, ...]


class DeploymentRow(NamedTuple):
    environment: str
    url_fragment: str


class ProjectUpdateRow(NamedTuple):
    original_name: str
    new_name: str
    original_description: str
    new_description: str
    expected_success: bool


_LOGIN_CREDENTIALS = (
    LoginRow(c.TEST_USERNAME, c.TEST_PASSWORD, True),
    LoginRow("invalid@example.com", c.TEST_PASSWORD, False),
    LoginRow(c.TEST_USERNAME, "wrongpassword", False),
    LoginRow("", c.TEST_PASSWORD, False),
    LoginRow(c.TEST_USERNAME, "", False),
    LoginRow("notanemail", c.TEST_PASSWORD, False),
)

_SIGNUP_CREDENTIALS = (
    SignUpRow("New User", "newuser@example.com", "Password123!", "Password123!", True),
    SignUpRow("", "newuser@example.com", "Password123!", "Password123!", False),
    SignUpRow("New User", "", "Password123!", "Password123!", False),
    SignUpRow("New User", "newuser@example.com", "", "Password123!", False),
    SignUpRow("New User", "newuser@example.com", "Password123!", "", False),
    SignUpRow("New User", "newuser@example.com", "Password123!", "DifferentPass!", False),
    SignUpRow("New User", "notanemail", "Password123!", "Password123!", False),
    SignUpRow("New User", "newuser@example.com", "short", "short", False),
)

_PROJECT_DATA = (
    ProjectRow("Test Project", "A test project description", c.TEMPLATE_WEB_APP, True),
    ProjectRow("", "A test project description", c.TEMPLATE_WEB_APP, False),
    # An empty description is accepted
    ProjectRow("Test Project", "", c.TEMPLATE_WEB_APP, True),
    ProjectRow("Test Project", "A test project description", c.TEMPLATE_API, True),
    ProjectRow("Test Project", "A test project description", c.TEMPLATE_DATABASE, True),
    ProjectRow("Duplicate Project", "This project name already exists", c.TEMPLATE_WEB_APP, False),
)

_PROMPT_DATA = (
    PromptRow(c.PROMPT_SIMPLE_WEB_APP, "HTML"),
    PromptRow(c.PROMPT_REACT_APP, "React"),
    PromptRow(c.PROMPT_BACKEND_API, "Express"),
    PromptRow(c.PROMPT_DATABASE_SCHEMA, "schema"),
)

_PROMPT_TEMPLATES = tuple(row.prompt for row in _PROMPT_DATA)

_CODE_GENERATION_TECHNOLOGIES = (
    TechnologyRow(
        "Vue.js",
        "Create a Vue.js component that renders a todo list with add and remove buttons",
        ("vue", "v-for", "v-model", "<template"),
    ),
    TechnologyRow(
        "Python Flask",
        "Create a Python Flask application with a health check endpoint",
        ("flask", "@app.route", "def "),
    ),
    TechnologyRow(
        "TypeScript",
        "Create a TypeScript module with an interface for a user and a function that validates it",
        ("interface", ": string", "export"),
    ),
    TechnologyRow(
        "Tailwind CSS",
        "Create a landing page styled with Tailwind CSS utility classes",
        ("tailwind", "class=\"", "className="),
    ),
)

_DEPLOYMENT_ENVIRONMENTS = (
    DeploymentRow(c.ENV_DEVELOPMENT, "dev"),
    DeploymentRow(c.ENV_STAGING, "staging"),
)

_PROJECT_UPDATE_DATA = (
    ProjectUpdateRow("Test Project", "Updated Project", "Original description", "Updated description", True),
    ProjectUpdateRow("Test Project", "", "Original description", "Updated description", False),
    ProjectUpdateRow("Test Project", "Updated Project", "Original description", "", True),
)

_TEST_CASE_TEMPLATES = (
    c.TEST_CASE_TEMPLATE,
    "Test that the hello world function returns the correct string",
    "Test that the hello world function handles being called twice",
)

# Safari needs extra setup outside macOS
_BROWSERS = (c.BROWSER_CHROME, c.BROWSER_FIREFOX, c.BROWSER_EDGE)


def login_credentials() -> Tuple[LoginRow, ...]:
    return _LOGIN_CREDENTIALS


def signup_credentials() -> Tuple[SignUpRow, ...]:
    return _SIGNUP_CREDENTIALS


def project_data() -> Tuple[ProjectRow, ...]:
    return _PROJECT_DATA


def project_templates() -> Tuple[str, ...]:
    return c.PROJECT_TEMPLATES


def prompt_data() -> Tuple[PromptRow, ...]:
    return _PROMPT_DATA


def prompt_templates() -> Tuple[str, ...]:
    return _PROMPT_TEMPLATES


def code_generation_technologies() -> Tuple[TechnologyRow, ...]:
    return _CODE_GENERATION_TECHNOLOGIES


def deployment_environments() -> Tuple[DeploymentRow, ...]:
    return _DEPLOYMENT_ENVIRONMENTS


def project_update_data() -> Tuple[ProjectUpdateRow, ...]:
    return _PROJECT_UPDATE_DATA


def test_case_templates() -> Tuple[str, ...]:
    return _TEST_CASE_TEMPLATES


# Keep pytest from collecting this when imported into a test module
test_case_templates.__test__ = False


def browsers() -> Tuple[str, ...]:
    return _BROWSERS
