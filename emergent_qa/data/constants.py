# Timeouts, in seconds
AI_RESPONSE_TIMEOUT = 30
DEPLOYMENT_TIMEOUT = 120
TEST_RUN_TIMEOUT = 60

LOGIN_PATH = "/login"
SIGNUP_PATH = "/signup"
DASHBOARD_PATH = "/dashboard"
FORGOT_PASSWORD_PATH = "/forgot-password"

TEST_USERNAME = "test@example.com"
TEST_PASSWORD = "Password123!"

# Project templates
TEMPLATE_WEB_APP = "Web Application"
TEMPLATE_MOBILE_APP = "Mobile Application"
TEMPLATE_API = "API"
TEMPLATE_DATABASE = "Database"
PROJECT_TEMPLATES = (TEMPLATE_WEB_APP, TEMPLATE_MOBILE_APP, TEMPLATE_API, TEMPLATE_DATABASE)

# Error messages
ERROR_PASSWORD_MISMATCH = "Passwords do not match"
ERROR_EMPTY_PROJECT_NAME = "Project name is required"
ERROR_DUPLICATE_PROJECT = "A project with this name already exists"
ERROR_EMPTY_PROMPT = "Prompt cannot be empty"

# Success message
SUCCESS_PASSWORD_RESET = "Password reset email sent"

# Prompts
PROMPT_SIMPLE_WEB_APP = "Create a simple web application with HTML, CSS, and JavaScript"
PROMPT_REACT_APP = "Create a React application with a login form and dashboard"
PROMPT_BACKEND_API = "Create a RESTful API with Node.js and Express"
PROMPT_DATABASE_SCHEMA = "Create a database schema for an e-commerce application"

TEST_CASE_TEMPLATE = "Create a test case for the login functionality"

# Deployment environments
ENV_DEVELOPMENT = "Development"
ENV_STAGING = "Staging"

# Browser names
BROWSER_CHROME = "chrome"
BROWSER_FIREFOX = "firefox"
BROWSER_EDGE = "edge"
