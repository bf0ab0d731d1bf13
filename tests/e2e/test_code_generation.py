import pytest
from scenario_base import ScenarioBase, excerpt

from emergent_qa.data import providers

pytestmark = [pytest.mark.e2e, pytest.mark.codegen]


class TestCodeGeneration(ScenarioBase):
    reset_cookies = True

    @pytest.fixture(autouse=True)
    def _project(self, _scenario_setup):
        self.details_page = self.create_project()

    def _generate(self, prompt: str, timeout: float) -> str:
        """Send ``prompt`` and return the code preview once the response is in."""
        self.details_page.send_prompt(prompt)
        response = self.details_page.wait_for_ai_response(timeout)
        self.log_step(f'AI response received: {excerpt(response)}')

        assert response, 'AI response is empty'
        assert self.details_page.is_code_preview_displayed(), 'Code preview is not displayed after AI response'
        return self.details_page.get_code_preview()

    def test_generate_simple_web_application(self):
        code = self._generate(
            'Create a simple HTML page with a header, navigation menu, and a contact form', self.config.default_timeout
        )

        assert '<html' in code and '<header' in code and '<form' in code, (
            'Generated code does not contain required HTML elements'
        )

    def test_generate_react_application(self):
        code = self._generate(
            'Create a React application with a navigation bar and a product listing page',
            self.config.default_timeout * 2,
        )

        assert any(marker in code for marker in ('import React', "from 'react'", 'useState', 'useEffect')), (
            'Generated code does not contain React-specific elements'
        )

    def test_generate_backend_api(self):
        code = self._generate(
            'Create a Node.js Express API with endpoints for user authentication and product management',
            self.config.default_timeout * 2,
        )

        assert 'express' in code, 'Generated code does not use Express'
        assert any(route in code for route in ('app.get', 'app.post', 'router.get', 'router.post')), (
            'Generated code does not contain Express API endpoints'
        )

    def test_generate_database_schema(self):
        code = self._generate(
            'Create a SQL database schema for an e-commerce application with tables for users, products, '
            'orders, and reviews',
            self.config.default_timeout,
        )

        assert 'CREATE TABLE' in code and 'PRIMARY KEY' in code, 'Generated code does not contain SQL schema elements'
        lowered = code.lower()
        assert all(table in lowered for table in ('users', 'products', 'orders')), (
            'Generated schema does not include all requested tables'
        )

    @pytest.mark.parametrize('row', providers.code_generation_technologies(), ids=lambda row: row.technology)
    def test_generate_code_with_specific_technology(self, row: providers.TechnologyRow):
        code = self._generate(row.prompt, self.config.default_timeout * 2).lower()

        assert any(keyword.lower() in code for keyword in row.expected_keywords), (
            f'Generated code does not contain any of the expected keywords for {row.technology}'
        )
