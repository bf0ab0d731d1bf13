import pytest

pytest_plugins = ['emergent_qa.reporting.plugin', 'pytester']


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        '--url',
        action='store',
        default=None,
        help='Application root URL for e2e scenarios (overrides base.url)',
    )
