import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "EMERGENT_"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class SuiteConfig(BaseModel):
    """Run configuration, read from flat dotted keys (``base.url``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    base_url: str = Field("https://emergent.sh", alias="base.url")
    browser: str = Field("chrome", alias="browser")
    headless: bool = Field(False, alias="headless")
    default_timeout: float = Field(30, ge=0, alias="default.timeout")
    implicit_wait: float = Field(10, ge=0, alias="implicit.wait")
    page_load_timeout: float = Field(60, ge=0, alias="page.load.timeout")
    script_timeout: float = Field(30, ge=0, alias="script.timeout")
    window_width: int = Field(1920, gt=0, alias="window.width")
    window_height: int = Field(1080, gt=0, alias="window.height")
    test_username: str = Field("test@example.com", alias="test.username")
    test_password: str = Field("Password123!", alias="test.password")
    screenshot_path: str = Field("target/screenshots", alias="screenshot.path")
    report_path: str = Field("target/reports", alias="report.path")
    report_name: str = Field("Emergent.sh Test Automation Report", alias="report.name")
    take_screenshot_on_failure: bool = Field(True, alias="take.screenshot.on.failure")
    reset_cookies_after_scenario: bool = Field(False, alias="reset.cookies.after.scenario")
    log_level: str = Field("info", alias="log.level")
    log_path: str = Field("logs", alias="log.path")


def env_name(key: str) -> str:
    """``base.url`` -> ``EMERGENT_BASE_URL``"""
    return ENV_PREFIX + key.upper().replace(".", "_")


def find_config_file(args_config=None):
    """Find the configuration file.

    An explicit path must exist. Otherwise the default locations are tried
    in order and ``None`` is returned when none of them holds a file.
    """
    if args_config:
        if os.path.isfile(args_config):
            logging.info(f"Using specified config file: {args_config}")
            return args_config
        raise FileNotFoundError(f"Specified config file not found: {args_config}")

    current_dir = os.getcwd()
    default_paths = [
        os.path.join(current_dir, "config", "config.yaml"),  # config in current directory
        os.path.join(PROJECT_ROOT, "config", "config.yaml"),  # config in project root
        os.path.join(current_dir, "config.yaml"),  # compatible location in current directory
    ]
    for path in default_paths:
        if os.path.isfile(path):
            logging.info(f"Auto-discovered config file: {path}")
            return path

    logging.info("No config file found, using built-in defaults")
    return None


def _flatten(data: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def load_yaml(path) -> Dict[str, Any]:
    """Read a YAML config file into a flat mapping of dotted keys."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Config file {path} must hold a mapping, got {type(data).__name__}")
    return _flatten(data)


def load_config(path: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> SuiteConfig:
    """Build the run configuration.

    Precedence, lowest first: built-in defaults, the YAML file, environment
    variables (``.env`` included), then ``overrides``.

    Raises:
        FileNotFoundError: an explicit ``path`` does not exist
        pydantic.ValidationError: a value is malformed or out of range
    """
    load_dotenv()

    config_file = find_config_file(path)
    values = load_yaml(config_file) if config_file else {}

    for field in SuiteConfig.model_fields.values():
        env_value = os.getenv(env_name(field.alias))
        if env_value is not None:
            values[field.alias] = env_value

    for key, value in (overrides or {}).items():
        if value is not None:
            field = SuiteConfig.model_fields.get(key)
            values[field.alias if field else key] = value

    config = SuiteConfig.model_validate(values)
    logging.debug(f"Loaded configuration: {config.model_dump(by_alias=True)}")
    return config
