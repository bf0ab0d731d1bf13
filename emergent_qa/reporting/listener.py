import logging
import os
import platform
import re
import threading
from datetime import datetime
from typing import List, Optional, Protocol

from jinja2 import Environment, FileSystemLoader, select_autoescape

from emergent_qa.data.test_structures import ScenarioEntry, ScenarioOutcome, TestStatus
from emergent_qa.utils.config import SuiteConfig

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
REPORT_TEMPLATE = "report.html"
DOCUMENT_TITLE = "Emergent.sh Test Results"


class ScreenshotSource(Protocol):
    def capture_screenshot(self, name: str, directory: str = None) -> str: ...


def _file_safe(name: str) -> str:
    return re.sub(r"[^\w.-]+", "_", name).strip("_") or "scenario"


class ReportingListener:
    """Process-wide collector of scenario results.

    Scenario hooks pass their ``ScenarioEntry`` explicitly, so concurrent
    scenarios never share state through the listener.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls, config: Optional[SuiteConfig] = None) -> "ReportingListener":
        """Return the shared listener, creating it on first use.

        ``config`` is only read by the call that creates the instance.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(config or SuiteConfig())
                    logging.info("Reporting listener initialized")
        return cls._instance

    @classmethod
    def has_instance(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset_instance(cls):
        with cls._lock:
            cls._instance = None

    def __init__(self, config: SuiteConfig):
        self.config = config
        self.entries: List[ScenarioEntry] = []
        self.started_at = datetime.now()
        self._entries_lock = threading.Lock()
        self._flush_lock = threading.Lock()
        self._report_path: Optional[str] = None

    def start_scenario(self, name: str, description: str = "") -> ScenarioEntry:
        entry = ScenarioEntry(name=name, description=description)
        with self._entries_lock:
            self.entries.append(entry)
        logging.info(f"Scenario started: {name}")
        return entry

    def on_pass(self, entry: ScenarioEntry):
        entry.finish(ScenarioOutcome(status=TestStatus.PASSED))
        logging.info(f"Scenario passed: {entry.name}")

    def on_fail(self, entry: ScenarioEntry, detail: str, screenshot_source: Optional[ScreenshotSource] = None):
        """Record a failure, attaching a screenshot when one can be taken.

        A screenshot that cannot be captured is logged and the failure is
        recorded without it.
        """
        if entry.finished:
            raise ValueError(f"Scenario '{entry.name}' already finished as {entry.outcome.status.value}")

        screenshot_path = None
        if screenshot_source is not None and self.config.take_screenshot_on_failure:
            try:
                screenshot_path = screenshot_source.capture_screenshot(
                    _file_safe(entry.name), self.config.screenshot_path
                )
            except Exception as e:
                logging.warning(f"Failed to capture screenshot for {entry.name}: {e}")

        entry.finish(ScenarioOutcome(status=TestStatus.FAILED, detail=detail, screenshot_path=screenshot_path))
        logging.error(f"Scenario failed: {entry.name}")

    def on_skip(self, entry: ScenarioEntry, reason: str = ""):
        entry.finish(ScenarioOutcome(status=TestStatus.SKIPPED, detail=reason))
        logging.info(f"Scenario skipped: {entry.name} {reason}".rstrip())

    def log_info(self, entry: ScenarioEntry, message: str):
        entry.add_log("INFO", message)
        logging.info(message)

    def log_warning(self, entry: ScenarioEntry, message: str):
        entry.add_log("WARNING", message)
        logging.warning(message)

    def log_error(self, entry: ScenarioEntry, message: str):
        entry.add_log("ERROR", message)
        logging.error(message)

    def summary(self) -> dict:
        with self._entries_lock:
            entries = list(self.entries)
        counts = {status.value: 0 for status in TestStatus}
        for entry in entries:
            if entry.outcome is not None:
                counts[entry.outcome.status.value] += 1
        counts["total"] = len(entries)
        return counts

    def system_info(self) -> dict:
        return {
            "OS": platform.platform(),
            "Browser": self.config.browser,
            "Environment": self.config.base_url,
            "User": os.getenv("USER") or os.getenv("USERNAME") or "unknown",
            "Python": platform.python_version(),
        }

    def flush(self) -> str:
        """Write the HTML report.

        The report is written once; later calls return the same path.

        Returns:
            str: absolute path of the report
        """
        with self._flush_lock:
            if self._report_path is not None:
                return self._report_path

            with self._entries_lock:
                entries = list(self.entries)

            env = Environment(loader=FileSystemLoader(TEMPLATE_DIR), autoescape=select_autoescape(["html"]))
            report_dir = os.path.abspath(self.config.report_path)
            # Screenshot links are relative to the report file
            env.filters["relpath"] = lambda path: os.path.relpath(os.path.abspath(path), report_dir)
            html = env.get_template(REPORT_TEMPLATE).render(
                title=DOCUMENT_TITLE,
                report_name=self.config.report_name,
                generated_at=datetime.now(),
                started_at=self.started_at,
                system_info=self.system_info(),
                summary=self.summary(),
                entries=entries,
            )

            os.makedirs(self.config.report_path, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            report_path = os.path.abspath(os.path.join(self.config.report_path, f"TestReport_{timestamp}.html"))
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(html)

            self._report_path = report_path
            logging.info(f"HTML report generated: {report_path}")
            return report_path
