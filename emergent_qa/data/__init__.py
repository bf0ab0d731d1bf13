from .test_structures import LogRecord, ScenarioEntry, ScenarioOutcome, TestStatus

__all__ = ["TestStatus", "ScenarioOutcome", "ScenarioEntry", "LogRecord"]
