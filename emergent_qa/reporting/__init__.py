from .listener import ReportingListener, ScreenshotSource

__all__ = ["ReportingListener", "ScreenshotSource"]
