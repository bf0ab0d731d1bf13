from .driver import Driver
from .session import BrowserSession, SessionError, SessionState

__all__ = ["Driver", "BrowserSession", "SessionError", "SessionState"]
