from .action_handler import ActionHandler, Element, ElementNotReady, Readiness
from .locators import By, Locator

__all__ = ["ActionHandler", "Element", "ElementNotReady", "Readiness", "By", "Locator"]
