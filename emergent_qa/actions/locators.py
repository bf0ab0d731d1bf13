from dataclasses import dataclass
from enum import Enum


class By(str, Enum):
    """Locator strategies understood by the Playwright selector engine."""

    ID = "id"
    CSS = "css"
    XPATH = "xpath"
    TEXT = "text"
    PLACEHOLDER = "placeholder"


def xpath_literal(value: str) -> str:
    """Quote ``value`` as an XPath string literal.

    XPath 1.0 has no escape sequences, so a value holding both quote kinds
    is assembled with ``concat()``.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


@dataclass(frozen=True)
class Locator:
    strategy: By
    value: str

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        if self.strategy is By.ID:
            return f"#{self.value}"
        if self.strategy is By.PLACEHOLDER:
            return f'[placeholder="{self.value}"]'
        return f"{self.strategy.value}={self.value}"

    def format(self, *args: str) -> "Locator":
        """Fill the ``%s`` placeholders of a parameterised locator.

        For XPath locators the placeholders stand for complete string
        literals, so callers write ``contains(., %s)`` without quotes.
        """
        if self.strategy is By.XPATH:
            args = tuple(xpath_literal(str(arg)) for arg in args)
        return Locator(self.strategy, self.value % args)

    def __str__(self):
        return f"{self.strategy.value}: {self.value}"


def by_id(value: str) -> Locator:
    return Locator(By.ID, value)


def by_css(value: str) -> Locator:
    return Locator(By.CSS, value)


def by_xpath(value: str) -> Locator:
    return Locator(By.XPATH, value)


def by_text(value: str) -> Locator:
    return Locator(By.TEXT, value)


def by_placeholder(value: str) -> Locator:
    return Locator(By.PLACEHOLDER, value)
