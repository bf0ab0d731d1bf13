import logging
import threading

from playwright.sync_api import sync_playwright

from emergent_qa.browser.config import BROWSER_TYPES, CHROMIUM_ARGS


class Driver:
    # Lock used to ensure thread-safety when multiple workers create Driver instances concurrently
    __lock = threading.Lock()

    @staticmethod
    def getInstance(browser_config, *args, **kwargs):
        """Creates a new Driver with a launched browser.

        Args:
            browser_config (dict): Browser configuration options.
        """
        logging.info(f"Driver.getInstance called with browser_config: {browser_config}")

        with Driver.__lock:
            driver = Driver(browser_config=browser_config)
            driver.create_browser(browser_config=browser_config)
            return driver

    def __init__(self, browser_config=None, *args, **kwargs):
        self._is_closed = False
        self.page = None
        self.browser = None
        self.context = None
        self.playwright = None
        self.config = browser_config

    def is_closed(self):
        """Check if the browser instance is closed."""
        return getattr(self, "_is_closed", True)

    @staticmethod
    def resolve_browser(name):
        """Map a configured browser name onto a Playwright browser type.

        Unknown names fall back to Chrome.

        Returns:
            tuple: (browser name, Playwright browser type, launch channel)
        """
        key = (name or "").strip().lower()
        if key not in BROWSER_TYPES:
            logging.warning(f"Unsupported browser '{name}', falling back to chrome")
            key = "chrome"
        browser_type, channel = BROWSER_TYPES[key]
        return key, browser_type, channel

    def create_browser(self, browser_config):
        """Creates a new browser instance and sets up the page.

        Args:
            browser_config (dict): Browser configuration containing:
                - browser (str): chrome, edge, firefox or safari
                - headless (bool): Whether to run browser in headless mode
                - viewport (dict): width and height of the browser viewport
                - language (str): Browser locale

        Returns:
            Page: The page of the new browser context.
        """
        try:
            name, browser_type, channel = self.resolve_browser(browser_config.get("browser"))
            width = browser_config["viewport"]["width"]
            height = browser_config["viewport"]["height"]

            headless = browser_config["headless"]
            if name == "safari" and headless:
                logging.info("Safari has no headless mode, launching headed")
                headless = False

            launch_options = {"headless": headless}
            if browser_type == "chromium":
                launch_options["args"] = CHROMIUM_ARGS + [f"--window-size={width},{height}"]
            if channel:
                launch_options["channel"] = channel

            self.playwright = sync_playwright().start()
            self.browser = getattr(self.playwright, browser_type).launch(**launch_options)

            self.context = self.browser.new_context(
                viewport={"width": width, "height": height},
                ignore_https_errors=True,
                locale=browser_config.get("language"),
            )
            self.page = self.context.new_page()
            self.config = {**browser_config, "browser": name}

            logging.debug(f"Browser instance created successfully with config: {self.config}")
            return self.page

        except Exception as e:
            logging.error("Failed to create browser instance.", exc_info=True)
            if self.playwright is not None:
                self.playwright.stop()
                self.playwright = None
            raise e

    def get_context(self):
        return self.context

    def get_page(self):
        """Returns the current page instance.

        Returns:
            Page: The current page instance.
        """
        return self.page

    def close_browser(self):
        """Closes the browser instance and stops Playwright."""
        try:
            if not self.is_closed():
                self.browser.close()
                self.playwright.stop()
                self._is_closed = True
                logging.info("Browser instance closed successfully.")
        except Exception as e:
            logging.error("Failed to close browser instance.", exc_info=True)
            raise e
