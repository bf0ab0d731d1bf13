DEFAULT_CONFIG = {
    "browser": "chrome",
    "headless": False,
    "viewport": {"width": 1920, "height": 1080},
    "language": "en-US",
}

# Browser name -> (Playwright browser type, launch channel)
BROWSER_TYPES = {
    "chrome": ("chromium", None),
    "edge": ("chromium", "msedge"),
    "firefox": ("firefox", None),
    "safari": ("webkit", None),
}

CHROMIUM_ARGS = [
    "--ignore-certificate-errors",
    "--disable-dev-shm-usage",  # Mitigate shared memory issues in Docker
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-gpu",
    "--force-device-scale-factor=1",
]
