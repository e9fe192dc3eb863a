import logging
import webbrowser

from cpibridge.core.models.errors import LaunchError
from cpibridge.core.ports.launcher import Launcher


class WebBrowserLauncher(Launcher):
    """
    Opens URLs with the user's preferred browser. A browser name (as known
    to the `webbrowser` module, e.g. "chrome") can pin a specific one.
    """
    def __init__(self, browser: str | None = None) -> None:
        self._browser = browser
        self._logger = logging.getLogger("infra.browser")

    def open(self, url: str) -> None:
        try:
            controller = webbrowser.get(self._browser)
        except webbrowser.Error as exc:
            raise LaunchError(f"no usable browser: {exc}") from exc

        if not controller.open(url, new=2):
            raise LaunchError("browser refused to open the URL")

        self._logger.info("Browser opened")
