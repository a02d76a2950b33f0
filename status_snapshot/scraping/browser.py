"""
Browser automation collaborator for loading rendered status pages.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import TracebackType

from playwright.sync_api import Browser, Page, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from status_snapshot.errors import BrowserTimeoutError, NavigationError
from status_snapshot.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)


class BrowserPage(ABC):
    """
    The narrow page interface extractors rely on.
    """

    @abstractmethod
    def goto(self, url: str) -> None:
        """
        Navigate to `url` and block until network activity settles.
        """

    @abstractmethod
    def click(self, selector: str) -> None:
        """
        Click the first element matching `selector`.
        """

    @abstractmethod
    def wait_for_selector(self, selector: str, *, timeout_ms: int) -> None:
        """
        Block until `selector` appears, raising BrowserTimeoutError otherwise.
        """

    @abstractmethod
    def content(self) -> str:
        """
        Return the rendered document as HTML.
        """


class PlaywrightPage(BrowserPage):
    """
    BrowserPage backed by a Playwright sync page.
    """

    def __init__(self, page: Page) -> None:
        self._page = page

    def goto(self, url: str) -> None:
        try:
            self._page.goto(url, wait_until="networkidle")
        except PlaywrightError as exc:
            raise NavigationError(f"Failed to load {url}: {exc}") from exc
        log_event(logger, logging.INFO, "page_loaded", url=url)

    def click(self, selector: str) -> None:
        try:
            self._page.click(selector)
        except PlaywrightError as exc:
            raise NavigationError(f"Failed to click '{selector}': {exc}") from exc

    def wait_for_selector(self, selector: str, *, timeout_ms: int) -> None:
        try:
            self._page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise BrowserTimeoutError(
                f"Selector '{selector}' did not appear within {timeout_ms} ms."
            ) from exc
        except PlaywrightError as exc:
            raise NavigationError(f"Failed waiting for '{selector}': {exc}") from exc

    def content(self) -> str:
        return self._page.content()


class PlaywrightBrowserSession:
    """
    Context manager owning one headless Chromium session and its single page.

    The session is released exactly once on exit, whatever stage failed.
    """

    def __init__(self, *, headless: bool = True) -> None:
        self._headless = headless
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None

    def __enter__(self) -> PlaywrightPage:
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=self._headless)
            page = self._browser.new_page()
        except BaseException:
            self.close()
            raise
        return PlaywrightPage(page)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        try:
            if browser is not None:
                browser.close()
        finally:
            if playwright is not None:
                playwright.stop()
