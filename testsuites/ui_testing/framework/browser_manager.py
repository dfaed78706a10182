"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Engine selection from PlaywrightSettings (Chrome / Edge via channels)
    - Contexts preconfigured with base URL and viewport
    - Optional video recording and Playwright tracing
    - Ordered release: pages, contexts, browser, Playwright

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger as default_logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    BrowserType as PlaywrightBrowserType,
    Error as PlaywrightError,
    Page,
    Playwright,
)

from storefront_tools.settings import BrowserType, PlaywrightSettings


TRACES_DIR = "traces"
VIDEOS_DIR = "videos"

# Branded browsers run on the chromium engine through a release channel
BROWSER_CHANNELS: Dict[BrowserType, str] = {
    BrowserType.CHROME: "chrome",
    BrowserType.EDGE: "msedge",
}


def safe_file_name(name: str) -> str:
    """Replace characters that are not valid in file names."""
    return re.sub(r"[^\w.-]+", "_", name).strip("_") or "unnamed"


class BrowserManager:
    """
    Manages Playwright, one browser and the contexts created from it.

    Usage:
        async with BrowserManager(settings, logger=case_logger) as manager:
            page = await manager.new_page(name="test_login")
            await page.goto("/form")

        # Override the configured engine for a single run
        async with BrowserManager(settings, browser_type=BrowserType.FIREFOX) as manager:
            ...
    """

    def __init__(
        self,
        settings: Optional[PlaywrightSettings] = None,
        logger: Any = None,
        browser_type: Optional[BrowserType] = None,
        record_video: Optional[bool] = None,
        enable_tracing: Optional[bool] = None,
        output_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize browser manager.

        Args:
            settings: Browser settings; defaults apply when None
            logger: Per-test logger handle; the global loguru logger if None
            browser_type: Overrides settings.browser_type
            record_video: Overrides settings.record_video
            enable_tracing: Overrides settings.enable_tracing
            output_dir: Root directory for traces/ and videos/
        """
        self.settings = settings or PlaywrightSettings()
        self.log = logger or default_logger
        self.browser_type = BrowserType(browser_type or self.settings.browser_type)
        self.record_video = self.settings.record_video if record_video is None else record_video
        self.enable_tracing = self.settings.enable_tracing if enable_tracing is None else enable_tracing
        self.output_dir = Path(output_dir) if output_dir else Path.cwd()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []
        self._pages: List[Page] = []
        self._trace_names: Dict[int, str] = {}
        self._closed = False

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser

    @property
    def closed(self) -> bool:
        return self._closed

    def launch_options(self) -> Dict[str, Any]:
        """Options passed to BrowserType.launch for the configured engine."""
        options: Dict[str, Any] = {
            "headless": self.settings.headless,
            "slow_mo": self.settings.slow_mo_ms,
        }
        channel = BROWSER_CHANNELS.get(self.browser_type)
        if channel:
            options["channel"] = channel
        return options

    def context_options(self) -> Dict[str, Any]:
        """Options passed to Browser.new_context."""
        options: Dict[str, Any] = {"viewport": self.settings.viewport}
        if self.settings.base_url:
            options["base_url"] = self.settings.base_url
        if self.record_video:
            video_dir = self.output_dir / VIDEOS_DIR
            video_dir.mkdir(parents=True, exist_ok=True)
            options["record_video_dir"] = str(video_dir)
            options["record_video_size"] = self.settings.viewport
        return options

    def _launcher(self) -> PlaywrightBrowserType:
        if self.browser_type == BrowserType.FIREFOX:
            return self._playwright.firefox
        if self.browser_type == BrowserType.WEBKIT:
            return self._playwright.webkit
        return self._playwright.chromium

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        if self._closed:
            raise RuntimeError("BrowserManager is closed; create a new one.")

        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._launcher().launch(**self.launch_options())
        except PlaywrightError:
            self.log.error(f"Failed to launch browser: {self.browser_type.value}")
            await self._playwright.stop()
            self._playwright = None
            raise

        self.log.info(
            f"Browser launched: {self.browser_type.value} "
            f"(headless={self.settings.headless}, record_video={self.record_video})"
        )

    async def new_context(self, name: Optional[str] = None, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            name: Trace file name when tracing is enabled
            **options: Additional context options
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(**{**self.context_options(), **options})
        self._contexts.append(context)

        if self.enable_tracing:
            trace_name = safe_file_name(
                name or f"trace-{datetime.now().strftime('%Y%m%d-%H%M%S')}"
            )
            await context.tracing.start(
                title=trace_name, screenshots=True, snapshots=True, sources=True
            )
            self._trace_names[id(context)] = trace_name
            self.log.debug(f"Tracing started: {trace_name}")

        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        name: Optional[str] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        The page uses settings.default_timeout_ms for every action.
        """
        if context is None:
            context = await self.new_context(name=name, **context_options)

        page = await context.new_page()
        page.set_default_timeout(self.settings.default_timeout_ms)
        self._pages.append(page)
        return page

    async def stop_tracing(self, context: BrowserContext) -> Optional[Path]:
        """
        Stop tracing for a context and save traces/<name>.zip.

        A failed trace export is logged and does not fail the test.
        """
        trace_name = self._trace_names.pop(id(context), None)
        if trace_name is None:
            return None

        trace_dir = self.output_dir / TRACES_DIR
        trace_dir.mkdir(parents=True, exist_ok=True)
        trace_path = trace_dir / f"{trace_name}.zip"
        try:
            await context.tracing.stop(path=str(trace_path))
        except PlaywrightError as e:
            self.log.warning(f"Failed to stop tracing for {trace_name}: {e}")
            return None

        self.log.info(f"Trace saved: {trace_path}")
        return trace_path

    async def close(self) -> None:
        """
        Release pages, contexts, browser and Playwright in that order.

        Runs once; later calls are no-ops. Every resource is released even
        when an earlier one fails, then the first failure is raised.
        """
        if self._closed:
            return
        self._closed = True

        errors: List[Exception] = []

        for page in self._pages:
            try:
                if not page.is_closed():
                    await page.close()
            except PlaywrightError as e:
                self.log.warning(f"Failed to close page: {e}")
                errors.append(e)
        self._pages.clear()

        for context in self._contexts:
            await self.stop_tracing(context)
            try:
                await context.close()
            except PlaywrightError as e:
                self.log.warning(f"Failed to close context: {e}")
                errors.append(e)
        self._contexts.clear()

        try:
            if self._browser:
                await self._browser.close()
        except PlaywrightError as e:
            self.log.warning(f"Failed to close browser: {e}")
            errors.append(e)
        finally:
            self._browser = None
            if self._playwright:
                await self._playwright.stop()
                self._playwright = None

        self.log.debug("Browser closed")

        if errors:
            raise errors[0]


__all__ = [
    "BROWSER_CHANNELS",
    "BrowserManager",
    "safe_file_name",
]
