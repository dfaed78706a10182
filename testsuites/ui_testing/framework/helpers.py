"""
================================================================================
UI Helpers
================================================================================

Screenshot capture, failure diagnostics, popup and dialog handling.

Usage:
    >>> async with capture_on_failure(page, "checkout", logger=case_logger):
    ...     await checkout_page.submit()

    >>> title = await handle_popup(
    ...     page.context,
    ...     trigger=lambda: page.click("a[target=_blank]"),
    ...     on_popup=lambda popup: popup.title(),
    ... )

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, AsyncIterator, Awaitable, Callable, List, Optional, TypeVar, Union

from loguru import logger as default_logger
from playwright.async_api import BrowserContext, Dialog, Page

from storefront_tools.reporting import attach_screenshot

from .browser_manager import safe_file_name


SCREENSHOTS_DIR = "screenshots"

T = TypeVar("T")


async def take_screenshot(
    page: Page,
    name: str,
    full_page: bool = True,
    output_dir: Optional[Union[str, Path]] = None,
    logger: Any = None,
) -> Path:
    """
    Save a PNG under screenshots/ and attach it to the Allure report.

    Returns:
        Path to the saved screenshot
    """
    log = logger or default_logger
    screenshot_dir = Path(output_dir) if output_dir else Path(SCREENSHOTS_DIR)
    screenshot_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    path = screenshot_dir / f"{safe_file_name(name)}-{timestamp}.png"

    image = await page.screenshot(full_page=full_page)
    path.write_bytes(image)
    attach_screenshot(image, name=name)

    log.info(f"Screenshot saved: {path}")
    return path


@asynccontextmanager
async def capture_on_failure(
    page: Page,
    name: str,
    output_dir: Optional[Union[str, Path]] = None,
    logger: Any = None,
) -> AsyncIterator[Page]:
    """
    Screenshot the page when the wrapped block raises, then re-raise.

    The original exception propagates unchanged, also when the screenshot
    itself fails.
    """
    log = logger or default_logger
    try:
        yield page
    except Exception:
        log.error(f"Failure in '{name}', capturing screenshot")
        if not page.is_closed():
            try:
                await take_screenshot(page, f"failure_{name}", output_dir=output_dir, logger=log)
            except Exception as shot_error:
                log.warning(f"Screenshot for '{name}' failed: {shot_error}")
        raise


async def handle_popup(
    context: BrowserContext,
    trigger: Callable[[], Awaitable[Any]],
    on_popup: Callable[[Page], Awaitable[T]],
    logger: Any = None,
) -> T:
    """
    Run trigger, wait for the page it opens and hand it to on_popup.

    The popup is closed afterwards whatever on_popup does.
    """
    log = logger or default_logger
    log.info("Setting up popup handler")

    async with context.expect_page() as popup_info:
        await trigger()
    popup = await popup_info.value
    await popup.wait_for_load_state()
    log.info(f"Popup opened: {popup.url}")

    try:
        return await on_popup(popup)
    finally:
        await popup.close()
        log.info("Popup closed")


async def handle_dialog(
    page: Page,
    trigger: Callable[[], Awaitable[Any]],
    accept: bool = True,
    prompt_text: Optional[str] = None,
    logger: Any = None,
) -> Optional[str]:
    """
    Accept or dismiss the next alert / confirm / prompt raised by trigger.

    The handler is registered before trigger runs, so actions that block
    on the dialog complete once it is answered.

    Returns:
        The dialog message, or None when no dialog appeared
    """
    log = logger or default_logger
    log.info(f"Setting up dialog handler - accept: {accept}")
    messages: List[str] = []

    async def answer(dialog: Dialog) -> None:
        log.info(f"Dialog appeared: type={dialog.type}, message='{dialog.message}'")
        messages.append(dialog.message)
        if not accept:
            await dialog.dismiss()
        elif prompt_text:
            await dialog.accept(prompt_text)
        else:
            await dialog.accept()

    page.once("dialog", answer)
    await trigger()
    return messages[0] if messages else None


__all__ = [
    "capture_on_failure",
    "handle_dialog",
    "handle_popup",
    "take_screenshot",
]
