"""System clipboard access with timed "Copied!" feedback."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable

import pyperclip

from prompt_gallery.settings import settings

logger = logging.getLogger(__name__)

COPY_FAILED_MESSAGE = "Failed to copy text."

Scheduler = Callable[[float, Callable[[], None]], Any]


@dataclass
class CopyControl:
    """State of one prompt's copy button."""

    original_label: str = "Copy"
    label: str = "Copy"
    disabled: bool = False
    copied: bool = False

    def show_copied(self, copied_label: str = "Copied!") -> None:
        self.label = copied_label
        self.disabled = True
        self.copied = True

    def revert(self) -> None:
        self.label = self.original_label
        self.disabled = False
        self.copied = False


def _call_later(delay_seconds: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    return asyncio.get_running_loop().call_later(delay_seconds, callback)


class ClipboardHelper:
    """Copies prompt text and drives the copy control's feedback."""

    def __init__(
        self,
        notifier: Callable[[str], None],
        writer: Callable[[str], None] = pyperclip.copy,
        scheduler: Scheduler = _call_later,
        feedback_ms: int | None = None,
    ) -> None:
        """Initialize clipboard helper.

        Args:
            notifier: Called synchronously with a message when a copy fails
            writer: Function that puts text on the clipboard
            scheduler: ``(delay_seconds, callback)`` timer used for the revert
            feedback_ms: How long the control shows "Copied!"
        """
        self.notifier = notifier
        self.writer = writer
        self.scheduler = scheduler
        self.feedback_ms = settings.copy_feedback_ms if feedback_ms is None else feedback_ms

    async def copy(
        self,
        text: str,
        control: CopyControl,
        on_change: Callable[[CopyControl], None] | None = None,
    ) -> bool:
        """Copy text and flip the control to "Copied!" until the timer fires.

        Args:
            text: Text to put on the clipboard
            control: The control that initiated the copy
            on_change: Called after the control changes state (copied and reverted)

        Returns:
            True if the text was copied, False if the user was notified of a failure
        """
        try:
            await asyncio.to_thread(self.writer, text)
        except (pyperclip.PyperclipException, OSError) as e:
            logger.error(f"[CLIPBOARD] Failed to copy text: {e}")
            self.notifier(COPY_FAILED_MESSAGE)
            return False

        control.show_copied()
        if on_change:
            on_change(control)

        def _revert() -> None:
            control.revert()
            if on_change:
                on_change(control)

        self.scheduler(self.feedback_ms / 1000, _revert)
        logger.debug(f"[CLIPBOARD] Copied {len(text)} chars")
        return True
