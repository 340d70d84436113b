"""Terminal display surface."""

import asyncio
import sys
from collections import deque
from typing import Optional, TextIO

from threadview.application.display import DisplaySurface
from threadview.domain.model import ViewFragment
from threadview.domain.value import CommentId
from threadview.interface.console.text import view_to_text

YES_ANSWERS = {"y", "yes"}


class ConsoleDisplaySurface(DisplaySurface):
    """Display surface writing to a text stream.

    Confirmation is non-blocking: confirm() parks a future that the command
    loop resolves with the next line the user types, while other requests keep
    running. Overlapping prompts are queued and answered oldest first.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout
        self.error: str = ""
        self.reply_target: CommentId | None = None
        self._pending_confirmations: deque[asyncio.Future[bool]] = deque()

    def show_view(self, view: ViewFragment) -> None:
        self._write(view_to_text(view))

    def show_error(self, message: str) -> None:
        self.error = message
        self._write(f"! {message}")

    def clear_error(self) -> None:
        self.error = ""

    def clear_inputs(self) -> None:
        # The terminal consumes its input line on submit; only the target field remains
        self.reply_target = None

    def show_reply_target(self, comment_id: CommentId | None) -> None:
        self.reply_target = comment_id

    def acknowledge(self, message: str) -> None:
        self._write(f"* {message}")

    async def confirm(self, prompt: str) -> bool:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[bool] = loop.create_future()
        self._pending_confirmations.append(future)
        self._write(f"? {prompt} [y/N]")
        try:
            return await future
        finally:
            if future in self._pending_confirmations:
                self._pending_confirmations.remove(future)

    @property
    def awaiting_confirmation(self) -> bool:
        return any(not f.done() for f in self._pending_confirmations)

    def answer(self, line: str) -> bool:
        """Resolve the oldest pending confirmation with a typed line.

        Returns:
            True if the line was consumed as an answer
        """
        while self._pending_confirmations:
            future = self._pending_confirmations.popleft()
            if not future.done():
                future.set_result(line.strip().lower() in YES_ANSWERS)
                return True
        return False

    def cancel_confirmation(self) -> None:
        """Decline every pending confirmation (used on shutdown)."""
        while self._pending_confirmations:
            future = self._pending_confirmations.popleft()
            if not future.done():
                future.set_result(False)

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()
