"""Test doubles for the display host."""

import asyncio

from threadview.application import DisplaySurface
from threadview.domain.model import ViewFragment
from threadview.domain.value import CommentId


class RecordingDisplaySurface(DisplaySurface):
    """Display surface that records every write.

    confirm() answers with confirm_answer; set confirm_gate to an Event to
    hold the answer until the test releases it.
    """

    def __init__(self, confirm_answer: bool = True) -> None:
        self.views: list[ViewFragment] = []
        self.errors: list[str] = []
        self.error: str = ""
        self.acknowledgements: list[str] = []
        self.prompts: list[str] = []
        self.reply_target: CommentId | None = None
        self.inputs_cleared = 0
        self.confirm_answer = confirm_answer
        self.confirm_gate: asyncio.Event | None = None

    @property
    def last_view(self) -> ViewFragment | None:
        return self.views[-1] if self.views else None

    def show_view(self, view: ViewFragment) -> None:
        self.views.append(view)

    def show_error(self, message: str) -> None:
        self.errors.append(message)
        self.error = message

    def clear_error(self) -> None:
        self.error = ""

    def clear_inputs(self) -> None:
        self.inputs_cleared += 1

    def show_reply_target(self, comment_id: CommentId | None) -> None:
        self.reply_target = comment_id

    def acknowledge(self, message: str) -> None:
        self.acknowledgements.append(message)

    async def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if self.confirm_gate is not None:
            await self.confirm_gate.wait()
        return self.confirm_answer
