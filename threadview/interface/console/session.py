"""Interactive console session.

Reads commands line by line and runs each one as its own task, so the prompt
stays responsive while requests are in flight. A line typed while a
confirmation is pending answers that confirmation instead.
"""

import asyncio
from typing import Awaitable, Callable

import logfire

from threadview.application import CommentTreeController
from threadview.domain.value import CommentId
from threadview.interface.console.commands import Command, help_text, parse_command
from threadview.interface.console.surface import ConsoleDisplaySurface
from threadview.interface.error import CommandError


class ConsoleSession:
    """Command loop driving one comment tree controller."""

    def __init__(
        self,
        controller: CommentTreeController,
        surface: ConsoleDisplaySurface,
        read_line: Callable[[], Awaitable[str]],
    ) -> None:
        """Initialize console session.

        Args:
            controller: Controller for the displayed widget
            surface: Console surface the controller writes into
            read_line: Coroutine returning the next input line ("" at end of input)
        """
        self.controller = controller
        self.surface = surface
        self.read_line = read_line
        self._tasks: set[asyncio.Task] = set()

    async def run(self) -> None:
        """Show root page 1, then process commands until quit or end of input."""
        await self.controller.load_root_page(1)
        try:
            while True:
                line = await self.read_line()
                if not line:
                    break
                if self.surface.answer(line):
                    continue

                try:
                    command = parse_command(line)
                except CommandError as e:
                    self.surface.acknowledge(f"{e}. Type 'help' for commands.")
                    continue

                if command is None:
                    continue
                if command.name == "quit":
                    break
                self._spawn(self.execute(command))
        finally:
            await self.shutdown()

    async def execute(self, command: Command) -> None:
        """Run one parsed command against the controller."""
        controller = self.controller
        name = command.name

        if name == "page":
            await controller.select_page(command.number)
        elif name == "root":
            await controller.load_root_page(1)
        elif name == "open":
            await controller.expand_replies(CommentId(command.number))
        elif name == "reply":
            controller.mark_reply_target(CommentId(command.number))
        elif name == "target":
            controller.describe_reply_target()
        elif name == "new":
            await controller.create_comment(command.argument)
        elif name == "delete":
            await controller.delete_comment(CommentId(command.number))
        elif name == "search":
            await controller.search(command.argument)
        elif name == "reload":
            await controller.reload()
        elif name == "help":
            self.surface.acknowledge("Commands:\n" + help_text())

    async def shutdown(self) -> None:
        """Decline pending confirmations and let in-flight commands finish."""
        self.surface.cancel_confirmation()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _spawn(self, coro: Awaitable[None]) -> None:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._finished)

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logfire.error(
                "Console command crashed",
                error=str(error),
                error_type=type(error).__name__,
                _exc_info=error,
            )
            self.surface.show_error(f"Unexpected error: {error}")
