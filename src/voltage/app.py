"""Terminal shell for voltage built on Textual.

Textual owns the event loop. Key presses and command results are fed to
the controller one message at a time; work commands run as workers and
post their result back as a ``CommandFinished`` message.
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message as TextualMessage
from textual.widget import Widget
from textual.widgets import Static

from .core.controller import VoltageController
from .core.messages import Command, KeyPressed, Message, Quit, ScheduleMessage
from .core.runner import CommandRunner

logger = logging.getLogger(__name__)


class CommandFinished(TextualMessage):
    """A command's result, delivered back into the loop."""

    def __init__(self, result: Message) -> None:
        super().__init__()
        self.result = result


class VoltageApp(App[int]):
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+c", "request_quit('ctrl+c')", show=False, priority=True),
        Binding("ctrl+q", "request_quit('ctrl+q')", show=False, priority=True),
    ]

    def __init__(
        self,
        controller: VoltageController,
        runner: CommandRunner,
        selector_widget: Widget | None = None,
    ):
        super().__init__()
        self._controller = controller
        self._runner = runner
        self._selector_widget = selector_widget

    def compose(self) -> ComposeResult:
        yield Static("", id="view", markup=False)
        if self._selector_widget is not None:
            yield self._selector_widget

    def on_mount(self) -> None:
        self._refresh_view()
        self._execute(self._controller.start())

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self._dispatch(KeyPressed(event.key))

    def action_request_quit(self, key: str) -> None:
        self._dispatch(KeyPressed(key))

    def on_command_finished(self, message: CommandFinished) -> None:
        self._dispatch(message.result)

    def _dispatch(self, message: Message) -> None:
        commands = self._controller.handle(message)
        self._refresh_view()
        self._execute(commands)

    def _refresh_view(self) -> None:
        self.query_one("#view", Static).update(self._controller.render())
        if self._selector_widget is not None:
            self._selector_widget.display = self._controller.selector_visible

    def _execute(self, commands: list[Command]) -> None:
        for command in commands:
            if isinstance(command, Quit):
                logger.info("exiting with code %d", command.exit_code)
                self.exit(command.exit_code, return_code=command.exit_code)
                return
            if isinstance(command, ScheduleMessage):
                self.set_timer(command.delay, partial(self._dispatch, command.message))
                continue
            self.run_worker(self._perform(command), group="commands")

    async def _perform(self, command: Command) -> None:
        if command.blocking:
            result = await asyncio.to_thread(self._runner.run, command)
        else:
            result = self._runner.run(command)
        self.post_message(CommandFinished(result))
