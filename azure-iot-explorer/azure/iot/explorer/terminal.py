# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Terminal implementations of the prompt surface, output channel and clipboard, used by the
command line interface.

Prompts block the event loop while waiting for input. No other step of an operation runs
while the user is being prompted.
"""

import logging
from typing import Optional
import click
import pyperclip
from rich.console import Console
from .prompt import Clipboard, OutputChannel, PromptSurface

logger = logging.getLogger(__name__)

CANCEL_HINT = "leave empty to cancel"


class TerminalPromptSurface(PromptSurface):
    def __init__(self, console: Optional[Console] = None) -> None:
        """
        :param console: rich Console progress is rendered on (default: stderr console)
        """
        self._console = console or Console(stderr=True)

    async def show_quick_pick(self, items, placeholder):
        if not items:
            click.secho("{} (nothing to choose from)".format(placeholder), fg="yellow")
            return None

        click.echo()
        click.secho(placeholder, fg="cyan", bold=True)
        for i, item in enumerate(items, 1):
            description = " ({})".format(item.description) if item.description else ""
            click.echo("  {}. {}{}".format(click.style(str(i), fg="cyan"), item.label, description))
        click.echo()

        while True:
            choice = _prompt("Enter choice ({})".format(CANCEL_HINT))
            if not choice:
                return None
            try:
                index = int(choice)
            except ValueError:
                click.secho("Please enter a valid number", fg="red")
                continue
            if 1 <= index <= len(items):
                return items[index - 1]
            click.secho("Please enter a number between 1 and {}".format(len(items)), fg="red")

    async def show_input_box(self, prompt, placeholder=None, validate_input=None):
        text = "{} ({})".format(prompt, placeholder) if placeholder else prompt
        while True:
            value = _prompt("{}, {}".format(text, CANCEL_HINT))
            if not value:
                return None
            if validate_input:
                message = validate_input(value)
                if message:
                    click.secho(message, fg="red")
                    continue
            return value

    async def with_progress(self, title, task):
        with self._console.status(title):
            return await task()

    async def show_error_message(self, message):
        click.secho(message, fg="red", err=True)

    async def show_information_message(self, message):
        click.secho(message, fg="green")


class TerminalOutputChannel(OutputChannel):
    def append(self, value):
        click.echo(value, nl=False)

    def append_line(self, value):
        click.echo(value)

    def show(self):
        # The terminal is always visible
        pass


class PyperclipClipboard(Clipboard):
    def write(self, text):
        pyperclip.copy(text)


def _prompt(text):
    """Read one line of input. Empty input, Ctrl-C and end of input all dismiss the prompt."""
    try:
        value = click.prompt(text, default="", show_default=False)
    except click.Abort:
        click.echo()
        logger.debug("Prompt '{}' aborted".format(text))
        return None
    return value.strip()
