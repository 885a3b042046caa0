# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines the interactive surface the explorer drives: prompts, the output
channel, and the clipboard.
"""

import abc
from typing import Awaitable, Callable, Optional, Sequence, TypeVar
from .models import QuickPickItem

_T = TypeVar("_T")
_Item = TypeVar("_Item", bound=QuickPickItem)

InputValidator = Callable[[str], Optional[str]]


class PromptSurface(abc.ABC):
    @abc.abstractmethod
    async def show_quick_pick(self, items: Sequence[_Item], placeholder: str) -> Optional[_Item]:
        """Let the user pick one of the items.

        :returns: The picked item, or None if the user dismissed the pick
        """
        pass

    @abc.abstractmethod
    async def show_input_box(
        self,
        prompt: str,
        placeholder: Optional[str] = None,
        validate_input: Optional[InputValidator] = None,
    ) -> Optional[str]:
        """Let the user enter text. Submission is blocked while validate_input returns a message.

        :returns: The entered text, or None (or an empty string) if the user dismissed the box
        """
        pass

    @abc.abstractmethod
    async def with_progress(self, title: str, task: Callable[[], Awaitable[_T]]) -> _T:
        """Run the task while showing the title as progress, returning the task's result"""
        pass

    @abc.abstractmethod
    async def show_error_message(self, message: str) -> None:
        pass

    @abc.abstractmethod
    async def show_information_message(self, message: str) -> None:
        pass


class OutputChannel(abc.ABC):
    @abc.abstractmethod
    def append(self, value: str) -> None:
        pass

    @abc.abstractmethod
    def append_line(self, value: str) -> None:
        pass

    @abc.abstractmethod
    def show(self) -> None:
        pass

    def output_line(self, label: str, line: str) -> None:
        self.append_line("[{}] {}".format(label, line))


class Clipboard(abc.ABC):
    @abc.abstractmethod
    def write(self, text: str) -> None:
        pass
