# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the quick pick selector used for every single-choice step.

Quick pick surfaces sometimes close immediately and report that nothing was picked, which
looks the same as the user pressing Escape. A dismissal that happens faster than the retry
window cannot have come from the user, so the pick is shown again, up to the retry count.
"""

import logging
import time
from typing import Callable, Optional, Sequence, TypeVar
from . import constant
from .models import QuickPickItem
from .prompt import PromptSurface

logger = logging.getLogger(__name__)

_Item = TypeVar("_Item", bound=QuickPickItem)


class QuickPickSelector:
    def __init__(
        self,
        prompt: PromptSurface,
        retry_window: float = constant.PICKER_RETRY_WINDOW_SECS,
        retry_count: int = constant.PICKER_RETRY_COUNT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        :param prompt: The surface the quick pick is shown on
        :param float retry_window: Dismissals faster than this (in seconds) are UI glitches
        :param int retry_count: Maximum number of times the quick pick is shown
        :param clock: Monotonic clock used to time the quick pick, in seconds
        """
        self._prompt = prompt
        self._retry_window = retry_window
        self._retry_count = retry_count
        self._clock = clock

    async def select(self, items: Sequence[_Item], placeholder: str) -> Optional[_Item]:
        """Show the items and return the one picked, or None if the user dismissed the pick.

        An empty list is shown once and never again.
        """
        attempts_left = max(self._retry_count, 1)
        while True:
            start = self._clock()
            item = await self._prompt.show_quick_pick(items, placeholder)
            if item is not None or not items:
                return item
            elapsed = self._clock() - start
            attempts_left -= 1
            if elapsed >= self._retry_window or attempts_left <= 0:
                return None
            logger.debug(
                "Quick pick '{}' dismissed after {:.3f}s, showing it again".format(
                    placeholder, elapsed
                )
            )
