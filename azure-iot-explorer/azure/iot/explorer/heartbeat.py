# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import asyncio
import contextlib
import logging
from typing import AsyncIterator
from . import constant
from .prompt import OutputChannel

logger = logging.getLogger(__name__)

TICK = "."


async def _tick(output: OutputChannel, interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        output.append(TICK)


@contextlib.asynccontextmanager
async def heartbeat(
    output: OutputChannel, interval: float = constant.HEARTBEAT_INTERVAL_SECS
) -> AsyncIterator["asyncio.Task[None]"]:
    """Append a tick to the output once per interval for as long as the context is entered.

    The background task is cancelled and awaited on exit, whether the body succeeded or raised,
    and the line of ticks is then ended.
    """
    task = asyncio.create_task(_tick(output, interval))
    logger.debug("Heartbeat started")
    try:
        yield task
    finally:
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        output.append_line("")
        logger.debug("Heartbeat stopped")
