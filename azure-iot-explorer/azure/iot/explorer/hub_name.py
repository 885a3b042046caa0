# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import logging
from typing import Optional
from .control_plane import ControlPlaneClient
from .exceptions import extract_error_message
from .prompt import PromptSurface
from .validation import validate_iothub_name

logger = logging.getLogger(__name__)

CHECK_FAILED_MESSAGE = "Unable to check the availability of the IoT Hub name."


class HubNameNegotiator:
    """Prompts for IoT Hub names until one is available, or the user gives up"""

    def __init__(self, prompt: PromptSurface) -> None:
        self._prompt = prompt

    async def negotiate(self, client: ControlPlaneClient) -> Optional[str]:
        """
        :returns: An available IoT Hub name, or None if the user dismissed the prompt
        """
        while True:
            name = await self._prompt.show_input_box(
                prompt="Provide IoT Hub name",
                placeholder="IoT Hub name",
                validate_input=validate_iothub_name,
            )
            if not name:
                return None

            try:
                availability = await client.check_name_availability(name)
            except Exception as e:
                # A failed check is reported and the user may try again
                logger.debug(
                    "Name availability check for '{}' failed".format(name), exc_info=True
                )
                await self._prompt.show_error_message(
                    extract_error_message(e, CHECK_FAILED_MESSAGE)
                )
                continue

            if availability.name_available:
                return name
            await self._prompt.show_error_message(
                "IoT Hub name '{}' is not available.".format(name)
            )
