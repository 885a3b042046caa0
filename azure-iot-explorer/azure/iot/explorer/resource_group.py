# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import logging
from typing import Optional
from .control_plane import ControlPlaneClient
from .models import (
    CreateResourceGroupItem,
    LocationItem,
    ResourceGroup,
    ResourceGroupItem,
)
from .prompt import PromptSurface
from .selector import QuickPickSelector
from .validation import validate_resource_group_name

logger = logging.getLogger(__name__)


class ResourceGroupResolver:
    """Obtains the resource group an IoT Hub is created in, creating a new one if the user asks"""

    def __init__(self, prompt: PromptSurface, selector: QuickPickSelector) -> None:
        self._prompt = prompt
        self._selector = selector

    async def get_or_create(self, client: ControlPlaneClient) -> Optional[ResourceGroupItem]:
        """Let the user pick an existing resource group or create a new one.

        :returns: The resource group, or None if the user cancelled at any step
        """
        resource_groups = await client.list_resource_groups()
        items = [CreateResourceGroupItem()] + [ResourceGroupItem(rg) for rg in resource_groups]
        pick = await self._selector.select(
            items, "Select a resource group to create your IoT Hub in..."
        )
        if pick is None:
            return None
        if isinstance(pick, ResourceGroupItem):
            return pick
        new_group = await self.create(client)
        if new_group is None:
            return None
        return ResourceGroupItem(new_group)

    async def create(self, client: ControlPlaneClient) -> Optional[ResourceGroup]:
        """Prompt for the name and location of a new resource group, then create it.

        Nothing is created if the user cancels either prompt.

        :returns: The created resource group, or None if the user cancelled
        """
        name = await self._prompt.show_input_box(
            prompt="Provide a resource group name",
            placeholder="Resource Group Name",
            validate_input=validate_resource_group_name,
        )
        if not name:
            return None

        locations = await client.list_locations()
        location_item = await self._selector.select(
            [LocationItem(location) for location in locations],
            "Select a location to create your Resource Group in...",
        )
        if location_item is None:
            return None

        location = location_item.location.name
        logger.debug("Creating resource group '{}' in '{}'".format(name, location))
        return await self._prompt.with_progress(
            "Creating resource group '{}'".format(name),
            lambda: client.create_resource_group(name, location),
        )
