# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the subscription-scoped control plane clients used to discover and
create the resources an IoT Hub depends on.
"""

import abc
import logging
from typing import List
from azure.mgmt.iothub.aio import IotHubClient
from azure.mgmt.resource.resources.aio import ResourceManagementClient
from azure.mgmt.subscription.aio import SubscriptionClient
from .models import (
    IotHubDescription,
    Location,
    NameAvailability,
    ResourceGroup,
    SharedAccessKey,
)

logger = logging.getLogger(__name__)


class ControlPlaneClient(abc.ABC):
    """Control plane operations for a single subscription.

    Every operation is a coroutine, and raises whatever error the underlying transport or
    service reports.
    """

    @abc.abstractmethod
    async def list_resource_groups(self) -> List[ResourceGroup]:
        pass

    @abc.abstractmethod
    async def create_resource_group(self, name: str, location: str) -> ResourceGroup:
        pass

    @abc.abstractmethod
    async def list_locations(self) -> List[Location]:
        pass

    @abc.abstractmethod
    async def list_iothubs(self) -> List[IotHubDescription]:
        pass

    @abc.abstractmethod
    async def create_iothub(
        self, resource_group: str, name: str, location: str, sku_name: str, capacity: int
    ) -> IotHubDescription:
        pass

    @abc.abstractmethod
    async def check_name_availability(self, name: str) -> NameAvailability:
        pass

    @abc.abstractmethod
    async def get_keys_for_key_name(
        self, resource_group: str, name: str, key_name: str
    ) -> SharedAccessKey:
        pass


class ArmControlPlaneClient(ControlPlaneClient):
    """ControlPlaneClient backed by the Azure Resource Manager management libraries"""

    def __init__(self, credential, subscription_id: str) -> None:
        """
        :param credential: An azure-identity async credential
        :param str subscription_id: The subscription all operations are scoped to
        """
        self._credential = credential
        self.subscription_id = subscription_id

    def _resource_client(self):
        return ResourceManagementClient(self._credential, self.subscription_id)

    def _iothub_client(self):
        return IotHubClient(self._credential, self.subscription_id)

    async def list_resource_groups(self) -> List[ResourceGroup]:
        async with self._resource_client() as client:
            return [
                ResourceGroup(name=rg.name, location=rg.location)
                async for rg in client.resource_groups.list()
            ]

    async def create_resource_group(self, name: str, location: str) -> ResourceGroup:
        logger.debug("Creating resource group {} in {}".format(name, location))
        async with self._resource_client() as client:
            rg = await client.resource_groups.create_or_update(name, {"location": location})
        return ResourceGroup(name=rg.name, location=rg.location)

    async def list_locations(self) -> List[Location]:
        async with SubscriptionClient(self._credential) as client:
            return [
                Location(name=location.name, display_name=location.display_name)
                async for location in client.subscriptions.list_locations(self.subscription_id)
            ]

    async def list_iothubs(self) -> List[IotHubDescription]:
        async with self._iothub_client() as client:
            return [
                _convert_iothub(hub)
                async for hub in client.iot_hub_resource.list_by_subscription()
            ]

    async def create_iothub(
        self, resource_group: str, name: str, location: str, sku_name: str, capacity: int
    ) -> IotHubDescription:
        logger.debug("Creating IoT Hub {} ({}) in {}".format(name, sku_name, resource_group))
        parameters = {
            "location": location,
            "sku": {"name": sku_name, "capacity": capacity},
        }
        async with self._iothub_client() as client:
            poller = await client.iot_hub_resource.begin_create_or_update(
                resource_group, name, parameters
            )
            hub = await poller.result()
        return _convert_iothub(hub, resource_group=resource_group)

    async def check_name_availability(self, name: str) -> NameAvailability:
        async with self._iothub_client() as client:
            info = await client.iot_hub_resource.check_name_availability({"name": name})
        return NameAvailability(
            name_available=bool(info.name_available), reason=info.reason, message=info.message
        )

    async def get_keys_for_key_name(
        self, resource_group: str, name: str, key_name: str
    ) -> SharedAccessKey:
        async with self._iothub_client() as client:
            rule = await client.iot_hub_resource.get_keys_for_key_name(
                resource_group, name, key_name
            )
        return SharedAccessKey(
            key_name=rule.key_name,
            primary_key=rule.primary_key,
            secondary_key=rule.secondary_key,
        )


def resource_group_from_id(resource_id):
    """Extract the resource group name from an ARM resource id

    e.g. /subscriptions/<sub>/resourceGroups/<rg>/providers/Microsoft.Devices/IotHubs/<name>
    """
    segments = resource_id.split("/") if resource_id else []
    for i, segment in enumerate(segments[:-1]):
        if segment.lower() == "resourcegroups":
            return segments[i + 1]
    return None


def _convert_iothub(hub, resource_group=None):
    properties = getattr(hub, "properties", None)
    sku = getattr(hub, "sku", None)
    return IotHubDescription(
        name=hub.name,
        resource_group=resource_group or resource_group_from_id(hub.id),
        host_name=getattr(properties, "host_name", None),
        location=hub.location,
        sku=getattr(sku, "name", None),
        id=hub.id,
    )
