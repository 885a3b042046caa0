# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the IoT Hub Resource Explorer, which provisions or selects an IoT Hub
and manages the credentials derived from it.

Every interactive operation returns an OperationResult. Dismissing any prompt cancels the
operation without side effects. Errors reported by the control plane are raised.
"""

import locale
import logging
from typing import Callable, Optional
from . import connection_string as cs
from . import constant
from . import sastoken as st
from .account import AzureAccount
from .config import ConfigStore, ExplorerConfig
from .control_plane import ArmControlPlaneClient, ControlPlaneClient
from .exceptions import LoginError, extract_error_message
from .handle_exceptions import call_and_swallow, swallow_unraised_exception
from .heartbeat import heartbeat
from .hub_name import HubNameNegotiator
from .models import (
    DeviceItem,
    IotHubDescription,
    IotHubItem,
    LocationItem,
    OperationResult,
    PricingTier,
    PricingTierItem,
    SubscriptionItem,
)
from .prompt import Clipboard, OutputChannel, PromptSurface
from .resource_group import ResourceGroupResolver
from .selector import QuickPickSelector
from .telemetry import TelemetryClient

logger = logging.getLogger(__name__)

CREATE_FAILED_MESSAGE = "Error occurred when creating IoT Hub."

ClientFactory = Callable[[SubscriptionItem], ControlPlaneClient]


def arm_client_factory(subscription_item: SubscriptionItem) -> ControlPlaneClient:
    return ArmControlPlaneClient(
        subscription_item.session.credentials, subscription_item.subscription.subscription_id
    )


class IoTHubResourceExplorer:
    def __init__(
        self,
        *,
        account: AzureAccount,
        prompt: PromptSurface,
        output: OutputChannel,
        config_store: ConfigStore,
        clipboard: Clipboard,
        telemetry: Optional[TelemetryClient] = None,
        client_factory: ClientFactory = arm_client_factory,
        config: Optional[ExplorerConfig] = None,
        refresh_callback: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        :param account: Provider of the Azure login and the subscriptions to choose from
        :param prompt: Surface used for all interaction with the user
        :param output: Channel progress and results are written to
        :param config_store: Store the IoT Hub connection string is persisted in
        :param clipboard: Clipboard generated credentials are copied to
        :param telemetry: Sink for usage events (default: a new TelemetryClient)
        :param client_factory: Callable returning a ControlPlaneClient for a subscription
        :param config: Explorer tunables (default: a new ExplorerConfig)
        :param refresh_callback: Called after a new IoT Hub connection string is persisted
        """
        self._account = account
        self._prompt = prompt
        self._output = output
        self._config_store = config_store
        self._clipboard = clipboard
        self._telemetry = telemetry or TelemetryClient()
        self._client_factory = client_factory
        self._config = config or ExplorerConfig()
        self._refresh_callback = refresh_callback

        self._selector = QuickPickSelector(
            prompt,
            retry_window=self._config.picker_retry_window,
            retry_count=self._config.picker_retry_count,
        )
        self._resource_groups = ResourceGroupResolver(prompt, self._selector)
        self._hub_names = HubNameNegotiator(prompt)

    async def create_iothub(self) -> OperationResult:
        """Walk the user through creating a new IoT Hub, and store its connection string.

        :returns: OperationResult carrying the created IotHubDescription, with its
            connection string attached
        :raises: The error reported by the control plane if creation fails
        """
        self._telemetry.send_event(constant.IOTHUB_CREATE_START_EVENT)
        if not await self._wait_for_login():
            return OperationResult.cancelled()

        subscription_item = await self._selector.select(
            await self._load_subscription_items(),
            "Select a subscription to create your IoT Hub in...",
        )
        if subscription_item is None:
            return OperationResult.cancelled()
        self._output.show()
        self._output.append_line("Subscription selected: {}".format(subscription_item.label))
        client = self._client_factory(subscription_item)

        resource_group_item = await self._resource_groups.get_or_create(client)
        if resource_group_item is None:
            return OperationResult.cancelled()
        self._output.append_line("Resource Group selected: {}".format(resource_group_item.label))

        locations = await client.list_locations()
        location_item = await self._selector.select(
            [LocationItem(location) for location in locations],
            "Select a location to create your IoT Hub in...",
        )
        if location_item is None:
            return OperationResult.cancelled()
        self._output.append_line("Location selected: {}".format(location_item.label))

        tier_item = await self._selector.select(
            [PricingTierItem(tier) for tier in PricingTier],
            "Select pricing and scale tier for your IoT Hub...",
        )
        if tier_item is None:
            return OperationResult.cancelled()
        self._output.append_line("Pricing and scale tier selected: {}".format(tier_item.label))

        name = await self._hub_names.negotiate(client)
        if not name:
            return OperationResult.cancelled()

        iothub = await self._prompt.with_progress(
            "Creating IoT Hub '{}'".format(name),
            lambda: self._create_iothub_resource(
                client,
                resource_group=resource_group_item.resource_group.name,
                location=location_item.location.name,
                tier=tier_item.tier,
                name=name,
            ),
        )
        return OperationResult.succeeded(iothub)

    async def _create_iothub_resource(
        self,
        client: ControlPlaneClient,
        resource_group: str,
        location: str,
        tier: PricingTier,
        name: str,
    ) -> IotHubDescription:
        self._output.append_line("Creating IoT Hub: {}".format(name))
        try:
            async with heartbeat(self._output, self._config.heartbeat_interval):
                iothub = await client.create_iothub(
                    resource_group=resource_group,
                    name=name,
                    location=location,
                    sku_name=tier.sku_name,
                    capacity=tier.capacity,
                )
            # The resource group is known here even if the response does not carry it
            if not iothub.resource_group:
                iothub.resource_group = resource_group
            connection_string = await self._get_connection_string_for(client, iothub)
        except Exception as e:
            error_message = extract_error_message(e, CREATE_FAILED_MESSAGE)
            logger.debug("IoT Hub creation failed: {}".format(error_message))
            self._output.append_line(error_message)
            self._telemetry.send_event(
                constant.IOTHUB_CREATE_DONE_EVENT, {"Result": "Fail", "Message": error_message}
            )
            raise

        self._output.append_line("IoT Hub '{}' is created.".format(name))
        await self._update_iothub_connection_string(connection_string)
        iothub.connection_string = connection_string
        self._telemetry.send_event(
            constant.IOTHUB_CREATE_DONE_EVENT, {"Result": "Success"}, connection_string
        )
        return iothub

    async def select_iothub(self) -> OperationResult:
        """Let the user choose an existing IoT Hub, and store its connection string.

        :returns: OperationResult carrying the selected IotHubDescription, with its
            connection string attached
        :raises: The error reported by the control plane if listing or key retrieval fails
        """
        self._telemetry.send_event(constant.IOTHUB_SELECT_START_EVENT)
        if not await self._wait_for_login():
            return OperationResult.cancelled()

        self._telemetry.send_event(constant.SUBSCRIPTION_SELECT_START_EVENT)
        subscription_item = await self._selector.select(
            await self._load_subscription_items(), "Select Subscription"
        )
        if subscription_item is None:
            return OperationResult.cancelled()
        self._telemetry.send_event(constant.SUBSCRIPTION_SELECT_DONE_EVENT)
        self._output.show()
        self._output.append_line("Subscription selected: {}".format(subscription_item.label))
        client = self._client_factory(subscription_item)

        iothub_item = await self._selector.select(
            await self._load_iothub_items(client), "Select IoT Hub"
        )
        if iothub_item is None:
            return OperationResult.cancelled()
        self._output.append_line("IoT Hub selected: {}".format(iothub_item.label))

        iothub = iothub_item.iothub_description
        connection_string = await self._get_connection_string_for(client, iothub)
        await self._update_iothub_connection_string(connection_string)
        iothub.connection_string = connection_string
        self._telemetry.send_event(constant.IOTHUB_SELECT_DONE_EVENT, None, connection_string)
        return OperationResult.succeeded(iothub)

    async def get_iothub_connection_string(self) -> Optional[str]:
        """Return the stored IoT Hub connection string.

        If none is stored, the user is asked for one, and it is stored.

        :returns: The connection string, or None if the user dismissed the prompt
        """
        connection_string = self._config_store.get(constant.IOTHUB_CONNECTION_STRING_KEY)
        if connection_string and cs.is_iothub_connection_string(connection_string):
            return connection_string

        connection_string = await self._prompt.show_input_box(
            prompt="Enter {}".format(constant.IOTHUB_CONNECTION_STRING_TITLE),
            placeholder="HostName=<my-hub>.azure-devices.net;SharedAccessKeyName=<my-policy>;"
            "SharedAccessKey=<my-policy-key>",
            validate_input=_validate_iothub_connection_string,
        )
        if not connection_string:
            return None
        await self._update_iothub_connection_string(connection_string)
        return connection_string

    def copy_iothub_connection_string(self) -> OperationResult:
        """Copy the stored IoT Hub connection string to the clipboard, if there is one"""
        self._telemetry.send_event(constant.COPY_IOTHUB_CONNECTION_STRING_EVENT)
        connection_string = self._config_store.get(constant.IOTHUB_CONNECTION_STRING_KEY)
        if not connection_string:
            return OperationResult.cancelled()
        self._clipboard.write(connection_string)
        return OperationResult.succeeded(connection_string)

    async def copy_device_connection_string(
        self, device_item: Optional[DeviceItem] = None
    ) -> OperationResult:
        """Copy the connection string of a device to the clipboard.

        :param device_item: The device. If not provided, the user is asked for one.
        """
        device_item = await self._get_input_device(
            device_item, constant.COPY_DEVICE_CONNECTION_STRING_EVENT
        )
        if device_item is None or not device_item.connection_string:
            return OperationResult.cancelled()
        self._clipboard.write(device_item.connection_string)
        return OperationResult.succeeded(device_item.connection_string)

    async def generate_sas_token_for_iothub(self) -> OperationResult:
        """Generate a SAS token for the stored IoT Hub and copy it to the clipboard"""
        self._telemetry.send_event(constant.SASTOKEN_SERVICE_EVENT)
        connection_string = await self.get_iothub_connection_string()
        if not connection_string:
            return OperationResult.cancelled()
        return await self._generate_sas_token(
            st.generate_sas_token_for_service, connection_string, "IoT Hub"
        )

    async def generate_sas_token_for_device(
        self, device_item: Optional[DeviceItem] = None
    ) -> OperationResult:
        """Generate a SAS token for a device and copy it to the clipboard.

        :param device_item: The device. If not provided, the user is asked for one.
        """
        device_item = await self._get_input_device(device_item, constant.SASTOKEN_DEVICE_EVENT)
        if device_item is None or not device_item.connection_string:
            return OperationResult.cancelled()
        return await self._generate_sas_token(
            st.generate_sas_token_for_device, device_item.connection_string, device_item.device_id
        )

    async def _generate_sas_token(self, sastoken_fn, connection_string, target):
        expiry = await self._prompt.show_input_box(
            prompt="Enter expiration time (hours)",
            validate_input=st.validate_expiry_in_hours,
        )
        if not expiry:
            return OperationResult.cancelled()
        try:
            expiry_in_hours = st.parse_expiry_in_hours(expiry)
        except ValueError as e:
            # Reached only when the prompt surface skips validate_input
            await self._prompt.show_error_message(str(e))
            return OperationResult.cancelled()

        sastoken = sastoken_fn(connection_string, expiry_in_hours)
        self._clipboard.write(sastoken)
        self._output.show()
        self._output.output_line(
            "SASToken",
            "SAS token for [{}] is generated and copied to clipboard:".format(target),
        )
        self._output.append_line(sastoken)
        return OperationResult.succeeded(sastoken)

    async def _get_input_device(self, device_item, event_name):
        if device_item is None:
            connection_string = await self._prompt.show_input_box(
                prompt="Enter device connection string",
                placeholder="HostName=<my-hub>.azure-devices.net;DeviceId=<my-device>;"
                "SharedAccessKey=<my-device-key>",
                validate_input=_validate_device_connection_string,
            )
            if not connection_string:
                return None
            device_id = cs.ConnectionString(connection_string)[cs.DEVICE_ID]
            device_item = DeviceItem(device_id, connection_string)
        self._telemetry.send_event(event_name)
        return device_item

    async def _wait_for_login(self) -> bool:
        if await self._account.wait_for_login():
            return True
        self._telemetry.send_event(constant.ASK_FOR_LOGIN_EVENT)
        try:
            await self._account.ask_for_login()
        except LoginError as e:
            # Not being logged in afterwards cancels the operation
            swallow_unraised_exception(e, log_msg="Azure login flow failed")
        return await self._account.wait_for_login()

    async def _load_subscription_items(self):
        await self._account.wait_for_filters()
        subscription_items = [
            SubscriptionItem(f.subscription, f.session) for f in self._account.filters
        ]
        self._telemetry.send_event(
            constant.SUBSCRIPTION_LOAD_EVENT, {"SubscriptionCount": str(len(subscription_items))}
        )
        return subscription_items

    async def _load_iothub_items(self, client: ControlPlaneClient):
        iothubs = await client.list_iothubs()
        iothub_items = sorted((IotHubItem(iothub) for iothub in iothubs), key=_label_sort_key)
        self._telemetry.send_event(
            constant.IOTHUB_LOAD_EVENT, {"IoTHubCount": str(len(iothub_items))}
        )
        return iothub_items

    async def _get_connection_string_for(
        self, client: ControlPlaneClient, iothub: IotHubDescription
    ) -> str:
        key = await client.get_keys_for_key_name(
            iothub.resource_group, iothub.name, self._config.owner_policy_name
        )
        return str(
            cs.ConnectionString.create_with_parsed_values(
                iothub.host_name,
                key.key_name or self._config.owner_policy_name,
                key.primary_key,
            )
        )

    async def _update_iothub_connection_string(self, connection_string: str) -> None:
        await self._config_store.update(
            constant.IOTHUB_CONNECTION_STRING_KEY, connection_string, user_scope=True
        )
        logger.debug("Stored new IoT Hub connection string")
        if self._refresh_callback:
            call_and_swallow(
                self._refresh_callback, log_msg="Refresh after connection string update failed"
            )


def _label_sort_key(item):
    return (locale.strxfrm(item.label.casefold()), item.label)


def _validate_iothub_connection_string(value):
    if cs.is_iothub_connection_string(value):
        return None
    return (
        "The format should be 'HostName=<my-hub>.azure-devices.net;"
        "SharedAccessKeyName=<my-policy>;SharedAccessKey=<my-policy-key>'"
    )


def _validate_device_connection_string(value):
    if cs.is_device_connection_string(value):
        return None
    return (
        "The format should be 'HostName=<my-hub>.azure-devices.net;DeviceId=<my-device>;"
        "SharedAccessKey=<my-device-key>'"
    )
