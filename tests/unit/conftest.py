# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import pytest
from azure.iot.explorer.account import (
    AzureAccount,
    AzureResourceFilter,
    AzureSession,
    AzureSubscription,
)
from azure.iot.explorer.config import InMemoryConfigStore
from azure.iot.explorer.control_plane import ControlPlaneClient
from azure.iot.explorer.models import (
    IotHubDescription,
    Location,
    NameAvailability,
    ResourceGroup,
    SharedAccessKey,
)
from azure.iot.explorer.prompt import Clipboard, OutputChannel, PromptSurface

FAKE_HOST_NAME = "my-hub.azure-devices.net"
FAKE_PRIMARY_KEY = "Zm9vYmFyYmF6"
FAKE_SECONDARY_KEY = "YmF6YmFyZm9v"
FAKE_OWNER_POLICY = "iothubowner"


class RecordingOutputChannel(OutputChannel):
    """OutputChannel keeping everything written to it"""

    def __init__(self):
        self.text = ""
        self.shown = False

    def append(self, value):
        self.text += value

    def append_line(self, value):
        self.text += value + "\n"

    def show(self):
        self.shown = True

    @property
    def lines(self):
        return self.text.splitlines()


@pytest.fixture
def output():
    return RecordingOutputChannel()


@pytest.fixture
def mock_prompt(mocker):
    prompt = mocker.MagicMock(spec=PromptSurface)

    async def run_task(title, task):
        return await task()

    prompt.with_progress.side_effect = run_task
    return prompt


@pytest.fixture
def mock_clipboard(mocker):
    return mocker.MagicMock(spec=Clipboard)


@pytest.fixture
def config_store():
    return InMemoryConfigStore()


@pytest.fixture
def subscription():
    return AzureSubscription("00000000-0000-0000-0000-000000000000", "My Subscription")


@pytest.fixture
def mock_account(mocker, subscription):
    account = mocker.MagicMock(spec=AzureAccount)
    account.wait_for_login.return_value = True
    account.filters = [AzureResourceFilter(subscription, AzureSession(mocker.MagicMock()))]
    return account


@pytest.fixture
def resource_groups():
    return [ResourceGroup("rg-one", "westus2"), ResourceGroup("rg-two", "eastus")]


@pytest.fixture
def locations():
    return [Location("westus2", "West US 2"), Location("eastus", "East US")]


@pytest.fixture
def iothubs():
    return [
        IotHubDescription("zeta-hub", "rg-one", "zeta-hub.azure-devices.net"),
        IotHubDescription("Alpha-hub", "rg-two", "Alpha-hub.azure-devices.net"),
        IotHubDescription("my-hub", "rg-one", FAKE_HOST_NAME),
    ]


@pytest.fixture
def mock_control_plane(mocker, resource_groups, locations, iothubs):
    client = mocker.MagicMock(spec=ControlPlaneClient)
    client.list_resource_groups.return_value = resource_groups
    client.list_locations.return_value = locations
    client.list_iothubs.return_value = iothubs
    client.check_name_availability.return_value = NameAvailability(True)
    client.create_iothub.return_value = IotHubDescription(
        "my-hub", "rg-one", FAKE_HOST_NAME, location="westus2", sku="S1"
    )
    client.get_keys_for_key_name.return_value = SharedAccessKey(
        FAKE_OWNER_POLICY, FAKE_PRIMARY_KEY, FAKE_SECONDARY_KEY
    )

    async def create_resource_group(name, location):
        return ResourceGroup(name, location)

    client.create_resource_group.side_effect = create_resource_group
    return client
