# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the resource records returned by the control plane.
"""
import enum
from .. import constant


class ResourceGroup(object):
    """A resource group in a subscription.

    :ivar str name: The name of the resource group.
    :ivar str location: The location the resource group metadata is stored in.
    """

    def __init__(self, name, location):
        self.name = name
        self.location = location

    def __repr__(self):
        return "ResourceGroup(name={!r}, location={!r})".format(self.name, self.location)


class Location(object):
    """A geographic location available to a subscription.

    :ivar str name: The programmatic name of the location (e.g. "westus2").
    :ivar str display_name: The human readable name of the location (e.g. "West US 2").
    """

    def __init__(self, name, display_name=None):
        self.name = name
        self.display_name = display_name or name

    def __repr__(self):
        return "Location(name={!r})".format(self.name)


class IotHubDescription(object):
    """Description of an IoT Hub resource.

    The connection string is not part of the control plane response. It is attached by the
    explorer once the owner policy key has been retrieved.

    :ivar str name: The name of the IoT Hub.
    :ivar str resource_group: The resource group the IoT Hub belongs to.
    :ivar str location: The location of the IoT Hub.
    :ivar str host_name: The host name of the IoT Hub.
    :ivar str sku: The pricing tier of the IoT Hub.
    :ivar str id: The ARM resource id of the IoT Hub.
    :ivar str connection_string: The IoT Hub connection string, once attached.
    """

    def __init__(self, name, resource_group, host_name, location=None, sku=None, id=None):
        self.name = name
        self.resource_group = resource_group
        self.host_name = host_name
        self.location = location
        self.sku = sku
        self.id = id
        self.connection_string = None

    def __repr__(self):
        return "IotHubDescription(name={!r}, resource_group={!r}, host_name={!r})".format(
            self.name, self.resource_group, self.host_name
        )


class SharedAccessKey(object):
    """Keys of a shared access policy.

    :ivar str key_name: The name of the shared access policy.
    :ivar str primary_key: The primary key.
    :ivar str secondary_key: The secondary key.
    """

    def __init__(self, key_name, primary_key, secondary_key=None):
        self.key_name = key_name
        self.primary_key = primary_key
        self.secondary_key = secondary_key


class NameAvailability(object):
    """Result of checking whether an IoT Hub name is still available.

    :ivar bool name_available: True if the name can be used.
    :ivar str reason: Reason the name is unavailable, if any.
    :ivar str message: Detailed explanation, if any.
    """

    def __init__(self, name_available, reason=None, message=None):
        self.name_available = name_available
        self.reason = reason
        self.message = message


class PricingTier(enum.Enum):
    """Pricing and scale tiers an IoT Hub can be created in"""

    F1 = "F1 Free"
    S1 = "S1 Standard"
    S2 = "S2 Standard"
    S3 = "S3 Standard"

    @property
    def label(self):
        return self.value

    @property
    def sku_name(self):
        return self.name

    @property
    def capacity(self):
        return constant.IOTHUB_SKU_CAPACITY
