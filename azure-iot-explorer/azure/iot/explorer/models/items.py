# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the items presented to the user in quick pick lists.
"""


class QuickPickItem(object):
    """An entry of a quick pick list.

    :ivar str label: The text shown for the entry.
    :ivar str description: Secondary text shown next to the label (optional).
    """

    def __init__(self, label, description=None):
        self.label = label
        self.description = description

    def __repr__(self):
        return "{}(label={!r})".format(type(self).__name__, self.label)


class SubscriptionItem(QuickPickItem):
    def __init__(self, subscription, session):
        """
        :param subscription: The subscription
        :type subscription: :class:`azure.iot.explorer.account.AzureSubscription`
        :param session: The authenticated session the subscription is accessed with
        :type session: :class:`azure.iot.explorer.account.AzureSession`
        """
        super(SubscriptionItem, self).__init__(
            label=subscription.display_name, description=subscription.subscription_id
        )
        self.subscription = subscription
        self.session = session


class ResourceGroupItem(QuickPickItem):
    def __init__(self, resource_group):
        super(ResourceGroupItem, self).__init__(
            label=resource_group.name, description=resource_group.location
        )
        self.resource_group = resource_group


class CreateResourceGroupItem(QuickPickItem):
    """Synthetic entry offering to create a new resource group"""

    def __init__(self):
        super(CreateResourceGroupItem, self).__init__(label="$(plus) Create Resource Group")


class LocationItem(QuickPickItem):
    def __init__(self, location):
        super(LocationItem, self).__init__(label=location.display_name, description=location.name)
        self.location = location


class PricingTierItem(QuickPickItem):
    def __init__(self, tier):
        super(PricingTierItem, self).__init__(label=tier.label)
        self.tier = tier


class IotHubItem(QuickPickItem):
    def __init__(self, iothub_description):
        super(IotHubItem, self).__init__(
            label=iothub_description.name, description=iothub_description.resource_group
        )
        self.iothub_description = iothub_description


class DeviceItem(QuickPickItem):
    def __init__(self, device_id, connection_string=None):
        """
        :param str device_id: The device identity
        :param str connection_string: The device connection string, if known
        """
        super(DeviceItem, self).__init__(label=device_id)
        self.device_id = device_id
        self.connection_string = connection_string
