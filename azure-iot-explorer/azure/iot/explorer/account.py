# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the Azure account (authentication and subscription) providers"""

import abc
import asyncio
import logging
from typing import List
from azure.core.exceptions import ClientAuthenticationError
from azure.identity.aio import AzureCliCredential
from azure.mgmt.subscription.aio import SubscriptionClient
from . import constant
from .exceptions import LoginError

logger = logging.getLogger(__name__)


class AzureSubscription:
    def __init__(self, subscription_id: str, display_name: str) -> None:
        self.subscription_id = subscription_id
        self.display_name = display_name


class AzureSession:
    def __init__(self, credentials) -> None:
        """
        :param credentials: An azure-identity async credential
        """
        self.credentials = credentials


class AzureResourceFilter:
    """A subscription the user has chosen to work with, and the session to access it with"""

    def __init__(self, subscription: AzureSubscription, session: AzureSession) -> None:
        self.subscription = subscription
        self.session = session


class AzureAccount(abc.ABC):
    @abc.abstractmethod
    async def wait_for_login(self) -> bool:
        """Return True if the user is logged in to Azure"""
        pass

    @abc.abstractmethod
    async def wait_for_filters(self) -> None:
        """Wait until the subscription filters are loaded"""
        pass

    @property
    @abc.abstractmethod
    def filters(self) -> List[AzureResourceFilter]:
        pass

    @abc.abstractmethod
    async def ask_for_login(self) -> None:
        """Run the interactive login flow

        :raises: LoginError if the login flow could not be run
        """
        pass


class AzureCliAccount(AzureAccount):
    """AzureAccount sharing the login of the Azure CLI"""

    def __init__(self, credential=None) -> None:
        """
        :param credential: azure-identity async credential to use. Defaults to an
            AzureCliCredential.
        """
        self._credential = credential or AzureCliCredential()
        self._filters: List[AzureResourceFilter] = []

    @property
    def filters(self) -> List[AzureResourceFilter]:
        return self._filters

    async def wait_for_login(self) -> bool:
        try:
            await self._credential.get_token(constant.ARM_SCOPE)
        except ClientAuthenticationError:
            logger.debug("Azure credential unavailable, user is not logged in")
            return False
        return True

    async def wait_for_filters(self) -> None:
        filters = []
        async with SubscriptionClient(self._credential) as client:
            async for subscription in client.subscriptions.list():
                filters.append(
                    AzureResourceFilter(
                        AzureSubscription(
                            subscription_id=subscription.subscription_id,
                            display_name=subscription.display_name,
                        ),
                        AzureSession(self._credential),
                    )
                )
        logger.debug("Loaded {} subscriptions".format(len(filters)))
        self._filters = filters

    async def ask_for_login(self) -> None:
        logger.debug("Running 'az login'")
        try:
            process = await asyncio.create_subprocess_exec("az", "login")
        except OSError as e:
            raise LoginError("Unable to run 'az login'") from e
        returncode = await process.wait()
        if returncode != 0:
            raise LoginError("'az login' exited with code {}".format(returncode))

    async def close(self) -> None:
        await self._credential.close()
