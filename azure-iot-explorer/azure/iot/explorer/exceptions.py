# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Define Azure IoT Explorer user-facing exceptions to be shared across package"""
from collections.abc import Mapping


class ExplorerError(Exception):
    """Represents a failure from the IoT Hub Resource Explorer"""

    pass


class ConnectionStringNotFoundError(ExplorerError):
    """Represents a missing IoT Hub connection string in configuration"""

    pass


class LoginError(ExplorerError):
    """Represents a failure of the external Azure login flow"""

    pass


def extract_error_message(error, fallback):
    """Return the most specific message available on an error raised by the control plane.

    Checked in order: a direct ``message`` attribute, a ``message`` inside the error ``body``
    (attribute or mapping), the string representation of the error, and finally `fallback`.

    :param error: The error to inspect
    :param str fallback: Message used if the error carries no message of its own
    :rtype: str
    """
    message = getattr(error, "message", None)
    if message:
        return str(message)

    body = getattr(error, "body", None)
    if isinstance(body, Mapping):
        message = body.get("message")
    else:
        message = getattr(body, "message", None)
    if message:
        return str(message)

    message = str(error)
    if message:
        return message
    return fallback
