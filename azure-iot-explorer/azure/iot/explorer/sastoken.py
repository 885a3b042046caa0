# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains tools for working with Shared Access Signature (SAS) Tokens"""

import base64
import binascii
import hashlib
import hmac
import math
import time
import urllib.parse
from typing import Dict, List, Optional
from . import connection_string as cs

REQUIRED_SASTOKEN_FIELDS: List[str] = ["sr", "sig", "se"]
VALID_SASTOKEN_FIELDS: List[str] = REQUIRED_SASTOKEN_FIELDS + ["skn"]
TOKEN_FORMAT: str = "SharedAccessSignature sr={resource}&sig={signature}&se={expiry}"
AUTH_RULE_TOKEN_FORMAT: str = TOKEN_FORMAT + "&skn={keyname}"


class SasTokenError(Exception):
    """Error in SasToken"""

    pass


class SasToken:
    def __init__(self, sastoken_str: str) -> None:
        """Create a SasToken object from a SAS Token string
        :param str sastoken_str: The SAS Token string

        :raises: SasTokenError if SAS Token string is invalid
        """
        self._token_str: str = sastoken_str
        self._token_info: Dict[str, str] = _get_sastoken_info_from_string(sastoken_str)

    def __str__(self) -> str:
        return self._token_str

    def is_expired(self) -> bool:
        return time.time() >= self.expiry_time

    @property
    def expiry_time(self) -> float:
        return float(self._token_info["se"])

    @property
    def resource_uri(self) -> str:
        uri = self._token_info["sr"]
        return urllib.parse.unquote(uri)

    @property
    def signature(self) -> str:
        signature = self._token_info["sig"]
        return urllib.parse.unquote(signature)

    @property
    def key_name(self) -> Optional[str]:
        return self._token_info.get("skn")


def generate_sas_token(
    uri: str, key: str, expiry_in_hours: float, key_name: Optional[str] = None
) -> str:
    """Generate a SAS Token string granting access to a resource until now + expiry_in_hours

    :param str uri: The URI of the resource the token grants access to
    :param str key: Symmetric key (base64 encoded) used to sign the token
    :param float expiry_in_hours: Lifetime of the token in hours. Fractions are allowed.
    :param str key_name: Name of the shared access policy (optional)

    :raises: ValueError if expiry_in_hours is not a finite number
    :raises: SasTokenError if the token cannot be signed
    """
    if not _is_finite_number(expiry_in_hours):
        raise ValueError("Expiry must be a finite number of hours")
    expiry_time = int(math.floor(time.time()) + expiry_in_hours * 60 * 60)
    url_encoded_uri = urllib.parse.quote(uri, safe="")
    message = url_encoded_uri + "\n" + str(expiry_time)
    try:
        signature = sign_with_key(key, message)
    except ValueError as e:
        raise SasTokenError("Unable to generate SasToken") from e
    url_encoded_signature = urllib.parse.quote(signature, safe="")
    if key_name:
        return AUTH_RULE_TOKEN_FORMAT.format(
            resource=url_encoded_uri,
            signature=url_encoded_signature,
            expiry=str(expiry_time),
            keyname=key_name,
        )
    else:
        return TOKEN_FORMAT.format(
            resource=url_encoded_uri,
            signature=url_encoded_signature,
            expiry=str(expiry_time),
        )


def sign_with_key(key: str, message: str) -> str:
    """Sign a message with a base64 encoded symmetric key, using HMAC-SHA256

    :returns: The base64 encoded signature
    :raises: ValueError if the key is not valid base64
    """
    try:
        signing_key = base64.b64decode(key.encode("utf-8"), validate=True)
    except (binascii.Error, AttributeError):
        raise ValueError("Invalid symmetric key")
    digest = hmac.HMAC(key=signing_key, msg=message.encode("utf-8"), digestmod=hashlib.sha256)
    return base64.b64encode(digest.digest()).decode("utf-8")


def generate_sas_token_for_service(iothub_connection_string: str, expiry_in_hours: float) -> str:
    """Generate a SAS Token for an IoT Hub from its (service) connection string

    :raises: ValueError if the connection string is invalid or not an IoT Hub connection string
    """
    cs_obj = cs.ConnectionString(iothub_connection_string)
    if cs_obj.is_device or cs.SHARED_ACCESS_KEY_NAME not in cs_obj:
        raise ValueError("Not an IoT Hub connection string")
    return generate_sas_token(
        uri=cs_obj[cs.HOST_NAME],
        key=cs_obj[cs.SHARED_ACCESS_KEY],
        expiry_in_hours=expiry_in_hours,
        key_name=cs_obj[cs.SHARED_ACCESS_KEY_NAME],
    )


def generate_sas_token_for_device(device_connection_string: str, expiry_in_hours: float) -> str:
    """Generate a SAS Token for a device from the device connection string

    :raises: ValueError if the connection string is invalid or has no device shared access key
    """
    cs_obj = cs.ConnectionString(device_connection_string)
    if not cs_obj.is_device or cs.SHARED_ACCESS_KEY not in cs_obj:
        raise ValueError("Not a device connection string with a shared access key")
    uri = "{hostname}/devices/{device_id}".format(
        hostname=cs_obj[cs.HOST_NAME], device_id=cs_obj[cs.DEVICE_ID]
    )
    return generate_sas_token(
        uri=uri, key=cs_obj[cs.SHARED_ACCESS_KEY], expiry_in_hours=expiry_in_hours
    )


def parse_expiry_in_hours(value: str) -> float:
    """Convert user input into an expiry duration in hours

    :raises: ValueError if the value is not a finite, positive number
    """
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValueError("The expiration time must be a number of hours")
    if not math.isfinite(hours):
        raise ValueError("The expiration time must be a finite number of hours")
    if hours <= 0:
        raise ValueError("The expiration time must be greater than 0")
    return hours


def validate_expiry_in_hours(value: str) -> Optional[str]:
    """Input box validator counterpart of parse_expiry_in_hours"""
    try:
        parse_expiry_in_hours(value)
    except ValueError as e:
        return str(e)
    return None


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _get_sastoken_info_from_string(sastoken_string: str) -> Dict[str, str]:
    pieces = sastoken_string.split("SharedAccessSignature ")
    if len(pieces) != 2:
        raise SasTokenError("Invalid SasToken string: Not a SasToken ")

    # Get sastoken info as dictionary
    try:
        sastoken_info = dict(
            map(str.strip, sub.split("=", 1)) for sub in pieces[1].split("&")  # type: ignore
        )
    except Exception as e:
        raise SasTokenError("Invalid SasToken string: Incorrectly formatted") from e

    # Validate that all required fields are present
    if not all(key in sastoken_info for key in REQUIRED_SASTOKEN_FIELDS):
        raise SasTokenError("Invalid SasToken string: Not all required fields present")

    # Validate that no unexpected fields are present
    if not all(key in VALID_SASTOKEN_FIELDS for key in sastoken_info):
        raise SasTokenError("Invalid SasToken string: Unexpected fields present")

    return sastoken_info
