# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains tools for working with Connection Strings"""

__all__ = ["ConnectionString"]

CS_DELIMITER = ";"
CS_VAL_SEPARATOR = "="

HOST_NAME = "HostName"
SHARED_ACCESS_KEY_NAME = "SharedAccessKeyName"
SHARED_ACCESS_KEY = "SharedAccessKey"
SHARED_ACCESS_SIGNATURE = "SharedAccessSignature"
DEVICE_ID = "DeviceId"
MODULE_ID = "ModuleId"
GATEWAY_HOST_NAME = "GatewayHostName"

_valid_keys = [
    HOST_NAME,
    SHARED_ACCESS_KEY_NAME,
    SHARED_ACCESS_KEY,
    SHARED_ACCESS_SIGNATURE,
    DEVICE_ID,
    MODULE_ID,
    GATEWAY_HOST_NAME,
]


class ConnectionString(object):
    """Key/value mappings for connection details.
    Uses the same syntax as dictionary
    """

    def __init__(self, connection_string):
        """Initializer for ConnectionString

        :param str connection_string: String with connection details provided by Azure
        :raises: TypeError if provided connection_string is not a string
        :raises: ValueError if provided connection_string is invalid
        """
        self._dict = _parse_connection_string(connection_string)
        self._strrep = connection_string

    @classmethod
    def create_with_parsed_values(cls, host_name, shared_access_key_name, shared_access_key):
        """Compose an IoT Hub (service) connection string from its parts

        :param str host_name: Host name of the IoT Hub
        :param str shared_access_key_name: Name of the shared access policy
        :param str shared_access_key: Secret of the shared access policy
        :returns: A new ConnectionString
        """
        connection_string = CS_DELIMITER.join(
            [
                HOST_NAME + CS_VAL_SEPARATOR + host_name,
                SHARED_ACCESS_KEY_NAME + CS_VAL_SEPARATOR + shared_access_key_name,
                SHARED_ACCESS_KEY + CS_VAL_SEPARATOR + shared_access_key,
            ]
        )
        return cls(connection_string)

    def __contains__(self, item):
        return item in self._dict

    def __getitem__(self, key):
        return self._dict[key]

    def __repr__(self):
        return self._strrep

    def get(self, key, default=None):
        """Return the value for key if key is in the dictionary, else default

        :param str key: The key to retrieve a value for
        :param str default: The default value returned if a key is not found
        :returns: The value for the given key
        """
        try:
            return self._dict[key]
        except KeyError:
            return default

    @property
    def is_device(self):
        return DEVICE_ID in self._dict


def is_iothub_connection_string(connection_string):
    """Return True if the given string is a valid IoT Hub (service) connection string"""
    try:
        cs = ConnectionString(connection_string)
    except (TypeError, ValueError):
        return False
    return not cs.is_device and SHARED_ACCESS_KEY_NAME in cs


def is_device_connection_string(connection_string):
    """Return True if the given string is a valid device connection string"""
    try:
        cs = ConnectionString(connection_string)
    except (TypeError, ValueError):
        return False
    return cs.is_device


def _parse_connection_string(connection_string):
    """Return a dictionary of values contained in a given connection string"""
    try:
        cs_args = connection_string.split(CS_DELIMITER)
    except (AttributeError, TypeError):
        raise TypeError("Connection String must be of type str")
    try:
        d = dict(arg.split(CS_VAL_SEPARATOR, 1) for arg in cs_args)
    except ValueError:
        # A single token after the split cannot form a key/value pair
        raise ValueError("Invalid Connection String - Unable to parse")
    if len(cs_args) != len(d):
        # various errors related to incorrect parsing - duplicate args, bad syntax, etc.
        raise ValueError("Invalid Connection String - Unable to parse")
    if not all(key in _valid_keys for key in d.keys()):
        raise ValueError("Invalid Connection String - Invalid Key")
    _validate_keys(d)
    return d


def _validate_keys(d):
    """Raise ValueError if incorrect combination of keys in dict d"""
    host_name = d.get(HOST_NAME)
    shared_access_key_name = d.get(SHARED_ACCESS_KEY_NAME)
    shared_access_key = d.get(SHARED_ACCESS_KEY)
    shared_access_signature = d.get(SHARED_ACCESS_SIGNATURE)
    device_id = d.get(DEVICE_ID)

    if shared_access_key and shared_access_signature:
        raise ValueError("Invalid Connection String - Mixed authentication scheme")

    if host_name and device_id and (shared_access_key or shared_access_signature):
        pass
    elif host_name and shared_access_key and shared_access_key_name:
        pass
    else:
        raise ValueError("Invalid Connection String - Incomplete")
