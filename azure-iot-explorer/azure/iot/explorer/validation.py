# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Syntax rules for names of resources created by the explorer.

Each validator returns None if the name is acceptable, otherwise a message describing the
first rule the name breaks. Rules are checked in the order: length, characters, boundaries.
"""

import re
from typing import Optional

IOTHUB_NAME_MIN_LENGTH = 3
IOTHUB_NAME_MAX_LENGTH = 50
RESOURCE_GROUP_NAME_MIN_LENGTH = 1
RESOURCE_GROUP_NAME_MAX_LENGTH = 90

_iothub_name_invalid_chars = re.compile(r"[^a-zA-Z0-9-]")
_resource_group_name_invalid_chars = re.compile(r"[^a-zA-Z0-9._()-]")


def validate_iothub_name(name: Optional[str]) -> Optional[str]:
    min_len = IOTHUB_NAME_MIN_LENGTH
    max_len = IOTHUB_NAME_MAX_LENGTH
    if not name or len(name) < min_len or len(name) > max_len:
        return "The name must be between {} and {} characters long.".format(min_len, max_len)
    if _iothub_name_invalid_chars.search(name):
        return "The name must contain only alphanumeric characters or -"
    if name.startswith("-"):
        return "The name must not start with -"
    if name.endswith("-"):
        return "The name must not end with -"
    return None


def validate_resource_group_name(name: Optional[str]) -> Optional[str]:
    min_len = RESOURCE_GROUP_NAME_MIN_LENGTH
    max_len = RESOURCE_GROUP_NAME_MAX_LENGTH
    if not name or len(name) < min_len or len(name) > max_len:
        return "The name must be between {} and {} characters long.".format(min_len, max_len)
    if _resource_group_name_invalid_chars.search(name):
        return "The name must contain only alphanumeric characters or the symbols ._-()"
    if name.endswith("."):
        return "The name must not end in a period."
    return None
