# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the result returned by interactive explorer operations.
"""
import enum


class OperationStatus(enum.Enum):
    CANCELLED = "cancelled"
    SUCCEEDED = "succeeded"


class OperationResult(object):
    """Outcome of an interactive operation.

    Failures are not represented here. They are raised to the caller.

    :ivar status: Whether the operation completed or was declined by the user.
    :type status: :class:`OperationStatus`
    :ivar value: The value produced by a successful operation.
    """

    def __init__(self, status, value=None):
        self.status = status
        self.value = value

    @classmethod
    def cancelled(cls):
        return cls(OperationStatus.CANCELLED)

    @classmethod
    def succeeded(cls, value=None):
        return cls(OperationStatus.SUCCEEDED, value)

    @property
    def is_cancelled(self):
        return self.status is OperationStatus.CANCELLED

    @property
    def is_succeeded(self):
        return self.status is OperationStatus.SUCCEEDED

    def __bool__(self):
        return self.is_succeeded

    def __repr__(self):
        return "OperationResult(status={}, value={!r})".format(self.status.value, self.value)
