# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Handling for failures of fire-and-forget collaborators (telemetry, refresh notifications),
which must never fail the operation that triggered them.
"""
import logging

logger = logging.getLogger(__name__)


def swallow_unraised_exception(e, log_msg=None, log_lvl=logging.WARNING):
    """Swallow and log an exception object.

    Exceptions can only be logged with their traceback from within an except block, so the
    exception is re-raised and caught here.

    :param Exception e: Exception object to be swallowed.
    :param str log_msg: Optional message to use when logging.
    :param int log_lvl: The logging level to log at. Default WARNING.
    """
    try:
        raise e
    except Exception:
        logger.log(log_lvl, log_msg, exc_info=True)


def call_and_swallow(fn, *args, log_msg=None, **kwargs):
    """Invoke a fire-and-forget callable, logging instead of raising any error it raises.

    :returns: The return value of fn, or None if it raised
    """
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        swallow_unraised_exception(e, log_msg=log_msg)
        return None
