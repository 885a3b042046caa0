# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the sink for usage events emitted by the explorer"""

import hashlib
import logging
from typing import Dict, Optional
from . import connection_string as cs
from .handle_exceptions import swallow_unraised_exception

logger = logging.getLogger(__name__)

HOST_NAME_HASH_PROPERTY = "IoTHubHostNameHash"


class TelemetryClient:
    def __init__(self, enabled: bool = True, event_logger: Optional[logging.Logger] = None):
        """Fire-and-forget sink for usage events.

        Events are written to the `event_logger` at INFO level. A failure to emit an event is
        logged and never raised.

        :param bool enabled: Events are dropped when False
        :param event_logger: Logger events are written to (default: this module's logger)
        """
        self.enabled = enabled
        self._event_logger = event_logger or logger

    def send_event(
        self,
        event_name: str,
        properties: Optional[Dict[str, str]] = None,
        iothub_connection_string: Optional[str] = None,
    ) -> None:
        """Emit a usage event.

        :param str event_name: Name of the event
        :param dict properties: Additional string properties of the event
        :param str iothub_connection_string: If provided, a hash of its host name is attached
            to the event. The connection string itself is never emitted.
        """
        if not self.enabled:
            return
        try:
            event_properties = dict(properties or {})
            if iothub_connection_string:
                event_properties[HOST_NAME_HASH_PROPERTY] = _hash_host_name(
                    iothub_connection_string
                )
            self._event_logger.info(
                "Telemetry event: {} {}".format(event_name, event_properties)
            )
        except Exception as e:
            swallow_unraised_exception(
                e, log_msg="Unable to send telemetry event '{}'".format(event_name)
            )


def _hash_host_name(connection_string):
    host_name = cs.ConnectionString(connection_string)[cs.HOST_NAME]
    return hashlib.sha256(host_name.encode("utf-8")).hexdigest()
