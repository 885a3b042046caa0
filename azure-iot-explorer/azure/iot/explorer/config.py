# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import abc
import click
import json
import logging
import os
import tempfile
from typing import Any, Dict, Optional
from . import constant

logger = logging.getLogger(__name__)

# Upper bounds on tunables that only affect interactive feedback
MAX_HEARTBEAT_INTERVAL_SECS = 60
MAX_PICKER_RETRY_COUNT = 10


class ConfigStore(abc.ABC):
    """Storage for the settings shared with downstream tooling"""

    @abc.abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        pass

    @abc.abstractmethod
    async def update(self, key: str, value: Any, user_scope: bool = True) -> None:
        """Write a single setting, overwriting any previous value.

        :param str key: The setting to write
        :param value: The new value (JSON serializable)
        :param bool user_scope: Persist the setting for the user rather than the workspace
        """
        pass


class InMemoryConfigStore(ConfigStore):
    """ConfigStore that keeps settings for the lifetime of the object only"""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._settings: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    async def update(self, key: str, value: Any, user_scope: bool = True) -> None:
        self._settings[key] = value


class JsonFileConfigStore(ConfigStore):
    """ConfigStore persisting settings as a JSON document.

    The document is rewritten in full on every update, through a temporary file that replaces
    the previous document, so readers never observe a partially written value.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                settings = json.load(f)
        except FileNotFoundError:
            return {}
        except ValueError:
            logger.warning("Settings file {} is not valid JSON. Ignoring it.".format(self.path))
            return {}
        if not isinstance(settings, dict):
            logger.warning("Settings file {} is not a JSON object. Ignoring it.".format(self.path))
            return {}
        return settings

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    async def update(self, key: str, value: Any, user_scope: bool = True) -> None:
        settings = self._load()
        settings[key] = value
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".settings-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(settings, f, indent=4)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.remove(tmp_path)
            raise
        logger.debug("Updated setting '{}' in {}".format(key, self.path))


def default_settings_path() -> str:
    """Path of the user settings document, overridable through the environment"""
    override = os.environ.get(constant.SETTINGS_PATH_ENV_VAR)
    if override:
        return override
    return os.path.join(click.get_app_dir(constant.APP_NAME), constant.SETTINGS_FILE_NAME)


class ExplorerConfig:
    """
    Class for storing the tunables of the IoT Hub Resource Explorer.
    """

    def __init__(
        self,
        *,
        heartbeat_interval: float = constant.HEARTBEAT_INTERVAL_SECS,
        picker_retry_window: float = constant.PICKER_RETRY_WINDOW_SECS,
        picker_retry_count: int = constant.PICKER_RETRY_COUNT,
        owner_policy_name: str = constant.IOTHUB_OWNER_POLICY,
    ) -> None:
        """Initializer for ExplorerConfig

        :param float heartbeat_interval: Seconds between progress ticks written to the output
            while an IoT Hub is being created.
        :param float picker_retry_window: A quick pick dismissed faster than this many seconds
            is treated as a UI glitch and shown again.
        :param int picker_retry_count: Maximum number of times a quick pick is shown in total.
        :param str owner_policy_name: Shared access policy used to build connection strings.
        """
        self.heartbeat_interval = _sanitize_heartbeat_interval(heartbeat_interval)
        self.picker_retry_window = _sanitize_retry_window(picker_retry_window)
        self.picker_retry_count = _sanitize_retry_count(picker_retry_count)
        self.owner_policy_name = owner_policy_name


# Sanitization #


def _sanitize_heartbeat_interval(interval):
    try:
        interval = float(interval)
    except (ValueError, TypeError):
        raise TypeError("Invalid type for 'heartbeat interval'. Must be a numeric value.")

    if interval <= 0:
        raise ValueError("'heartbeat interval' must be greater than 0")

    if interval > MAX_HEARTBEAT_INTERVAL_SECS:
        raise ValueError("'heartbeat interval' cannot exceed 60 seconds")

    return interval


def _sanitize_retry_window(window):
    try:
        window = float(window)
    except (ValueError, TypeError):
        raise TypeError("Invalid type for 'picker retry window'. Must be a numeric value.")

    if window < 0:
        raise ValueError("'picker retry window' cannot be negative")

    return window


def _sanitize_retry_count(count):
    try:
        count = int(count)
    except (ValueError, TypeError):
        raise TypeError("Invalid type for 'picker retry count'. Must be a numeric value.")

    if count < 0:
        raise ValueError("'picker retry count' cannot be negative")

    if count > MAX_PICKER_RETRY_COUNT:
        raise ValueError("'picker retry count' cannot exceed 10")

    return count
