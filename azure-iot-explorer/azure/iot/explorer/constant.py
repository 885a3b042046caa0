# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines constants for use across the azure-iot-explorer package
"""

VERSION = "0.1.0"

# Configuration
IOTHUB_CONNECTION_STRING_KEY = "iotHubConnectionString"
IOTHUB_CONNECTION_STRING_TITLE = "IoT Hub Connection String"
SETTINGS_FILE_NAME = "settings.json"
SETTINGS_PATH_ENV_VAR = "AZURE_IOT_EXPLORER_SETTINGS"
APP_NAME = "azure-iot-explorer"

# Control plane
IOTHUB_OWNER_POLICY = "iothubowner"
IOTHUB_SKU_CAPACITY = 1
ARM_SCOPE = "https://management.azure.com/.default"

# Quick pick flake workaround
PICKER_RETRY_WINDOW_SECS = 0.5
PICKER_RETRY_COUNT = 3

# Creation feedback
HEARTBEAT_INTERVAL_SECS = 1.0

# Telemetry events
IOTHUB_CREATE_START_EVENT = "AZ.Create.IoTHub.Start"
IOTHUB_CREATE_DONE_EVENT = "AZ.Create.IoTHub.Done"
IOTHUB_SELECT_START_EVENT = "General.Select.IoTHub.Start"
IOTHUB_SELECT_DONE_EVENT = "AZ.Select.IoTHub.Done"
SUBSCRIPTION_SELECT_START_EVENT = "General.Select.Subscription.Start"
SUBSCRIPTION_SELECT_DONE_EVENT = "General.Select.Subscription.Done"
SUBSCRIPTION_LOAD_EVENT = "General.Load.Subscription"
IOTHUB_LOAD_EVENT = "General.Load.IoTHub"
ASK_FOR_LOGIN_EVENT = "General.AskForAzureLogin"
COPY_IOTHUB_CONNECTION_STRING_EVENT = "AZ.Copy.IotHubConnectionString"
COPY_DEVICE_CONNECTION_STRING_EVENT = "AZ.Copy.DeviceConnectionString"
SASTOKEN_SERVICE_EVENT = "AZ.Generate.SasToken.Service"
SASTOKEN_DEVICE_EVENT = "AZ.Generate.SasToken.Device"
