"""Azure IoT Explorer

This package provides an interactive explorer that creates or selects an Azure IoT Hub,
stores its connection string, and generates credentials for the hub and its devices.
"""

from .explorer import IoTHubResourceExplorer  # noqa: F401
from .account import AzureAccount, AzureCliAccount  # noqa: F401
from .config import ConfigStore, ExplorerConfig, InMemoryConfigStore, JsonFileConfigStore  # noqa
from .control_plane import ArmControlPlaneClient, ControlPlaneClient  # noqa: F401
from .exceptions import ExplorerError, ConnectionStringNotFoundError, LoginError  # noqa: F401
from .models import OperationResult, OperationStatus, PricingTier  # noqa: F401
from .telemetry import TelemetryClient  # noqa: F401
from .constant import VERSION as __version__  # noqa: F401
