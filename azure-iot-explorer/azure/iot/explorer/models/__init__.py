"""Azure IoT Explorer Models

This package provides the records exchanged with the control plane, the items presented in
interactive pickers, and the result of explorer operations.
"""

from .resources import (  # noqa: F401
    ResourceGroup,
    Location,
    IotHubDescription,
    SharedAccessKey,
    NameAvailability,
    PricingTier,
)
from .items import (  # noqa: F401
    QuickPickItem,
    SubscriptionItem,
    ResourceGroupItem,
    CreateResourceGroupItem,
    LocationItem,
    PricingTierItem,
    IotHubItem,
    DeviceItem,
)
from .result import OperationResult, OperationStatus  # noqa: F401
