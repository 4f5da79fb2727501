"""Custom exception hierarchy for the process network."""

from typing import Optional

from chemnet.core.enums import DeviceErrorKind


class ChemNetError(Exception):
    """Base exception for all chemnet errors."""
    pass


class DeviceError(ChemNetError):
    """
    Base exception for device wiring and update errors.

    Attributes:
        kind: Which contract was violated
        device_id: Registry identifier of the offending device, if known
    """

    def __init__(self, message: str, kind: DeviceErrorKind, device_id: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.device_id = device_id


class CapacityExceededError(DeviceError):
    """Raised when a stream is attached to a port collection that is already full."""
    pass


class NotFullyWiredError(DeviceError):
    """Raised when update_outputs() is called with missing or incomplete wiring."""
    pass


class RegistryError(ChemNetError):
    """Base exception for registry errors."""
    pass


class DeviceNotFoundError(RegistryError):
    """Raised when device ID not found in registry."""
    pass


class DuplicateDeviceError(RegistryError):
    """Raised when attempting to register duplicate device ID."""
    pass


class ConfigurationError(ChemNetError):
    """Raised for configuration loading/validation errors."""
    pass


class SimulationError(ChemNetError):
    """Raised for network execution errors."""
    pass
