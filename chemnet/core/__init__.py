"""Core abstractions: streams, devices, registry and error hierarchy."""

from chemnet.core.constants import MASS_BALANCE_TOLERANCE, MIXER_OUTPUTS, REACTOR_INPUTS
from chemnet.core.device import Device
from chemnet.core.device_registry import DeviceRegistry
from chemnet.core.enums import DeviceErrorKind, PortType, ReactorMode
from chemnet.core.exceptions import (
    CapacityExceededError,
    ChemNetError,
    ConfigurationError,
    DeviceError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    NotFullyWiredError,
    RegistryError,
    SimulationError,
)
from chemnet.core.stream import Stream
from chemnet.core.stream_factory import StreamFactory

__all__ = [
    'Stream',
    'StreamFactory',
    'Device',
    'DeviceRegistry',
    'DeviceErrorKind',
    'PortType',
    'ReactorMode',
    'ChemNetError',
    'DeviceError',
    'CapacityExceededError',
    'NotFullyWiredError',
    'RegistryError',
    'DeviceNotFoundError',
    'DuplicateDeviceError',
    'ConfigurationError',
    'SimulationError',
    'MASS_BALANCE_TOLERANCE',
    'MIXER_OUTPUTS',
    'REACTOR_INPUTS',
]
