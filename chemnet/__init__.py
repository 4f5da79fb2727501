"""
Chemical Process Network - Main Package

Named streams carry a mass flow (kg/h); devices transform them:
- Mixer: sums its inputs and averages the total across its outputs
- Reactor: passes one feed through, or splits it equally in two

See chemnet.simulation.runner for the command-line entry point.
"""

__version__ = "1.0.0"

from chemnet.core import *
from chemnet.components import *
from chemnet.simulation import *

__all__ = [
    # Core
    'Stream',
    'StreamFactory',
    'Device',
    'DeviceRegistry',

    # Enums
    'DeviceErrorKind',
    'PortType',
    'ReactorMode',

    # Errors
    'ChemNetError',
    'DeviceError',
    'CapacityExceededError',
    'NotFullyWiredError',
    'RegistryError',
    'DeviceNotFoundError',
    'DuplicateDeviceError',
    'ConfigurationError',
    'SimulationError',

    # Devices
    'Mixer',
    'Reactor',

    # Simulation
    'ProcessNetwork',
]
