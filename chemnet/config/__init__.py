"""Network configuration: dataclasses, loaders and builder."""

from chemnet.config.network_config import (
    DeviceConfig,
    NetworkConfig,
    SimulationConfig,
    StreamConfig,
)
from chemnet.config.loaders import ConfigLoader, load_network_config
from chemnet.config.builder import NetworkBuilder

__all__ = [
    'StreamConfig',
    'DeviceConfig',
    'SimulationConfig',
    'NetworkConfig',
    'ConfigLoader',
    'load_network_config',
    'NetworkBuilder',
]
