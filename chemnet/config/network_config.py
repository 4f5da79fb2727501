"""
Configuration dataclasses for a process network.

Provides type-safe, validated configuration structures using Python
dataclasses with JSON Schema validation support.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEVICE_TYPES = ('mixer', 'reactor')

# Parameters each device type accepts
DEVICE_PARAMS = {
    'mixer': ('input_capacity', 'output_capacity'),
    'reactor': ('is_double_output',),
}


@dataclass
class StreamConfig:
    """A declared stream. Unnamed streams receive the next factory name."""
    name: Optional[str] = None
    mass_flow_kg_h: Optional[float] = None

    def validate(self) -> None:
        if self.name is not None and not self.name:
            raise ValueError("Stream name must not be empty")


@dataclass
class DeviceConfig:
    """A device instance and its wiring, by stream name."""
    id: str
    type: str
    params: Dict[str, Any] = field(default_factory=dict)
    inputs: List[str] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)

    def validate(self) -> None:
        """Validate device configuration."""
        if not self.id:
            raise ValueError("Device id must be specified")
        if self.type not in DEVICE_TYPES:
            raise ValueError(
                f"Device '{self.id}': unknown type '{self.type}' "
                f"(expected one of {', '.join(DEVICE_TYPES)})"
            )
        unknown = sorted(set(self.params) - set(DEVICE_PARAMS[self.type]))
        if unknown:
            raise ValueError(
                f"Device '{self.id}': parameters {unknown} do not apply to a {self.type} "
                f"(accepted: {', '.join(DEVICE_PARAMS[self.type])})"
            )
        if self.type == 'mixer' and 'input_capacity' not in self.params:
            raise ValueError(f"Mixer '{self.id}' requires params.input_capacity")


@dataclass
class SimulationConfig:
    """How many update passes to run over the network."""
    steps: int = 1

    def validate(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be at least 1")


@dataclass
class NetworkConfig:
    """Complete process network configuration."""
    name: str = "Process Network"
    version: str = "1.0"
    streams: List[StreamConfig] = field(default_factory=list)
    devices: List[DeviceConfig] = field(default_factory=list)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)

    def stream_names(self) -> List[str]:
        return [s.name for s in self.streams if s.name is not None]

    def validate(self) -> None:
        """Validate entire network configuration."""
        for stream in self.streams:
            stream.validate()
        for device in self.devices:
            device.validate()
        self.simulation.validate()

        # Cross-validation checks
        names = self.stream_names()
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate stream names: {duplicates}")

        ids = [d.id for d in self.devices]
        duplicate_ids = sorted({i for i in ids if ids.count(i) > 1})
        if duplicate_ids:
            raise ValueError(f"Duplicate device ids: {duplicate_ids}")

        known = set(names)
        for device in self.devices:
            for stream_name in device.inputs + device.outputs:
                if stream_name not in known:
                    raise ValueError(
                        f"Device '{device.id}' references undeclared stream '{stream_name}'"
                    )
