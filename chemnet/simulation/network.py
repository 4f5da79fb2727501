"""
ProcessNetwork: the context object that owns streams and devices.

A network holds its own StreamFactory, so stream names are unique per
network and never depend on process-wide state. Devices are kept in a
DeviceRegistry and updated in registration order.
"""

import logging
from typing import Any, Dict, List, Optional

import numpy as np

from chemnet.core.constants import MASS_BALANCE_TOLERANCE
from chemnet.core.device import Device
from chemnet.core.device_registry import DeviceRegistry
from chemnet.core.exceptions import ConfigurationError, SimulationError
from chemnet.core.stream import Stream
from chemnet.core.stream_factory import StreamFactory

logger = logging.getLogger(__name__)


class ProcessNetwork:
    """
    Streams and devices of one process flowsheet.

    Example:
        net = ProcessNetwork("demo")
        feed = net.create_stream(30.0)
        a, b = net.create_stream(), net.create_stream()
        net.add_device("r1", Reactor(is_double_output=True))
        net.connect_input("r1", feed)
        net.connect_output("r1", a)
        net.connect_output("r1", b)
        net.update_all()
        net.stream_table()   # {'s1': 30.0, 's2': 15.0, 's3': 15.0}
    """

    def __init__(self, name: str = "Process Network", stream_factory: Optional[StreamFactory] = None):
        self.name = name
        self.stream_factory = stream_factory or StreamFactory()
        self.registry = DeviceRegistry()
        self._streams: Dict[str, Stream] = {}
        self.passes_run = 0

    # --- Streams ---

    def create_stream(self, mass_flow_kg_h: Optional[float] = None) -> Stream:
        """Create a factory-named stream and add it to the network."""
        return self.add_stream(self.stream_factory.create(mass_flow_kg_h, taken=self._streams))

    def add_stream(self, stream: Stream) -> Stream:
        """
        Add an existing stream under its own name.

        Raises:
            ConfigurationError: If another stream already uses the name
        """
        self._check_name_free(stream)
        self._streams[stream.name] = stream
        return stream

    def _check_name_free(self, stream: Stream) -> None:
        existing = self._streams.get(stream.name)
        if existing is not None and existing is not stream:
            raise ConfigurationError(f"Stream name '{stream.name}' already used in network '{self.name}'")

    def get_stream(self, name: str) -> Stream:
        if name not in self._streams:
            raise ConfigurationError(
                f"Stream '{name}' not found in network '{self.name}'. "
                f"Available: {list(self._streams.keys())}"
            )
        return self._streams[name]

    @property
    def streams(self) -> List[Stream]:
        return list(self._streams.values())

    # --- Devices ---

    def add_device(self, device_id: str, device: Device, device_type: Optional[str] = None) -> Device:
        self.registry.register(device_id, device, device_type=device_type or type(device).__name__.lower())
        return device

    def get_device(self, device_id: str) -> Device:
        return self.registry.get(device_id)

    def connect_input(self, device_id: str, stream: Stream | str) -> None:
        """
        Attach a stream (or stream name) as an input of device_id.

        A stream object not yet in the network is added only once the
        device accepts it.
        """
        device = self.get_device(device_id)
        resolved = self._resolve(stream)
        device.add_input(resolved)
        self.add_stream(resolved)

    def connect_output(self, device_id: str, stream: Stream | str) -> None:
        """Attach a stream (or stream name) as an output of device_id."""
        device = self.get_device(device_id)
        resolved = self._resolve(stream)
        device.add_output(resolved)
        self.add_stream(resolved)

    def _resolve(self, stream: Stream | str) -> Stream:
        if isinstance(stream, str):
            return self.get_stream(stream)
        self._check_name_free(stream)
        return stream

    # --- Execution ---

    def update_all(self) -> None:
        """Run one update pass over all devices in registration order."""
        self.registry.update_all()
        self.passes_run += 1

    def run(self, steps: int = 1) -> Dict[str, float]:
        """
        Run several update passes and return the final stream table.

        Repeated passes let values propagate through devices registered
        before their upstream neighbours.

        Raises:
            SimulationError: If steps is not positive
        """
        if steps < 1:
            raise SimulationError(f"steps must be at least 1, got {steps}")

        logger.info(f"Running network '{self.name}': {self.registry.get_device_count()} devices, {steps} pass(es)")
        for _ in range(steps):
            self.update_all()
        return self.stream_table()

    # --- Reporting ---

    def stream_table(self) -> Dict[str, float]:
        """Map each stream name to its current mass flow (kg/h)."""
        return {name: s.get_mass_flow() for name, s in self._streams.items()}

    def mass_balance(self, device_id: str) -> float:
        """Return sum(inputs) - sum(outputs) for a device (kg/h)."""
        device = self.get_device(device_id)
        m_in = np.array([s.get_mass_flow() for s in device.inputs], dtype=float)
        m_out = np.array([s.get_mass_flow() for s in device.outputs], dtype=float)
        return float(m_in.sum() - m_out.sum())

    def is_balanced(self, device_id: str, tolerance: float = MASS_BALANCE_TOLERANCE) -> bool:
        return bool(np.isclose(self.mass_balance(device_id), 0.0, rtol=0.0, atol=tolerance))

    def get_all_states(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "passes_run": self.passes_run,
            "streams": {name: s.get_state() for name, s in self._streams.items()},
            "devices": self.registry.get_all_states(),
        }

    def print_streams(self) -> None:
        for stream in self._streams.values():
            stream.print()
