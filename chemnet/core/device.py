"""
Core device abstraction for the process network.

This module defines the Device abstract base class that mixers, reactors and
any future unit operations inherit from. The base class owns the one and only
capacity check for each port collection; subclasses decide their capacities
in the constructor and implement the transform in update_outputs().
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from chemnet.core.enums import DeviceErrorKind, PortType
from chemnet.core.exceptions import CapacityExceededError
from chemnet.core.stream import Stream


class Device(ABC):
    """
    Abstract base class for all process devices.

    A device holds two ordered collections of streams, inputs and outputs,
    each bounded by a capacity fixed at construction. Devices reference
    streams but do not own them: a stream may be wired into several devices
    and may outlive all of them.

    Lifecycle:

    1. __init__(): capacities are established, collections start empty
    2. add_input() / add_output(): wire streams, bounded by capacity
    3. update_outputs(): write output mass flows from current inputs

    Wiring and updating may be repeated in any order after construction;
    there is no sealed state.

    Attributes:
        device_id: Unique identifier set during registry registration
        input_capacity: Maximum number of input streams
        output_capacity: Maximum number of output streams
    """

    def __init__(self, input_capacity: int, output_capacity: int, **kwargs) -> None:
        """
        Initialize device with fixed capacities.

        Args:
            input_capacity: Maximum number of inputs (positive integer)
            output_capacity: Maximum number of outputs (positive integer)
            **kwargs: Additional keyword arguments:
                - device_id: Optional explicit ID (for tests/manual wiring)

        Raises:
            ValueError: If a capacity is not a positive integer
        """
        device_id = kwargs.pop("device_id", None)

        self.device_id: Optional[str] = None
        self.input_capacity: int = self._validate_capacity("input_capacity", input_capacity)
        self.output_capacity: int = self._validate_capacity("output_capacity", output_capacity)
        self._inputs: List[Stream] = []
        self._outputs: List[Stream] = []

        if device_id is not None:
            self.set_device_id(device_id)

    @staticmethod
    def _validate_capacity(label: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"{label} must be a positive integer, got {value!r}")
        return value

    @property
    def inputs(self) -> Tuple[Stream, ...]:
        """Attached input streams, in wiring order."""
        return tuple(self._inputs)

    @property
    def outputs(self) -> Tuple[Stream, ...]:
        """Attached output streams, in wiring order."""
        return tuple(self._outputs)

    def has_input_capacity(self) -> bool:
        return len(self._inputs) < self.input_capacity

    def has_output_capacity(self) -> bool:
        return len(self._outputs) < self.output_capacity

    def add_input(self, stream: Stream) -> None:
        """
        Attach an input stream.

        Args:
            stream: Stream to read from during update_outputs()

        Raises:
            CapacityExceededError: If input_capacity streams are already attached.
                The input collection is left unchanged.
        """
        if not self.has_input_capacity():
            raise CapacityExceededError(
                f"{self._label()}: input limit of {self.input_capacity} reached",
                kind=DeviceErrorKind.INPUT_CAPACITY,
                device_id=self.device_id,
            )
        self._inputs.append(stream)

    def add_output(self, stream: Stream) -> None:
        """
        Attach an output stream.

        Args:
            stream: Stream written by update_outputs()

        Raises:
            CapacityExceededError: If output_capacity streams are already attached.
                The output collection is left unchanged.
        """
        if not self.has_output_capacity():
            raise CapacityExceededError(
                f"{self._label()}: output limit of {self.output_capacity} reached",
                kind=DeviceErrorKind.OUTPUT_CAPACITY,
                device_id=self.device_id,
            )
        self._outputs.append(stream)

    @abstractmethod
    def update_outputs(self) -> None:
        """
        Write output mass flows from the current input mass flows.

        Implementations must be deterministic given the current inputs and
        wiring, must validate wiring before writing anything, and must leave
        every output untouched when they raise.

        Raises:
            NotFullyWiredError: If required inputs or outputs are missing
        """

    def set_device_id(self, device_id: str) -> None:
        """
        Set unique device identifier (called by DeviceRegistry).

        Args:
            device_id: Unique identifier for registry lookup
        """
        self.device_id = device_id

    def get_state(self) -> Dict[str, Any]:
        """
        Return current device state for monitoring.

        Returns:
            Dictionary of JSON-serializable values. Subclasses extend it with
            {**super().get_state(), ...}.
        """
        return {
            "device_id": self.device_id,
            "device_type": type(self).__name__,
            "inputs": [s.name for s in self._inputs],
            "outputs": [s.name for s in self._outputs],
            "input_capacity": self.input_capacity,
            "output_capacity": self.output_capacity,
        }

    def get_ports(self) -> Dict[str, Dict[str, Any]]:
        """
        Describe the port collections of this device.

        Returns:
            {
                'inlet':  {'type': PortType.INPUT,  'capacity': int, 'connected': int},
                'outlet': {'type': PortType.OUTPUT, 'capacity': int, 'connected': int}
            }
        """
        return {
            'inlet': {
                'type': PortType.INPUT,
                'capacity': self.input_capacity,
                'connected': len(self._inputs),
            },
            'outlet': {
                'type': PortType.OUTPUT,
                'capacity': self.output_capacity,
                'connected': len(self._outputs),
            },
        }

    def _label(self) -> str:
        if self.device_id:
            return f"{type(self).__name__} '{self.device_id}'"
        return type(self).__name__
