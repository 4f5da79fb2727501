"""
Device registry for lookup and ordered execution.

The DeviceRegistry keeps every device of a network under a unique ID and
runs them in registration order. Order matters: a device whose input is the
output of another device must be registered after it to see this pass's
value.
"""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import logging

from chemnet.core.device import Device
from chemnet.core.exceptions import (
    DeviceError,
    DeviceNotFoundError,
    DuplicateDeviceError,
)

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """
    Central registry for device management.

    Example:
        registry = DeviceRegistry()
        registry.register("r1", Reactor(is_double_output=True), device_type="reactor")
        registry.register("m1", Mixer(input_capacity=2), device_type="mixer")

        registry.update_all()
        state = registry.get_all_states()
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._devices: Dict[str, Device] = {}
        self._devices_by_type: Dict[str, List[Device]] = defaultdict(list)

    def register(
        self,
        device_id: str,
        device: Device,
        device_type: Optional[str] = None
    ) -> None:
        """
        Register a device in the registry.

        Args:
            device_id: Unique identifier for lookup
            device: Device instance to register
            device_type: Optional type tag for filtering (e.g., "mixer")

        Raises:
            DuplicateDeviceError: If device_id already registered
            TypeError: If device doesn't inherit from Device
        """
        if device_id in self._devices:
            raise DuplicateDeviceError(f"Device ID '{device_id}' already registered")

        if not isinstance(device, Device):
            raise TypeError(f"Device must inherit from Device ABC, got {type(device)}")

        device.set_device_id(device_id)
        self._devices[device_id] = device

        if device_type:
            self._devices_by_type[device_type].append(device)

        logger.debug(f"Registered device '{device_id}' (type: {device_type})")

    def get(self, device_id: str) -> Device:
        """
        Retrieve device by ID.

        Raises:
            DeviceNotFoundError: If device_id not found
        """
        if device_id not in self._devices:
            raise DeviceNotFoundError(
                f"Device '{device_id}' not found in registry. "
                f"Available: {list(self._devices.keys())}"
            )
        return self._devices[device_id]

    def get_by_type(self, device_type: str) -> List[Device]:
        """Return all devices registered with device_type (empty if none)."""
        return list(self._devices_by_type.get(device_type, []))

    def has(self, device_id: str) -> bool:
        return device_id in self._devices

    def update_all(self) -> None:
        """
        Run update_outputs() on every device in STRICT REGISTRATION ORDER.

        Raises:
            DeviceError: The first failing device's error, re-raised after
                logging. Devices registered after it are not updated.
        """
        for device_id, device in self._devices.items():
            try:
                device.update_outputs()
            except DeviceError as e:
                logger.error(f"Device '{device_id}' failed to update: {e}")
                if e.device_id is None:
                    e.device_id = device_id
                raise

    def get_all_states(self) -> Dict[str, Dict[str, Any]]:
        """Return a mapping of device IDs to their state dictionaries."""
        return {
            device_id: device.get_state()
            for device_id, device in self._devices.items()
        }

    def get_device_count(self) -> int:
        return len(self._devices)

    def get_all_ids(self) -> List[str]:
        return list(self._devices.keys())

    def list_devices(self) -> List[tuple[str, Device]]:
        """Return list of (device_id, device) tuples."""
        return list(self._devices.items())
