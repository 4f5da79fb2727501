"""
Stream class for mass-flow tracking.

Represents a named material flow carrying a single scalar:
- Mass flow (kg/h)

Streams are shared by reference between devices. A stream wired as the
output of one device and the input of another lets the downstream device
observe the upstream update.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from chemnet.core.constants import DEFAULT_MASS_FLOW_KG_H


@dataclass(eq=False)
class Stream:
    """
    Represents a named material flow.

    A stream that has never been written reads as DEFAULT_MASS_FLOW_KG_H
    (zero); `is_set` tells the two cases apart.

    Attributes:
        name: Stream identifier, fixed after construction
        mass_flow_kg_h: Optional initial mass flow (kg/h)
    """
    name: str
    mass_flow_kg_h: Optional[float] = None
    _is_set: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        if self.mass_flow_kg_h is None:
            self.mass_flow_kg_h = DEFAULT_MASS_FLOW_KG_H
        else:
            self.set_mass_flow(self.mass_flow_kg_h)

    def get_name(self) -> str:
        return self.name

    def set_mass_flow(self, value: float) -> None:
        """Store a new mass flow (kg/h). No range validation is applied."""
        self.mass_flow_kg_h = float(value)
        self._is_set = True

    def get_mass_flow(self) -> float:
        """Return the last stored mass flow, or zero if never written."""
        return self.mass_flow_kg_h

    @property
    def is_set(self) -> bool:
        """True once a mass flow has been written."""
        return self._is_set

    def describe(self) -> str:
        return f"Stream {self.name} flow = {self.mass_flow_kg_h:g}"

    def print(self) -> None:
        """Write the one-line stream report to stdout."""
        print(self.describe())

    def get_state(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "mass_flow_kg_h": float(self.mass_flow_kg_h),
            "is_set": self._is_set,
        }

    def __str__(self) -> str:
        return self.describe()
