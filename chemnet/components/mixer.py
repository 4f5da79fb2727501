"""
Mixer Component.

This module implements a device that combines any number of input streams
and distributes the combined mass flow evenly over its output streams.
"""

import logging
from typing import Any, Dict

import numpy as np

from chemnet.core.constants import MIXER_OUTPUTS
from chemnet.core.device import Device
from chemnet.core.enums import DeviceErrorKind
from chemnet.core.exceptions import NotFullyWiredError

logger = logging.getLogger(__name__)


class Mixer(Device):
    """
    Combines input streams and averages the total across outputs.

    Physics:
        - Mass Balance: sum(m_in) = M * m_out
        - Every output receives the same flow: m_out = sum(m_in) / M

    With no inputs attached the total is zero and outputs are written as
    zero. At least one output must be attached before updating.

    Configuration:
        input_capacity (int): Maximum number of input streams.
        output_capacity (int): Maximum number of output streams (default 1).
    """

    def __init__(self, input_capacity: int, output_capacity: int = MIXER_OUTPUTS, **kwargs) -> None:
        super().__init__(input_capacity, output_capacity, **kwargs)
        self.last_total_kg_h: float = 0.0

    def update_outputs(self) -> None:
        """
        Write sum(inputs) / len(outputs) to every attached output.

        Raises:
            NotFullyWiredError: If no output is attached. Nothing is written.
        """
        if not self._outputs:
            raise NotFullyWiredError(
                f"{self._label()}: outputs must be attached before update",
                kind=DeviceErrorKind.NO_OUTPUTS,
                device_id=self.device_id,
            )

        flows = np.array([s.get_mass_flow() for s in self._inputs], dtype=float)
        total = float(flows.sum())
        per_output = total / len(self._outputs)

        for stream in self._outputs:
            stream.set_mass_flow(per_output)

        self.last_total_kg_h = total
        logger.debug(
            f"{self._label()}: mixed {len(self._inputs)} inputs ({total:g} kg/h) "
            f"into {len(self._outputs)} outputs of {per_output:g} kg/h"
        )

    def get_state(self) -> Dict[str, Any]:
        return {
            **super().get_state(),
            "total_flow_kg_h": self.last_total_kg_h,
            "flow_out_kg_h": [s.get_mass_flow() for s in self._outputs],
        }
