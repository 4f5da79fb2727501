"""
Reactor Component.

This module implements a single-feed reactor that either passes its feed
through to one product stream or splits it equally into two.
"""

import logging
from typing import Any, Dict

from chemnet.core.constants import REACTOR_INPUTS
from chemnet.core.device import Device
from chemnet.core.enums import DeviceErrorKind, ReactorMode
from chemnet.core.exceptions import NotFullyWiredError

logger = logging.getLogger(__name__)


class Reactor(Device):
    """
    Chemical reactor with 1 input and 1 or 2 outputs.

    Modes (fixed at construction):
        - SINGLE: 1 input -> 1 output, m_out = m_in
        - DOUBLE: 1 input -> 2 outputs, m_out1 = m_out2 = m_in / 2

    The output count must match the mode exactly before update_outputs()
    will run.
    """

    def __init__(self, is_double_output: bool = False, **kwargs) -> None:
        """
        Initialize the Reactor.

        Args:
            is_double_output: True for two outputs, False for one.
            **kwargs: Forwarded to Device (device_id).
        """
        self._mode = ReactorMode.DOUBLE if is_double_output else ReactorMode.SINGLE
        super().__init__(REACTOR_INPUTS, self._mode.output_count, **kwargs)

    @property
    def mode(self) -> ReactorMode:
        return self._mode

    @property
    def is_double_output(self) -> bool:
        return self._mode == ReactorMode.DOUBLE

    def update_outputs(self) -> None:
        """
        Transfer or split the feed mass flow.

        Raises:
            NotFullyWiredError: If the input is missing or the number of
                outputs differs from the mode's arity. Nothing is written.
        """
        if not self._inputs:
            raise NotFullyWiredError(
                f"{self._label()}: input stream not connected",
                kind=DeviceErrorKind.NO_INPUT,
                device_id=self.device_id,
            )

        if len(self._outputs) != self.output_capacity:
            raise NotFullyWiredError(
                f"{self._label()}: expected {self.output_capacity} outputs, "
                f"got {len(self._outputs)}",
                kind=DeviceErrorKind.OUTPUTS_INCOMPLETE,
                device_id=self.device_id,
            )

        m_in = self._inputs[0].get_mass_flow()

        if self._mode == ReactorMode.DOUBLE:
            m_out = m_in / 2.0
            self._outputs[0].set_mass_flow(m_out)
            self._outputs[1].set_mass_flow(m_out)
            logger.debug(f"{self._label()}: split mass {m_in:g} into two outputs of {m_out:g}")
        else:
            self._outputs[0].set_mass_flow(m_in)
            logger.debug(f"{self._label()}: transferred mass {m_in:g} to single output")

    def get_state(self) -> Dict[str, Any]:
        return {
            **super().get_state(),
            "mode": int(self._mode),
            "is_double_output": self.is_double_output,
        }
