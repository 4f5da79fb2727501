"""
Enumerations shared by devices and the network.

IntEnum is used so values serialize cleanly into get_state() dictionaries.
"""

from enum import IntEnum


class ReactorMode(IntEnum):
    """
    Output arity of a reactor, fixed at construction.

    Examples:
        reactor = Reactor(is_double_output=True)
        assert reactor.mode == ReactorMode.DOUBLE
        assert reactor.output_capacity == ReactorMode.DOUBLE.output_count
    """
    SINGLE = 1  # 1 input -> 1 output, pass-through
    DOUBLE = 2  # 1 input -> 2 outputs, equal split

    @property
    def output_count(self) -> int:
        return int(self.value)


class DeviceErrorKind(IntEnum):
    """Reason attached to a DeviceError."""
    INPUT_CAPACITY = 0      # add_input() on a full input collection
    OUTPUT_CAPACITY = 1     # add_output() on a full output collection
    NO_INPUT = 2            # update_outputs() with no input attached
    NO_OUTPUTS = 3          # update_outputs() with no output attached
    OUTPUTS_INCOMPLETE = 4  # output count differs from required arity


class PortType(IntEnum):
    """Direction of a device port."""
    INPUT = 0
    OUTPUT = 1
