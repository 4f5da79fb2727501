"""
Constants for the process network.

Device arities and the numeric tolerance used for mass balance checks.
"""

# Device arity
MIXER_OUTPUTS = 1        # Default output capacity of a Mixer
REACTOR_INPUTS = 1       # Reactors always take exactly one feed

# Stream naming
STREAM_NAME_PREFIX = "s"  # Streams are named s1, s2, ...

# Numerics
MASS_BALANCE_TOLERANCE = 0.01  # kg/h, absolute
DEFAULT_MASS_FLOW_KG_H = 0.0   # Value read from a stream that was never written
