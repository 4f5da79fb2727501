"""Network execution and command-line runner."""

from chemnet.simulation.network import ProcessNetwork

__all__ = ['ProcessNetwork']
