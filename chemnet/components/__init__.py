"""Process devices: mixing and reaction."""

from chemnet.components.mixer import Mixer
from chemnet.components.reactor import Reactor

__all__ = ['Mixer', 'Reactor']
