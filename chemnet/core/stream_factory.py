"""
Stream factory with an owned name counter.

Each factory numbers its own streams (s1, s2, ...). Nothing is shared
between factories, so tests and networks can create streams independently.
"""

import logging
from typing import Container, Optional

from chemnet.core.constants import STREAM_NAME_PREFIX
from chemnet.core.stream import Stream

logger = logging.getLogger(__name__)


class StreamFactory:
    """
    Allocates uniquely named streams.

    Example:
        factory = StreamFactory()
        feed = factory.create(mass_flow_kg_h=10.0)   # "s1"
        product = factory.create()                  # "s2", reads 0.0
        factory.reset()
        factory.create().name                       # "s1" again
    """

    def __init__(self, prefix: str = STREAM_NAME_PREFIX, start: int = 0) -> None:
        """
        Args:
            prefix: Text placed before the counter in each stream name
            start: Counter value before the first stream is issued
        """
        if start < 0:
            raise ValueError(f"StreamFactory start must be non-negative, got {start}")
        self.prefix = prefix
        self._start = start
        self._counter = start
        self._issued = 0

    @property
    def count(self) -> int:
        """Number of streams issued since construction or the last reset()."""
        return self._issued

    def next_name(self) -> str:
        """Advance the counter and return the next stream name."""
        self._counter += 1
        return f"{self.prefix}{self._counter}"

    def create(self, mass_flow_kg_h: Optional[float] = None, taken: Container[str] = ()) -> Stream:
        """
        Create a new stream with the next free name.

        Args:
            mass_flow_kg_h: Initial mass flow; left unset when None
            taken: Names already in use; the counter skips past them
        """
        name = self.next_name()
        while name in taken:
            name = self.next_name()
        stream = Stream(name, mass_flow_kg_h)
        self._issued += 1
        logger.debug(f"Created stream '{stream.name}'")
        return stream

    def reset(self) -> None:
        self._counter = self._start
        self._issued = 0
