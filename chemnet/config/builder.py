"""
NetworkBuilder: Factory for configuration-driven network assembly.

Constructs a complete ProcessNetwork from NetworkConfig, creating streams,
instantiating devices and wiring them by stream name.
"""

from pathlib import Path
from typing import Callable, Dict
import logging

from chemnet.components.mixer import Mixer
from chemnet.components.reactor import Reactor
from chemnet.config.loaders import ConfigLoader, load_network_config
from chemnet.config.network_config import DeviceConfig, NetworkConfig
from chemnet.core.constants import MIXER_OUTPUTS
from chemnet.core.device import Device
from chemnet.core.exceptions import ConfigurationError, DeviceError
from chemnet.core.stream import Stream
from chemnet.simulation.network import ProcessNetwork

logger = logging.getLogger(__name__)


def _make_mixer(cfg: DeviceConfig) -> Device:
    return Mixer(
        input_capacity=cfg.params['input_capacity'],
        output_capacity=cfg.params.get('output_capacity', MIXER_OUTPUTS),
    )


def _make_reactor(cfg: DeviceConfig) -> Device:
    return Reactor(is_double_output=bool(cfg.params.get('is_double_output', False)))


DEVICE_FACTORIES: Dict[str, Callable[[DeviceConfig], Device]] = {
    'mixer': _make_mixer,
    'reactor': _make_reactor,
}


class NetworkBuilder:
    """
    Factory for building process networks from configuration.

    Example:
        # From configuration file
        builder = NetworkBuilder.from_file("configs/reactor_split.yaml")
        builder.network.run(builder.config.simulation.steps)

        # From NetworkConfig object
        builder = NetworkBuilder.from_config(NetworkConfig(...))
    """

    def __init__(self, config: NetworkConfig):
        """
        Args:
            config: Validated NetworkConfig instance
        """
        self.config = config
        self.network = ProcessNetwork(config.name)

    @classmethod
    def from_file(cls, config_path: Path | str) -> 'NetworkBuilder':
        config = load_network_config(config_path)
        builder = cls(config)
        builder.build()
        return builder

    @classmethod
    def from_config(cls, config: NetworkConfig) -> 'NetworkBuilder':
        try:
            config.validate()
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e
        builder = cls(config)
        builder.build()
        return builder

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'NetworkBuilder':
        config = ConfigLoader().dict_to_config(config_dict)
        builder = cls(config)
        builder.build()
        return builder

    def build(self) -> None:
        """Create streams, then devices, then wiring."""
        logger.info(f"Building network: {self.config.name}")

        self._build_streams()
        for device_cfg in self.config.devices:
            self._build_device(device_cfg)

        logger.info(
            f"Network built: {len(self.network.streams)} streams, "
            f"{self.network.registry.get_device_count()} devices"
        )

    def _build_streams(self) -> None:
        # Named streams first so generated names skip over them
        for stream_cfg in self.config.streams:
            if stream_cfg.name is not None:
                self.network.add_stream(Stream(stream_cfg.name, stream_cfg.mass_flow_kg_h))
        for stream_cfg in self.config.streams:
            if stream_cfg.name is None:
                self.network.create_stream(stream_cfg.mass_flow_kg_h)

    def _build_device(self, cfg: DeviceConfig) -> None:
        try:
            factory = DEVICE_FACTORIES[cfg.type]
        except KeyError:
            raise ConfigurationError(f"Device '{cfg.id}': unsupported type '{cfg.type}'") from None

        try:
            device = factory(cfg)
        except ValueError as e:
            raise ConfigurationError(f"Device '{cfg.id}': {e}") from e

        self.network.add_device(cfg.id, device, device_type=cfg.type)

        try:
            for name in cfg.inputs:
                self.network.connect_input(cfg.id, name)
            for name in cfg.outputs:
                self.network.connect_output(cfg.id, name)
        except DeviceError as e:
            raise ConfigurationError(f"Device '{cfg.id}' wiring failed: {e}") from e

        logger.debug(f"Built {cfg.type} '{cfg.id}': inputs={cfg.inputs}, outputs={cfg.outputs}")
