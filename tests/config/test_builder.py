import pytest
from chemnet.components.mixer import Mixer
from chemnet.components.reactor import Reactor
from chemnet.config.builder import NetworkBuilder
from chemnet.config.network_config import DeviceConfig, NetworkConfig, StreamConfig
from chemnet.core.exceptions import ConfigurationError


def test_builder_from_file(configs_dir):
    builder = NetworkBuilder.from_file(configs_dir / "reactor_split.yaml")
    network = builder.network

    assert network.name == "Reactor split and recombine"
    assert isinstance(network.get_device("splitter_reactor"), Reactor)
    assert isinstance(network.get_device("recombiner"), Mixer)
    assert network.registry.get_by_type("mixer") == [network.get_device("recombiner")]

    reactor = network.get_device("splitter_reactor")
    mixer = network.get_device("recombiner")
    assert reactor.is_double_output
    # product_a is shared: reactor output and mixer input
    assert reactor.outputs[0] is mixer.inputs[0]

def test_builder_from_config():
    config = NetworkConfig(
        name="Manual",
        streams=[StreamConfig("feed", 20.0), StreamConfig("out")],
        devices=[DeviceConfig(id="r", type="reactor", inputs=["feed"], outputs=["out"])],
    )

    network = NetworkBuilder.from_config(config).network
    network.update_all()

    assert network.get_stream("out").get_mass_flow() == 20.0

def test_builder_from_config_wraps_validation_errors():
    config = NetworkConfig(devices=[DeviceConfig(id="x", type="heater")])
    with pytest.raises(ConfigurationError, match="validation failed"):
        NetworkBuilder.from_config(config)

def test_unnamed_streams_get_factory_names():
    builder = NetworkBuilder.from_dict({
        "streams": [{"name": "s1", "mass_flow_kg_h": 4.0}, {}, {"mass_flow_kg_h": 2.0}],
        "devices": [],
    })

    table = builder.network.stream_table()
    # s1 is taken explicitly, so generated names continue at s2
    assert table == {"s1": 4.0, "s2": 0.0, "s3": 2.0}

def test_over_capacity_wiring_raises_configuration_error():
    with pytest.raises(ConfigurationError, match="wiring failed"):
        NetworkBuilder.from_dict({
            "streams": [{"name": "a"}, {"name": "b"}, {"name": "c"}],
            "devices": [{"id": "r", "type": "reactor", "inputs": ["a", "b"], "outputs": ["c"]}],
        })

def test_mixer_output_capacity_param():
    builder = NetworkBuilder.from_dict({
        "streams": [{"name": "in", "mass_flow_kg_h": 9.0}, {"name": "o1"}, {"name": "o2"}, {"name": "o3"}],
        "devices": [{"id": "m", "type": "mixer",
                     "params": {"input_capacity": 1, "output_capacity": 3},
                     "inputs": ["in"], "outputs": ["o1", "o2", "o3"]}],
    })

    table = builder.network.run()

    assert table["o1"] == table["o2"] == table["o3"] == pytest.approx(3.0)
