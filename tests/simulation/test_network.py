import pytest
from chemnet.components.mixer import Mixer
from chemnet.components.reactor import Reactor
from chemnet.core.exceptions import (
    CapacityExceededError,
    ConfigurationError,
    DuplicateDeviceError,
    NotFullyWiredError,
    SimulationError,
)
from chemnet.core.stream import Stream
from chemnet.core.stream_factory import StreamFactory
from chemnet.simulation.network import ProcessNetwork


def _split_and_recombine(network):
    """feed -> double reactor -> (a, b) -> mixer -> combined"""
    feed = network.create_stream(30.0)
    a, b, combined = network.create_stream(), network.create_stream(), network.create_stream()

    network.add_device("r1", Reactor(is_double_output=True))
    network.connect_input("r1", feed)
    network.connect_output("r1", a)
    network.connect_output("r1", b)

    network.add_device("m1", Mixer(input_capacity=2))
    network.connect_input("m1", a)
    network.connect_input("m1", b)
    network.connect_output("m1", combined)
    return feed, a, b, combined


def test_streams_are_named_per_network():
    n1, n2 = ProcessNetwork("one"), ProcessNetwork("two")

    assert n1.create_stream().name == "s1"
    assert n1.create_stream().name == "s2"
    assert n2.create_stream().name == "s1"

def test_network_accepts_custom_factory():
    network = ProcessNetwork(stream_factory=StreamFactory(prefix="line_"))
    assert network.create_stream().name == "line_1"

def test_chained_devices_share_streams(network):
    feed, a, b, combined = _split_and_recombine(network)

    network.update_all()

    assert a.get_mass_flow() == b.get_mass_flow() == pytest.approx(15.0)
    assert combined.get_mass_flow() == pytest.approx(30.0)
    assert network.stream_table() == {"s1": 30.0, "s2": 15.0, "s3": 15.0, "s4": 30.0}

def test_mass_balance_per_device(network):
    _split_and_recombine(network)
    network.update_all()

    assert network.mass_balance("r1") == pytest.approx(0.0)
    assert network.is_balanced("r1")
    assert network.is_balanced("m1")

def test_unbalanced_device_detected(network):
    _split_and_recombine(network)
    network.update_all()
    network.get_stream("s4").set_mass_flow(10.0)

    assert network.mass_balance("m1") == pytest.approx(20.0)
    assert not network.is_balanced("m1")

def test_registration_order_needs_extra_passes(network):
    """A device registered before its upstream neighbour lags one pass."""
    feed = network.create_stream(8.0)
    mid, out = network.create_stream(), network.create_stream()

    network.add_device("downstream", Reactor())
    network.connect_input("downstream", mid)
    network.connect_output("downstream", out)
    network.add_device("upstream", Reactor())
    network.connect_input("upstream", feed)
    network.connect_output("upstream", mid)

    network.update_all()
    assert out.get_mass_flow() == 0.0

    table = network.run(steps=1)
    assert table[out.name] == 8.0
    assert network.passes_run == 2

def test_run_rejects_non_positive_steps(network):
    with pytest.raises(SimulationError):
        network.run(steps=0)

def test_connect_by_name_and_unknown_stream(network):
    network.add_stream(Stream("feed", 5.0))
    network.add_device("r", Reactor())
    network.connect_input("r", "feed")

    with pytest.raises(ConfigurationError, match="not found"):
        network.connect_output("r", "nowhere")

def test_connecting_foreign_stream_adds_it(network):
    network.add_device("r", Reactor())
    outside = Stream("outside")
    network.connect_output("r", outside)

    assert network.get_stream("outside") is outside

def test_stream_name_collision_rejected(network):
    network.add_stream(Stream("feed"))
    with pytest.raises(ConfigurationError, match="already used"):
        network.add_stream(Stream("feed"))

def test_create_stream_skips_taken_names(network):
    network.add_stream(Stream("s1"))
    assert network.create_stream().name == "s2"

def test_capacity_errors_propagate(network):
    network.add_device("r", Reactor())
    network.connect_input("r", network.create_stream())
    with pytest.raises(CapacityExceededError):
        network.connect_input("r", network.create_stream())

def test_wiring_errors_propagate_from_update(network):
    network.add_device("r", Reactor(is_double_output=True))
    network.connect_input("r", network.create_stream(1.0))
    network.connect_output("r", network.create_stream())

    with pytest.raises(NotFullyWiredError) as exc_info:
        network.update_all()
    assert exc_info.value.device_id == "r"
    assert network.passes_run == 0

def test_duplicate_device_rejected(network):
    network.add_device("r", Reactor())
    with pytest.raises(DuplicateDeviceError):
        network.add_device("r", Reactor())

def test_rewire_and_update_again(network):
    """Devices are never sealed: rewiring after an update is allowed."""
    mixer = Mixer(input_capacity=2, output_capacity=2)
    network.add_device("m", mixer)
    network.connect_input("m", network.create_stream(6.0))
    o1 = network.create_stream()
    network.connect_output("m", o1)
    network.update_all()
    assert o1.get_mass_flow() == 6.0

    o2 = network.create_stream()
    network.connect_output("m", o2)
    network.update_all()
    assert o1.get_mass_flow() == o2.get_mass_flow() == 3.0

def test_get_all_states(network):
    _split_and_recombine(network)
    network.update_all()

    state = network.get_all_states()
    assert state["name"] == "test network"
    assert state["passes_run"] == 1
    assert state["streams"]["s4"]["mass_flow_kg_h"] == 30.0
    assert state["devices"]["r1"]["device_type"] == "Reactor"
    assert state["devices"]["m1"]["inputs"] == ["s2", "s3"]

def test_print_streams(network, capsys):
    _split_and_recombine(network)
    network.update_all()

    network.print_streams()

    assert capsys.readouterr().out.splitlines() == [
        "Stream s1 flow = 30",
        "Stream s2 flow = 15",
        "Stream s3 flow = 15",
        "Stream s4 flow = 30",
    ]

def test_rejected_input_leaves_stream_table_unchanged(network):
    network.add_device("m", Mixer(input_capacity=1))
    network.connect_input("m", network.create_stream(1.0))

    with pytest.raises(CapacityExceededError):
        network.connect_input("m", Stream("stray", 5.0))

    assert set(network.stream_table()) == {"s1"}
    assert len(network.get_device("m").inputs) == 1

def test_rejected_output_leaves_stream_table_unchanged(network):
    network.add_device("r", Reactor())
    network.connect_output("r", network.create_stream())

    with pytest.raises(CapacityExceededError):
        network.connect_output("r", Stream("stray"))

    assert set(network.stream_table()) == {"s1"}

def test_name_collision_on_connect_leaves_device_unchanged(network):
    network.add_stream(Stream("feed"))
    network.add_device("r", Reactor())

    with pytest.raises(ConfigurationError, match="already used"):
        network.connect_input("r", Stream("feed"))

    assert network.get_device("r").inputs == ()

def test_create_stream_counts_only_issued_streams(network):
    network.add_stream(Stream("s1"))
    network.add_stream(Stream("s2"))

    created = network.create_stream()

    assert created.name == "s3"
    assert network.stream_factory.count == 1
