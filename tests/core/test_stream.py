import pytest
from chemnet.core.stream import Stream
from chemnet.core.stream_factory import StreamFactory


def test_unwritten_stream_reads_zero():
    """A stream that was never written reads as zero and reports unset."""
    stream = Stream("s1")

    assert stream.get_mass_flow() == 0.0
    assert not stream.is_set

def test_set_mass_flow_stores_value():
    stream = Stream("s1")
    stream.set_mass_flow(12.5)

    assert stream.get_mass_flow() == 12.5
    assert stream.is_set

    stream.set_mass_flow(3)
    assert stream.get_mass_flow() == 3.0
    assert isinstance(stream.get_mass_flow(), float)

def test_initial_mass_flow_counts_as_written():
    stream = Stream("feed", 7.0)

    assert stream.is_set
    assert stream.get_name() == "feed"

def test_describe_and_print(capsys):
    stream = Stream("s4", 15.0)

    assert stream.describe() == "Stream s4 flow = 15"
    assert str(stream) == stream.describe()

    stream.print()
    assert capsys.readouterr().out == "Stream s4 flow = 15\n"

def test_streams_compare_by_identity():
    """Two streams with equal values are still distinct objects."""
    a = Stream("s1", 1.0)
    b = Stream("s1", 1.0)

    assert a != b
    assert len({a, b}) == 2

def test_get_state():
    state = Stream("s1", 2.0).get_state()
    assert state == {"name": "s1", "mass_flow_kg_h": 2.0, "is_set": True}


def test_factory_names_streams_sequentially():
    factory = StreamFactory()

    names = [factory.create().name for _ in range(3)]

    assert names == ["s1", "s2", "s3"]
    assert factory.count == 3

def test_factory_initial_mass_flow():
    factory = StreamFactory()

    stream = factory.create(mass_flow_kg_h=10.0)
    assert stream.get_mass_flow() == 10.0

    assert not factory.create().is_set

def test_factory_reset_restarts_numbering():
    factory = StreamFactory()
    factory.create()
    factory.create()

    factory.reset()

    assert factory.count == 0
    assert factory.create().name == "s1"

def test_factories_are_independent():
    """Each factory owns its counter; no global state is shared."""
    f1 = StreamFactory()
    f2 = StreamFactory(prefix="feed_", start=10)

    f1.create()
    f1.create()

    assert f2.create().name == "feed_11"
    assert f1.create().name == "s3"

def test_factory_rejects_negative_start():
    with pytest.raises(ValueError, match="non-negative"):
        StreamFactory(start=-1)

def test_factory_skips_taken_names():
    factory = StreamFactory()

    stream = factory.create(2.0, taken={"s1", "s2"})

    assert stream.name == "s3"
    assert stream.get_mass_flow() == 2.0
    assert factory.count == 1
    assert factory.create().name == "s4"
    assert factory.count == 2
