"""
Example network built directly in Python.

A feed is split by a double-output reactor; one product is passed through a
single-output reactor and both are recombined in a mixer.
"""

import logging

from chemnet import Mixer, ProcessNetwork, Reactor


def main():
    """
    Build, run and report a small flowsheet.
    """
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')

    net = ProcessNetwork("basic example")

    feed = net.create_stream(30.0)
    split_a, split_b = net.create_stream(), net.create_stream()
    passed = net.create_stream()
    combined = net.create_stream()

    net.add_device("splitter", Reactor(is_double_output=True))
    net.connect_input("splitter", feed)
    net.connect_output("splitter", split_a)
    net.connect_output("splitter", split_b)

    net.add_device("pass_through", Reactor(is_double_output=False))
    net.connect_input("pass_through", split_b)
    net.connect_output("pass_through", passed)

    net.add_device("recombiner", Mixer(input_capacity=2))
    net.connect_input("recombiner", split_a)
    net.connect_input("recombiner", passed)
    net.connect_output("recombiner", combined)

    net.run()
    net.print_streams()

    for device_id in net.registry.get_all_ids():
        print(f"{device_id}: balanced={net.is_balanced(device_id)}")


if __name__ == "__main__":
    main()
