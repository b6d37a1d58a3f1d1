"""Command-line demonstration of a NOR latch built on a logic network."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from illogic.logic import LogicType, Network, NetworkError

_TRUE_CELL = "|---T---"
_FALSE_CELL = "|   F   "
_HEADER = "| Inp 1 | Inp 2 | NOR 1 | NOR 2 |"
_PROBE_INPUT = 100


def format_states(network: Network, elements: Iterable[int]) -> str:
    """Render the states of ``elements`` as one table row.

    Indices that no longer name an element are left out of the row.
    """
    cells = []
    for index in elements:
        try:
            state = network.element_state(index)
        except NetworkError:
            continue
        cells.append(_TRUE_CELL if state else _FALSE_CELL)
    return "".join(cells) + "|"


def _latch_sensor(state: bool) -> None:
    if state:
        print("|=Latch=on!=====================|")
    else:
        print("|=Latch=off!====================|")


def _cycle_and_show(network: Network, elements: Sequence[int]) -> None:
    network.cycle()
    print(format_states(network, elements))


def _build_latch() -> tuple[Network, list[int]]:
    network = Network()
    elements = [
        network.add_input(),
        network.add_input(),
        network.add_empty_element(LogicType.NOR),
        network.add_empty_element(LogicType.NOR),
    ]
    try:
        network.add_element_input(elements[2], _PROBE_INPUT)
    except NetworkError:
        print(f"ERROR SETTING ELEMENT {elements[2]} TO CONTAIN INPUT {_PROBE_INPUT}")
    try:
        network.add_element_input(elements[2], elements[0])
    except NetworkError:
        pass
    else:
        print(f"Proof we have added input {elements[0]} to element {elements[2]}!")
    network.add_element_input(elements[2], elements[3])
    network.add_element_input(elements[3], elements[1])
    network.add_element_input(elements[3], elements[2])
    network.set_element_sensor(elements[2], _latch_sensor)
    return network, elements


def main(argv: Sequence[str] | None = None) -> int:
    """Run the latch demonstration and print the state table."""
    parser = argparse.ArgumentParser(
        prog="illogic",
        description="Simulate a NOR latch and print its states cycle by cycle.",
    )
    parser.parse_args(argv)

    network, elements = _build_latch()
    print(f"test_net size: {len(network)}")
    print(_HEADER)
    print(format_states(network, elements))

    first, second = elements[0], elements[1]
    # Each step: input states to apply (or None to leave them), then cycles to run.
    schedule: list[tuple[dict[int, bool], int]] = [
        ({}, 4),
        ({first: True}, 1),
        ({first: False}, 3),
        ({second: True}, 2),
        ({second: False}, 3),
        ({first: True, second: True}, 3),
        ({first: False, second: False}, 3),
    ]
    for changes, cycles in schedule:
        for index, state in changes.items():
            network.set_input_state(index, state)
        for _ in range(cycles):
            _cycle_and_show(network, elements)

    print("Removing element 2...")
    network.remove_element(elements[2])
    for _ in range(3):
        _cycle_and_show(network, elements)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())