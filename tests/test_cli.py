import pytest

from illogic.cli import format_states, main
from illogic.logic import LogicType, Network

TRUE_CELL = "|---T---"
FALSE_CELL = "|   F   "
LATCH_ON = "|=Latch=on!=====================|"
LATCH_OFF = "|=Latch=off!====================|"


def _state_rows(lines):
    return [line for line in lines if line.startswith("|") and "Latch" not in line and "Inp" not in line]


def test_format_states_mixed():
    network = Network()
    a = network.add_input()
    b = network.add_input()
    network.set_input_state(a, True)
    assert format_states(network, [a, b]) == TRUE_CELL + FALSE_CELL + "|"


def test_format_states_empty_list():
    network = Network()
    assert format_states(network, []) == "|"


def test_format_states_skips_missing_elements():
    network = Network()
    a = network.add_input()
    assert format_states(network, [a, 7, 8]) == FALSE_CELL + "|"


def test_format_states_follows_cycle():
    network = Network()
    a = network.add_input()
    gate = network.add_empty_element(LogicType.NOR)
    network.add_element_input(gate, a)
    network.cycle()
    assert format_states(network, [a, gate]) == FALSE_CELL + TRUE_CELL + "|"


def test_main_returns_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Removing element 2..." in out


def test_main_preamble(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "ERROR SETTING ELEMENT 2 TO CONTAIN INPUT 100"
    assert lines[1] == "Proof we have added input 0 to element 2!"
    assert lines[2] == "test_net size: 4"
    assert lines[3] == "| Inp 1 | Inp 2 | NOR 1 | NOR 2 |"
    assert lines[4] == FALSE_CELL * 4 + "|"


def test_main_row_widths(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    split = lines.index("Removing element 2...")
    before = _state_rows(lines[:split])
    after = _state_rows(lines[split + 1:])
    assert before and all(row.count("|") == 5 for row in before)
    assert len(after) == 3
    assert all(row.count("|") == 4 for row in after)


def test_main_latch_fires(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    latch_lines = [line for line in lines if "Latch" in line]
    assert LATCH_ON in latch_lines
    assert all(line in (LATCH_ON, LATCH_OFF) for line in latch_lines)


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])