# illogic

`illogic` simulates networks of logic elements. A network holds inputs and the
gates AND, OR, NAND, NOR, XOR and NOT. Elements refer to each other by index.
A call to `cycle()` updates the network in a fixed number of stages.

## Installation

```
pip install .
```

## Usage

```python
from illogic.logic import Network, LogicType

net = Network()
set_in = net.add_input()
reset_in = net.add_input()
q = net.add_empty_element(LogicType.NOR)
q_bar = net.add_empty_element(LogicType.NOR)

# Cross-couple two NOR gates into an SR latch.
net.add_element_input(q, set_in)
net.add_element_input(q, q_bar)
net.add_element_input(q_bar, reset_in)
net.add_element_input(q_bar, q)

net.set_element_sensor(q, lambda state: print("latch", "on" if state else "off"))

net.set_input_state(set_in, True)
net.cycle()
print(net.element_state(q), net.element_state(q_bar))
print(len(net))
```

## The `Network` class

Adding elements:

- `add_input()` adds an input element and returns its index.
- `add_empty_element(kind)` adds an element of the given `LogicType` with no inputs and returns its index.
- `add_element(kind, inputs)` adds an element that is already wired to `inputs` and returns its index. The element is added only if `inputs` is non-empty and at least one index in it lies past the end of the network. In every other case the method raises `NetworkError`. A NOT element keeps only the first input.

Inspecting elements:

- `len(network)` gives the number of elements.
- `element_type(index)` returns the element's `LogicType`.
- `element_state(index)` returns the element's current output.
- `element_inputs(index)` returns a copy of the element's input indices. For an input element it returns `None`.

Wiring and driving elements:

- `set_element_inputs(index, inputs)` replaces the element's inputs. A NOT element takes only the first one.
- `add_element_input(index, input_index)` appends an input to a gate. On a NOT element it replaces the single input instead.
- `set_element_sensor(index, callback)` attaches a callback. After a cycle, the callback is called with the new state whenever a gate's output has changed. Sensors are not called for NOT elements.
- `set_input_state(index, state)` sets the state of an input element and returns the element's `LogicType`. Elements that are not inputs are left unchanged.
- `remove_element(index)` removes an element and shifts every higher input reference down by one. It returns the indices of the elements that were affected. An index that is out of range removes nothing.

Simulation:

- `cycle()` advances the network by one cycle. The elements are divided into `stage_count` stages (default 5) by index modulo the stage count. Every element in a stage is evaluated first, and then the stage's results are written, before the next stage starts.

Evaluation rules:

- References to inputs that do not exist are ignored.
- A NOT element with no valid input outputs `True`.
- The AND gate starts its fold from `False`, so it always outputs `False`. For the same reason, NAND always outputs `True`.

Attaching wiring or a sensor to an input element raises `NetworkError`, as does referring to an index that names no element.

## Demo

This command runs an SR-latch demonstration and prints the state of each element after every cycle:

```
illogic
```

The demo lives in `illogic.cli`. Its `format_states(network, elements)` function renders one row of the state table and skips indices that no longer name an element.

## What it does not do

There is no way to load or save networks and no netlist file format. The only command is the fixed demonstration above.