"""A gate-level logic network that is evaluated in staged cycles."""

from __future__ import annotations

import enum
import functools
import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

Sensor = Callable[[bool], None]

DEFAULT_STAGE_COUNT = 5


class LogicType(enum.Enum):
    """Kinds of element a network can hold."""

    AND = enum.auto()
    OR = enum.auto()
    NAND = enum.auto()
    NOR = enum.auto()
    XOR = enum.auto()
    NOT = enum.auto()
    INPUT = enum.auto()


class NetworkError(Exception):
    """Raised when an element is missing or cannot take the requested change."""


def _and(states: Iterable[bool]) -> bool:
    # The fold is seeded with False, so the gate never reports True.
    return functools.reduce(operator.and_, states, False)


def _or(states: Iterable[bool]) -> bool:
    return any(states)


def _nand(states: Iterable[bool]) -> bool:
    return not _and(states)


def _nor(states: Iterable[bool]) -> bool:
    return not _or(states)


def _xor(states: Iterable[bool]) -> bool:
    return functools.reduce(operator.xor, states, False)


_GATES: dict[LogicType, Callable[[Iterable[bool]], bool]] = {
    LogicType.AND: _and,
    LogicType.OR: _or,
    LogicType.NAND: _nand,
    LogicType.NOR: _nor,
    LogicType.XOR: _xor,
}


@dataclass
class _Element:
    kind: LogicType
    inputs: list[int] = field(default_factory=list)
    state: bool = False
    sensor: Sensor | None = None


class Network:
    """A set of logic elements wired together by index."""

    def __init__(self) -> None:
        self._elements: list[_Element] = []
        self.stage_count = DEFAULT_STAGE_COUNT

    def __len__(self) -> int:
        return len(self._elements)

    # -- building -----------------------------------------------------------

    def _append(self, element: _Element) -> int:
        self._elements.append(element)
        return len(self._elements) - 1

    def _missing(self, inputs: Iterable[int]) -> list[int]:
        """Return the indices that do not name an element."""
        return [i for i in inputs if i > len(self._elements)]

    def add_empty_element(self, element_type: LogicType) -> int:
        """Add an element with no inputs and return its index."""
        return self._append(_Element(element_type))

    def add_element(self, element_type: LogicType, inputs: Iterable[int]) -> int:
        """Add an element wired to ``inputs`` and return its index.

        The element is only added when ``inputs`` is non-empty and names at
        least one index past the end of the network; otherwise NetworkError.
        """
        inputs = list(inputs)
        if not inputs or not self._missing(inputs):
            raise NetworkError(f"cannot add {element_type.name} element with inputs {inputs}")
        if element_type is LogicType.INPUT:
            return self._append(_Element(element_type))
        if element_type is LogicType.NOT:
            return self._append(_Element(element_type, [inputs[0]]))
        return self._append(_Element(element_type, inputs))

    def add_input(self) -> int:
        """Add an input element and return its index."""
        return self._append(_Element(LogicType.INPUT))

    def remove_element(self, index: int) -> list[int]:
        """Remove an element and return the indices of the elements that referred to it.

        References above ``index`` are shifted down by one. An out-of-range
        index removes nothing and returns an empty list.
        """
        affected: list[int] = []
        if not 0 <= index < len(self._elements):
            return affected
        del self._elements[index]
        for position, element in enumerate(self._elements):
            if element.kind is LogicType.INPUT:
                continue
            if element.kind is LogicType.NOT:
                if element.inputs == [index]:
                    element.inputs = []
                    affected.append(position)
                elif not element.inputs or element.inputs[0] > index:
                    element.inputs = [i - 1 for i in element.inputs]
                    affected.append(position)
                continue
            found = any(i >= index for i in element.inputs)
            shifted = [i - 1 if i > index else i for i in element.inputs]
            element.inputs = [i for i in shifted if i != index]
            if found:
                affected.append(position)
        return affected

    # -- inspection ---------------------------------------------------------

    def _get(self, index: int) -> _Element:
        if not 0 <= index < len(self._elements):
            raise NetworkError(f"no element at index {index}")
        return self._elements[index]

    def _state_of(self, index: int) -> bool | None:
        if 0 <= index < len(self._elements):
            return self._elements[index].state
        return None

    def element_type(self, index: int) -> LogicType:
        """Return the kind of the element at ``index``."""
        return self._get(index).kind

    def element_state(self, index: int) -> bool:
        """Return the current output of the element at ``index``."""
        return self._get(index).state

    def element_inputs(self, index: int) -> list[int] | None:
        """Return a copy of the element's inputs, or None for an input element."""
        element = self._get(index)
        if element.kind is LogicType.INPUT:
            return None
        return list(element.inputs)

    # -- wiring -------------------------------------------------------------

    def _wirable(self, index: int) -> _Element:
        element = self._get(index)
        if element.kind is LogicType.INPUT:
            raise NetworkError(f"element {index} is an input and takes no wiring")
        return element

    def set_element_inputs(self, index: int, inputs: Iterable[int]) -> None:
        """Replace the inputs of the element at ``index``."""
        inputs = list(inputs)
        missing = self._missing(inputs)
        if missing:
            raise NetworkError(f"inputs do not exist: {missing}")
        element = self._wirable(index)
        if element.kind is LogicType.NOT:
            if not inputs:
                raise NetworkError("a NOT element needs one input")
            element.inputs = [inputs[0]]
        else:
            element.inputs = inputs

    def set_element_sensor(self, index: int, callback: Sensor) -> None:
        """Attach a callback fired with the new state when the element changes."""
        self._wirable(index).sensor = callback

    def add_element_input(self, index: int, input_index: int) -> None:
        """Wire ``input_index`` into the element at ``index``."""
        if self._missing([input_index]):
            raise NetworkError(f"cannot add input {input_index} to element {index}")
        element = self._wirable(index)
        if element.kind is LogicType.NOT:
            element.inputs = [input_index]
        else:
            element.inputs.append(input_index)

    def set_input_state(self, index: int, state: bool) -> LogicType:
        """Set an input element's state and return the element's kind.

        Elements that are not inputs are left unchanged.
        """
        element = self._get(index)
        if element.kind is LogicType.INPUT:
            element.state = bool(state)
        return element.kind

    # -- simulation ---------------------------------------------------------

    def _evaluate(self, element: _Element) -> bool:
        if element.kind is LogicType.INPUT:
            return element.state
        if element.kind is LogicType.NOT:
            source = self._state_of(element.inputs[0]) if element.inputs else None
            return True if source is None else not source
        states = [s for s in map(self._state_of, element.inputs) if s is not None]
        return _GATES[element.kind](states)

    def cycle(self) -> None:
        """Advance the network by one cycle.

        Elements are split into stages by index modulo the stage count; each
        stage is evaluated as a whole and then written before the next begins.
        """
        for stage in range(self.stage_count):
            members = self._elements[stage::self.stage_count]
            results = [self._evaluate(element) for element in members]
            for element, new_state in zip(members, results):
                if element.kind is LogicType.INPUT:
                    continue
                if element.kind is LogicType.NOT:
                    element.state = new_state
                    continue
                if element.state != new_state and element.sensor is not None:
                    element.sensor(new_state)
                element.state = new_state