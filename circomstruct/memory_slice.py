"""Multi-dimensional values stored as a flat, row-major list of cells."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import Generic, Optional, Sequence, TypeVar

C = TypeVar("C")


class MemorySliceError(Exception):
    """Base of every error raised while manipulating memory."""


class OutOfBoundsError(MemorySliceError):
    def __init__(self) -> None:
        super().__init__("access out of bounds")


class MismatchedDimensions(MemorySliceError):
    """The assigned value has a different shape from its destination."""

    def __init__(self, given: int, expected: int) -> None:
        super().__init__(f"dimension {given} does not match expected {expected}")
        self.given = given
        self.expected = expected


class MismatchedDimensionsWeak(MismatchedDimensions):
    """The assigned value is smaller than its destination; it was still written."""


class TypeAssignmentError(MemorySliceError):
    """A forbidden assignment."""

    MULTIPLE_ASSIGNMENTS = "multiple_assignments"
    ASSIGNMENT_OUTPUT = "assignment_output"

    def __init__(self, reason: str) -> None:
        super().__init__(reason.replace("_", " "))
        self.reason = reason


class TypeInvalidAccess(MemorySliceError):
    """Access to something that cannot be used yet."""

    MISSING_INPUTS = "missing_inputs"
    MISSING_INPUT_TAGS = "missing_input_tags"
    NO_INITIALIZED_COMPONENT = "no_initialized_component"
    NO_INITIALIZED_SIGNAL = "no_initialized_signal"

    def __init__(self, reason: str, name: Optional[str] = None) -> None:
        text = reason.replace("_", " ")
        super().__init__(f"{text}: {name}" if name is not None else text)
        self.reason = reason
        self.name = name


@dataclass
class MemorySlice(Generic[C]):
    """``values`` holds ``prod(route)`` cells; ``route`` gives the dimensions."""

    route: list[int] = field(default_factory=list)
    values: list[C] = field(default_factory=list)

    @classmethod
    def single(cls, initial_value: C) -> "MemorySlice[C]":
        return cls.filled([], initial_value)

    @classmethod
    def filled(cls, route: Sequence[int], initial_value: C) -> "MemorySlice[C]":
        length = math.prod(route)
        return cls(list(route), [copy.deepcopy(initial_value) for _ in range(length)])

    def _initial_cell(self, access: Sequence[int]) -> int:
        if len(access) > len(self.route):
            raise OutOfBoundsError()
        cell = 0
        cell_jump = len(self.values)
        for index, dim in zip(access, self.route):
            if index >= dim:
                raise OutOfBoundsError()
            cell_jump //= dim
            cell += cell_jump * index
        return cell

    def check_correct_dims(
        self,
        access: Sequence[int],
        new_values: "MemorySlice[C]",
        is_strict: bool,
    ) -> None:
        """Raise unless ``new_values`` fits at ``access``.

        A smaller value raises MismatchedDimensionsWeak when not strict.
        """
        if len(access) + len(new_values.route) > len(self.route):
            raise OutOfBoundsError()
        if any(index >= dim for index, dim in zip(access, self.route)):
            raise OutOfBoundsError()
        remaining = self.route[len(access) :]
        for given, expected in zip(new_values.route, remaining):
            if given < expected:
                if is_strict:
                    raise MismatchedDimensions(given, expected)
                raise MismatchedDimensionsWeak(given, expected)
            if given > expected:
                raise MismatchedDimensions(given, expected)

    def _write_from(self, cell: int, new_values: "MemorySlice[C]") -> None:
        end = cell + len(new_values.values)
        if end > len(self.values):
            raise OutOfBoundsError()
        self.values[cell:end] = [copy.deepcopy(v) for v in new_values.values]

    def insert_values(
        self,
        access: Sequence[int],
        new_values: "MemorySlice[C]",
        is_strict: bool,
    ) -> None:
        """Copy ``new_values`` in at ``access``.

        A smaller value is written and then MismatchedDimensionsWeak is raised.
        """
        try:
            self.check_correct_dims(access, new_values, is_strict)
        except MismatchedDimensionsWeak:
            self._write_from(self._initial_cell(access), new_values)
            raise
        self._write_from(self._initial_cell(access), new_values)

    def insert_value_by_index(self, index: int, new_value: C) -> None:
        if not 0 <= index < len(self.values):
            raise OutOfBoundsError()
        self.values[index] = new_value

    def get_access_index(self, index: int) -> list[int]:
        """Turn a flat cell index into one index per dimension."""
        number_cells = len(self.values)
        if not 0 <= index < number_cells:
            raise OutOfBoundsError()
        access = []
        rest = index
        for dim in self.route:
            number_cells //= dim
            position, rest = divmod(rest, number_cells)
            access.append(position)
        return access

    def access_values(self, access: Sequence[int]) -> "MemorySlice[C]":
        """The sub-slice found by following ``access``."""
        if not access:
            return copy.deepcopy(self)
        if len(access) > len(self.route):
            raise OutOfBoundsError()
        route = self.route[len(access) :]
        count = math.prod(route)
        cell = self._initial_cell(access)
        return MemorySlice(list(route), copy.deepcopy(self.values[cell : cell + count]))

    def access_value_by_index(self, index: int) -> C:
        if not 0 <= index < len(self.values):
            raise OutOfBoundsError()
        return copy.deepcopy(self.values[index])

    def get_single_value(self, access: Sequence[int]) -> C:
        if len(access) != len(self.route):
            raise ValueError("access must name every dimension")
        return self.values[self._initial_cell(access)]

    def set_single_value(self, access: Sequence[int], value: C) -> None:
        if len(access) != len(self.route):
            raise ValueError("access must name every dimension")
        self.values[self._initial_cell(access)] = value

    def is_single(self) -> bool:
        return not self.route

    def unwrap_to_single(self) -> C:
        if not self.is_single():
            raise ValueError("memory slice holds more than one value")
        return self.values[-1]

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        if len(self.values) == 1:
            return str(self.values[0])
        return "[" + ",".join(str(v) for v in self.values) + "]"