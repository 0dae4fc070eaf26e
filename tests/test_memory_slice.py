import pytest

from circomstruct.memory_slice import (
    MemorySlice,
    MemorySliceError,
    MismatchedDimensions,
    MismatchedDimensionsWeak,
    OutOfBoundsError,
    TypeAssignmentError,
    TypeInvalidAccess,
)


def test_memory_slice_vector_initialization():
    route = [3, 4]
    memory = MemorySlice.filled(route, 0)
    assert len(memory) == 12
    assert memory.route == route
    for f in range(3):
        for c in range(4):
            assert memory.get_single_value([f, c]) == 0


def test_memory_slice_single_initialization():
    memory = MemorySlice.single(4)
    assert len(memory) == 1
    assert memory.get_single_value([]) == 4


def test_memory_slice_multiple_insertion():
    memory = MemorySlice.filled([3, 4], 0)
    new_row = MemorySlice.filled([4], 4)
    memory.insert_values([2], new_row, True)
    for c in range(4):
        assert memory.get_single_value([2, c]) == 4
    for c in range(4):
        assert memory.get_single_value([1, c]) == 0


def test_insert_smaller_strict_raises_without_writing():
    memory = MemorySlice.filled([3, 4], 0)
    with pytest.raises(MismatchedDimensions) as info:
        memory.insert_values([1], MemorySlice.filled([2], 7), True)
    assert not isinstance(info.value, MismatchedDimensionsWeak)
    assert (info.value.given, info.value.expected) == (2, 4)
    assert memory.values == [0] * 12


def test_insert_smaller_weak_writes_then_raises():
    memory = MemorySlice.filled([3, 4], 0)
    with pytest.raises(MismatchedDimensionsWeak):
        memory.insert_values([1], MemorySlice.filled([2], 7), False)
    assert memory.access_values([1]).values == [7, 7, 0, 0]


def test_insert_larger_always_raises():
    memory = MemorySlice.filled([3, 4], 0)
    with pytest.raises(MismatchedDimensions) as info:
        memory.insert_values([0], MemorySlice.filled([5], 1), False)
    assert not isinstance(info.value, MismatchedDimensionsWeak)


def test_insert_out_of_bounds():
    memory = MemorySlice.filled([3, 4], 0)
    with pytest.raises(OutOfBoundsError):
        memory.insert_values([3], MemorySlice.filled([4], 1), True)
    with pytest.raises(OutOfBoundsError):
        memory.insert_values([0, 0], MemorySlice.filled([4], 1), True)


def test_access_values_returns_sub_slice():
    memory = MemorySlice([2, 3], [1, 2, 3, 4, 5, 6])
    row = memory.access_values([1])
    assert row == MemorySlice([3], [4, 5, 6])
    assert memory.access_values([]) == memory
    assert memory.access_values([0, 2]).unwrap_to_single() == 3


def test_access_values_out_of_bounds():
    memory = MemorySlice([2, 3], [1, 2, 3, 4, 5, 6])
    with pytest.raises(OutOfBoundsError):
        memory.access_values([2])
    with pytest.raises(OutOfBoundsError):
        memory.access_values([0, 0, 0])


def test_access_index_round_trip():
    memory = MemorySlice([2, 3, 2], list(range(12)))
    for index in range(12):
        access = memory.get_access_index(index)
        assert memory.get_single_value(access) == index
    with pytest.raises(OutOfBoundsError):
        memory.get_access_index(12)


def test_value_by_index():
    memory = MemorySlice.filled([2, 2], 0)
    memory.insert_value_by_index(3, 9)
    assert memory.access_value_by_index(3) == 9
    assert memory.get_single_value([1, 1]) == 9
    with pytest.raises(OutOfBoundsError):
        memory.insert_value_by_index(4, 1)
    with pytest.raises(OutOfBoundsError):
        memory.access_value_by_index(4)


def test_set_single_value_and_partial_access():
    memory = MemorySlice.filled([2, 2], 0)
    memory.set_single_value([0, 1], 5)
    assert memory.values == [0, 5, 0, 0]
    with pytest.raises(ValueError):
        memory.get_single_value([0])
    with pytest.raises(ValueError):
        memory.set_single_value([0], 1)


def test_unwrap_and_is_single():
    assert MemorySlice.single(8).is_single()
    assert MemorySlice.single(8).unwrap_to_single() == 8
    array = MemorySlice.filled([2], 0)
    assert not array.is_single()
    with pytest.raises(ValueError):
        array.unwrap_to_single()


def test_str():
    assert str(MemorySlice([0], [])) == "[]"
    assert str(MemorySlice.single(5)) == "5"
    assert str(MemorySlice([3], [1, 2, 3])) == "[1,2,3]"


def test_filled_cells_are_independent():
    memory = MemorySlice.filled([2], [0])
    memory.values[0].append(1)
    assert memory.values[1] == [0]


def test_error_kinds_are_memory_errors():
    invalid = TypeInvalidAccess(TypeInvalidAccess.MISSING_INPUTS, "in")
    assert isinstance(invalid, MemorySliceError)
    assert invalid.name == "in"
    assert str(invalid) == "missing inputs: in"
    assignment = TypeAssignmentError(TypeAssignmentError.ASSIGNMENT_OUTPUT)
    assert isinstance(assignment, MemorySliceError)
    assert assignment.reason == "assignment_output"