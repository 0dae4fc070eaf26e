import copy

import pytest

from circomstruct.fill import fill
from circomstruct.function_data import FunctionData
from circomstruct.syntax import Block, Meta, Number, Return


def _body():
    return Block(Meta(0, 10), [Return(Meta(1, 5), Number(Meta(2, 3), 7))])


def test_create_fills_body_and_counts_params():
    body = _body()
    expected_next = fill(copy.deepcopy(body), 3, 5)
    data, next_id = FunctionData.create("f", 3, body, ["a", "b"], range(4, 9), 5)
    assert next_id == expected_next
    assert data.num_of_params == 2
    assert data.name_of_params == ["a", "b"]
    assert data.param_location == range(4, 9)
    assert data.body.meta.elem_id == 5
    assert data.body.meta.file_id == 3
    assert data.body.stmts[0].value.meta.file_id == 3


def test_body_statements():
    data, _ = FunctionData.create("f", 0, _body(), [], range(0, 0), 0)
    stmts = data.body_statements()
    assert len(stmts) == 1
    assert isinstance(stmts[0], Return)


def test_body_statements_requires_block():
    data, _ = FunctionData.create("f", 0, Return(Meta(0, 1), Number(Meta(0, 1), 1)),
                                  [], range(0, 0), 0)
    with pytest.raises(ValueError):
        data.body_statements()


def test_replace_body_returns_old():
    data, _ = FunctionData.create("f", 0, _body(), [], range(0, 0), 0)
    old = data.body
    new = Block(Meta(0, 1), [])
    assert data.replace_body(new) is old
    assert data.body is new
    assert data.body_statements() == []