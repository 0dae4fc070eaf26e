import copy

import pytest

from circomstruct.fill import fill
from circomstruct.syntax import (
    Block,
    Declaration,
    IfThenElse,
    InitializationBlock,
    Meta,
    Number,
    Return,
    SignalType,
    VariableType,
    While,
)
from circomstruct.template_data import TemplateData


def _decl(name, signal_type, dims=0, tags=()):
    xtype = VariableType.signal(signal_type, tags)
    return Declaration(Meta(0, 1), xtype, name, [Number(Meta(0, 1), 2) for _ in range(dims)])


def _body():
    return Block(Meta(0, 100), [
        InitializationBlock(Meta(0, 10), VariableType.signal(SignalType.INPUT), [
            _decl("z", SignalType.INPUT, 1, ["binary"]),
        ]),
        _decl("out", SignalType.OUTPUT),
        _decl("mid", SignalType.INTERMEDIATE),
        IfThenElse(Meta(0, 1), Number(Meta(0, 1), 1),
                   Block(Meta(0, 1), []),
                   Block(Meta(0, 1), [_decl("a", SignalType.INPUT, 2)])),
        While(Meta(0, 1), Number(Meta(0, 1), 0),
              Block(Meta(0, 1), [_decl("o2", SignalType.OUTPUT)])),
        Declaration(Meta(0, 1), VariableType.var(), "v", []),
    ])


def _create(body=None):
    return TemplateData.create("T", 2, body or _body(), ["n"], range(1, 3), 0, True, False)


def test_signals_are_collected():
    data, _ = _create()
    assert data.get_input_info("z") == (1, {"binary"})
    assert data.get_input_info("a") == (2, frozenset())
    assert data.get_output_info("out") == (0, frozenset())
    assert data.get_output_info("o2") == (0, frozenset())
    assert data.get_input_info("mid") is None
    assert data.get_output_info("mid") is None
    assert data.get_input_info("v") is None


def test_maps_sorted_and_declarations_in_order():
    data, _ = _create()
    assert list(data.input_signals) == sorted(data.input_signals)
    assert list(data.output_signals) == sorted(data.output_signals)
    assert data.input_declarations == [("z", 1), ("a", 2)]
    assert data.output_declarations == [("out", 0), ("o2", 0)]


def test_create_fills_and_keeps_flags():
    body = _body()
    expected_next = fill(copy.deepcopy(body), 2, 0)
    data, next_id = TemplateData.create("T", 2, body, ["n", "m"], range(1, 3), 0, True, False)
    assert next_id == expected_next
    assert data.body.meta.file_id == 2
    assert data.body.meta.elem_id == 0
    assert data.num_of_params == 2
    assert data.is_parallel is True
    assert data.is_custom_gate is False
    assert data.param_location == range(1, 3)


def test_body_statements():
    data, _ = _create()
    assert data.body_statements() is data.body.stmts
    other, _ = _create(Return(Meta(0, 1), Number(Meta(0, 1), 1)))
    with pytest.raises(ValueError):
        other.body_statements()