import copy

import pytest

from circomstruct.error_code import ReportCode
from circomstruct.fill import fill
from circomstruct.program_merger import Merger
from circomstruct.syntax import (
    Block,
    Declaration,
    Function,
    Meta,
    Number,
    Return,
    SignalType,
    Template,
    VariableType,
)


def _function(name, start=0):
    body = Block(Meta(start, start + 10), [Return(Meta(start, start + 5), Number(Meta(start, start + 1), 1))])
    return Function(Meta(start, start + 10), name, ["a", "b"], range(start, start + 3), body)


def _template(name, start=0, parallel=False, custom=False):
    decl = Declaration(
        Meta(start, start + 4), VariableType.signal(SignalType.INPUT, ["binary"]), "x", []
    )
    body = Block(Meta(start, start + 10), [decl])
    return Template(
        Meta(start, start + 10), name, ["n"], range(start, start + 2), body,
        parallel=parallel, is_custom_gate=custom,
    )


def test_add_function_and_template():
    merger = Merger()
    reports = merger.add_definitions(0, [_function("f"), _template("T")])
    assert reports == []
    assert merger.contains_function("f")
    assert merger.contains_template("T")
    assert not merger.contains_function("T")
    assert not merger.contains_template("f")


def test_function_data_contents():
    merger = Merger()
    merger.add_definitions(2, [_function("f")])
    data = merger.functions["f"]
    assert data.name == "f"
    assert data.file_id == 2
    assert data.name_of_params == ["a", "b"]
    assert data.num_of_params == 2


def test_fresh_id_advances_by_node_count():
    definition = _function("f")
    expected = fill(copy.deepcopy(definition.body), 0, 0)
    merger = Merger()
    merger.add_definitions(0, [definition])
    assert merger.fresh_id == expected
    assert definition.body.meta.elem_id == 0
    assert definition.body.meta.file_id == 0


def test_ids_continue_across_definitions():
    first, second = _function("f"), _function("g")
    merger = Merger()
    merger.add_definitions(0, [first])
    after_first = merger.fresh_id
    merger.add_definitions(1, [second])
    assert second.body.meta.elem_id == after_first
    assert second.body.meta.file_id == 1


def test_template_signals_collected():
    merger = Merger()
    merger.add_definitions(0, [_template("T", parallel=True, custom=True)])
    data = merger.templates["T"]
    assert data.get_input_info("x") == (0, frozenset({"binary"}))
    assert data.is_parallel is True
    assert data.is_custom_gate is True


def test_duplicate_name_reported():
    merger = Merger()
    merger.add_definitions(0, [_function("f")])
    reports = merger.add_definitions(3, [_template("f", start=20)])
    assert len(reports) == 1
    report = reports[0]
    assert report.code is ReportCode.SAME_SYMBOL_DECLARED_TWICE
    assert report.message == "Duplicated callable symbol"
    assert report.is_error()
    label = report.primary[0]
    assert label.file_id == 3
    assert label.location == range(20, 30)
    assert label.message == "f is already in use"
    assert not merger.contains_template("f")


def test_duplicate_does_not_consume_ids():
    merger = Merger()
    merger.add_definitions(0, [_function("f")])
    before = merger.fresh_id
    merger.add_definitions(0, [_function("f")])
    assert merger.fresh_id == before


def test_duplicates_within_one_batch():
    merger = Merger()
    reports = merger.add_definitions(0, [_function("f"), _function("f"), _template("f")])
    assert len(reports) == 2
    assert list(merger.functions) == ["f"]