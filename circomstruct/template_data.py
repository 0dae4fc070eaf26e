"""Stored information about a template definition and its input/output signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .fill import fill
from .syntax import (
    Block,
    Declaration,
    IfThenElse,
    InitializationBlock,
    SignalType,
    Statement,
    VariableKind,
    While,
)

SignalEntry = tuple[int, frozenset[str]]


@dataclass
class TemplateData:
    name: str
    file_id: int
    body: Statement
    num_of_params: int
    name_of_params: list[str]
    param_location: range
    input_signals: dict[str, SignalEntry] = field(default_factory=dict)
    output_signals: dict[str, SignalEntry] = field(default_factory=dict)
    is_parallel: bool = False
    is_custom_gate: bool = False
    input_declarations: list[tuple[str, int]] = field(default_factory=list)
    output_declarations: list[tuple[str, int]] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        file_id: int,
        body: Statement,
        name_of_params,
        param_location: range,
        next_id: int,
        is_parallel: bool,
        is_custom_gate: bool,
    ) -> tuple["TemplateData", int]:
        """Number the body from ``next_id`` and collect its signals.

        Returns the data and the next free id. Signal maps are sorted by name;
        the declaration lists keep source order.
        """
        next_id = fill(body, file_id, next_id)
        inputs: dict[str, SignalEntry] = {}
        outputs: dict[str, SignalEntry] = {}
        input_order: list[tuple[str, int]] = []
        output_order: list[tuple[str, int]] = []
        for decl in _signal_declarations(body):
            entry = (len(decl.dimensions), frozenset(decl.xtype.tags))
            if decl.xtype.signal_type is SignalType.INPUT:
                inputs[decl.name] = entry
                input_order.append((decl.name, entry[0]))
            elif decl.xtype.signal_type is SignalType.OUTPUT:
                outputs[decl.name] = entry
                output_order.append((decl.name, entry[0]))
        params = list(name_of_params)
        data = cls(
            name=name,
            file_id=file_id,
            body=body,
            num_of_params=len(params),
            name_of_params=params,
            param_location=param_location,
            input_signals=dict(sorted(inputs.items())),
            output_signals=dict(sorted(outputs.items())),
            is_parallel=is_parallel,
            is_custom_gate=is_custom_gate,
            input_declarations=input_order,
            output_declarations=output_order,
        )
        return data, next_id

    def body_statements(self) -> list[Statement]:
        if not isinstance(self.body, Block):
            raise ValueError("template body should be a block")
        return self.body.stmts

    def get_input_info(self, name: str) -> Optional[SignalEntry]:
        return self.input_signals.get(name)

    def get_output_info(self, name: str) -> Optional[SignalEntry]:
        return self.output_signals.get(name)


def _signal_declarations(stmt: Statement) -> Iterator[Declaration]:
    match stmt:
        case IfThenElse(if_case=if_case, else_case=else_case):
            yield from _signal_declarations(if_case)
            if else_case is not None:
                yield from _signal_declarations(else_case)
        case Block(stmts=stmts):
            for inner in stmts:
                yield from _signal_declarations(inner)
        case While(stmt=inner):
            yield from _signal_declarations(inner)
        case InitializationBlock(initializations=initializations):
            for inner in initializations:
                yield from _signal_declarations(inner)
        case Declaration(xtype=xtype) if xtype.kind is VariableKind.SIGNAL:
            yield stmt