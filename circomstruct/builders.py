"""Constructors and desugaring helpers used while building the syntax tree."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .syntax import (
    Access,
    AssignOp,
    Block,
    Declaration,
    Expression,
    ExpressionInfixOpcode,
    InfixOp,
    InitializationBlock,
    LogArgument,
    LogCall,
    LogStr,
    Meta,
    MultSubstitution,
    Number,
    Statement,
    Substitution,
    Tuple,
    UniformArray,
    Variable,
    VariableType,
    While,
)

_LOG_CHUNK = 230

MainComponent = tuple[list[str], Expression]


@dataclass
class Symbol:
    """One name of a declaration, with its dimensions and optional initialiser."""

    name: str
    is_array: list[Expression] = field(default_factory=list)
    init: Optional[Expression] = None


@dataclass
class TupleInit:
    """Initialiser of a tuple declaration: the operator and the right-hand side."""

    op: AssignOp
    expression: Expression


def _clone(value):
    return copy.deepcopy(value)


def build_main_component(public: Sequence[str], call: Expression) -> MainComponent:
    return (list(public), call)


def build_declaration(
    meta: Meta, xtype: VariableType, name: str, dimensions: Sequence[Expression]
) -> Declaration:
    return Declaration(meta, xtype, name, list(dimensions), is_constant=True)


def _split_string(text: str) -> list[LogStr]:
    return [LogStr(text[i : i + _LOG_CHUNK]) for i in range(0, len(text), _LOG_CHUNK)]


def build_log_call(meta: Meta, args: Sequence[LogArgument]) -> LogCall:
    """A log statement; long strings are cut into pieces of at most 230 characters."""
    new_args: list[LogArgument] = []
    for arg in args:
        if isinstance(arg, LogStr):
            new_args.extend(_split_string(arg.value))
        else:
            new_args.append(arg)
    return LogCall(meta, new_args)


def build_anonymous_component_statement(meta: Meta, arg: Expression) -> MultSubstitution:
    return MultSubstitution(
        _clone(meta), Tuple(meta, []), AssignOp.ASSIGN_CONSTRAINT_SIGNAL, arg
    )


def unzip_3(
    items: Sequence[tuple[str, AssignOp, Expression]],
) -> tuple[list[tuple[AssignOp, str]], list[Expression]]:
    names = [(op, name) for name, op, _ in items]
    exprs = [expr for _, _, expr in items]
    return names, exprs


def assign_with_op_shortcut(
    op: ExpressionInfixOpcode,
    meta: Meta,
    variable: tuple[str, list[Access]],
    rhe: Expression,
) -> Substitution:
    """Desugar ``x op= rhe`` into ``x = x op rhe``."""
    name, access = variable
    current = Variable(_clone(meta), name, _clone(list(access)))
    infix = InfixOp(_clone(meta), current, op, rhe)
    return Substitution(meta, name, list(access), AssignOp.ASSIGN_VAR, infix)


def plusplus(meta: Meta, variable: tuple[str, list[Access]]) -> Substitution:
    one = Number(_clone(meta), 1)
    return assign_with_op_shortcut(ExpressionInfixOpcode.ADD, meta, variable, one)


def subsub(meta: Meta, variable: tuple[str, list[Access]]) -> Substitution:
    one = Number(_clone(meta), 1)
    return assign_with_op_shortcut(ExpressionInfixOpcode.SUB, meta, variable, one)


def for_into_while(
    meta: Meta, init: Statement, cond: Expression, step: Statement, body: Statement
) -> Block:
    """Desugar a for loop into ``{ init; while (cond) { body; step } }``."""
    while_body = Block(_clone(body.meta), [body, step])
    loop = While(_clone(meta), cond, while_body)
    return Block(meta, [init, loop])


def _zero_filled(meta: Meta, dimensions: Sequence[Expression]) -> Expression:
    value: Expression = Number(_clone(meta), 0)
    for dim in reversed(dimensions):
        value = UniformArray(_clone(meta), value, _clone(dim))
    return value


def split_declaration_into_single_nodes(
    meta: Meta, xtype: VariableType, symbols: Sequence[Symbol], op: AssignOp
) -> InitializationBlock:
    """One declaration per symbol, each followed by its initialisation.

    Variables without an initialiser are set to zero-filled arrays.
    """
    initializations: list[Statement] = []
    is_var = xtype == VariableType.var()
    for symbol in symbols:
        dimensions = symbol.is_array
        initializations.append(
            build_declaration(_clone(meta), xtype, symbol.name, _clone(list(dimensions)))
        )
        if symbol.init is not None:
            initializations.append(
                Substitution(_clone(meta), symbol.name, [], op, symbol.init)
            )
        elif is_var:
            initializations.append(
                Substitution(
                    _clone(meta), symbol.name, [], op, _zero_filled(meta, dimensions)
                )
            )
    return InitializationBlock(meta, xtype, initializations)


def split_declaration_into_single_nodes_and_multisubstitution(
    meta: Meta,
    xtype: VariableType,
    symbols: Sequence[Symbol],
    init: Optional[TupleInit],
) -> InitializationBlock:
    """Declarations for a tuple of symbols, assigned together from ``init``."""
    initializations: list[Statement] = []
    values: list[Expression] = []
    zero_fill = xtype == VariableType.var() and init is None
    for symbol in symbols:
        if symbol.init is not None:
            raise ValueError(f"symbol {symbol.name!r} of a tuple declaration has an initialiser")
        dimensions = symbol.is_array
        initializations.append(
            build_declaration(_clone(meta), xtype, symbol.name, _clone(list(dimensions)))
        )
        if zero_fill:
            initializations.append(
                Substitution(
                    _clone(meta),
                    symbol.name,
                    [],
                    AssignOp.ASSIGN_VAR,
                    _zero_filled(meta, dimensions),
                )
            )
        values.append(Variable(_clone(meta), symbol.name, []))
    if init is not None:
        initializations.append(
            MultSubstitution(
                _clone(meta), Tuple(_clone(meta), values), init.op, init.expression
            )
        )
    return InitializationBlock(meta, xtype, initializations)