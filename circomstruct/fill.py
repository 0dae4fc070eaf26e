"""Numbering of syntax-tree nodes and stamping them with their file."""

from __future__ import annotations

from typing import Iterator, Union

from .syntax import (
    AnonymousComp,
    ArrayAccess,
    ArrayInLine,
    Assert,
    Block,
    Call,
    ConstraintEquality,
    Declaration,
    Expression,
    IfThenElse,
    InfixOp,
    InitializationBlock,
    InlineSwitchOp,
    LogCall,
    LogExp,
    MultSubstitution,
    ParallelOp,
    PrefixOp,
    Return,
    Statement,
    Substitution,
    Tuple,
    UnderscoreSubstitution,
    UniformArray,
    Variable,
    While,
)

Node = Union[Expression, Statement]


def _array_accesses(access) -> Iterator[Expression]:
    for item in access:
        if isinstance(item, ArrayAccess):
            yield item.expression


def _expression_children(expr: Expression) -> Iterator[Expression]:
    match expr:
        case InfixOp(lhe=lhe, rhe=rhe):
            yield lhe
            yield rhe
        case PrefixOp(rhe=rhe) | ParallelOp(rhe=rhe):
            yield rhe
        case InlineSwitchOp(cond=cond, if_true=if_true, if_false=if_false):
            yield cond
            yield if_true
            yield if_false
        case Variable(access=access):
            yield from _array_accesses(access)
        case Call(args=args):
            yield from args
        case AnonymousComp(params=params, signals=signals):
            yield from params
            yield from signals
        case ArrayInLine(values=values) | Tuple(values=values):
            yield from values
        case UniformArray(value=value, dimension=dimension):
            yield value
            yield dimension


def _statement_children(stmt: Statement) -> Iterator[Node]:
    match stmt:
        case IfThenElse(cond=cond, if_case=if_case, else_case=else_case):
            yield cond
            yield if_case
            if else_case is not None:
                yield else_case
        case While(cond=cond, stmt=body):
            yield cond
            yield body
        case Return(value=value):
            yield value
        case InitializationBlock(initializations=initializations):
            yield from initializations
        case Declaration(dimensions=dimensions):
            yield from dimensions
        case Substitution(access=access, rhe=rhe):
            yield rhe
            yield from _array_accesses(access)
        case MultSubstitution(lhe=lhe, rhe=rhe):
            yield rhe
            yield lhe
        case ConstraintEquality(lhe=lhe, rhe=rhe):
            yield lhe
            yield rhe
        case LogCall(args=args):
            for arg in args:
                if isinstance(arg, LogExp):
                    yield arg.expression
        case Block(stmts=stmts):
            yield from stmts
        case Assert(arg=arg):
            yield arg
        case UnderscoreSubstitution(rhe=rhe):
            yield rhe


def fill(node: Node, file_id: int, next_id: int) -> int:
    """Give ``node`` and its descendants fresh element ids in pre-order.

    Every visited node is stamped with ``file_id``. Returns the next unused id.
    """
    if isinstance(node, Expression):
        children = _expression_children(node)
    elif isinstance(node, Statement):
        children = _statement_children(node)
    else:
        raise TypeError(f"cannot fill {type(node).__name__}")
    node.meta.elem_id = next_id
    node.meta.file_id = file_id
    next_id += 1
    for child in children:
        next_id = fill(child, file_id, next_id)
    return next_id