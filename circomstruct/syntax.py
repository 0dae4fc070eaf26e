"""Syntax tree nodes for circuit programs and the knowledge attached to them."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Iterator, Optional, Union

Version = tuple[int, int, int]


class TypeReduction(IntEnum):
    VARIABLE = auto()
    COMPONENT = auto()
    SIGNAL = auto()
    TAG = auto()


@dataclass
class TypeKnowledge:
    """What a node's type reduces to, once type analysis has decided it."""

    reduces_to: Optional[TypeReduction] = None

    @property
    def reduction(self) -> TypeReduction:
        if self.reduces_to is None:
            raise ValueError("reduces_to knowledge looked at without being initialized")
        return self.reduces_to

    def is_var(self) -> bool:
        return self.reduction is TypeReduction.VARIABLE

    def is_component(self) -> bool:
        return self.reduction is TypeReduction.COMPONENT

    def is_signal(self) -> bool:
        return self.reduction is TypeReduction.SIGNAL

    def is_tag(self) -> bool:
        return self.reduction is TypeReduction.TAG


@dataclass
class MemoryKnowledge:
    """Concrete layout facts about a node, filled in by later analyses."""

    _concrete_dimensions: Optional[list[int]] = None
    _full_length: Optional[int] = None
    _abstract_memory_address: Optional[int] = None

    def set_concrete_dimensions(self, value: list[int]) -> None:
        self._full_length = math.prod(value)
        self._concrete_dimensions = list(value)

    @property
    def concrete_dimensions(self) -> list[int]:
        if self._concrete_dimensions is None:
            raise ValueError("concrete dimensions looked at without being initialized")
        return self._concrete_dimensions

    @property
    def full_length(self) -> int:
        if self._full_length is None:
            raise ValueError("full dimension looked at without being initialized")
        return self._full_length

    @property
    def abstract_memory_address(self) -> int:
        if self._abstract_memory_address is None:
            raise ValueError("abstract memory address looked at without being initialized")
        return self._abstract_memory_address

    @abstract_memory_address.setter
    def abstract_memory_address(self, value: int) -> None:
        self._abstract_memory_address = value


@dataclass
class Meta:
    """Position and analysis data carried by every node."""

    start: int
    end: int
    elem_id: int = 0
    location: Optional[range] = None
    file_id: Optional[int] = None
    component_inference: Optional[str] = None
    type_knowledge: TypeKnowledge = field(default_factory=TypeKnowledge)
    memory_knowledge: MemoryKnowledge = field(default_factory=MemoryKnowledge)

    def __post_init__(self) -> None:
        if self.location is None:
            self.location = range(self.start, self.end)

    def change_location(self, location: range, file_id: Optional[int]) -> None:
        self.location = location
        self.file_id = file_id

    def require_file_id(self) -> int:
        if self.file_id is None:
            raise ValueError("empty file id accessed")
        return self.file_id


class SignalType(IntEnum):
    OUTPUT = auto()
    INPUT = auto()
    INTERMEDIATE = auto()


class VariableKind(IntEnum):
    VAR = auto()
    SIGNAL = auto()
    COMPONENT = auto()
    ANONYMOUS_COMPONENT = auto()


@dataclass(frozen=True, order=True)
class VariableType:
    """Declared type of a symbol; signals also carry a kind and a tag list."""

    kind: VariableKind
    signal_type: Optional[SignalType] = None
    tags: tuple[str, ...] = ()

    @classmethod
    def var(cls) -> "VariableType":
        return cls(VariableKind.VAR)

    @classmethod
    def signal(cls, signal_type: SignalType, tags=()) -> "VariableType":
        return cls(VariableKind.SIGNAL, signal_type, tuple(tags))

    @classmethod
    def component(cls) -> "VariableType":
        return cls(VariableKind.COMPONENT)

    @classmethod
    def anonymous_component(cls) -> "VariableType":
        return cls(VariableKind.ANONYMOUS_COMPONENT)


class AssignOp(Enum):
    ASSIGN_VAR = auto()
    ASSIGN_SIGNAL = auto()
    ASSIGN_CONSTRAINT_SIGNAL = auto()

    def is_signal_operator(self) -> bool:
        return self in (AssignOp.ASSIGN_SIGNAL, AssignOp.ASSIGN_CONSTRAINT_SIGNAL)


class ExpressionInfixOpcode(Enum):
    MUL = auto()
    DIV = auto()
    ADD = auto()
    SUB = auto()
    POW = auto()
    INT_DIV = auto()
    MOD = auto()
    SHIFT_L = auto()
    SHIFT_R = auto()
    LESSER_EQ = auto()
    GREATER_EQ = auto()
    LESSER = auto()
    GREATER = auto()
    EQ = auto()
    NOT_EQ = auto()
    BOOL_OR = auto()
    BOOL_AND = auto()
    BIT_OR = auto()
    BIT_AND = auto()
    BIT_XOR = auto()


class ExpressionPrefixOpcode(Enum):
    SUB = auto()
    BOOL_NOT = auto()
    COMPLEMENT = auto()


@dataclass
class VersionPragma:
    meta: Meta
    file_id: int
    version: Version


@dataclass
class CustomGatesPragma:
    meta: Meta
    file_id: int


@dataclass
class UnrecognizedPragma:
    """A pragma already reported by the parser; it carries nothing."""


# Expressions


@dataclass
class Expression:
    meta: Meta

    def _children(self) -> Iterator["Expression"]:
        return iter(())

    def is_array(self) -> bool:
        return isinstance(self, (ArrayInLine, UniformArray))

    def contains_anonymous_comp(self) -> bool:
        if isinstance(self, AnonymousComp):
            return True
        return any(child.contains_anonymous_comp() for child in self._children())

    def contains_tuple(self) -> bool:
        if isinstance(self, Tuple):
            return True
        return any(child.contains_tuple() for child in self._children())

    def make_anonymous_parallel(self) -> "Expression":
        if isinstance(self, AnonymousComp):
            return dataclasses.replace(self, is_parallel=True)
        return self


@dataclass
class ComponentAccess:
    name: str


@dataclass
class ArrayAccess:
    expression: Expression


Access = Union[ComponentAccess, ArrayAccess]


@dataclass
class InfixOp(Expression):
    lhe: Expression
    infix_op: ExpressionInfixOpcode
    rhe: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.lhe
        yield self.rhe


@dataclass
class PrefixOp(Expression):
    prefix_op: ExpressionPrefixOpcode
    rhe: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.rhe


@dataclass
class InlineSwitchOp(Expression):
    cond: Expression
    if_true: Expression
    if_false: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.cond
        yield self.if_true
        yield self.if_false


@dataclass
class ParallelOp(Expression):
    rhe: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.rhe


@dataclass
class Variable(Expression):
    name: str
    access: list[Access] = field(default_factory=list)

    def _children(self) -> Iterator[Expression]:
        for item in self.access:
            if isinstance(item, ArrayAccess):
                yield item.expression


@dataclass
class Number(Expression):
    value: int


@dataclass
class Call(Expression):
    id: str
    args: list[Expression] = field(default_factory=list)

    def _children(self) -> Iterator[Expression]:
        yield from self.args


@dataclass
class AnonymousComp(Expression):
    id: str
    is_parallel: bool
    params: list[Expression] = field(default_factory=list)
    signals: list[Expression] = field(default_factory=list)
    names: Optional[list[tuple[AssignOp, str]]] = None

    def _children(self) -> Iterator[Expression]:
        yield from self.params
        yield from self.signals


@dataclass
class ArrayInLine(Expression):
    values: list[Expression] = field(default_factory=list)

    def _children(self) -> Iterator[Expression]:
        yield from self.values


@dataclass
class Tuple(Expression):
    values: list[Expression] = field(default_factory=list)

    def _children(self) -> Iterator[Expression]:
        yield from self.values


@dataclass
class UniformArray(Expression):
    value: Expression
    dimension: Expression

    def _children(self) -> Iterator[Expression]:
        yield self.value
        yield self.dimension


# Log arguments


@dataclass
class LogStr:
    value: str


@dataclass
class LogExp:
    expression: Expression


LogArgument = Union[LogStr, LogExp]


# Statements


@dataclass
class Statement:
    meta: Meta


@dataclass
class IfThenElse(Statement):
    cond: Expression
    if_case: Statement
    else_case: Optional[Statement] = None


@dataclass
class While(Statement):
    cond: Expression
    stmt: Statement


@dataclass
class Return(Statement):
    value: Expression


@dataclass
class InitializationBlock(Statement):
    xtype: VariableType
    initializations: list[Statement] = field(default_factory=list)


@dataclass
class Declaration(Statement):
    xtype: VariableType
    name: str
    dimensions: list[Expression] = field(default_factory=list)
    is_constant: bool = True


@dataclass
class Substitution(Statement):
    var: str
    access: list[Access]
    op: AssignOp
    rhe: Expression


@dataclass
class MultSubstitution(Statement):
    lhe: Expression
    op: AssignOp
    rhe: Expression


@dataclass
class UnderscoreSubstitution(Statement):
    op: AssignOp
    rhe: Expression


@dataclass
class ConstraintEquality(Statement):
    lhe: Expression
    rhe: Expression


@dataclass
class LogCall(Statement):
    args: list[LogArgument] = field(default_factory=list)


@dataclass
class Block(Statement):
    stmts: list[Statement] = field(default_factory=list)


@dataclass
class Assert(Statement):
    arg: Expression


# Definitions


@dataclass
class Definition:
    meta: Meta
    name: str
    args: list[str]
    arg_location: range
    body: Statement


@dataclass
class Template(Definition):
    parallel: bool = False
    is_custom_gate: bool = False


@dataclass
class Function(Definition):
    pass