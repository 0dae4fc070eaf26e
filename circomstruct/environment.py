"""Scoped symbol tables for variables, components and signals."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

CC = TypeVar("CC")
SC = TypeVar("SC")
VC = TypeVar("VC")


class NonExistentSymbol(LookupError):
    """A symbol was required but is not defined in the environment."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"non-existent symbol: {symbol}")
        self.symbol = symbol


def _union(
    left: dict[str, VC], right: dict[str, VC], using: Callable[[VC, VC], VC]
) -> dict[str, VC]:
    result: dict[str, VC] = {}
    remaining = dict(right)
    for key, value in left.items():
        if key in remaining:
            result[key] = using(value, remaining.pop(key))
        else:
            result[key] = value
    for key, value in remaining.items():
        result.setdefault(key, value)
    return result


class Environment(Generic[CC, SC, VC]):
    """Components and signals live in flat tables; variables live in nested blocks.

    Variable lookups search from the innermost block outwards. A fresh
    environment starts with one variable block.
    """

    def __init__(self) -> None:
        self.components: dict[str, CC] = {}
        self.inputs: dict[str, SC] = {}
        self.outputs: dict[str, SC] = {}
        self.intermediates: dict[str, SC] = {}
        self.variables: list[dict[str, VC]] = [{}]

    @classmethod
    def merge(
        cls,
        left: "Environment[CC, SC, VC]",
        right: "Environment[CC, SC, VC]",
        using: Callable[[VC, VC], VC],
    ) -> "Environment[CC, SC, VC]":
        """Join two environments.

        Entries of ``right`` win in the flat tables. Variable blocks are paired
        from the innermost outwards, as many as the shallower side has, and a
        variable present in both paired blocks is combined with ``using``.
        """
        merged: Environment[CC, SC, VC] = cls()
        merged.components = {**left.components, **right.components}
        merged.inputs = {**left.inputs, **right.inputs}
        merged.outputs = {**left.outputs, **right.outputs}
        merged.intermediates = {**left.intermediates, **right.intermediates}
        depth = min(len(left.variables), len(right.variables))
        left_blocks = left.variables[len(left.variables) - depth :]
        right_blocks = right.variables[len(right.variables) - depth :]
        merged.variables = [
            _union(lb, rb, using) for lb, rb in zip(left_blocks, right_blocks)
        ]
        return merged

    def has_symbol(self, symbol: str) -> bool:
        return (
            self.has_signal(symbol)
            or self.has_component(symbol)
            or self.has_variable(symbol)
        )

    # Variables

    def _block_with(self, symbol: str) -> Optional[dict[str, VC]]:
        for block in reversed(self.variables):
            if symbol in block:
                return block
        return None

    def add_variable_block(self) -> None:
        self.variables.append({})

    def remove_variable_block(self) -> None:
        if not self.variables:
            raise IndexError("no variable block to remove")
        self.variables.pop()

    def add_variable(self, name: str, content: VC) -> None:
        """Define ``name`` in the innermost block."""
        if not self.variables:
            raise IndexError("no variable block to add to")
        self.variables[-1][name] = content

    def has_variable(self, symbol: str) -> bool:
        return self._block_with(symbol) is not None

    def get_variable(self, symbol: str) -> Optional[VC]:
        block = self._block_with(symbol)
        return None if block is None else block[symbol]

    def require_variable(self, symbol: str) -> VC:
        block = self._block_with(symbol)
        if block is None:
            raise NonExistentSymbol(symbol)
        return block[symbol]

    def update_variable(self, symbol: str, content: VC) -> None:
        """Replace the value of the innermost visible ``symbol``."""
        block = self._block_with(symbol)
        if block is None:
            raise NonExistentSymbol(symbol)
        block[symbol] = content

    def remove_variable(self, symbol: str) -> None:
        block = self._block_with(symbol)
        if block is not None:
            del block[symbol]

    # Components

    def add_component(self, name: str, content: CC) -> None:
        self.components[name] = content

    def remove_component(self, name: str) -> None:
        self.components.pop(name, None)

    def has_component(self, symbol: str) -> bool:
        return symbol in self.components

    def get_component(self, symbol: str) -> Optional[CC]:
        return self.components.get(symbol)

    def require_component(self, symbol: str) -> CC:
        try:
            return self.components[symbol]
        except KeyError:
            raise NonExistentSymbol(symbol) from None

    # Signals

    def add_input(self, name: str, content: SC) -> None:
        self.inputs[name] = content

    def remove_input(self, name: str) -> None:
        self.inputs.pop(name, None)

    def add_output(self, name: str, content: SC) -> None:
        self.outputs[name] = content

    def remove_output(self, name: str) -> None:
        self.outputs.pop(name, None)

    def add_intermediate(self, name: str, content: SC) -> None:
        self.intermediates[name] = content

    def remove_intermediate(self, name: str) -> None:
        self.intermediates.pop(name, None)

    def has_input(self, symbol: str) -> bool:
        return symbol in self.inputs

    def has_output(self, symbol: str) -> bool:
        return symbol in self.outputs

    def has_intermediate(self, symbol: str) -> bool:
        return symbol in self.intermediates

    def has_signal(self, symbol: str) -> bool:
        return (
            self.has_input(symbol)
            or self.has_output(symbol)
            or self.has_intermediate(symbol)
        )

    def get_input(self, symbol: str) -> Optional[SC]:
        return self.inputs.get(symbol)

    def get_output(self, symbol: str) -> Optional[SC]:
        return self.outputs.get(symbol)

    def get_intermediate(self, symbol: str) -> Optional[SC]:
        return self.intermediates.get(symbol)

    def _signal_table(self, symbol: str) -> Optional[dict[str, SC]]:
        for table in (self.inputs, self.outputs, self.intermediates):
            if symbol in table:
                return table
        return None

    def get_signal(self, symbol: str) -> Optional[SC]:
        """Look in inputs, then outputs, then intermediates."""
        table = self._signal_table(symbol)
        return None if table is None else table[symbol]

    @staticmethod
    def _require(table: dict[str, SC], symbol: str) -> SC:
        try:
            return table[symbol]
        except KeyError:
            raise NonExistentSymbol(symbol) from None

    def require_input(self, symbol: str) -> SC:
        return self._require(self.inputs, symbol)

    def require_output(self, symbol: str) -> SC:
        return self._require(self.outputs, symbol)

    def require_intermediate(self, symbol: str) -> SC:
        return self._require(self.intermediates, symbol)

    def require_signal(self, symbol: str) -> SC:
        table = self._signal_table(symbol)
        if table is None:
            raise NonExistentSymbol(symbol)
        return table[symbol]