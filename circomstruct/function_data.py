"""Stored information about a function definition."""

from __future__ import annotations

from dataclasses import dataclass

from .fill import fill
from .syntax import Block, Statement


@dataclass
class FunctionData:
    name: str
    file_id: int
    body: Statement
    num_of_params: int
    name_of_params: list[str]
    param_location: range

    @classmethod
    def create(
        cls,
        name: str,
        file_id: int,
        body: Statement,
        name_of_params,
        param_location: range,
        next_id: int,
    ) -> tuple["FunctionData", int]:
        """Number the body's nodes from ``next_id``; returns the data and the next free id."""
        next_id = fill(body, file_id, next_id)
        params = list(name_of_params)
        data = cls(name, file_id, body, len(params), params, param_location)
        return data, next_id

    def body_statements(self) -> list[Statement]:
        if not isinstance(self.body, Block):
            raise ValueError("function body should be a block")
        return self.body.stmts

    def replace_body(self, new: Statement) -> Statement:
        old, self.body = self.body, new
        return old