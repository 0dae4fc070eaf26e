"""Collects the callable definitions of every file into one namespace."""

from __future__ import annotations

from typing import Iterable

from .error_code import ReportCode
from .error_definition import Report
from .function_data import FunctionData
from .syntax import Definition, Function, Template
from .template_data import TemplateData


class Merger:
    """Registers functions and templates, numbering their nodes as it goes.

    Names are shared between functions and templates: a second definition
    with a name already in use is rejected and reported.
    """

    def __init__(self) -> None:
        self.fresh_id = 0
        self.functions: dict[str, FunctionData] = {}
        self.templates: dict[str, TemplateData] = {}

    def add_definitions(
        self, file_id: int, definitions: Iterable[Definition]
    ) -> list[Report]:
        """Add the definitions of one file; returns a report per duplicated name."""
        reports: list[Report] = []
        for definition in definitions:
            name = definition.name
            if self.contains_function(name) or self.contains_template(name):
                reports.append(_duplicate_report(definition, file_id))
                continue
            if isinstance(definition, Template):
                data, self.fresh_id = TemplateData.create(
                    name,
                    file_id,
                    definition.body,
                    definition.args,
                    definition.arg_location,
                    self.fresh_id,
                    definition.parallel,
                    definition.is_custom_gate,
                )
                self.templates[name] = data
            elif isinstance(definition, Function):
                data, self.fresh_id = FunctionData.create(
                    name,
                    file_id,
                    definition.body,
                    definition.args,
                    definition.arg_location,
                    self.fresh_id,
                )
                self.functions[name] = data
            else:
                raise TypeError(f"unknown definition {type(definition).__name__}")
        return reports

    def contains_function(self, function_name: str) -> bool:
        return function_name in self.functions

    def contains_template(self, template_name: str) -> bool:
        return template_name in self.templates


def _duplicate_report(definition: Definition, file_id: int) -> Report:
    report = Report.error(
        "Duplicated callable symbol", ReportCode.SAME_SYMBOL_DECLARED_TWICE
    )
    report.add_primary(
        definition.meta.location, file_id, f"{definition.name} is already in use"
    )
    return report