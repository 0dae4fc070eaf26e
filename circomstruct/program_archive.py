"""The whole program: every function, every template and the main component."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .error_definition import Report
from .file_definition import FileLibrary
from .fill import fill
from .function_data import FunctionData
from .program_merger import Merger
from .syntax import Definition, Expression
from .template_data import TemplateData


class ArchiveError(Exception):
    """The program could not be assembled; carries the file library and the reports."""

    def __init__(self, file_library: FileLibrary, reports: list[Report]) -> None:
        super().__init__(f"program could not be assembled: {len(reports)} report(s)")
        self.file_library = file_library
        self.reports = reports


@dataclass
class ProgramArchive:
    id_max: int
    file_id_main: int
    file_library: FileLibrary
    functions: dict[str, FunctionData]
    templates: dict[str, TemplateData]
    public_inputs: list[str]
    initial_template_call: Expression
    custom_gates: bool = False
    function_keys: set[str] = field(default_factory=set)
    template_keys: set[str] = field(default_factory=set)

    @classmethod
    def build(
        cls,
        file_library: FileLibrary,
        file_id_main: int,
        main_component: tuple[Sequence[str], Expression],
        program_contents: Iterable[tuple[int, Iterable[Definition]]],
        custom_gates: bool,
    ) -> "ProgramArchive":
        """Merge every file's definitions; raises ArchiveError on duplicated names."""
        merger = Merger()
        reports: list[Report] = []
        for file_id, definitions in program_contents:
            reports.extend(merger.add_definitions(file_id, definitions))
        public_inputs, initial_template_call = main_component
        id_max = fill(initial_template_call, file_id_main, merger.fresh_id)
        if reports:
            raise ArchiveError(file_library, reports)
        return cls(
            id_max=id_max,
            file_id_main=file_id_main,
            file_library=file_library,
            functions=merger.functions,
            templates=merger.templates,
            public_inputs=list(public_inputs),
            initial_template_call=initial_template_call,
            custom_gates=custom_gates,
            function_keys=set(merger.functions),
            template_keys=set(merger.templates),
        )

    def contains_template(self, template_name: str) -> bool:
        return template_name in self.templates

    def get_template_data(self, template_name: str) -> TemplateData:
        if not self.contains_template(template_name):
            raise KeyError(template_name)
        return self.templates[template_name]

    def remove_template(self, name: str) -> None:
        self.template_keys.discard(name)
        self.templates.pop(name, None)

    def contains_function(self, function_name: str) -> bool:
        return function_name in self.functions

    def get_function_data(self, function_name: str) -> FunctionData:
        if not self.contains_function(function_name):
            raise KeyError(function_name)
        return self.functions[function_name]

    def remove_function(self, name: str) -> None:
        self.function_keys.discard(name)
        self.functions.pop(name, None)