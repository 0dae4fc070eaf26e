"""The syntax tree of one parsed file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .error_code import ReportCode
from .error_definition import Report
from .reports import produce_report
from .syntax import (
    CustomGatesPragma,
    Definition,
    Expression,
    Meta,
    Template,
    Version,
    VersionPragma,
)

MainComponent = tuple[list[str], Expression]


@dataclass
class AST:
    meta: Meta
    compiler_version: Optional[Version] = None
    custom_gates: bool = False
    custom_gates_declared: bool = False
    includes: list[str] = field(default_factory=list)
    definitions: list[Definition] = field(default_factory=list)
    main_component: Optional[MainComponent] = None

    @classmethod
    def build(
        cls,
        meta: Meta,
        pragmas: Sequence,
        includes: Sequence[str],
        definitions: Sequence[Definition],
        main_component: Optional[MainComponent],
    ) -> tuple["AST", list[Report]]:
        """Assemble the tree; a repeated pragma yields a report, the first one wins."""
        compiler_version: Optional[Version] = None
        custom_gates = False
        reports: list[Report] = []
        for pragma in pragmas:
            if isinstance(pragma, VersionPragma):
                if compiler_version is not None:
                    reports.append(_duplicate(pragma.meta, pragma.file_id))
                else:
                    compiler_version = pragma.version
            elif isinstance(pragma, CustomGatesPragma):
                if custom_gates:
                    reports.append(_duplicate(pragma.meta, pragma.file_id))
                else:
                    custom_gates = True
            # Unrecognized pragmas were already reported by the parser.
        definitions = list(definitions)
        declared = any(
            isinstance(d, Template) and d.is_custom_gate for d in definitions
        )
        ast = cls(
            meta=meta,
            compiler_version=compiler_version,
            custom_gates=custom_gates,
            custom_gates_declared=declared,
            includes=list(includes),
            definitions=definitions,
            main_component=main_component,
        )
        return ast, reports

    def decompose(
        self,
    ) -> tuple[
        Meta, Optional[Version], list[str], list[Definition], Optional[MainComponent]
    ]:
        return (
            self.meta,
            self.compiler_version,
            self.includes,
            self.definitions,
            self.main_component,
        )


def _duplicate(meta: Meta, file_id: int) -> Report:
    return produce_report(
        ReportCode.MULTIPLE_PRAGMA, range(meta.start, meta.end), file_id
    )