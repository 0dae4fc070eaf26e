# circomstruct

Data structures for programs in the circom circuit language: a syntax
tree, diagnostics that render against the loaded sources, a program archive
that gathers definitions from many files, and the runtime helpers used while
evaluating circuits.

## Modules

- `circomstruct.syntax` — the syntax tree. `Meta` carries the source span,
  file id, element id and the `TypeKnowledge` / `MemoryKnowledge` filled in by
  later analyses. Expressions (`InfixOp`, `PrefixOp`, `InlineSwitchOp`,
  `ParallelOp`, `Variable`, `Number`, `Call`, `AnonymousComp`, `ArrayInLine`,
  `Tuple`, `UniformArray`) derive from `Expression`, which offers
  `is_array()`, `contains_anonymous_comp()`, `contains_tuple()` and
  `make_anonymous_parallel()`. Statements derive from `Statement`; definitions
  are `Template` and `Function`. `VariableType.var()`, `.signal(...)`,
  `.component()` and `.anonymous_component()` build declared types;
  `AssignOp.is_signal_operator()` tells signal assignments apart.
- `circomstruct.builders` — constructors and desugaring: `plusplus`,
  `subsub`, `assign_with_op_shortcut`, `for_into_while`,
  `split_declaration_into_single_nodes`,
  `split_declaration_into_single_nodes_and_multisubstitution`,
  `build_log_call` (splits strings into pieces of at most 230 characters),
  `build_declaration`, `build_anonymous_component_statement`,
  `build_main_component`, `unzip_3`, with the `Symbol` and `TupleInit` records.
- `circomstruct.fill` — `fill(node, file_id, next_id)` numbers a node and all
  its descendants in pre-order, stamps them with the file id and returns the
  next free id.
- `circomstruct.error_code` — `ReportCode`; `str(code)` gives the short code
  such as `"T2008"`.
- `circomstruct.error_definition` — `Report` (`error`, `warning`,
  `add_primary`, `add_secondary`, `add_note`, `render`), `Label`,
  `MessageCategory` and `print_reports(reports, file_library, stream)`, which
  writes to standard error when no stream is given.
- `circomstruct.file_definition` — `FileLibrary` registers sources under
  sequential ids and turns byte offsets into lines and columns.
- `circomstruct.reports` — ready-made reports: `produce_report`,
  `produce_version_warning_report`, `produce_report_with_message`,
  `produce_compiler_version_report`, `anonymous_inside_condition_error`,
  `anonymous_general_error`, `tuple_general_error`.
- `circomstruct.program_ast` — `AST.build(...)` assembles one file's tree from
  its pragmas, includes, definitions and main component, reporting repeated
  pragmas.
- `circomstruct.function_data`, `circomstruct.template_data` — `FunctionData`
  and `TemplateData`; templates also record their input and output signals.
- `circomstruct.program_merger` — `Merger` gathers definitions into one
  namespace and reports names declared twice.
- `circomstruct.program_archive` — `ProgramArchive.build(...)` merges every
  file and numbers the main call; it raises `ArchiveError` (holding the file
  library and the reports) when names clash.
- `circomstruct.memory_slice` — `MemorySlice`, a multi-dimensional value held
  as a flat row-major list, with `OutOfBoundsError`, `MismatchedDimensions`
  and `MismatchedDimensionsWeak`.
- `circomstruct.environment` — `Environment`, scoped tables of variables,
  components and signals; `require_*` methods raise `NonExistentSymbol`.
- `circomstruct.constants` — `UsefulConstants(name).p` is the modulus of one
  of `bn128`, `bls12381`, `goldilocks`, `grumpkin`, `pallas`, `vesta`.

## Installing

```
pip install .
```

## Examples

```python
from circomstruct.memory_slice import MemorySlice

grid = MemorySlice.filled([3, 4], 0)
row = MemorySlice.filled([4], 4)
grid.insert_values([2], row, True)
assert grid.get_single_value([2, 1]) == 4
print(len(grid))   # 12
```

```python
from circomstruct.builders import plusplus
from circomstruct.fill import fill
from circomstruct.syntax import Meta

stmt = plusplus(Meta(0, 3), ("i", []))   # i = i + 1
print(fill(stmt, 0, 0))                  # 4: four nodes numbered 0..3
```

```python
import sys

from circomstruct.error_code import ReportCode
from circomstruct.error_definition import Report, print_reports
from circomstruct.file_definition import FileLibrary

library = FileLibrary()
fid = library.add_file("main.circom", "template A() {}\n")
report = Report.error("Duplicated callable symbol", ReportCode.SAME_SYMBOL_DECLARED_TWICE)
report.add_primary(range(9, 10), fid, "A is already in use")
print_reports([report], library, sys.stdout)
```

which prints

```
error[T2008]: Duplicated callable symbol
 --> main.circom:1:10
  |
1 | template A() {}
  |          ^ A is already in use
```

## What it does not do

The package holds and checks program structure; it does not read circom
source text. There is no parser, no type analysis, no constraint generation
and no command-line tool: trees are built by the caller from the node
classes and builders above.

## Running the tests

```
pip install .[test]
pytest
```