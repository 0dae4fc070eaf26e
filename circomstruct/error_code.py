"""Diagnostic codes attached to compiler reports."""

from __future__ import annotations

from enum import Enum


class ReportCode(Enum):
    """Kind of a report, each with the short code shown to the user.

    Several kinds share one code; they remain distinct members.
    """

    def __new__(cls, code: str) -> "ReportCode":
        member = object.__new__(cls)
        member._value_ = len(cls.__members__) + 1
        member.code = code
        return member

    # Parse errors
    UNCLOSED_COMMENT = "P1005"
    FILE_OS = "P1006"
    NO_MAIN_FOUND_IN_PROJECT = "P1001"
    MULTIPLE_MAIN = "P1002"
    MISSING_SEMICOLON = "P1008"
    UNRECOGNIZED_INCLUDE = "P1009"
    UNRECOGNIZED_VERSION = "P1010"
    UNRECOGNIZED_PRAGMA = "P1011"
    EXPECTED_IDENTIFIER = "P1015"
    INCLUDE_NOT_FOUND = "P1014"
    ILLEGAL_EXPRESSION = "P1012"
    MULTIPLE_PRAGMA = "P1013"
    NO_COMPILER_VERSION_WARNING = "P1004"
    COMPILER_VERSION_ERROR = "P1003"
    # Type analysis
    WRONG_TYPES_IN_ASSIGN_OPERATION_OPERATOR_SIGNAL = "T2000"
    WRONG_TYPES_IN_ASSIGN_OPERATION_OPERATOR_NO_SIGNAL = "T2000"
    WRONG_TYPES_IN_ASSIGN_OPERATION_TEMPLATE = "T2000"
    WRONG_TYPES_IN_ASSIGN_OPERATION_EXPRESSION = "T2000"
    WRONG_TYPES_IN_ASSIGN_OPERATION_ARRAY_TEMPLATES = "T2000"
    WRONG_TYPES_IN_ASSIGN_OPERATION_DIMS = "T2000"
    WRONG_NUMBER_OF_ARGUMENTS = "T20465"
    UNDEFINED_FUNCTION = "T2001"
    UNDEFINED_TEMPLATE = "T2002"
    UNINITIALIZED_SYMBOL_IN_EXPRESSION = "T2003"
    UNABLE_TO_TYPE_FUNCTION = "T2004"
    UNREACHABLE_CONSTRAINTS = "T2005"
    UNREACHABLE_TAGS = "T2049"
    UNREACHABLE_SIGNALS = "T2050"
    UNKNOWN_INDEX = "T2042"
    UNKNOWN_DIMENSION = "T20460"
    SAME_FUNCTION_DECLARED_TWICE = "T2006"
    SAME_TEMPLATE_DECLARED_TWICE = "T2007"
    SAME_SYMBOL_DECLARED_TWICE = "T2008"
    STATIC_INFO_WAS_OVERWRITTEN = "T2009"
    SIGNAL_IN_LINE_INITIALIZATION = "T2010"
    SIGNAL_OUTSIDE_ORIGINAL_SCOPE = "T2011"
    FUNCTION_WRONG_NUMBER_OF_ARGUMENTS = "T2012"
    FUNCTION_INCONSISTENT_TYPING = "T2013"
    FUNCTION_PATH_WITHOUT_RETURN = "T2014"
    FUNCTION_RETURN_ERROR = "T2015"
    FORBIDDEN_DECLARATION_IN_FUNCTION = "T2016"
    NON_HOMOGENEOUS_ARRAY = "T2017"
    NON_BOOLEAN_CONDITION = "T2018"
    NON_COMPATIBLE_BRANCH_TYPES = "T2019"
    NON_EQUAL_TYPES_IN_EXPRESSION = "T2020"
    NON_EXISTENT_SYMBOL = "T2021"
    MAIN_COMPONENT_WITH_TAGS = "T2051"
    TEMPLATE_CALL_AS_ARGUMENT = "T2022"
    TEMPLATE_WRONG_NUMBER_OF_ARGUMENTS = "T2023"
    TEMPLATE_WITH_RETURN_STATEMENT = "T2024"
    TYPE_CANT_BE_USE_AS_CONDITION = "T2025"
    EMPTY_ARRAY_INLINE_DECLARATION = "T2026"
    PREFIX_OPERATOR_WITH_WRONG_TYPES = "T2027"
    PARALLEL_OPERATOR_WITH_WRONG_TYPES = "T2047"
    INFIX_OPERATOR_WITH_WRONG_TYPES = "T2028"
    INVALID_ARGUMENT_IN_CALL = "T2029"
    INCONSISTENT_RETURN_TYPES_IN_BLOCK = "T2030"
    INCONSISTENT_STATIC_INFORMATION = "T2031"
    INVALID_ARRAY_ACCESS = "T2032"
    INVALID_SIGNAL_ACCESS = "T2046"
    INVALID_TAG_ACCESS = "T2048"
    INVALID_TAG_ACCESS_AFTER_ARRAY = "T2049"
    INVALID_ARRAY_SIZE = "T2033"
    INVALID_ARRAY_SIZE_T = "T2033"
    INVALID_ARRAY_TYPE = "T2034"
    FOR_STATEMENT_ILL_CONSTRUCTED = "T2035"
    BAD_ARRAY_ACCESS = "T2035"
    ASSIGNING_A_COMPONENT_TWICE = "T2036"
    ASSIGNING_A_SIGNAL_TWICE = "T2037"
    NOT_ALLOWED_OPERATION = "T2038"
    CONSTRAINT_GENERATOR_IN_FUNCTION = "T2039"
    WRONG_SIGNAL_TAGS = "T2040"
    INVALID_PARTIAL_ARRAY = "T2043"
    MUST_BE_SINGLE_ARITHMETIC = "T2044"
    MUST_BE_SINGLE_ARITHMETIC_T = "T2044"
    MUST_BE_ARITHMETIC = "T2047"
    OUTPUT_TAG_CANNOT_BE_MODIFIED_OUTSIDE = "T2048"
    MUST_BE_SAME_DIMENSION = "T2046"
    EXPECTED_DIM_DIFF_GOT_DIM = "T2045"
    RUNTIME_ERROR = "T3001"
    RUNTIME_WARNING = "T3002"
    UNKNOWN_TEMPLATE = "T20461"
    NON_QUADRATIC = "T20462"
    NON_CONSTANT_ARRAY_LENGTH = "T20463"
    NON_COMPUTABLE_EXPRESSION = "T20464"
    # Constraint analysis
    UNCONSTRAINED_SIGNAL = "CA01"
    UNCONSTRAINED_IO_SIGNAL = "CA02"
    UNUSED_INPUT = "CA03"
    UNUSED_OUTPUT = "CA04"
    ERROR_WAT2WASM = "W01"
    CUSTOM_GATE_INTERMEDIATE_SIGNAL_WARNING = "CG01"
    CUSTOM_GATE_CONSTRAINT_ERROR = "CG02"
    CUSTOM_GATE_SUB_COMPONENT_ERROR = "CG03"
    CUSTOM_GATES_PRAGMA_ERROR = "CG04"
    CUSTOM_GATES_VERSION_ERROR = "CG05"
    ANONYMOUS_COMP_ERROR = "TAC01"
    UNDERSCORE_WITH_NO_SIGNAL_WARNING = "TAC03"
    TUPLE_ERROR = "TAC02"
    INVALID_SIGNAL_TAG_ACCESS = "T2047"
    UNINITIALIZED_COMPONENT = "T20466"

    def __str__(self) -> str:
        return self.code