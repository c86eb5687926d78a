"""Converters package providing kebab-case, camelCase and dot.case conversion."""

from .camel import to_camel_case
from .core import ESTILOS, build_colunas_labels, converter, get_conversor
from .dot import to_dot_case
from .errors import (
    CaseConversionError,
    EmptyInputError,
    EmptyKebabInputError,
    NoTokensError,
    TypeMismatchError,
)
from .kebab import to_kebab_case

__all__ = [
    "CaseConversionError",
    "ESTILOS",
    "EmptyInputError",
    "EmptyKebabInputError",
    "NoTokensError",
    "TypeMismatchError",
    "build_colunas_labels",
    "converter",
    "get_conversor",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
]
