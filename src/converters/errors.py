from __future__ import annotations


class CaseConversionError(Exception):
    """Base class for every failure raised by the case converters."""


class TypeMismatchError(CaseConversionError, TypeError):
    pass


class EmptyInputError(CaseConversionError, ValueError):
    pass


class EmptyKebabInputError(EmptyInputError, TypeError):
    """Blank input to ``to_kebab_case``, which has always signalled it as a TypeError."""


class NoTokensError(CaseConversionError, ValueError):
    pass
