from __future__ import annotations

from typing import Iterable

from .errors import EmptyInputError, TypeMismatchError


def valida_texto(valor: object, nome: str, erro_vazio: type[EmptyInputError] = EmptyInputError) -> str:
    """Return ``valor`` trimmed, rejecting non-strings and blank strings."""
    if not isinstance(valor, str):
        raise TypeMismatchError(f"{nome}: expected a string input, received {type(valor).__name__}")
    if not valor:
        raise erro_vazio(f"{nome}: input string is empty")
    texto = valor.strip()
    if not texto:
        raise erro_vazio(f"{nome}: input string contains only whitespace")
    return texto


def join_tokens(tokens: Iterable[str], sep: str) -> str:
    """Join tokens with ``sep``, skipping empty ones."""
    return sep.join(tok for tok in tokens if tok)
