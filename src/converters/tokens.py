from __future__ import annotations

import unicodedata

__all__ = [
    "is_alnum",
    "is_lower",
    "is_number",
    "is_upper",
    "has_separator",
    "split_separators",
    "split_case_boundaries",
]


def _categoria(ch: str) -> str:
    return unicodedata.category(ch)


def is_upper(ch: str) -> bool:
    return _categoria(ch) == "Lu"


def is_lower(ch: str) -> bool:
    return _categoria(ch) == "Ll"


def is_number(ch: str) -> bool:
    return _categoria(ch).startswith("N")


def is_alnum(ch: str) -> bool:
    """Letter (L*) or number (N*) in the Unicode sense."""
    return _categoria(ch)[0] in "LN"


def has_separator(texto: str) -> bool:
    return any(not is_alnum(ch) for ch in texto)


def split_separators(texto: str) -> list[str]:
    """Split on every run of characters that are neither letters nor numbers."""
    tokens: list[str] = []
    inicio = None
    for i, ch in enumerate(texto):
        if is_alnum(ch):
            if inicio is None:
                inicio = i
        elif inicio is not None:
            tokens.append(texto[inicio:i])
            inicio = None
    if inicio is not None:
        tokens.append(texto[inicio:])
    return tokens


def _acronimo(texto: str, i: int) -> int:
    """End of the shortest uppercase run at ``i`` that is followed by an
    uppercase+lowercase pair, or -1. The pair itself is not consumed."""
    n = len(texto)
    if not is_upper(texto[i]):
        return -1
    fim = i + 1
    while fim + 1 < n and is_upper(texto[fim]):
        if is_lower(texto[fim + 1]):
            return fim
        fim += 1
    return -1


def _palavra(texto: str, i: int) -> int:
    """End of an optional uppercase letter followed by lowercase letters, or -1."""
    n = len(texto)
    j = i + 1 if is_upper(texto[i]) else i
    if j >= n or not is_lower(texto[j]):
        return -1
    while j < n and is_lower(texto[j]):
        j += 1
    return j


def _numero(texto: str, i: int) -> int:
    n = len(texto)
    j = i
    while j < n and is_number(texto[j]):
        j += 1
    return j if j > i else -1


_REGRAS = (_acronimo, _palavra, _numero)


def split_case_boundaries(texto: str) -> list[str]:
    """Split a separator-free string at case and digit boundaries.

    At each position the first rule that matches wins: an acronym run
    ("XMLHttp" -> "XML", "Http"), a capitalised or lowercase word, or a run of
    digits. Characters no rule matches are skipped, so the result may be empty.

        >>> split_case_boundaries("helloWorld42")
        ['hello', 'World', '42']
    """
    tokens: list[str] = []
    i = 0
    n = len(texto)
    while i < n:
        for regra in _REGRAS:
            fim = regra(texto, i)
            if fim > i:
                tokens.append(texto[i:fim])
                i = fim
                break
        else:
            i += 1
    return tokens
