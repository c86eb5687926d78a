from __future__ import annotations

from .errors import NoTokensError
from .tokens import has_separator, split_case_boundaries, split_separators
from .utils import join_tokens, valida_texto


def to_dot_case(valor: str) -> str:
    """Convert a string to dot.case.

    Separated input is split like camelCase. A single word is split at case
    and digit boundaries instead, keeping acronyms together; when no boundary
    rule matches, the whole word is one token.

        >>> to_dot_case("helloWorld42")
        'hello.world.42'
        >>> to_dot_case("XMLHttpRequest")
        'xml.http.request'
    """
    texto = valida_texto(valor, "to_dot_case")
    if has_separator(texto):
        tokens = split_separators(texto)
    else:
        tokens = split_case_boundaries(texto) or [texto]

    if not tokens:
        raise NoTokensError("to_dot_case: no alphanumeric tokens found in input")
    return join_tokens((t.lower() for t in tokens), ".")
