from __future__ import annotations

from .errors import NoTokensError
from .tokens import has_separator, split_separators
from .utils import join_tokens, valida_texto


def _capitaliza(token: str) -> str:
    return token[:1].upper() + token[1:].lower()


def to_camel_case(valor: str) -> str:
    """Convert a string to camelCase.

    Any character that is not a Unicode letter or number separates words.
    Input without separators is taken as a single word whose internal casing
    is kept, only the first character is lowercased:

        >>> to_camel_case("__FOO---bar__")
        'fooBar'
        >>> to_camel_case("HelloWorld")
        'helloWorld'
    """
    texto = valida_texto(valor, "to_camel_case")
    if not has_separator(texto):
        return texto[0].lower() + texto[1:]

    tokens = split_separators(texto)
    if not tokens:
        raise NoTokensError("to_camel_case: no alphanumeric tokens found in input")

    primeiro = tokens[0].lower()
    return join_tokens([primeiro] + [_capitaliza(t) for t in tokens[1:]], "")
