from __future__ import annotations

import re

from .errors import EmptyKebabInputError, NoTokensError
from .utils import valida_texto

_RE_ESPACO_UNDERSCORE = re.compile(r"[\s_]+")
_RE_HIFENS = re.compile(r"-+")


def to_kebab_case(valor: str) -> str:
    """Convert a string to kebab-case.

    Only whitespace, underscores and hyphens separate words; case and digit
    boundaries are left alone.

        >>> to_kebab_case(" Hello  World ")
        'hello-world'
        >>> to_kebab_case("foo_bar__baz")
        'foo-bar-baz'
    """
    texto = valida_texto(valor, "to_kebab_case", EmptyKebabInputError)
    kebab = _RE_ESPACO_UNDERSCORE.sub("-", texto.lower())
    kebab = _RE_HIFENS.sub("-", kebab).strip("-")
    if not kebab:
        raise NoTokensError("to_kebab_case: no tokens left after removing separators")
    return kebab
