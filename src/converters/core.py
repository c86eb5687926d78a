from __future__ import annotations

from typing import Callable, Sequence

from .camel import to_camel_case
from .dot import to_dot_case
from .kebab import to_kebab_case

ESTILOS: dict[str, Callable[[str], str]] = {
    "kebab": to_kebab_case,
    "camel": to_camel_case,
    "dot": to_dot_case,
}


def get_conversor(estilo: str) -> Callable[[str], str]:
    try:
        return ESTILOS[estilo.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Estilo '{estilo}' desconhecido; use um de: {', '.join(ESTILOS)}"
        ) from None


def converter(valor: str, estilo: str) -> str:
    """Convert ``valor`` using the converter registered under ``estilo``."""
    return get_conversor(estilo)(valor)


def build_colunas_labels(colunas: Sequence[tuple[int, str, str]]) -> list[str]:
    return [f"{nome} {estilo.strip().lower()}" for _, estilo, nome in colunas]
