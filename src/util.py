from __future__ import annotations
from unidecode import unidecode


__all__ = ["sem_acento"]


def sem_acento(s: str) -> str:
    """Transliterate to ASCII keeping case ("Olá Mundo" -> "Ola Mundo")."""
    return unidecode(s)
