from __future__ import annotations

import util


def test_sem_acento_removes_accents_and_keeps_case():
    assert util.sem_acento("Olá Mundo Ação") == "Ola Mundo Acao"


def test_sem_acento_leaves_ascii_untouched():
    assert util.sem_acento("helloWorld_42") == "helloWorld_42"
