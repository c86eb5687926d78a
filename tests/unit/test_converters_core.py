from __future__ import annotations

import pytest

from converters import ESTILOS, build_colunas_labels, converter, get_conversor, to_dot_case


def test_converter_dispatches_by_style_name():
    assert converter("Hello World", "kebab") == "hello-world"
    assert converter("Hello World", " Camel ") == "helloWorld"
    assert converter("Hello World", "DOT") == "hello.world"


def test_get_conversor_unknown_style():
    with pytest.raises(ValueError, match="desconhecido"):
        get_conversor("snake")


def test_estilos_registry():
    assert set(ESTILOS) == {"kebab", "camel", "dot"}
    assert ESTILOS["dot"] is to_dot_case


def test_build_colunas_labels():
    colunas = [(0, "Kebab", "nome"), (2, "dot", "chave")]
    assert build_colunas_labels(colunas) == ["nome kebab", "chave dot"]
