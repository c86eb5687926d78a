from __future__ import annotations

import pytest

from converters import (
    EmptyInputError,
    NoTokensError,
    TypeMismatchError,
    to_dot_case,
)


@pytest.mark.parametrize(
    "entrada, esperado",
    [
        ("helloWorld42", "hello.world.42"),
        ("XMLHttpRequest", "xml.http.request"),
        ("HelloWorld", "hello.world"),
        ("getHTTPResponse", "get.http.response"),
        ("hello world", "hello.world"),
        ("__FOO---bar__", "foo.bar"),
        ("Version2Beta", "version.2.beta"),
        ("ÉcoleNormale", "école.normale"),
    ],
)
def test_to_dot_case_examples(entrada, esperado):
    assert to_dot_case(entrada) == esperado


@pytest.mark.parametrize(
    "entrada, esperado",
    [
        ("ABC", "abc"),
        ("日本語", "日本語"),
    ],
)
def test_to_dot_case_falls_back_to_whole_word(entrada, esperado):
    assert to_dot_case(entrada) == esperado


def test_to_dot_case_keeps_separated_tokens_whole():
    assert to_dot_case("XMLHttp request") == "xmlhttp.request"


def test_to_dot_case_errors():
    with pytest.raises(TypeMismatchError):
        to_dot_case(3.5)
    with pytest.raises(EmptyInputError):
        to_dot_case("")
    with pytest.raises(EmptyInputError):
        to_dot_case(" \t ")
    with pytest.raises(NoTokensError):
        to_dot_case("?!")
