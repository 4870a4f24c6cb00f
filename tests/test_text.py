import pytest

from taskman.core.text import is_whitespace


@pytest.mark.parametrize("text", [None, "", " ", "\t\n", "  \r\n"])
def test_blank_text(text) -> None:
    assert is_whitespace(text)


@pytest.mark.parametrize("text", ["q", "  tasks ", "\t-"])
def test_non_blank_text(text: str) -> None:
    assert not is_whitespace(text)


@pytest.mark.parametrize("text", ["\u00a0", "\u2003", " \u3000 "])
def test_unicode_spaces_are_not_blank(text: str) -> None:
    assert not is_whitespace(text)
