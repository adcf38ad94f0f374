import pytest

from textsel_engine.actions import CaseMode, capitalize, transform


def test_upper_and_lower_use_full_unicode_mapping() -> None:
    assert transform("Straße café", CaseMode.UPPER) == "STRASSE CAFÉ"
    assert transform("ÀÉÎ Abc", CaseMode.LOWER) == "àéî abc"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello world", "Hello World"),
        ("", ""),
        ("a", "A"),
        ("mIxed case", "MIxed Case"),
        ("ßa", "SSa"),
    ],
)
def test_capitalized(text: str, expected: str) -> None:
    assert transform(text, CaseMode.CAPITALIZED) == expected


def test_capitalized_collapses_whitespace() -> None:
    assert capitalize("  one\t two\n\nthree  ") == "One Two Three"


def test_case_mode_from_menu_label() -> None:
    assert CaseMode.from_label("Uppercase") is CaseMode.UPPER
    assert CaseMode.from_label("lower") is CaseMode.LOWER
    assert CaseMode.from_label(" Capitalized ") is CaseMode.CAPITALIZED
    assert CaseMode.CAPITALIZED.label == "Capitalized"

    with pytest.raises(ValueError):
        CaseMode.from_label("Title")
