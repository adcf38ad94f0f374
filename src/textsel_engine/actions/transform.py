"""Case transformations applied to whole buffer content."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict


class CaseMode(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    CAPITALIZED = "capitalized"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "CaseMode":
        """Resolve a menu label (``"Uppercase"``) or enum value (``"upper"``)."""

        key = label.strip().lower()
        for mode, text in _LABELS.items():
            if key in {mode.value, text.lower()}:
                return mode
        raise ValueError(f"Unknown case mode '{label}'")


_LABELS: Dict[CaseMode, str] = {
    CaseMode.UPPER: "Uppercase",
    CaseMode.LOWER: "Lowercase",
    CaseMode.CAPITALIZED: "Capitalized",
}


def capitalize(text: str) -> str:
    """Uppercase the first character of every whitespace-separated word.

    Words are re-joined with a single space, so runs of whitespace (newlines
    included) collapse.
    """

    return " ".join(word[0].upper() + word[1:] for word in text.split())


_TRANSFORMS: Dict[CaseMode, Callable[[str], str]] = {
    CaseMode.UPPER: str.upper,
    CaseMode.LOWER: str.lower,
    CaseMode.CAPITALIZED: capitalize,
}


def transform(content: str, mode: CaseMode) -> str:
    return _TRANSFORMS[CaseMode(mode)](content)


__all__ = ["CaseMode", "capitalize", "transform"]
