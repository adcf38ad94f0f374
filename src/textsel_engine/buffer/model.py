"""Text content plus cursor: the single source of truth for a buffer."""

from __future__ import annotations

from . import offsets


class TextModel:
    """Owns the buffer text and the cursor's UTF-8 byte offset.

    Neither setter validates its argument. Callers keep ``cursor`` on a
    character boundary within ``content``; slicing with a bad offset raises
    ``BufferValidationError`` further down.
    """

    def __init__(self, content: str = "", cursor: int = 0) -> None:
        self._content = content
        self._cursor = cursor

    @classmethod
    def from_text(cls, text: str, *, cursor: int = 0) -> "TextModel":
        return cls(text, cursor)

    def get_content(self) -> str:
        return self._content

    def set_content(self, content: str) -> None:
        self._content = content

    def get_cursor(self) -> int:
        return self._cursor

    def set_cursor(self, offset: int) -> None:
        self._cursor = offset

    def content_bytes(self) -> bytes:
        return offsets.encode(self._content)

    def __repr__(self) -> str:
        return f"TextModel(cursor={self._cursor}, content={self._content!r})"
