"""Immutable editor buffer snapshot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EditBuffer(BaseModel):
    """Full editor text plus a caret offset (str indices)."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    cursor: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _validate_cursor(self) -> "EditBuffer":
        if self.cursor > len(self.text):
            raise ValueError("EditBuffer.cursor must be <= len(text)")
        return self

    @property
    def before_cursor(self) -> str:
        return self.text[: self.cursor]

    @property
    def after_cursor(self) -> str:
        return self.text[self.cursor :]

    def splice(self, start: int, end: int, insert: str, cursor: int) -> "EditBuffer":
        """Return a new buffer with ``text[start:end]`` replaced by ``insert``."""

        assert 0 <= start <= end <= len(self.text), f"bad range ({start}, {end})"
        text = self.text[:start] + insert + self.text[end:]
        return EditBuffer(text=text, cursor=cursor)
