"""Text style context and the measurement oracle contract."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TextStyle(BaseModel):
    """Computed style of the editor's text container."""

    model_config = ConfigDict(frozen=True)

    font_family: str = "monospace"
    font_size_px: float = Field(default=14.0, gt=0)
    font_weight: str = "normal"
    letter_spacing_px: float = 0.0
    line_height_px: float = Field(default=22.4, gt=0)
    container_width_px: float = Field(default=600.0, gt=0)
    padding_top_px: float = Field(default=0.0, ge=0)
    padding_left_px: float = Field(default=0.0, ge=0)
    padding_right_px: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def _validate_content_width(self) -> "TextStyle":
        if self.content_width_px <= 0:
            raise ValueError("horizontal padding leaves no room for content")
        return self

    @property
    def content_width_px(self) -> float:
        return self.container_width_px - self.padding_left_px - self.padding_right_px

    def average_char_width_px(self, ratio: float = 0.6) -> float:
        """Estimated glyph advance derived from the font size."""

        return self.font_size_px * ratio


@dataclass(frozen=True)
class TextMeasurement:
    """Rendered size of a text block wrapped at the content width."""

    width_px: float
    height_px: float


# Supplied by the host's text layout engine. Must wrap at
# ``style.content_width_px`` the same way the editor does.
MeasureFn = Callable[[str, TextStyle], TextMeasurement]
