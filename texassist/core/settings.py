"""Editor assistance settings.

Values resolve in the order: explicit keyword overrides, environment
variables, optional JSON settings file, built-in defaults.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

FONT_COMMANDS: tuple[str, ...] = (
    r"\mathbb",
    r"\mathbf",
    r"\mathit",
    r"\mathrm",
    r"\mathcal",
    r"\mathscr",
    r"\mathfrak",
    r"\text",
    r"\texttt",
    r"\textsf",
)

QUESTION_COMMANDS: tuple[str, ...] = (r"\choice", r"\fill", r"\subp", r"\subsubp")

_ENV_FIELDS = {
    "TEXASSIST_CHAR_WIDTH_RATIO": "char_width_ratio",
    "TEXASSIST_POPUP_GAP_PX": "popup_gap_px",
    "TEXASSIST_MAX_SUGGESTIONS": "max_suggestions",
    "TEXASSIST_CATALOG": "catalog_path",
}


class EditorSettings(BaseModel):
    """Tunable behaviour of the input-assistance engine."""

    model_config = ConfigDict(frozen=True)

    math_delimiter: str = Field(default="$", min_length=1)
    font_commands: tuple[str, ...] = FONT_COMMANDS
    char_width_ratio: float = Field(default=0.6, gt=0)
    popup_gap_px: float = Field(default=5.0, ge=0)
    max_suggestions: int | None = Field(default=None, ge=1)
    catalog_path: str | None = None


DEFAULT_SETTINGS = EditorSettings()


def load_settings(path: str | Path | None = None, **overrides: object) -> EditorSettings:
    """Build settings from a JSON file, environment and keyword overrides."""

    payload: dict = {}
    if path is not None:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"settings file must contain a JSON object: {path}")
        payload.update(data)

    for env_name, field_name in _ENV_FIELDS.items():
        value = os.getenv(env_name)
        if value:
            payload[field_name] = value

    payload.update({key: value for key, value in overrides.items() if value is not None})
    return EditorSettings.model_validate(payload)
