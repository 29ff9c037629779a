"""Template placeholder cleanup and smart caret placement."""

from __future__ import annotations

import re

from texassist.core.settings import FONT_COMMANDS

_PLACEHOLDER_RE = re.compile(r"\{[A-Za-z]+\}")
_LEFT_OPENERS = (r"\left(", r"\left[", r"\left\{")


def _follows_font_command(template: str, placeholder: str, font_commands: tuple[str, ...]) -> bool:
    # Substring test on everything before the first occurrence, not scope tracking.
    prefix = template[: template.find(placeholder)]
    return any(command in prefix for command in font_commands)


def clean_placeholders(template: str, font_commands: tuple[str, ...] = FONT_COMMANDS) -> str:
    """Replace letter placeholders such as ``{a}`` with empty ``{}`` groups.

    Placeholders preceded anywhere in the template by a font command
    (``\\mathbb{R}``, ``\\text{a}``) are kept verbatim.
    """

    def _replace(match: re.Match[str]) -> str:
        placeholder = match.group(0)
        if _follows_font_command(template, placeholder, font_commands):
            return placeholder
        return "{}"

    return _PLACEHOLDER_RE.sub(_replace, template)


def smart_cursor_offset(cleaned: str) -> int | None:
    """Return the caret offset inside a cleaned template.

    Rules, first match wins:

    1. ``{}{}`` present: inside the first pair.
    2. exactly one ``{}``: inside it.
    3. ``\\left(``, ``\\left[`` or ``\\left\\{`` present: right after the opener.

    ``None`` means the caret goes after the inserted text.
    """

    pair = cleaned.find("{}{}")
    if pair != -1:
        return pair + 1
    if cleaned.count("{}") == 1:
        return cleaned.find("{}") + 1
    for opener in _LEFT_OPENERS:
        idx = cleaned.find(opener)
        if idx != -1:
            return idx + len(opener)
    return None
