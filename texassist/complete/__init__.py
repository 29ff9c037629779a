"""Autocomplete candidate extraction and catalog matching."""

from texassist.complete.matcher import (
    AutocompleteMatcher,
    CompletionResult,
    Suggestion,
    candidate_range,
    match_candidate,
    suggestions_for,
)

__all__ = [
    "AutocompleteMatcher",
    "CompletionResult",
    "Suggestion",
    "candidate_range",
    "match_candidate",
    "suggestions_for",
]
