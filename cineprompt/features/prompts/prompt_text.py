"""
Prompt text helpers shared by merge rules and the prompt builder.
"""

from __future__ import annotations

from typing import Any, List

OPENING_QUOTES = ('"', "“")
SENTENCE_TERMINATORS = (".", "!", '"')


def nl_join(values: Any) -> Any:
    """Join a list as natural language: ["a", "b", "c"] -> "a, b and c".

    Anything that is not a list or tuple is returned unchanged.
    """
    if not isinstance(values, (list, tuple)):
        return values
    if not values:
        return ""
    if len(values) == 1:
        return values[0]
    return ", ".join(values[:-1]) + " and " + values[-1]


def as_text(value: Any) -> str:
    """Render a field value as text; multi-select values are nl-joined."""
    if value is None:
        return ""
    joined = nl_join(value)
    return joined if isinstance(joined, str) else str(joined)


def ensure_quoted(text: str) -> str:
    """Wrap text in double quotes unless it already opens with one."""
    if text.startswith(OPENING_QUOTES):
        return text
    return f'"{text}"'


def format_sentence(segment: str) -> str:
    """Capitalize the first character and close with a period if needed."""
    sentence = segment[:1].upper() + segment[1:]
    if not sentence.endswith(SENTENCE_TERMINATORS):
        sentence += "."
    return sentence


def join_sentences(segments: List[str]) -> str:
    return " ".join(format_sentence(segment) for segment in segments)
