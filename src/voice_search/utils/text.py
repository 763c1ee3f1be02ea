"""Text normalization for speech synthesis.

``clean()`` turns arbitrary provider text (HTML fragments, links, raw
punctuation runs) into a sentence a TTS engine can read aloud.
"""

from __future__ import annotations

import re

_TAG_PATTERN = re.compile(r"<[^>]*>")
_URL_PATTERN = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)
_EMAIL_PATTERN = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")

# Order matters: "e.g." and "i.e." must be expanded before "..." is collapsed.
_ABBREVIATIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bw/\s*", re.IGNORECASE), "with "),
    (re.compile(r"&"), " and "),
    (re.compile(r"\bvs\b\.?", re.IGNORECASE), "versus "),
    (re.compile(r"\be\.g\.", re.IGNORECASE), "for example"),
    (re.compile(r"\bi\.e\.", re.IGNORECASE), "that is"),
)

_ELLIPSIS_PATTERN = re.compile(r"(?:\.{2,}|…)")
_DASH_RUN_PATTERN = re.compile(r"-{2,}")
_REPEATED_MARK_PATTERN = re.compile(r"([!?])\1+")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_ENDS_WITH_LETTER = re.compile(r"[^\W\d_]$")

_MAX_PASSES = 4


def _clean_once(text: str, terminal_period: bool) -> str:
    text = _TAG_PATTERN.sub(" ", text)
    text = _URL_PATTERN.sub(" ", text)
    text = _EMAIL_PATTERN.sub(" ", text)

    for pattern, replacement in _ABBREVIATIONS:
        text = pattern.sub(replacement, text)

    text = _ELLIPSIS_PATTERN.sub(".", text)
    text = _DASH_RUN_PATTERN.sub(" - ", text)
    text = _REPEATED_MARK_PATTERN.sub(r"\1", text)
    text = _WHITESPACE_PATTERN.sub(" ", text).strip()

    if terminal_period and _ENDS_WITH_LETTER.search(text):
        text += "."
    return text


def clean(text: str | None, terminal_period: bool = True) -> str:
    """Make text safe for speech synthesis.

    Removes markup tags, URLs and email addresses, expands a handful of
    written abbreviations, collapses punctuation runs and whitespace, and (unless
    ``terminal_period`` is off) ends the text with a period when it stops on
    a letter.

    The transformation is applied until it reaches a fixed point, so
    ``clean(clean(s)) == clean(s)`` even when removing one construct exposes
    another (``"<<b>i>"`` and the like).

    Args:
        text: Raw text, possibly None
        terminal_period: Whether to close the text with a period (off for
            titles, which the composer punctuates itself)

    Returns:
        Normalized text ("" for None or blank input)
    """
    if not text:
        return ""

    current = text
    for _ in range(_MAX_PASSES):
        cleaned = _clean_once(current, terminal_period)
        if cleaned == current:
            break
        current = cleaned
    return current


def truncate(text: str, max_chars: int) -> str:
    """Cut text at a word boundary and mark the cut with an ellipsis."""
    if len(text) <= max_chars:
        return text
    cut = text[:max_chars].rsplit(" ", 1)[0]
    return f"{cut}..."
