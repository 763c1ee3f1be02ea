"""Location extraction for free-form queries.

Rules run in a fixed order and the first one that produces a result wins:

1. "near me" wording with no other place in the query -> is_near_me
2. an explicit phrase: "in <place>", "near/around <place>", "<place> area"
3. the first MAJOR_US_CITIES entry contained in the query
4. the first US_STATES entry contained in the query
5. nothing

Gazetteer scans follow list order, not position in the query, so a query
naming two cities resolves to whichever comes first in MAJOR_US_CITIES.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from voice_search.consts import MAJOR_US_CITIES, US_STATES
from voice_search.types.query import LocationResult

logger = logging.getLogger(__name__)

NEAR_ME_PATTERN = re.compile(
    r"\b(?:near me|nearby|close by|close to me|around me|around here|near here)\b"
)

# Stops a captured place before politeness or time words and punctuation
_PLACE_END = r"(?=\s+(?:please|thanks|thank you|today|tonight|now|right now|asap)\b|[?.!,;]|$)"
_PLACE = r"([a-z][a-z .'-]*?)"

EXPLICIT_LOCATION_PATTERNS = [
    re.compile(r"\bin\s+" + _PLACE + _PLACE_END),
    re.compile(r"\b(?:near|around)\s+(?!me\b|here\b)" + _PLACE + _PLACE_END),
    re.compile(r"\b((?:[a-z'.-]+\s+){0,2}[a-z'.-]+)\s+area\b"),
]

# Food words that leak into captures like "pizza in austin area"
LOCATION_STOPWORDS = re.compile(
    r"\b(?:restaurants?|food|dining|eat|pizza|burgers?|coffee|cafes?|the)\b"
)
MIN_LOCATION_CHARS = 3

# Captures that point at the speaker rather than naming a place
PLACEHOLDER_PLACES = frozenset({"area", "here", "there", "town"})


def _clean_capture(capture: str) -> str:
    capture = LOCATION_STOPWORDS.sub(" ", capture)
    return " ".join(capture.split()).strip(" .'-")


def find_explicit_location(q_lower: str) -> str | None:
    """Return the first usable place captured by an explicit location phrase.

    Args:
        q_lower: Lowercased query string

    Returns:
        Place text with food stopwords removed, or None when no pattern
        captured a real place of at least three characters
    """
    for pattern in EXPLICIT_LOCATION_PATTERNS:
        match = pattern.search(q_lower)
        if not match:
            continue
        place = _clean_capture(match.group(1))
        if len(place) >= MIN_LOCATION_CHARS and place not in PLACEHOLDER_PLACES:
            return place
    return None


def find_city(q_lower: str) -> str | None:
    """Return the first MAJOR_US_CITIES entry (list order) found in the query."""
    return next((city for city in MAJOR_US_CITIES if city in q_lower), None)


def find_state(q_lower: str) -> str | None:
    """Return the first US_STATES entry (list order) found in the query."""
    return next((state for state in US_STATES if state in q_lower), None)


def _near_me_rule(q_lower: str, query: str) -> LocationResult | None:
    if not NEAR_ME_PATTERN.search(q_lower):
        return None
    # "near me in austin" names a place, so it is not a bare near-me request
    if find_explicit_location(q_lower) or find_city(q_lower) or find_state(q_lower):
        return None
    return LocationResult(location=None, is_near_me=True, original_query=query)


def _explicit_rule(q_lower: str, query: str) -> LocationResult | None:
    place = find_explicit_location(q_lower)
    return LocationResult(location=place, original_query=query) if place else None


def _city_rule(q_lower: str, query: str) -> LocationResult | None:
    city = find_city(q_lower)
    return LocationResult(location=city, original_query=query) if city else None


def _state_rule(q_lower: str, query: str) -> LocationResult | None:
    state = find_state(q_lower)
    return LocationResult(location=state, original_query=query) if state else None


LocationRule = Callable[[str, str], LocationResult | None]

LOCATION_RULES: tuple[tuple[str, LocationRule], ...] = (
    ("near_me", _near_me_rule),
    ("explicit_phrase", _explicit_rule),
    ("major_city", _city_rule),
    ("us_state", _state_rule),
)


def extract_location(query: str) -> LocationResult:
    """Extract an explicit location or a near-me request from a query.

    Never raises; a query with no place yields an empty LocationResult.

    Args:
        query: Raw user query

    Returns:
        LocationResult with the matched place (lowercase) or the near-me flag
    """
    q_lower = (query or "").lower()

    for name, rule in LOCATION_RULES:
        result = rule(q_lower, query)
        if result is not None:
            logger.debug("Location rule %s matched: %s", name, result.location or "near me")
            return result

    return LocationResult(location=None, is_near_me=False, original_query=query)
