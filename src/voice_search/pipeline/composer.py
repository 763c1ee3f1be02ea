"""Response composer: turns ranked results into one speech-ready answer."""

from __future__ import annotations

from collections.abc import Sequence

from voice_search.errors import ProviderErrorKind
from voice_search.types.query import SearchEngine, SearchStrategy
from voice_search.types.search import FormattedResult
from voice_search.utils.text import clean

# Opening sentences; {count} results for {query} (and {where} for restaurants)
_OPENINGS: dict[SearchStrategy, str] = {
    SearchStrategy.WEB: 'I found {count} relevant {noun} for "{query}".',
    SearchStrategy.NEWS: 'Here {verb} the top {count} news {story} for "{query}".',
    SearchStrategy.CRYPTO: 'Here is the latest market information for "{query}". I found {count} {noun}.',
    SearchStrategy.RESTAURANTS: 'I found {count} restaurant {option} for "{query}"{where}.',
}
_SEMANTIC_OPENING = 'Using advanced AI search, I found {count} highly relevant {noun} for "{query}".'

_APOLOGIES: dict[SearchStrategy, str] = {
    SearchStrategy.WEB: (
        'I couldn\'t find any results for "{query}". '
        "You might want to try a different search term."
    ),
    SearchStrategy.NEWS: (
        'I couldn\'t find any recent news about "{query}". '
        "Try rephrasing or asking about a different topic."
    ),
    SearchStrategy.CRYPTO: (
        'I couldn\'t find current price information for "{query}". '
        "The market data might be temporarily unavailable, so try again or name a specific coin."
    ),
    SearchStrategy.RESTAURANTS: (
        'I couldn\'t find specific restaurants for "{query}"{where}. '
        "You might want to try a broader search or a different cuisine."
    ),
}
_SEMANTIC_APOLOGY = (
    'I couldn\'t find any results for "{query}" using AI search. '
    "You might want to try a different approach."
)

_ERROR_MESSAGES: dict[ProviderErrorKind, str] = {
    ProviderErrorKind.TIMEOUT: "The search service took too long to respond. Please try again in a moment.",
    ProviderErrorKind.AUTH: "I couldn't sign in to the search service. Please check the API key settings.",
    ProviderErrorKind.RATE_LIMIT: "The search service is receiving too many requests right now. Please try again shortly.",
    ProviderErrorKind.HTTP: "The search service returned an error. Please try again.",
    ProviderErrorKind.NETWORK: "I couldn't reach the search service. Please check the connection and try again.",
    ProviderErrorKind.NOT_CONFIGURED: "This search service hasn't been set up yet. Please add an API key to enable it.",
}
_GENERIC_ERROR = "I encountered an error while searching. Please try again."


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def compose(
    strategy: SearchStrategy,
    results: Sequence[FormattedResult],
    query: str,
    location: str | None = None,
    engine: SearchEngine = SearchEngine.KEYWORD,
) -> str:
    """Build the spoken narrative for a set of results.

    The opening sentence states how many results there are and echoes the
    query (and location, for restaurants); each result follows as
    "{n}. {title}. {snippet}." in the given order. With no results a
    strategy-specific apology is returned instead.

    Args:
        strategy: Strategy that produced the results
        results: Results in provider rank order
        query: Query to echo back
        location: Location searched, if any
        engine: Engine used (semantic web results get their own wording)

    Returns:
        TTS-safe narrative, never empty
    """
    query = " ".join(query.split())
    where = f" near {location}" if location else ""
    semantic = strategy == SearchStrategy.WEB and engine == SearchEngine.SEMANTIC

    if not results:
        template = _SEMANTIC_APOLOGY if semantic else _APOLOGIES[strategy]
        return clean(template.format(query=query, where=where))

    count = len(results)
    opening = (_SEMANTIC_OPENING if semantic else _OPENINGS[strategy]).format(
        count=count,
        query=query,
        where=where,
        noun=_plural(count, "result", "results"),
        verb=_plural(count, "is", "are"),
        story=_plural(count, "story", "stories"),
        option=_plural(count, "option", "options"),
    )

    parts = [opening]
    for index, result in enumerate(results, start=1):
        title = result.title.rstrip(".!?")
        snippet = result.snippet.rstrip(".!?")
        parts.append(f"{index}. {title}. {snippet}." if snippet else f"{index}. {title}.")

    return clean(" ".join(parts))


def compose_location_prompt(query: str) -> str:
    """Clarification asked when a near-me query has no usable location."""
    query = " ".join(query.split())
    return clean(
        f'I can look for "{query}", but I need to know where you are. '
        "Which city or neighborhood should I search in?"
    )


def compose_error(kind: ProviderErrorKind | None = None) -> str:
    """Spoken description of a failed search, in user terms."""
    if kind is None:
        return _GENERIC_ERROR
    return clean(_ERROR_MESSAGES.get(kind, _GENERIC_ERROR))
