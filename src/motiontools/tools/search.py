"""Keyword search over the example snippet index.

A snippet matches when any query term occurs in its title, description, tags,
category or code. Matches are ranked per term: title +3, description +2, any
tag +1. Ties keep index order.
"""

from __future__ import annotations

from motiontools.foundation.validation import ParamsModel, SearchQuery
from motiontools.tools.catalog import SEARCHABLE_EXAMPLES
from motiontools.tools.catalog.examples import POPULAR_EXAMPLES, SEARCH_CATEGORIES, SEARCH_SUGGESTIONS
from motiontools.tools.models import SearchHit, SearchResults

SEARCH_EXAMPLES = "search_motion_examples"


class SearchParams(ParamsModel):
    query: SearchQuery


def relevance(hit: SearchHit, terms: list[str]) -> int:
    score = 0
    for term in terms:
        if term in hit.title.lower():
            score += 3
        if term in hit.description.lower():
            score += 2
        if any(term in tag.lower() for tag in hit.tags):
            score += 1
    return score


def _matches(hit: SearchHit, terms: list[str]) -> bool:
    haystack = " ".join((hit.title, hit.description, *hit.tags, hit.category, hit.code)).lower()
    return any(term in haystack for term in terms)


def search_examples(params: SearchParams) -> SearchResults:
    """Rank snippets against the query. An empty result is still a success."""
    terms = params.query.lower().split()
    ranked = sorted(
        (hit for hit in SEARCHABLE_EXAMPLES if _matches(hit, terms)),
        key=lambda hit: relevance(hit, terms),
        reverse=True,
    )
    empty = not ranked
    return SearchResults(
        query=params.query,
        total_results=len(ranked),
        results=tuple(ranked),
        categories=SEARCH_CATEGORIES,
        suggestions=SEARCH_SUGGESTIONS if empty else None,
        popular_examples=POPULAR_EXAMPLES if empty else None,
    )
