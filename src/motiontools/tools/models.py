"""Payload models returned by the built-in tools.

Each tool has one statically-known result shape; optional parts are explicit
``None`` fields, dropped from the wire form. Payloads serialize with camelCase
keys.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Payload(BaseModel):
    """Base for tool payloads: immutable, camelCase on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


# ═════════════════════════════════════════════════════════════════════════════
# Components
# ═════════════════════════════════════════════════════════════════════════════


class CodeSample(Payload):
    title: str
    code: str


class ComponentInfo(Payload):
    """Reference entry for one Motion component, API or hook.

    Components list their ``props``, functions their ``parameters`` and hooks
    their ``returns``; the other two are None.
    """

    name: str
    type: Literal["React Component", "JavaScript API", "React Hook"]
    description: str
    category: str
    examples: tuple[CodeSample, ...]
    props: tuple[str, ...] | None = None
    parameters: tuple[str, ...] | None = None
    returns: tuple[str, ...] | None = None
    documentation: str
    related_components: tuple[str, ...] = ()


class ComponentSummary(Payload):
    name: str
    description: str
    usage: str


class CategoryListing(Payload):
    """Components of a single category."""

    kind: Literal["category"] = "category"
    category: str
    components: tuple[ComponentSummary, ...]
    total_count: int


class ListingSummary(Payload):
    total_components: int
    category_counts: dict[str, int]


class ComponentListing(Payload):
    """Every component grouped by category, with counts and install hints."""

    kind: Literal["all"] = "all"
    categories: dict[str, tuple[ComponentSummary, ...]]
    summary: ListingSummary
    getting_started: dict[str, str]


# ═════════════════════════════════════════════════════════════════════════════
# Examples
# ═════════════════════════════════════════════════════════════════════════════


class FrameworkSample(Payload):
    framework: Literal["React", "JavaScript"]
    code: str


class ExampleInfo(Payload):
    example_type: str
    title: str
    description: str
    category: str
    examples: tuple[FrameworkSample, ...]
    related_topics: tuple[str, ...]
    tips: tuple[str, ...]
    documentation: str
    playground: str


class SearchHit(Payload):
    id: str
    title: str
    description: str
    tags: tuple[str, ...]
    category: str
    difficulty: Literal["beginner", "intermediate", "advanced"]
    code: str


class SearchResults(Payload):
    """Relevance-ordered search hits.

    ``suggestions`` and ``popular_examples`` are only set when nothing matched.
    """

    query: str
    total_results: int
    results: tuple[SearchHit, ...]
    categories: tuple[str, ...]
    suggestions: tuple[str, ...] | None = None
    popular_examples: tuple[str, ...] | None = None


# ═════════════════════════════════════════════════════════════════════════════
# Docs & Releases
# ═════════════════════════════════════════════════════════════════════════════


class DocPage(Payload):
    topic: str
    title: str
    description: str
    content: str = Field(description="Markdown body")
    related_topics: tuple[str, ...]
    next_steps: tuple[str, ...]
    official_docs: str
    examples: str
    last_updated: date


class ReleaseInfo(Payload):
    """A published Motion release from GitHub."""

    tag_name: str
    name: str | None = None
    url: str
    published_at: datetime | None = None
    prerelease: bool = False
    author: str | None = None
    notes: str | None = Field(default=None, description="Release notes (markdown)")
