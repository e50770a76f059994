"""Built-in Motion reference tools.

Five static lookups over the bundled catalog plus one GitHub-backed release
lookup. ``builtin_tools`` returns their registrations with per-tool cache TTLs.

Example:
    >>> registry = ToolRegistry()
    >>> for spec in builtin_tools(GitHubClient(settings.http), settings.http.repository):
    ...     registry.register(spec)
"""

from __future__ import annotations

from motiontools.foundation.registry import ToolSpec
from motiontools.io.http import DEPENDENCY, ExternalCall

from .components import GET_COMPONENT, LIST_COMPONENTS, GetComponentParams, ListComponentsParams, get_component, list_components
from .docs import GET_DOCS, GetDocsParams, get_docs
from .examples import GET_EXAMPLE, GetExampleParams, get_example
from .releases import GET_RELEASE, GetReleaseParams, ReleaseLookup
from .search import SEARCH_EXAMPLES, SearchParams, search_examples

MINUTE = 60.0


def builtin_tools(github: ExternalCall, repository: str) -> list[ToolSpec]:
    """Registrations for every built-in tool."""
    return [
        ToolSpec(
            GET_COMPONENT, "Get information and examples for a specific Motion component or API",
            GetComponentParams, get_component, ttl=5 * MINUTE,
        ),
        ToolSpec(
            LIST_COMPONENTS, "Get all available Motion components and APIs, optionally for one category",
            ListComponentsParams, list_components, ttl=10 * MINUTE,
        ),
        ToolSpec(
            GET_EXAMPLE, "Get example code for a specific Motion animation pattern",
            GetExampleParams, get_example, ttl=10 * MINUTE,
        ),
        ToolSpec(
            SEARCH_EXAMPLES, "Search Motion examples and code snippets",
            SearchParams, search_examples, ttl=5 * MINUTE,
        ),
        ToolSpec(
            GET_DOCS, "Get documentation for Motion features and concepts",
            GetDocsParams, get_docs, ttl=30 * MINUTE,
        ),
        ToolSpec(
            GET_RELEASE, "Get the latest Motion release, or a specific tag, from GitHub",
            GetReleaseParams, ReleaseLookup(github, repository), ttl=15 * MINUTE, dependency=DEPENDENCY,
        ),
    ]


__all__ = [
    "builtin_tools",
    "GET_COMPONENT", "LIST_COMPONENTS", "GET_EXAMPLE", "SEARCH_EXAMPLES", "GET_DOCS", "GET_RELEASE",
    "GetComponentParams", "ListComponentsParams", "GetExampleParams", "SearchParams", "GetDocsParams",
    "GetReleaseParams", "ReleaseLookup",
    "get_component", "list_components", "get_example", "search_examples", "get_docs",
]
