"""Component reference tools: single lookup and categorized listing."""

from __future__ import annotations

from motiontools.foundation.errors import Ok, ToolResult, not_found
from motiontools.foundation.validation import Category, ComponentName, ParamsModel
from motiontools.tools.catalog import COMPONENT_LISTING, DOCS_BASE_URL, GETTING_STARTED, MOTION_COMPONENTS
from motiontools.tools.catalog.components import DEFAULT_SUGGESTIONS
from motiontools.tools.lookup import similar
from motiontools.tools.models import CategoryListing, ComponentInfo, ComponentListing, ListingSummary

GET_COMPONENT = "get_motion_component"
LIST_COMPONENTS = "list_motion_components"

MAX_RELATED = 5


class GetComponentParams(ParamsModel):
    component_name: ComponentName


class ListComponentsParams(ParamsModel):
    category: Category | None = None


def get_component(params: GetComponentParams) -> ToolResult:
    """Look up one component, API or hook by exact name."""
    name = params.component_name
    if (entry := MOTION_COMPONENTS.get(name)) is None:
        return not_found(
            GET_COMPONENT, f'Component "{name}" not found',
            available=list(MOTION_COMPONENTS),
            suggestions=similar(name, MOTION_COMPONENTS, DEFAULT_SUGGESTIONS),
        )
    related = [n for n, e in MOTION_COMPONENTS.items() if e.category == entry.category and n != name]
    return Ok(ComponentInfo(
        name=name,
        type=entry.type,
        description=entry.description,
        category=entry.category,
        examples=entry.examples,
        props=entry.props,
        parameters=entry.parameters,
        returns=entry.returns,
        documentation=f"{DOCS_BASE_URL}/{entry.category}",
        related_components=tuple(related[:MAX_RELATED]),
    ))


def list_components(params: ListComponentsParams) -> ToolResult:
    """One category's components, or all of them grouped with counts."""
    match params.category:
        case None:
            counts = {cat: len(items) for cat, items in COMPONENT_LISTING.items()}
            return Ok(ComponentListing(
                categories=COMPONENT_LISTING,
                summary=ListingSummary(total_components=sum(counts.values()), category_counts=counts),
                getting_started=GETTING_STARTED,
            ))
        case category if category in COMPONENT_LISTING:
            components = COMPONENT_LISTING[category]
            return Ok(CategoryListing(category=category, components=components, total_count=len(components)))
        case category:
            # Accepted by the schema but has no component listing
            return not_found(
                LIST_COMPONENTS, f"Invalid category: {category}",
                available=list(COMPONENT_LISTING), suggestions=similar(category, COMPONENT_LISTING, ()),
            )
