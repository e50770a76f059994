"""Static Motion reference data served by the lookup tools."""

from .components import COMPONENT_LISTING, GETTING_STARTED, MOTION_COMPONENTS, ComponentEntry
from .docs import DOCS_BASE_URL, MOTION_DOCS, DocEntry
from .examples import MOTION_EXAMPLES, SEARCHABLE_EXAMPLES, ExampleEntry

__all__ = [
    "COMPONENT_LISTING", "GETTING_STARTED", "MOTION_COMPONENTS", "ComponentEntry",
    "DOCS_BASE_URL", "MOTION_DOCS", "DocEntry",
    "MOTION_EXAMPLES", "SEARCHABLE_EXAMPLES", "ExampleEntry",
]
