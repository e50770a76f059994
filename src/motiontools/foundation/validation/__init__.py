"""Input sanitization and constrained parameter types."""

from .fields import (
    NAME_PATTERN,
    Category,
    ComponentName,
    ExampleType,
    ParamsModel,
    ReleaseTag,
    SearchQuery,
    Topic,
)
from .sanitize import sanitize, sanitize_params

__all__ = [
    "sanitize", "sanitize_params",
    "NAME_PATTERN", "ParamsModel",
    "Category", "ComponentName", "ExampleType", "ReleaseTag", "SearchQuery", "Topic",
]
