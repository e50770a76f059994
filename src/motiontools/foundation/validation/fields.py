"""Reusable constrained field types for tool parameter schemas.

Each alias carries its constraints as pydantic metadata so violations report
the offending field and the constraint (``string_too_long``,
``string_pattern_mismatch``, ``literal_error``...).
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

NAME_PATTERN = r"^[a-zA-Z0-9._-]+$"

ComponentName = Annotated[
    str,
    StringConstraints(min_length=1, max_length=100, pattern=NAME_PATTERN),
    Field(description='Name of the Motion component or API (e.g. "motion.div", "animate", "useSpring")'),
]

Topic = Annotated[
    str,
    StringConstraints(min_length=1, max_length=100, pattern=NAME_PATTERN),
    Field(description='Documentation topic (e.g. "getting-started", "animation-controls", "performance")'),
]

ExampleType = Annotated[
    str,
    StringConstraints(min_length=1, max_length=100),
    Field(description='Type of example (e.g. "spring-animation", "drag-gesture", "layout-animation")'),
]

SearchQuery = Annotated[
    str,
    StringConstraints(min_length=1, max_length=200),
    Field(description="Search query for examples"),
]

Category = Literal["react", "javascript", "hooks", "gestures", "layout", "examples"]


def _no_dot_segments(tag: str) -> str:
    """Tags become a URL path segment; "." and ".." would leave the releases path."""
    if tag == "." or ".." in tag:
        raise ValueError("tag must not be '.' or contain '..'")
    return tag


ReleaseTag = Annotated[
    str,
    StringConstraints(min_length=1, max_length=100, pattern=r"^[a-zA-Z0-9._@-]+$"),
    AfterValidator(_no_dot_segments),
    Field(description='Release tag (e.g. "v11.0.0"); latest release when omitted'),
]


class ParamsModel(BaseModel):
    """Base for tool parameter schemas: frozen, unknown fields rejected.

    Fields accept both snake_case and the camelCase names used on the wire.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True, alias_generator=to_camel)
