"""Animation pattern example lookup."""

from __future__ import annotations

from motiontools.foundation.errors import Ok, ToolResult, not_found
from motiontools.foundation.validation import ExampleType, ParamsModel
from motiontools.tools.catalog import DOCS_BASE_URL, MOTION_EXAMPLES
from motiontools.tools.catalog.examples import DEFAULT_SUGGESTIONS, PLAYGROUND, TIPS
from motiontools.tools.lookup import similar
from motiontools.tools.models import ExampleInfo

GET_EXAMPLE = "get_motion_example"


class GetExampleParams(ParamsModel):
    example_type: ExampleType


def get_example(params: GetExampleParams) -> ToolResult:
    kind = params.example_type
    if (entry := MOTION_EXAMPLES.get(kind)) is None:
        return not_found(
            GET_EXAMPLE, f'Example "{kind}" not found',
            available=list(MOTION_EXAMPLES),
            suggestions=similar(kind, MOTION_EXAMPLES, DEFAULT_SUGGESTIONS),
        )
    return Ok(ExampleInfo(
        example_type=kind,
        title=entry.title,
        description=entry.description,
        category=entry.category,
        examples=entry.examples,
        related_topics=entry.related_topics,
        tips=TIPS,
        documentation=f"{DOCS_BASE_URL}/{entry.category}",
        playground=PLAYGROUND,
    ))
