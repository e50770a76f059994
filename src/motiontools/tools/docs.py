"""Documentation page lookup."""

from __future__ import annotations

from datetime import UTC, datetime

from motiontools.foundation.errors import Ok, ToolResult, not_found
from motiontools.foundation.validation import ParamsModel, Topic
from motiontools.tools.catalog import DOCS_BASE_URL, MOTION_DOCS
from motiontools.tools.catalog.docs import DEFAULT_SUGGESTIONS
from motiontools.tools.catalog.examples import PLAYGROUND
from motiontools.tools.lookup import similar
from motiontools.tools.models import DocPage

GET_DOCS = "get_motion_docs"


class GetDocsParams(ParamsModel):
    topic: Topic


def get_docs(params: GetDocsParams) -> ToolResult:
    topic = params.topic
    if (entry := MOTION_DOCS.get(topic)) is None:
        return not_found(
            GET_DOCS, f'Documentation topic "{topic}" not found',
            available=list(MOTION_DOCS),
            suggestions=similar(topic, MOTION_DOCS, DEFAULT_SUGGESTIONS),
        )
    return Ok(DocPage(
        topic=topic,
        title=entry.title,
        description=entry.description,
        content=entry.content,
        related_topics=entry.related_topics,
        next_steps=entry.next_steps,
        official_docs=f"{DOCS_BASE_URL}/{topic}",
        examples=PLAYGROUND,
        last_updated=datetime.now(UTC).date(),
    ))
