"""Motion release lookup against the GitHub REST API.

The only built-in tool with an external dependency; the dispatcher routes it
through the ``github`` circuit breaker.
"""

from __future__ import annotations

from urllib.parse import quote

from pydantic import ValidationError

from motiontools.foundation.errors import DependencyError, JsonValue, Ok, ToolResult, not_found
from motiontools.foundation.validation import ParamsModel, ReleaseTag
from motiontools.io.http import DEPENDENCY, ExternalCall
from motiontools.tools.models import ReleaseInfo

GET_RELEASE = "get_motion_release"


class GetReleaseParams(ParamsModel):
    tag: ReleaseTag | None = None


class ReleaseLookup:
    """Handler fetching the latest release, or the one for ``tag``.

    Example:
        >>> lookup = ReleaseLookup(GitHubClient(settings.http), "motiondivision/motion")
        >>> (await lookup(GetReleaseParams(tag="v11.0.0"))).unwrap().tag_name
        'v11.0.0'
    """

    __slots__ = ("_client", "_repository")

    def __init__(self, client: ExternalCall, repository: str) -> None:
        self._client = client
        self._repository = repository

    def path(self, tag: str | None) -> str:
        base = f"/repos/{self._repository}/releases"
        return f"{base}/tags/{quote(tag, safe='')}" if tag else f"{base}/latest"

    async def __call__(self, params: GetReleaseParams) -> ToolResult:
        data = await self._client.get_json(self.path(params.tag))
        if data is None:
            what = f'Release "{params.tag}"' if params.tag else "Latest release"
            return not_found(
                GET_RELEASE, f"{what} not found in {self._repository}",
                available=[], suggestions=[] if params.tag is None else ["omit tag for the latest release"],
            )
        return Ok(_parse_release(data))


def _parse_release(data: JsonValue) -> ReleaseInfo:
    """Map a GitHub release object. Malformed payloads count as dependency failures."""
    if not isinstance(data, dict):
        raise DependencyError(DEPENDENCY, "GitHub returned a malformed release object")
    author = data.get("author")
    try:
        return ReleaseInfo(
            tag_name=data["tag_name"],
            name=data.get("name"),
            url=data["html_url"],
            published_at=data.get("published_at"),
            prerelease=bool(data.get("prerelease", False)),
            author=author.get("login") if isinstance(author, dict) else None,
            notes=data.get("body"),
        )
    except (KeyError, ValidationError) as e:
        raise DependencyError(DEPENDENCY, "GitHub returned a malformed release object") from e
