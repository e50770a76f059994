"""Async GitHub REST client for release metadata.

Thin wrapper over a shared ``httpx.AsyncClient``. Every transport or HTTP
failure surfaces as ``DependencyError`` so the circuit breaker guarding the
call sees one failure type; a 404 is an answer, not a failure, and comes
back as ``None``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx

from motiontools.foundation.config import HttpSettings
from motiontools.foundation.errors import DependencyError, JsonValue
from motiontools.runtime.observability import get_logger

log = get_logger("http")

DEPENDENCY = "github"


@runtime_checkable
class ExternalCall(Protocol):
    """Read-only JSON endpoint used by tool handlers."""

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> JsonValue | None:
        """GET ``path`` and decode JSON. None when the resource does not exist."""
        ...


class GitHubClient:
    """GitHub API client built from HttpSettings.

    The underlying httpx client is created lazily and reused across calls.
    Pass ``client`` to inject a preconfigured one (e.g. with MockTransport);
    an injected client is still closed by ``aclose()``.

    Example:
        >>> async with GitHubClient(get_settings().http) as gh:
        ...     release = await gh.get_json("/repos/motiondivision/motion/releases/latest")
    """

    __slots__ = ("_settings", "_client")

    def __init__(self, settings: HttpSettings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._client = client

    @property
    def repository(self) -> str:
        return self._settings.repository

    @property
    def headers(self) -> dict[str, str]:
        """Request headers, including auth when a token is configured."""
        headers = {
            "User-Agent": self._settings.user_agent,
            "Accept": "application/vnd.github+json",
        }
        if (token := self._settings.github_token) is not None:
            headers["Authorization"] = f"token {token.get_secret_value()}"
        return headers

    # ─────────────────────────────────────────────────────────────────
    # HTTP Client
    # ─────────────────────────────────────────────────────────────────

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create httpx async client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._settings.base_url,
                timeout=self._settings.timeout,
                follow_redirects=True,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    # ─────────────────────────────────────────────────────────────────
    # Requests
    # ─────────────────────────────────────────────────────────────────

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> JsonValue | None:
        """GET a JSON resource.

        Returns:
            Decoded JSON body, or None on 404

        Raises:
            DependencyError: Timeout, network failure, non-2xx status or undecodable body
        """
        try:
            response = await self._get_client().get(path, params=params, headers=self.headers)
        except httpx.TimeoutException as e:
            log.warning("request timed out", path=path, timeout=self._settings.timeout)
            raise DependencyError(DEPENDENCY, f"Request timed out after {self._settings.timeout}s") from e
        except httpx.RequestError as e:
            log.warning("request failed", path=path, error=type(e).__name__)
            raise DependencyError(DEPENDENCY, f"Network error: {type(e).__name__}") from e

        if response.status_code == 404:
            log.debug("resource not found", path=path)
            return None
        if not response.is_success:
            log.warning("unexpected status", path=path, status=response.status_code)
            raise DependencyError(
                DEPENDENCY, f"GitHub API returned HTTP {response.status_code}", status=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise DependencyError(DEPENDENCY, "GitHub API returned invalid JSON", status=response.status_code) from e
