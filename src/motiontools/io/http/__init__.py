"""HTTP clients for external dependencies."""

from .client import DEPENDENCY, ExternalCall, GitHubClient

__all__ = ["DEPENDENCY", "ExternalCall", "GitHubClient"]
