from typing import Any

from github_api_client.errors import GithubConfigurationError
from github_api_client.github_api import GithubApi


class GithubPullRequests:
    """Pull request operations scoped to a single repository."""

    def __init__(self, api: GithubApi, repo_slug: str):
        if not repo_slug:
            raise GithubConfigurationError("Missing or empty required parameter 'repoSlug'!")
        self._api = api
        self._repo_slug = repo_slug

    async def add_comment(self, pr: int, body: str) -> Any:
        if not isinstance(pr, int) or isinstance(pr, bool) or pr <= 0:
            raise ValueError(f"Invalid PR number: {pr}")
        if not body:
            raise ValueError(f"Invalid PR comment body: {body}")

        return await self._api.post(f"/repos/{self._repo_slug}/issues/{pr}/comments", None, {"body": body})

    async def fetch(self, pr: int) -> dict[str, Any]:
        # The issues endpoint also carries the labels, which /pulls/<n> omits.
        return await self._api.get(f"/repos/{self._repo_slug}/issues/{pr}")

    async def fetch_all(self, state: str = "all") -> list[dict[str, Any]]:
        return await self._api.get_paginated(f"/repos/{self._repo_slug}/pulls", {"state": state})

    async def fetch_files(self, pr: int) -> list[dict[str, Any]]:
        return await self._api.get(f"/repos/{self._repo_slug}/pulls/{pr}/files")
