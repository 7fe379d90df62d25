from typing import Any, Iterable

from loguru import logger

from github_api_client.errors import GithubApiError, GithubConfigurationError
from github_api_client.github_api import GithubApi


class GithubTeams:
    """Team lookups and membership checks for one organization."""

    def __init__(self, api: GithubApi, github_org: str):
        if not github_org:
            raise GithubConfigurationError("Missing or empty required parameter 'githubOrg'!")
        self._api = api
        self._github_org = github_org

    async def fetch_all(self) -> list[dict[str, Any]]:
        return await self._api.get_paginated(f"/orgs/{self._github_org}/teams")

    async def is_member_by_id(self, username: str, team_ids: Iterable[int]) -> bool:
        """Return True if ``username`` is an active member of any of the teams.

        Teams are checked one at a time, in order, stopping at the first match.
        GitHub answers 404 for non-members, so an API error only rules out that
        one team.
        """
        for team_id in team_ids:
            try:
                membership = await self._api.get(f"/teams/{team_id}/memberships/{username}")
            except GithubApiError as ex:
                logger.debug(f"No membership for {username} in team {team_id}: status {ex.status_code}")
                continue

            if membership.get("state") == "active":
                return True

        return False

    async def is_member_by_slug(self, username: str, team_slugs: Iterable[str]) -> bool:
        wanted = set(team_slugs)
        try:
            teams = await self.fetch_all()
        except GithubApiError as ex:
            logger.warning(f"Unable to list teams for {self._github_org}: {ex}")
            return False

        team_ids = [team["id"] for team in teams if team.get("slug") in wanted]
        return await self.is_member_by_id(username, team_ids)
