from github_api_client._version import __version__
from github_api_client.errors import GithubApiError, GithubConfigurationError
from github_api_client.github_api import PER_PAGE, GithubApi
from github_api_client.github_pull_requests import GithubPullRequests
from github_api_client.github_teams import GithubTeams

__all__ = [
    "GithubApi",
    "GithubApiError",
    "GithubConfigurationError",
    "GithubPullRequests",
    "GithubTeams",
    "PER_PAGE",
    "__version__",
]
