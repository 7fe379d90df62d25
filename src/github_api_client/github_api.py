import json
from typing import Any, Mapping
from urllib.parse import quote

import httpx
from loguru import logger

from github_api_client._version import __version__
from github_api_client.errors import GithubApiError, GithubConfigurationError

BASE_URL = "https://api.github.com"
PER_PAGE = 100

# Characters encodeURIComponent leaves alone on top of quote()'s always-safe set.
_URI_COMPONENT_SAFE = "!*'()"

QueryParams = Mapping[str, str | int | float | bool | None]


class GithubApi:
    """Thin async client for the GitHub REST API.

    Every request carries the token in the ``Authorization`` header and is sent
    to ``api.github.com``. Responses with a status outside ``[200, 400)`` raise
    :class:`GithubApiError`; anything else is decoded as JSON.
    """

    def __init__(self, github_token: str, transport: httpx.AsyncBaseTransport | None = None):
        if not github_token:
            raise GithubConfigurationError("Missing or empty required parameter 'githubToken'!")
        self._github_token = github_token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GithubApi":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, pathname: str, params: QueryParams | None = None) -> Any:
        path = self._build_path(pathname, params)
        return await self._request("get", path)

    async def post(self, pathname: str, params: QueryParams | None = None, data: Any = None) -> Any:
        path = self._build_path(pathname, params)
        return await self._request("post", path, data)

    async def get_paginated(self, pathname: str, params: QueryParams | None = None) -> list[Any]:
        """Fetch every page of a list endpoint and return the items in page order.

        A page holding exactly ``PER_PAGE`` items means there may be more, so an
        endpoint with an exact multiple of ``PER_PAGE`` items costs one extra,
        empty, request.
        """
        per_page = PER_PAGE
        page = 0
        items: list[Any] = []

        while True:
            page_items = await self.get(pathname, {**(params or {}), "page": page, "per_page": per_page})
            # A non-list page counts as a single item.
            if not isinstance(page_items, list):
                page_items = [page_items]
            items.extend(page_items)
            logger.debug(f"{pathname}: page {page} returned {len(page_items)} item(s), {len(items)} so far")

            if len(page_items) != per_page:
                return items
            page += 1

    def _build_path(self, pathname: str, params: QueryParams | None = None) -> str:
        if params is None:
            return pathname

        pairs = [
            f"{key}={quote(_format_value(value), safe=_URI_COMPONENT_SAFE)}"
            for key, value in params.items()
            if value is not None
        ]
        if not pairs:
            return pathname
        return f"{pathname}?{'&'.join(pairs)}"

    async def _request(self, method: str, path: str, data: Any = None) -> Any:
        client = self._get_client()
        kwargs: dict[str, Any] = {}
        if data is not None:
            kwargs["json"] = data

        verb = method.upper()
        logger.debug(f"{verb} {path}")
        resp = await client.request(verb, path, **kwargs)
        text = resp.text
        logger.debug(f"{verb} {path} -> {resp.status_code}")

        if resp.status_code < 200 or resp.status_code >= 400:
            raise GithubApiError(path, resp.status_code, text)

        # An empty body is not valid JSON either; callers see the decode error.
        return _parse_json(text)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=BASE_URL,
                headers={
                    "Authorization": f"token {self._github_token}",
                    "Accept": "application/vnd.github+json",
                    "User-Agent": f"github-api-client/{__version__}",
                },
                timeout=None,
                transport=self._transport,
            )
        return self._client


def _parse_json(text: str) -> Any:
    def _reject_constant(name: str) -> Any:
        raise json.JSONDecodeError(f"Invalid JSON constant {name!r}", text, text.find(name))

    return json.loads(text, parse_constant=_reject_constant)


def _format_value(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
