import argparse
import asyncio
import json
import sys
from typing import Any

import httpx
from dotenv import load_dotenv
from loguru import logger

from github_api_client.app_config import load_json_config, parse_app_config, resolve_runtime_env
from github_api_client.errors import GithubApiError
from github_api_client.github_api import GithubApi
from github_api_client.logging_config import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="github-api-client",
        description="Send an authenticated request to the GitHub REST API and print the JSON response.",
    )
    parser.add_argument("--log-level", help="Override LogLevel from config.json")

    commands = parser.add_subparsers(dest="command", required=True)

    get = commands.add_parser("get", help="GET a path")
    get.add_argument("path", help="API path, e.g. /repos/owner/repo/issues")
    get.add_argument("params", nargs="*", metavar="key=value", help="Query parameters")
    get.add_argument("--paginate", action="store_true", help="Follow pages and return every item")

    post = commands.add_parser("post", help="POST a JSON body to a path")
    post.add_argument("path", help="API path, e.g. /repos/owner/repo/issues")
    post.add_argument("params", nargs="*", metavar="key=value", help="Query parameters")
    post.add_argument("--data", type=json.loads, help="JSON request body")

    return parser.parse_args(argv)


def parse_params(pairs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        params[key] = value
    return params


async def run(args: argparse.Namespace, token: str) -> Any:
    params = parse_params(args.params) or None
    async with GithubApi(token) as api:
        if args.command == "post":
            return await api.post(args.path, params, args.data)
        if args.paginate:
            return await api.get_paginated(args.path, params)
        return await api.get(args.path, params)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    args = parse_args(argv)
    app = parse_app_config(load_json_config())
    setup_logging(level=args.log_level or app.log_level, consumers=app.log_consumers)

    env = resolve_runtime_env()
    if not env.github_token:
        logger.error("GITHUB_TOKEN environment variable is required.")
        return 1

    try:
        result = asyncio.run(run(args, env.github_token))
    except (GithubApiError, httpx.TransportError, ValueError) as ex:
        logger.error(f"{args.command.upper()} {args.path} failed: {ex}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
