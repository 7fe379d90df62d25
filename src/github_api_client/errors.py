class GithubConfigurationError(ValueError):
    """Raised when a client is constructed without a required parameter."""


class GithubApiError(Exception):
    """Raised when GitHub answers with a status outside [200, 400)."""

    def __init__(self, path: str, status_code: int, body: str):
        super().__init__(f"Request to '{path}' failed (status: {status_code}): {body}")
        self.path = path
        self.status_code = status_code
        self.body = body
