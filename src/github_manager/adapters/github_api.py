# src/github_manager/adapters/github_api.py
"""
Anti-corruption layer for GitHub's REST API.

This adapter:
1. Owns the HTTP session and the authentication headers
2. Retries transient failures (connection errors, timeouts, 502/503/504)
3. Tracks rate limits from the X-RateLimit-* headers
4. Turns GitHub's error bodies into GitHubAPIError

It returns the raw body; decoding into models happens in response_format.
"""

import json
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

import requests
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log
)
import logging

from github_manager.adapters.params import Params
from github_manager.config.settings import DEFAULT_API_URL, DEFAULT_API_VERSION, GitHubConfig

logger = logging.getLogger(__name__)

USER_AGENT = 'github-manager/1.0'
TRANSIENT_STATUS_CODES = (502, 503, 504)


@dataclass(frozen=True)
class RateLimitInfo:
    """Immutable rate limit information."""
    remaining: int
    reset_at: datetime
    limit: int
    used: int = 0
    resource: Optional[str] = None


@dataclass(frozen=True)
class ApiResponse:
    """Status, body and headers of a completed request."""
    status_code: int
    text: str
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class GitHubAPIError(Exception):
    """Raised for any non-successful GitHub response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        documentation_url: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.documentation_url = documentation_url

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class RateLimitExceeded(GitHubAPIError):
    """Raised when rate limit is exceeded."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 documentation_url: Optional[str] = None,
                 rate_limit: Optional[RateLimitInfo] = None):
        super().__init__(message, status_code, documentation_url)
        self.rate_limit = rate_limit


class TransientServerError(GitHubAPIError):
    """Gateway and availability errors worth retrying."""
    pass


class GitHubRestAdapter:
    """
    Thin synchronous client for api.github.com.

    Paths are relative to the API root (``/repos/{owner}/{repo}``); query
    and body parameters are passed as Params.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = DEFAULT_API_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 30.0,
        wait_on_rate_limit: bool = False,
        rate_limit_threshold: int = 50,
        session: Optional[requests.Session] = None
    ):
        self._base_url = base_url.rstrip('/')
        self._timeout = timeout
        self._wait_on_rate_limit = wait_on_rate_limit
        self._rate_limit_threshold = rate_limit_threshold
        self._session = session if session is not None else requests.Session()
        headers = {
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': api_version,
            'User-Agent': USER_AGENT
        }
        if token:
            headers['Authorization'] = f'Bearer {token}'
        self._session.headers.update(headers)
        self._last_rate_limit: Optional[RateLimitInfo] = None

    @classmethod
    def from_config(cls, config: GitHubConfig,
                    session: Optional[requests.Session] = None) -> 'GitHubRestAdapter':
        return cls(
            token=config.token,
            base_url=config.api_url,
            api_version=config.api_version,
            timeout=config.request_timeout,
            wait_on_rate_limit=config.wait_on_rate_limit,
            rate_limit_threshold=config.rate_limit_threshold,
            session=session
        )

    def __enter__(self) -> 'GitHubRestAdapter':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _build_url(self, path: str, params: Optional[Params]) -> str:
        if not path.startswith('/'):
            path = '/' + path
        query = params.to_query_string() if params is not None else ''
        return f"{self._base_url}{path}{query}"

    def _parse_rate_limit(self, headers) -> Optional[RateLimitInfo]:
        """Parse rate limit info from response headers, if GitHub sent any."""
        remaining = headers.get('X-RateLimit-Remaining')
        if remaining is None:
            return None
        try:
            reset_epoch = int(headers.get('X-RateLimit-Reset', '0'))
            reset_at = datetime.fromtimestamp(reset_epoch, tz=timezone.utc)
            return RateLimitInfo(
                remaining=int(remaining),
                reset_at=reset_at,
                limit=int(headers.get('X-RateLimit-Limit', '5000')),
                used=int(headers.get('X-RateLimit-Used', '0')),
                resource=headers.get('X-RateLimit-Resource')
            )
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed rate limit headers: remaining={remaining!r}")
            return None

    def _check_and_handle_rate_limit(self, rate_limit_info: RateLimitInfo) -> None:
        """Check and handle rate limiting proactively."""
        self._last_rate_limit = rate_limit_info

        if rate_limit_info.remaining >= self._rate_limit_threshold:
            return

        now = datetime.now(timezone.utc)
        wait_seconds = (rate_limit_info.reset_at - now).total_seconds()
        if self._wait_on_rate_limit and wait_seconds > 0:
            logger.warning(
                f"Rate limit low ({rate_limit_info.remaining} remaining). "
                f"Waiting {wait_seconds:.0f}s until reset..."
            )
            time.sleep(wait_seconds + 1)
        else:
            logger.warning(
                f"Rate limit low: {rate_limit_info.remaining}/{rate_limit_info.limit} remaining"
            )

    @retry(
        stop=stop_after_attempt(5),
        wait=wait_exponential(multiplier=2, min=4, max=120),
        retry=retry_if_exception_type(
            (requests.ConnectionError, requests.Timeout, TransientServerError)
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True
    )
    def _send(self, method: str, url: str, data: Optional[str]) -> requests.Response:
        """Perform one HTTP exchange, raising TransientServerError for retryable statuses."""
        headers = {'Content-Type': 'application/json'} if data is not None else None
        response = self._session.request(
            method,
            url,
            data=data,
            headers=headers,
            timeout=self._timeout
        )
        if response.status_code in TRANSIENT_STATUS_CODES:
            logger.warning(f"GitHub server error ({response.status_code}), retrying...")
            raise TransientServerError(
                f"Server error on {method} {url}",
                status_code=response.status_code
            )
        return response

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Params] = None,
        body: Optional[Params] = None
    ) -> ApiResponse:
        """
        Send a request and return the successful response.

        Args:
            method: HTTP verb
            path: Path below the API root
            params: Query-string parameters
            body: JSON body parameters

        Returns:
            ApiResponse for any 2xx status

        Raises:
            RateLimitExceeded: On 403/429 with no remaining quota
            GitHubAPIError: On any other non-2xx status, or once retries
                of a transient failure are exhausted
        """
        url = self._build_url(path, params)
        data = body.to_request_body() if body is not None else None
        logger.debug(f"{method} {url}")

        try:
            response = self._send(method, url, data)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise GitHubAPIError(f"Request to {url} failed: {e}") from e

        rate_limit = self._parse_rate_limit(response.headers)
        if rate_limit is not None:
            self._check_and_handle_rate_limit(rate_limit)

        status = response.status_code
        if status in (403, 429) and rate_limit is not None and rate_limit.remaining == 0:
            message, documentation_url = self._parse_error_body(response.text)
            logger.error(f"Rate limit exceeded, resets at {rate_limit.reset_at.isoformat()}")
            raise RateLimitExceeded(
                message or 'API rate limit exceeded',
                status_code=status,
                documentation_url=documentation_url,
                rate_limit=rate_limit
            )

        if not 200 <= status < 300:
            message, documentation_url = self._parse_error_body(response.text)
            logger.error(f"{method} {url} failed with {status}: {message}")
            raise GitHubAPIError(
                message or f"API error: {status}",
                status_code=status,
                documentation_url=documentation_url
            )

        return ApiResponse(
            status_code=status,
            text=response.text or '',
            headers=dict(response.headers)
        )

    @staticmethod
    def _parse_error_body(text: Optional[str]):
        """Extract GitHub's message and documentation_url from an error body."""
        if not text:
            return None, None
        try:
            payload = json.loads(text)
        except ValueError:
            return text, None
        if not isinstance(payload, dict):
            return text, None
        return payload.get('message'), payload.get('documentation_url')

    def get(self, path: str, params: Optional[Params] = None) -> ApiResponse:
        return self.request('GET', path, params=params)

    def post(self, path: str, body: Optional[Params] = None,
             params: Optional[Params] = None) -> ApiResponse:
        return self.request('POST', path, params=params, body=body)

    def put(self, path: str, body: Optional[Params] = None) -> ApiResponse:
        return self.request('PUT', path, body=body)

    def patch(self, path: str, body: Optional[Params] = None) -> ApiResponse:
        return self.request('PATCH', path, body=body)

    def delete(self, path: str, body: Optional[Params] = None) -> ApiResponse:
        return self.request('DELETE', path, body=body)

    def get_rate_limit_status(self) -> Optional[RateLimitInfo]:
        """Get the rate limit reported by the last response."""
        return self._last_rate_limit

    def close(self):
        """Clean up resources."""
        self._session.close()
        logger.info("GitHub API adapter closed")
