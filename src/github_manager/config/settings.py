# src/github_manager/config/settings.py
import os
from dataclasses import dataclass

DEFAULT_API_URL = 'https://api.github.com'
DEFAULT_API_VERSION = '2022-11-28'


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)  # Immutable configuration
class GitHubConfig:
    token: str = ''
    api_url: str = DEFAULT_API_URL
    api_version: str = DEFAULT_API_VERSION
    request_timeout: float = 30.0
    wait_on_rate_limit: bool = False
    rate_limit_threshold: int = 50  # Remaining requests below which we warn or wait

    @classmethod
    def from_env(cls) -> 'GitHubConfig':
        """
        Build the configuration from GITHUB_* environment variables.

        Raises:
            ValueError: If GITHUB_REQUEST_TIMEOUT or GITHUB_RATE_LIMIT_THRESHOLD
                is not a number
        """
        return cls(
            token=os.getenv('GITHUB_TOKEN', ''),
            api_url=os.getenv('GITHUB_API_URL', DEFAULT_API_URL).rstrip('/'),
            api_version=os.getenv('GITHUB_API_VERSION', DEFAULT_API_VERSION),
            request_timeout=float(os.getenv('GITHUB_REQUEST_TIMEOUT', '30')),
            wait_on_rate_limit=_env_flag('GITHUB_WAIT_ON_RATE_LIMIT', False),
            rate_limit_threshold=int(os.getenv('GITHUB_RATE_LIMIT_THRESHOLD', '50'))
        )
