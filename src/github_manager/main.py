# src/github_manager/main.py
"""
Command line entry point.

Looks up a single repository resource and prints either a short summary
or the payload itself:

    github-manager repo octocat/hello-world
    github-manager languages octocat/hello-world --format json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from github_manager.adapters.github_api import GitHubAPIError, GitHubRestAdapter
from github_manager.adapters.response_format import ReturnFormat
from github_manager.config.settings import GitHubConfig
from github_manager.models.base import DecodingError
from github_manager.models.repository import Repository, split_full_name
from github_manager.models.repository_metadata import RepositoryLanguages, RepositoryTag
from github_manager.services.repositories import RepositoriesManager

logger = logging.getLogger(__name__)

FORMATS = {
    'string': ReturnFormat.STRING,
    'json': ReturnFormat.JSON,
    'object': ReturnFormat.LIBRARY_OBJECT,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='github-manager')
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Log requests at DEBUG level'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    for name, help_text in (
        ('repo', 'Show a repository'),
        ('languages', 'Show the languages of a repository'),
        ('tags', 'List the tags of a repository'),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument('repository', metavar='OWNER/NAME')
        command.add_argument(
            '--format', dest='output_format', choices=sorted(FORMATS), default='object',
            help='object prints a summary, json the parsed payload, string the raw body'
        )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def summarize_repository(repository: Repository) -> List[str]:
    visibility = repository.visibility.value if repository.visibility else 'unknown'
    lines = [
        f"{repository.full_name} ({visibility})",
        f"  Description: {repository.description or '-'}",
        f"  Default branch: {repository.default_branch or '-'}",
        f"  Stars: {repository.stargazers_count:,}  Forks: {repository.forks_count:,}  "
        f"Open issues: {repository.open_issues_count:,}",
    ]
    if repository.fork and repository.parent is not None:
        lines.append(f"  Forked from: {repository.parent.full_name}")
    if repository.license is not None:
        lines.append(f"  License: {repository.license.spdx_id or repository.license.name}")
    return lines


def summarize_languages(languages: RepositoryLanguages) -> List[str]:
    total = languages.total_bytes
    lines = []
    for language, size in sorted(languages, key=lambda item: item[1], reverse=True):
        share = (size / total * 100) if total else 0.0
        lines.append(f"{language}: {size:,} bytes ({share:.1f}%)")
    return lines or ['No languages detected']


def summarize_tags(tags: List[RepositoryTag]) -> List[str]:
    lines = []
    for tag in tags:
        sha = tag.commit.sha[:7] if tag.commit is not None and tag.commit.sha else '-'
        lines.append(f"{tag.name} {sha}")
    return lines or ['No tags']


def run_command(manager: RepositoriesManager, command: str, owner: str, repo: str,
                fmt: ReturnFormat) -> str:
    """Fetch the requested resource and render it as text for stdout."""
    if command == 'repo':
        result = manager.get_repository(owner, repo, fmt=fmt)
        summarize = summarize_repository
    elif command == 'languages':
        result = manager.get_repository_languages(owner, repo, fmt=fmt)
        summarize = summarize_languages
    elif command == 'tags':
        result = manager.list_repository_tags(owner, repo, fmt=fmt)
        summarize = summarize_tags
    else:
        raise ValueError(f"Unknown command: {command}")

    if fmt is ReturnFormat.STRING:
        return result
    if fmt is ReturnFormat.JSON:
        return json.dumps(result, indent=2)
    return '\n'.join(summarize(result))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for error, 130 when interrupted)
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        owner, repo = split_full_name(args.repository)
    except ValueError as e:
        logger.error(str(e))
        return 1

    try:
        config = GitHubConfig.from_env()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    if not config.token:
        logger.warning("GITHUB_TOKEN not set, using unauthenticated requests (60/hour)")

    try:
        with GitHubRestAdapter.from_config(config) as adapter:
            output = run_command(
                RepositoriesManager(adapter), args.command, owner, repo, FORMATS[args.output_format]
            )
        print(output)
        return 0
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except (GitHubAPIError, DecodingError) as e:
        logger.error(f"Request failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
