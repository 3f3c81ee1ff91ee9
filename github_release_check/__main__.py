"""Command line entry point: print the latest (or every) release version of a repository."""
import argparse
import logging
import sys
from collections.abc import Sequence

import requests
from pydantic import ValidationError
from rich.table import Table
from rich.text import Text

from github_release_check.config import ClientSettings
from github_release_check.exceptions import ReleaseLookupError
from github_release_check.logging_setup import console, error_console, setup_logging
from github_release_check.networking import GitHub
from github_release_check.text_utils import pluralize


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='github-release-check',
        description='Check the latest GitHub release version of a repository.',
    )
    parser.add_argument('repository', help='repository in the format "owner/repo"')
    output = parser.add_mutually_exclusive_group()
    output.add_argument('--all', action='store_true', help='print every release tag instead of the latest version')
    output.add_argument('--details', action='store_true', help='print a table of every release')
    parser.add_argument('--api-root', help='REST API root ending in a slash (env: GITHUB_API_ROOT)')
    parser.add_argument('--token', help='personal access token (env: GITHUB_TOKEN)')
    parser.add_argument('--timeout', type=float, help='per-request timeout in seconds (env: GITHUB_TIMEOUT)')
    parser.add_argument('-v', '--verbose', action='store_true', help='log every page request')
    parser.add_argument('--log-file', help='also write warnings and errors to this rotating log file')
    return parser


def _settings_from_args(args: argparse.Namespace) -> ClientSettings:
    settings = ClientSettings.from_env()
    overrides = {
        'api_root': args.api_root,
        'access_token': args.token,
        'timeout': args.timeout,
    }
    return ClientSettings.model_validate(
        settings.model_dump() | {key: value for key, value in overrides.items() if value is not None},
    )


def _print_release_table(github: GitHub, repository: str) -> None:
    releases = github.get_all_releases(repository)

    table = Table(title=f'{repository}: {len(releases)} release{pluralize(len(releases))}')
    table.add_column('Tag')
    table.add_column('Name')
    table.add_column('Published')
    table.add_column('Flags')
    for release in releases:
        flags = ', '.join(flag for flag, is_set in (('draft', release.draft), ('prerelease', release.prerelease)) if is_set)
        table.add_row(Text(release.tag_name), Text(release.name or ''), Text(release.published_at or ''), flags)

    console.print(table)


def main(argv: Sequence[str] | None = None, *, session: requests.Session | None = None) -> int:
    """Run the command line interface and return the process exit status.

    Args:
        argv: Command line arguments, `sys.argv[1:]` when `None`.
        session: Optional session to send requests with, instead of one owned by the client.
    """
    args = _build_parser().parse_args(argv)
    setup_logging(console_level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        settings = _settings_from_args(args)
    except ValidationError as e:
        error_console.print(Text.assemble(('Invalid settings: ', 'bold red'), str(e)))
        return 2

    try:
        with GitHub.from_settings(settings, session=session) as github:
            if args.details:
                _print_release_table(github, args.repository)
            elif args.all:
                for version in github.get_all_versions(args.repository):
                    console.print(version, markup=False, highlight=False)
            else:
                console.print(github.get_latest_version(args.repository), markup=False, highlight=False)
    except ReleaseLookupError as e:
        error_console.print(Text.assemble(('Error: ', 'bold red'), str(e)))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
