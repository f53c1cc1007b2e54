"""Command-line access to the dashboard commands.

Runs the same operations the UI calls, against the same secrets and cache
files. Example usages::

    # Store credentials (the secret is prompted for when omitted).
    python -m scripts.dashboard_cli credentials save --client-id abc \
        --tenant-id 1234 --region eu02

    # Print the tenant's endpoints as JSON, using the cache when fresh.
    python -m scripts.dashboard_cli fetch

    # Force the next fetch to hit the API.
    python -m scripts.dashboard_cli clear-cache
"""

from __future__ import annotations

import argparse
import asyncio
import getpass
import json
import sys
from typing import Callable

from sophos_dashboard.core.config import get_settings
from sophos_dashboard.core.logging import configure_logging
from sophos_dashboard.dependencies import get_dashboard_commands
from sophos_dashboard.schemas import SophosCredentials
from sophos_dashboard.services import CommandError, DashboardCommands, summarize_endpoints

EXIT_OK = 0
EXIT_COMMAND_ERROR = 2
EXIT_RUNTIME_ERROR = 5


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _token(commands: DashboardCommands, args: argparse.Namespace) -> int:
    print(asyncio.run(commands.get_access_token()))
    return EXIT_OK


async def _fetch_with_fresh_token(commands: DashboardCommands):
    access_token = await commands.get_access_token()
    return await commands.fetch_endpoints(access_token)


def _fetch(commands: DashboardCommands, args: argparse.Namespace) -> int:
    endpoints = asyncio.run(_fetch_with_fresh_token(commands))
    if args.count_only:
        print(len(endpoints))
    else:
        _print_json([endpoint.to_wire() for endpoint in endpoints])
    return EXIT_OK


def _summary(commands: DashboardCommands, args: argparse.Namespace) -> int:
    endpoints = asyncio.run(_fetch_with_fresh_token(commands))
    _print_json(summarize_endpoints(endpoints).model_dump())
    return EXIT_OK


def _clear_cache(commands: DashboardCommands, args: argparse.Namespace) -> int:
    print(commands.clear_cache())
    return EXIT_OK


def _credentials_show(commands: DashboardCommands, args: argparse.Namespace) -> int:
    credentials = commands.load_credentials()
    payload = credentials.model_dump()
    if not args.reveal:
        payload["client_secret"] = "********"
    _print_json(payload)
    return EXIT_OK


def _credentials_save(commands: DashboardCommands, args: argparse.Namespace) -> int:
    secret = args.client_secret or getpass.getpass("Client secret: ")
    credentials = SophosCredentials(
        client_id=args.client_id,
        client_secret=secret,
        tenant_id=args.tenant_id,
        region=args.region,
    )
    print(commands.save_credentials(credentials))
    return EXIT_OK


def _credentials_path(commands: DashboardCommands, args: argparse.Namespace) -> int:
    print(commands.get_secrets_file_path())
    return EXIT_OK


def _build_parser(default_region: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query Sophos Central endpoints through the dashboard backend."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    token_parser = subparsers.add_parser("token", help="Print a fresh bearer token.")
    token_parser.set_defaults(handler=_token)

    fetch_parser = subparsers.add_parser(
        "fetch", help="Print the tenant's endpoints as JSON."
    )
    fetch_parser.add_argument(
        "--count-only",
        action="store_true",
        help="Print only the number of endpoints.",
    )
    fetch_parser.set_defaults(handler=_fetch)

    summary_parser = subparsers.add_parser(
        "summary", help="Print dashboard statistics for the tenant's endpoints."
    )
    summary_parser.set_defaults(handler=_summary)

    clear_parser = subparsers.add_parser(
        "clear-cache", help="Delete the cached endpoint snapshot."
    )
    clear_parser.set_defaults(handler=_clear_cache)

    credentials_parser = subparsers.add_parser(
        "credentials", help="Inspect or update the stored credentials."
    )
    credentials_sub = credentials_parser.add_subparsers(dest="action", required=True)

    show_parser = credentials_sub.add_parser("show", help="Print stored credentials.")
    show_parser.add_argument(
        "--reveal",
        action="store_true",
        help="Include the client secret in the output.",
    )
    show_parser.set_defaults(handler=_credentials_show)

    save_parser = credentials_sub.add_parser("save", help="Overwrite stored credentials.")
    save_parser.add_argument("--client-id", required=True)
    save_parser.add_argument(
        "--client-secret",
        default=None,
        help="Client secret (prompted for when omitted).",
    )
    save_parser.add_argument("--tenant-id", required=True)
    save_parser.add_argument(
        "--region",
        default=default_region,
        help=f"Regional API host suffix (default: {default_region}).",
    )
    save_parser.set_defaults(handler=_credentials_save)

    path_parser = credentials_sub.add_parser("path", help="Print the secrets file path.")
    path_parser.set_defaults(handler=_credentials_path)

    return parser


def main(
    argv: list[str] | None = None,
    *,
    commands: DashboardCommands | None = None,
) -> int:
    settings = get_settings()
    parser = _build_parser(settings.sophos.default_region)
    args = parser.parse_args(argv)

    if commands is None:
        configure_logging(settings.log_level)
        commands = get_dashboard_commands()

    handler: Callable[[DashboardCommands, argparse.Namespace], int] = args.handler
    try:
        return handler(commands, args)
    except CommandError as exc:
        print(exc.message, file=sys.stderr)
        return EXIT_COMMAND_ERROR
    except Exception as exc:  # pylint: disable=broad-except
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
