from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from inboxpy.app import (
    add_labels,
    archive_message,
    build_authorize_url,
    exchange_authorization_code,
    mark_messages_read,
    mark_messages_unread,
    move_message,
    remove_labels,
    revoke_access_tokens,
    star_messages,
    trash_message,
    unarchive_message,
    unstar_messages,
)
from inboxpy.config import ConfigurationError, configure_logging
from inboxpy.domain.errors import ResolutionError, ValidationError
from inboxpy.domain.types import Failure, failed

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from inboxpy.domain.types import BatchResult

log = logging.getLogger(__name__)

_BATCH_COMMANDS = {
    "star": star_messages,
    "unstar": unstar_messages,
    "read": mark_messages_read,
    "unread": mark_messages_unread,
}
_SINGLE_COMMANDS = {
    "archive": archive_message,
    "unarchive": unarchive_message,
    "trash": trash_message,
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Update Nylas messages")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("star", "Star one or more messages"),
        ("unstar", "Remove the star from one or more messages"),
        ("read", "Mark one or more messages as read"),
        ("unread", "Mark one or more messages as unread"),
    ):
        batch = subparsers.add_parser(command, help=help_text)
        batch.add_argument("message_ids", nargs="+", help="Message ids to update")

    for command, help_text in (
        ("archive", "Archive a message"),
        ("unarchive", "Move an archived message back to the inbox"),
        ("trash", "Move a message to the trash"),
    ):
        single = subparsers.add_parser(command, help=help_text)
        single.add_argument("message_id", help="Message id to update")

    move = subparsers.add_parser("move", help="Move a message between labels or folders")
    move.add_argument("message_id", help="Message id to update")
    move.add_argument("--from", dest="source", required=True, help="Current label/folder name")
    move.add_argument("--to", dest="destination", required=True, help="Target label/folder name")

    for command, help_text in (
        ("add-labels", "Add labels to a message by name"),
        ("remove-labels", "Remove labels from a message by name"),
    ):
        labels = subparsers.add_parser(command, help=help_text)
        labels.add_argument("message_id", help="Message id to update")
        labels.add_argument("labels", nargs="+", help="Label names")

    authorize = subparsers.add_parser("authorize-url", help="Print the hosted login URL")
    authorize.add_argument("--redirect-uri", required=True, help="OAuth redirect URI")
    authorize.add_argument("--scopes", required=True, help="Comma separated scopes")
    authorize.add_argument(
        "--response-type",
        choices=("code", "token"),
        default="code",
        help="OAuth response type (default: %(default)s)",
    )
    authorize.add_argument("--state", type=str, help="Opaque state echoed back on redirect")
    authorize.add_argument("--login-hint", type=str, help="Email address to prefill")
    authorize.add_argument("--provider", type=str, help="Skip provider selection")

    exchange = subparsers.add_parser("exchange-code", help="Exchange an authorization code")
    exchange.add_argument("code", help="Authorization code from the redirect")

    subparsers.add_parser("revoke", help="Revoke the configured access token")

    return parser.parse_args(list(argv))


def _authorize_params(args: argparse.Namespace) -> dict[str, object]:
    params: dict[str, object] = {
        "scopes": args.scopes,
        "redirect_uri": args.redirect_uri,
        "response_type": args.response_type,
    }
    for key in ("state", "login_hint", "provider"):
        value = getattr(args, key)
        if value is not None:
            params[key] = value
    return params


def _report(result: BatchResult) -> None:
    for message_id, outcome in result.items():
        if isinstance(outcome, Failure):
            print(f"{message_id}\tfailed\t{outcome.error}")  # noqa: T201
        else:
            print(f"{message_id}\tok")  # noqa: T201


def _run_command(args: argparse.Namespace) -> BatchResult | None:
    command = args.command
    if command in _BATCH_COMMANDS:
        return _BATCH_COMMANDS[command](args.message_ids)
    if command in _SINGLE_COMMANDS:
        return _SINGLE_COMMANDS[command](args.message_id)
    if command == "move":
        return move_message(args.message_id, source=args.source, destination=args.destination)
    if command == "add-labels":
        return add_labels(args.message_id, args.labels)
    if command == "remove-labels":
        return remove_labels(args.message_id, args.labels)
    if command == "authorize-url":
        print(build_authorize_url(_authorize_params(args)))  # noqa: T201
        return None
    if command == "exchange-code":
        token = exchange_authorization_code(args.code)
        print(token.access_token)  # noqa: T201
        return None
    if command == "revoke":
        revoke_access_tokens()
        return None
    raise ValueError(f"Unsupported command: {command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        result = _run_command(parsed_args)
    except (ValidationError, ResolutionError, ConfigurationError) as exc:
        log.error("Request rejected before any update was sent: %s", exc)
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while updating messages")
        sys.exit(1)

    if result is None:
        return
    _report(result)
    if failed(result):
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
