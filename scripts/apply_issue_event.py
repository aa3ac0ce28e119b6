"""Utility script to fan out notifications for an issue event by hand."""

from __future__ import annotations

import argparse

from issuewatch.application.use_cases.notifications import (
    create_or_update_issue_notifications,
)
from issuewatch.config import get_settings
from issuewatch.domain.exceptions import NotificationError
from issuewatch.infrastructure.database import SessionLocal, initialize_database
from issuewatch.logging_config import configure_logging


def parse_args() -> argparse.Namespace:
    """Parse command line arguments describing the event."""

    parser = argparse.ArgumentParser(
        description="Create or update the notifications of every watcher of an issue.",
    )
    parser.add_argument("issue_id", type=int, help="Issue or pull request id")
    parser.add_argument(
        "--comment-id",
        type=int,
        default=0,
        help="Comment that triggered the event (default: 0, no comment)",
    )
    parser.add_argument(
        "--actor-id",
        type=int,
        required=True,
        help="User who caused the event; never notified",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(get_settings().log_level)
    initialize_database()

    session = SessionLocal()
    try:
        result = create_or_update_issue_notifications(
            session, args.issue_id, args.comment_id, args.actor_id
        )
    except NotificationError as exc:
        raise SystemExit(f"Could not apply the event: {exc}") from exc
    finally:
        session.close()

    print(
        f"Issue {result.issue_id}:\n"
        f"  created: {', '.join(map(str, result.created)) or '-'}\n"
        f"  updated: {', '.join(map(str, result.updated)) or '-'}"
    )


if __name__ == "__main__":
    main()
