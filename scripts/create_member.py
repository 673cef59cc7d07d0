"""Utility script to register a member in the activity database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from activity_api.application.use_cases.users import DEFAULT_ROLE_ALIAS, create_user
from activity_api.infrastructure.database import SessionLocal, initialize_database
from activity_api.infrastructure.repositories import GroupMembershipRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for member creation."""

    parser = argparse.ArgumentParser(
        description="Create a member of the activity API.",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Display name of the member (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="E-mail address used to sign in (default: admin@example.com)",
    )
    parser.add_argument(
        "--role",
        default=DEFAULT_ROLE_ALIAS,
        help=f"Role alias of the member (default: {DEFAULT_ROLE_ALIAS})",
    )
    parser.add_argument(
        "--group",
        type=int,
        action="append",
        default=[],
        help="Group id the member joins; may be repeated.",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Member password. Prompted for interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a member using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Member password: ")
    if not password:
        raise SystemExit("No valid password was provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            role_alias=args.role,
        )
        memberships = GroupMembershipRepository(session)
        for group_id in args.group:
            memberships.add_member(group_id, user.id)
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the member: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the member: {exc}") from exc
    else:
        print(
            "Member created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role.alias}\n"
            f"  Groups: {', '.join(map(str, args.group)) or '-'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
