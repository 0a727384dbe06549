#!/usr/bin/env python3

import sys
from logger import get_logger
from services.errors import UserError

logger = get_logger()


def cmd_create(args, services):
    """Register a user with an already hashed password."""
    try:
        user = services.users.create(args.email, args.password_hash)
    except UserError as e:
        logger.error(f"Error creating user: {e}")
        sys.exit(1)

    logger.info(f"\n✓ User created successfully with ID: {user.id}")
    logger.info(f"  Email: {user.email}")


def cmd_show(args, services):
    """Show a single user."""
    user = services.users.find(args.user_id)
    if not user:
        logger.error(f"User with ID {args.user_id} not found.")
        sys.exit(1)

    logger.info(f"ID: {user.id}")
    logger.info(f"Email: {user.email}")


def setup_parser(subparsers):
    """Setup users subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "users",
        help="Manage users",
        description="Create and show users",
    )

    users_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available user commands",
        dest="subcommand",
        required=True,
    )

    create_parser = users_subparsers.add_parser("create", help="Create a user")
    create_parser.add_argument("--email", required=True, help="Email address")
    create_parser.add_argument(
        "--password-hash",
        required=True,
        help="Password hash produced by the authentication layer",
    )
    create_parser.set_defaults(func=cmd_create)

    show_parser = users_subparsers.add_parser("show", help="Show a user by ID")
    show_parser.add_argument("user_id", type=int, help="ID of the user")
    show_parser.set_defaults(func=cmd_show)
