#!/usr/bin/env python3
"""
Firetrack CLI - Command-line interface for managing users and categories.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    users        Manage users
    categories   Manage spending categories
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli users create --email me@example.com --password-hash '$argon2id$...'
    python -m cli categories create --user-id 1 --name Housing
    python -m cli categories tree --user-id 1
"""

import sys
import argparse
from cli import categories, migrate, users
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import get_logger, setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Firetrack - Personal budgeting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    users.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    # Errors the subcommands did not handle end the process here
    try:
        config = load_config()
        setup_logging(config)

        if args.command == "migrate":
            # Migrate commands need db_manager for raw database operations
            args.func(args, DatabaseManager(config))
        else:
            args.func(args, Services(config))
    except Exception as e:
        get_logger().error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
