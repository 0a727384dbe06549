#!/usr/bin/env python3

import sys
from collections import defaultdict
from logger import get_logger
from services.errors import CategoryError

logger = get_logger()


def _log_category(category, indent=""):
    logger.info(f"{indent}ID: {category.id}")
    logger.info(f"{indent}Name: {category.name}")
    if category.description:
        logger.info(f"{indent}Description: {category.description}")
    logger.info(f"{indent}Owner: user {category.user_id}")
    if category.parent_id:
        logger.info(f"{indent}Parent ID: {category.parent_id}")


def _require_user(services, user_id):
    user = services.users.find(user_id)
    if not user:
        logger.error(f"User with ID {user_id} not found.")
        sys.exit(1)
    return user


def cmd_create(args, services):
    """Create a new category for a user."""
    user = _require_user(services, args.user_id)

    parent = None
    if args.parent_id is not None:
        parent = services.categories.find(args.parent_id)
        if not parent:
            logger.error(f"Parent category with ID {args.parent_id} not found.")
            sys.exit(1)

    try:
        category = services.categories.create(
            user, args.name, args.description, parent
        )
    except CategoryError as e:
        logger.error(f"Error creating category: {e}")
        sys.exit(1)

    logger.info(f"\n✓ Category created successfully with ID: {category.id}")
    _log_category(category, indent="  ")


def cmd_show(args, services):
    """Show a single category."""
    category = services.categories.find(args.category_id)
    if not category:
        logger.error(f"Category with ID {args.category_id} not found.")
        sys.exit(1)

    _log_category(category)


def cmd_tree(args, services):
    """Print all categories of a user as a tree."""
    user = _require_user(services, args.user_id)
    categories = services.categories.find_by_user(user.id)

    if not categories:
        logger.info(f"No categories found for {user.email}.")
        return

    children = defaultdict(list)
    for category in categories:
        children[category.parent_id].append(category)

    def walk(parent_id, depth):
        for category in children[parent_id]:
            logger.info(f"{'  ' * depth}- {category.name} (ID: {category.id})")
            walk(category.id, depth + 1)

    logger.info(f"\nCategories for {user.email}:")
    logger.info("=" * 80)
    walk(None, 0)
    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_delete(args, services):
    """Delete a category by ID."""
    category_id = args.category_id

    category = services.categories.find(category_id)
    if not category:
        logger.error(f"Category with ID {category_id} not found.")
        sys.exit(1)

    logger.info("\nCategory to delete:")
    _log_category(category, indent="  ")

    if not args.yes:
        confirm = (
            input("\nAre you sure you want to delete this category? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    try:
        services.categories.delete(category_id)
    except CategoryError as e:
        logger.error(f"Error deleting category: {e}")
        sys.exit(1)

    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, show, and delete spending categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories create
    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category"
    )
    create_parser.add_argument(
        "--user-id", type=int, required=True, help="ID of the owning user"
    )
    create_parser.add_argument("--name", required=True, help="Category name")
    create_parser.add_argument("--description", help="Optional description")
    create_parser.add_argument(
        "--parent-id", type=int, help="ID of the parent category (omit for a root)"
    )
    create_parser.set_defaults(func=cmd_create)

    # categories show
    show_parser = categories_subparsers.add_parser(
        "show", help="Show a category by ID"
    )
    show_parser.add_argument("category_id", type=int, help="ID of the category")
    show_parser.set_defaults(func=cmd_show)

    # categories tree
    tree_parser = categories_subparsers.add_parser(
        "tree", help="Show all categories of a user as a tree"
    )
    tree_parser.add_argument(
        "--user-id", type=int, required=True, help="ID of the owning user"
    )
    tree_parser.set_defaults(func=cmd_tree)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by ID"
    )
    delete_parser.add_argument(
        "category_id",
        type=int,
        help="ID of the category to delete",
    )
    delete_parser.add_argument(
        "--yes", action="store_true", help="Do not ask for confirmation"
    )
    delete_parser.set_defaults(func=cmd_delete)
