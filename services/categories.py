"""Category store and service.

The module-level functions work on a connection owned by the caller. Each one
runs a single statement and never commits, so they can take part in a larger
transaction. CategoryService wraps them for callers that just want a
connection opened and committed for them.
"""

import sqlite3
from typing import List, Optional

from db.errors import is_foreign_key_violation, is_unique_violation
from models.category import Category
from models.user import User
from services.errors import (
    CategoryAlreadyExists,
    CategoryError,
    CreationFailed,
    DeletionFailed,
    HasChildren,
    MissingData,
    NotDeleted,
    ParentCategoryHasWrongUser,
)

COLUMNS = "id, name, description, user_id, parent_id"


def _row_to_category(row) -> Category:
    return Category(
        id=row[0], name=row[1], description=row[2], user_id=row[3], parent_id=row[4]
    )


def create(
    conn: sqlite3.Connection,
    user: User,
    name: str,
    description: Optional[str] = None,
    parent: Optional[Category] = None,
) -> Category:
    """Create a category owned by the given user.

    Args:
        conn: Open database connection. The caller commits.
        user: Owner of the new category.
        name: Category name. Leading and trailing whitespace is removed.
        description: Optional description of the category.
        parent: Optional parent category, which must belong to the same user.

    Returns:
        The created Category with id populated.

    Raises:
        MissingData: If the name is empty or only whitespace.
        ParentCategoryHasWrongUser: If the parent belongs to another user.
        CategoryAlreadyExists: If the user already has a category with this
            name under the same parent.
        CreationFailed: If the insert fails for any other reason.
    """
    # str.strip() removes every Unicode whitespace character, not just ASCII
    name = name.strip()
    if not name:
        raise MissingData("category name")

    if parent is not None and parent.user_id != user.id:
        raise ParentCategoryHasWrongUser(user.id, parent.user_id)

    parent_id = parent.id if parent is not None else None

    try:
        cursor = conn.execute(
            "INSERT INTO categories (name, description, user_id, parent_id) "
            "VALUES (?, ?, ?, ?)",
            (name, description, user.id, parent_id),
        )
    except sqlite3.Error as e:
        if is_unique_violation(e):
            raise CategoryAlreadyExists(
                name, parent.name if parent is not None else None
            ) from e
        raise CreationFailed(e) from e

    return Category(
        id=cursor.lastrowid,
        name=name,
        description=description,
        user_id=user.id,
        parent_id=parent_id,
    )


def read(conn: sqlite3.Connection, category_id: int) -> Optional[Category]:
    """Retrieve the category with the given ID.

    Lookup errors are reported the same way as a missing category.

    Returns:
        Category object if found, None otherwise.
    """
    try:
        row = conn.execute(
            f"SELECT {COLUMNS} FROM categories WHERE id = ?", (category_id,)
        ).fetchone()
    except sqlite3.Error:
        return None

    if row:
        return _row_to_category(row)
    return None


def delete(conn: sqlite3.Connection, category_id: int) -> None:
    """Delete the category with the given ID.

    Raises:
        HasChildren: If other categories use this one as their parent.
        DeletionFailed: If the delete fails for any other reason.
        NotDeleted: If no category with this ID exists.
    """
    try:
        cursor = conn.execute("DELETE FROM categories WHERE id = ?", (category_id,))
    except sqlite3.Error as e:
        if is_foreign_key_violation(e):
            raise HasChildren(category_id) from e
        raise DeletionFailed(e) from e

    if cursor.rowcount == 0:
        raise NotDeleted(category_id)


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find(self, category_id: int) -> Optional[Category]:
        """Get a single category by ID.

        Args:
            category_id: The category ID to find.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            return read(conn, category_id)

    def find_by_user(self, user_id: int) -> List[Category]:
        """Get all categories owned by a user.

        Args:
            user_id: ID of the owning user.

        Returns:
            List of Category objects, root categories first, then ordered by
            parent ID and name.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {COLUMNS} FROM categories WHERE user_id = ? "
                "ORDER BY parent_id IS NOT NULL, parent_id, name",
                (user_id,),
            )
            return [_row_to_category(row) for row in cursor.fetchall()]

    def create(
        self,
        user: User,
        name: str,
        description: Optional[str] = None,
        parent: Optional[Category] = None,
    ) -> Category:
        """Create a new category and commit it.

        See create() for the arguments and the errors raised.
        """
        with self.db_manager.connect() as conn:
            try:
                category = create(conn, user, name, description, parent)
            except CategoryError:
                conn.rollback()
                raise
            conn.commit()
            return category

    def delete(self, category_id: int) -> None:
        """Delete a category by ID and commit.

        See delete() for the errors raised.
        """
        with self.db_manager.connect() as conn:
            try:
                delete(conn, category_id)
            except CategoryError:
                conn.rollback()
                raise
            conn.commit()
