"""User store and service.

Only what categories need: a user row to own them. Password hashing and
login belong to the authentication layer, which hands over a ready hash.
"""

import sqlite3
from typing import Optional

from db.errors import is_unique_violation
from models.user import User
from services.errors import MissingData, UserAlreadyExists, UserCreationFailed, UserError


def create(conn: sqlite3.Connection, email: str, password_hash: str) -> User:
    """Insert a user. The caller commits.

    Raises:
        MissingData: If the email is blank.
        UserAlreadyExists: If the email is already registered.
        UserCreationFailed: If the insert fails for any other reason.
    """
    email = email.strip()
    if not email:
        raise MissingData("email")

    try:
        cursor = conn.execute(
            "INSERT INTO users (email, password_hash) VALUES (?, ?)",
            (email, password_hash),
        )
    except sqlite3.Error as e:
        if is_unique_violation(e):
            raise UserAlreadyExists(email) from e
        raise UserCreationFailed(e) from e

    return User(id=cursor.lastrowid, email=email, password_hash=password_hash)


def read(conn: sqlite3.Connection, user_id: int) -> Optional[User]:
    row = conn.execute(
        "SELECT id, email, password_hash FROM users WHERE id = ?", (user_id,)
    ).fetchone()
    if row:
        return User(id=row[0], email=row[1], password_hash=row[2])
    return None


class UserService:
    """Service for managing users."""

    def __init__(self, db_manager):
        """Initialize the user service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find(self, user_id: int) -> Optional[User]:
        """Get a single user by ID.

        Args:
            user_id: The user ID to find.

        Returns:
            User object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            return read(conn, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """Get a single user by email address.

        Args:
            email: The email address to find. Matching is case-sensitive.

        Returns:
            User object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            row = conn.execute(
                "SELECT id, email, password_hash FROM users WHERE email = ?",
                (email,),
            ).fetchone()

            if row:
                return User(id=row[0], email=row[1], password_hash=row[2])
            return None

    def create(self, email: str, password_hash: str) -> User:
        """Create a new user and commit it.

        Args:
            email: Email address, unique across users.
            password_hash: Password hash computed by the authentication layer.

        Returns:
            The created User object with id populated.
        """
        with self.db_manager.connect() as conn:
            try:
                user = create(conn, email, password_hash)
            except UserError:
                conn.rollback()
                raise
            conn.commit()
            return user
