"""Classification of SQLite constraint violations.

The sqlite3 driver reports every constraint failure as ``IntegrityError``.
The extended result code tells a duplicate key apart from a dangling
reference, so callers can map each to their own domain error.
"""

import sqlite3
from enum import Enum


class ConstraintViolation(Enum):
    """Kind of constraint a failed statement ran into."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    OTHER = "other"


_ERROR_NAMES = {
    "SQLITE_CONSTRAINT_UNIQUE": ConstraintViolation.UNIQUE,
    "SQLITE_CONSTRAINT_PRIMARYKEY": ConstraintViolation.UNIQUE,
    "SQLITE_CONSTRAINT_FOREIGNKEY": ConstraintViolation.FOREIGN_KEY,
}

_FOREIGN_KEY_MESSAGE = "FOREIGN KEY constraint failed"


def classify(error: sqlite3.Error) -> ConstraintViolation:
    """Map a driver error to the constraint it violated.

    Args:
        error: Exception raised by the sqlite3 driver.

    Returns:
        ConstraintViolation.UNIQUE or ConstraintViolation.FOREIGN_KEY for
        known constraint failures, ConstraintViolation.OTHER for anything else.
    """
    if not isinstance(error, sqlite3.IntegrityError):
        return ConstraintViolation.OTHER

    error_name = getattr(error, "sqlite_errorname", None)
    # ON DELETE RESTRICT actions report through SQLite's internal trigger program
    if (
        error_name == "SQLITE_CONSTRAINT_TRIGGER"
        and _FOREIGN_KEY_MESSAGE in str(error)
    ):
        return ConstraintViolation.FOREIGN_KEY
    return _ERROR_NAMES.get(error_name, ConstraintViolation.OTHER)


def is_unique_violation(error: sqlite3.Error) -> bool:
    return classify(error) is ConstraintViolation.UNIQUE


def is_foreign_key_violation(error: sqlite3.Error) -> bool:
    return classify(error) is ConstraintViolation.FOREIGN_KEY
