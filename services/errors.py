"""Errors raised by the data-access services.

Every error is an expected condition the caller can recover from. Two errors
of the same class carrying the same values compare equal.
"""

from typing import Optional


class ServiceError(Exception):
    """Base class for all service errors."""

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class CategoryError(ServiceError):
    """Base class for errors raised when handling categories."""


class UserError(ServiceError):
    """Base class for errors raised when handling users."""


class MissingData(CategoryError, UserError):
    """Some required data is missing."""

    def __init__(self, field: str):
        super().__init__(field)
        self.field = field

    def __str__(self):
        return f"Missing data for field: {self.field}"


class CategoryAlreadyExists(CategoryError):
    """The category with the given name and parent already exists."""

    def __init__(self, name: str, parent: Optional[str] = None):
        super().__init__(name, parent)
        self.name = name
        self.parent = parent

    def __str__(self):
        if self.parent is None:
            return f"The root category '{self.name}' already exists"
        return (
            f"The child category '{self.name}' already exists "
            f"in the parent category '{self.parent}'"
        )


class CreationFailed(CategoryError):
    """A category could not be created due to a database error."""

    def __init__(self, error: Exception):
        super().__init__(error)
        self.error = error

    def __str__(self):
        return f"Database error when creating category: {self.error}"


class DeletionFailed(CategoryError):
    """A category could not be deleted due to a database error."""

    def __init__(self, error: Exception):
        super().__init__(error)
        self.error = error

    def __str__(self):
        return f"Database error when deleting category: {self.error}"


class HasChildren(CategoryError):
    """A category could not be deleted because it has child categories."""

    def __init__(self, category_id: int):
        super().__init__(category_id)
        self.category_id = category_id

    def __str__(self):
        return (
            f"The category with ID {self.category_id} could not be deleted "
            "because it has child categories"
        )


class NotDeleted(CategoryError):
    """A category could not be deleted because it does not exist."""

    def __init__(self, category_id: int):
        super().__init__(category_id)
        self.category_id = category_id

    def __str__(self):
        return f"Could not delete category {self.category_id} because it does not exist"


class ParentCategoryHasWrongUser(CategoryError):
    """A parent category was passed that belongs to a different user."""

    def __init__(self, expected_user_id: int, actual_user_id: int):
        super().__init__(expected_user_id, actual_user_id)
        self.expected_user_id = expected_user_id
        self.actual_user_id = actual_user_id

    def __str__(self):
        return (
            f"Expected parent category for user {self.expected_user_id} "
            f"instead of user {self.actual_user_id}"
        )


class UserAlreadyExists(UserError):
    """A user with the given email address is already registered."""

    def __init__(self, email: str):
        super().__init__(email)
        self.email = email

    def __str__(self):
        return f"A user with email '{self.email}' already exists"


class UserCreationFailed(UserError):
    """A user could not be created due to a database error."""

    def __init__(self, error: Exception):
        super().__init__(error)
        self.error = error

    def __str__(self):
        return f"Database error when creating user: {self.error}"
