"""User model for category owners."""

from dataclasses import dataclass


@dataclass
class User:
    """Represents a registered user.

    Users are created by the authentication layer. Categories only read the id.

    Attributes:
        id: Unique identifier (auto-generated).
        email: Email address, unique across users.
        password_hash: Hash produced by the authentication layer, never plain text.
    """

    id: int
    email: str
    password_hash: str

    def to_dict(self) -> dict:
        """Convert user to dictionary, leaving out the password hash."""
        return {
            "id": self.id,
            "email": self.email,
        }
