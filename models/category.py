"""Category model for hierarchical budget categories."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """Represents a user-defined spending category.

    Categories form a forest per user: a category without a parent is a root
    category, every other category points at a parent owned by the same user.

    Attributes:
        id: Unique identifier (auto-generated).
        name: Category name, unique among siblings of the same user.
        description: Optional description of what belongs in this category.
        user_id: ID of the owning user.
        parent_id: Optional parent category ID. None for root categories.
    """

    id: int
    name: str
    description: Optional[str]
    user_id: int
    parent_id: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    def to_dict(self) -> dict:
        """Convert category to a plain dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "user_id": self.user_id,
            "parent_id": self.parent_id,
        }
