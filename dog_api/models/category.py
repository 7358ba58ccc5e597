"""
Category Model

Represents a breed group (e.g. "Herding", "Toy") in the database.
Every breed belongs to exactly one category.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dog_api.database import Base

if TYPE_CHECKING:
    from dog_api.models.breed import Breed


class Category(Base):
    """
    Category model representing breed groups.

    Table: categories

    Relationships:
    - breeds: One-to-Many, inverse of Breed.category_id

    Example:
        category = Category(
            name="Herding",
            description="Dogs bred to gather and move livestock.",
        )
    """

    __tablename__ = "categories"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False,
        comment="Category name (e.g., 'Herding', 'Toy')"
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Description of the breeds in this category"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # passive_deletes="all": the ORM never nullifies or deletes child breeds,
    # so deleting a category that still owns breeds fails on the foreign key.
    breeds: Mapped[List["Breed"]] = relationship(
        "Breed",
        back_populates="category",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name='{self.name}')"
