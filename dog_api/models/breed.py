"""
Breed Model

The central model of the Dog Breeds API.

Besides descriptive text, each breed carries three average measurements
(height in cm, weight in kg, life expectancy in years) and seven 1-5
ratings used for filtering and sorting.

colors and common_names are ordered lists of strings. They are stored
as JSON so the same model works on PostgreSQL and on the SQLite
database used by the tests.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dog_api.database import Base

if TYPE_CHECKING:
    from dog_api.models.category import Category


class Breed(Base):
    """
    Breed model representing dog breeds.

    Table: breeds

    Relationships:
    - category: Many-to-One through category_id

    Indexes:
    - name: Unique index, breeds are upserted by name when seeding
    - category_id: Index for the breeds-by-category loader
    """

    __tablename__ = "breeds"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    # -------------------------------------------------------------------------
    # Descriptive Fields
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False,
        comment="Breed name"
    )

    common_names: Mapped[list[str] | None] = mapped_column(
        JSON,
        nullable=True,
        comment="Other names the breed is known by"
    )

    description: Mapped[str] = mapped_column(Text, nullable=False)
    history: Mapped[str] = mapped_column(Text, nullable=False)
    fun_fact: Mapped[str | None] = mapped_column(Text, nullable=True)
    health: Mapped[str] = mapped_column(Text, nullable=False)
    origin: Mapped[str] = mapped_column(String(200), nullable=False)

    colors: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Recognised coat colors"
    )

    # -------------------------------------------------------------------------
    # Measurements
    # -------------------------------------------------------------------------
    average_height: Mapped[float] = mapped_column(
        Float, nullable=False, comment="Average height in cm"
    )
    average_weight: Mapped[float] = mapped_column(
        Float, nullable=False, comment="Average weight in kg"
    )
    average_life_expectancy: Mapped[float] = mapped_column(
        Float, nullable=False, comment="Average life expectancy in years"
    )

    # -------------------------------------------------------------------------
    # Ratings (1-5)
    # -------------------------------------------------------------------------
    exercise_required: Mapped[int] = mapped_column(Integer, nullable=False)
    ease_of_training: Mapped[int] = mapped_column(Integer, nullable=False)
    affection: Mapped[int] = mapped_column(Integer, nullable=False)
    playfulness: Mapped[int] = mapped_column(Integer, nullable=False)
    good_with_children: Mapped[int] = mapped_column(Integer, nullable=False)
    good_with_dogs: Mapped[int] = mapped_column(Integer, nullable=False)
    grooming_required: Mapped[int] = mapped_column(Integer, nullable=False)

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    category_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
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
    category: Mapped["Category"] = relationship(
        "Category",
        back_populates="breeds",
    )

    def __repr__(self) -> str:
        return f"Breed(id={self.id}, name='{self.name}', category_id={self.category_id})"
