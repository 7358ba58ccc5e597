"""
Breed Pydantic Schemas

Validation rules for breed mutations:
- name: 2-100 characters
- description, history, health: at least 10 characters
- origin: at least 2 characters
- measurements: positive numbers
- ratings: integers from 1 to 5
- category_id: a UUID
"""

import uuid
from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

Rating = Annotated[int, Field(ge=1, le=5, description="Rating from 1 to 5")]
Measurement = Annotated[float, Field(gt=0)]

# Columns that may be cleared with an explicit null on update
NULLABLE_FIELDS = {"common_names", "fun_fact"}


def _check_uuid(v: str) -> str:
    try:
        uuid.UUID(v)
    except (TypeError, ValueError):
        raise ValueError("category_id must be a valid UUID")
    return v


class BreedCreate(BaseModel):
    """Schema for creating a new breed."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Border Collie"])
    common_names: list[str] = Field(default_factory=list)
    description: str = Field(..., min_length=10)
    history: str = Field(..., min_length=10)
    fun_fact: Optional[str] = None
    health: str = Field(..., min_length=10)
    origin: str = Field(..., min_length=2)
    colors: list[str] = Field(default_factory=list)

    average_height: Measurement
    average_weight: Measurement
    average_life_expectancy: Measurement

    exercise_required: Rating
    ease_of_training: Rating
    affection: Rating
    playfulness: Rating
    good_with_children: Rating
    good_with_dogs: Rating
    grooming_required: Rating

    category_id: str

    @field_validator("common_names", "colors", mode="before")
    @classmethod
    def default_empty_list(cls, v):
        """A missing or null list is stored as an empty list."""
        return [] if v is None else v

    @field_validator("category_id")
    @classmethod
    def category_id_must_be_uuid(cls, v: str) -> str:
        return _check_uuid(v)


class BreedUpdate(BaseModel):
    """
    Schema for updating an existing breed. All fields optional.

    Dump with ``exclude_unset=True`` to get only the fields the client sent.
    Sending null is allowed only for common_names and fun_fact.
    """

    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    common_names: Optional[list[str]] = None
    description: Optional[str] = Field(default=None, min_length=10)
    history: Optional[str] = Field(default=None, min_length=10)
    fun_fact: Optional[str] = None
    health: Optional[str] = Field(default=None, min_length=10)
    origin: Optional[str] = Field(default=None, min_length=2)
    colors: Optional[list[str]] = None

    average_height: Optional[Measurement] = None
    average_weight: Optional[Measurement] = None
    average_life_expectancy: Optional[Measurement] = None

    exercise_required: Optional[Rating] = None
    ease_of_training: Optional[Rating] = None
    affection: Optional[Rating] = None
    playfulness: Optional[Rating] = None
    good_with_children: Optional[Rating] = None
    good_with_dogs: Optional[Rating] = None
    grooming_required: Optional[Rating] = None

    category_id: Optional[str] = None

    @field_validator("category_id")
    @classmethod
    def category_id_must_be_uuid(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _check_uuid(v)

    @model_validator(mode="after")
    def check_update(self) -> "BreedUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        for field in sorted(self.model_fields_set - NULLABLE_FIELDS):
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self
