"""
Category Pydantic Schemas

Validation rules for category mutations. The GraphQL input types only
describe shape; these schemas enforce lengths and non-blank names.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class CategoryBase(BaseModel):
    """Base schema with shared category fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Category name",
        examples=["Herding", "Toy", "Working"],
    )

    description: Optional[str] = Field(
        default=None,
        max_length=1000,
        description="Description of the category",
        examples=["Dogs bred to gather and move livestock"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize category name."""
        if not v.strip():
            raise ValueError("Category name cannot be empty or whitespace")
        return v.strip()


class CategoryCreate(CategoryBase):
    """Schema for creating a new category."""
    pass


class CategoryUpdate(BaseModel):
    """
    Schema for updating an existing category. All fields optional.

    Dump with ``exclude_unset=True`` to get only the fields the client sent.
    """

    name: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=100,
        description="Category name",
    )

    description: Optional[str] = Field(
        default=None,
        max_length=1000,
        description="Description of the category",
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: Optional[str]) -> Optional[str]:
        """Validate name if provided."""
        if v is not None and not v.strip():
            raise ValueError("Category name cannot be empty or whitespace")
        return v.strip() if v else v

    @model_validator(mode="after")
    def check_update(self) -> "CategoryUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name cannot be null")
        return self
