"""
Utilities Package

Helper functions used across the application.
"""

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from dog_api.errors import ValidationError


def validate_input(
    schema: type[BaseModel],
    data: dict[str, Any],
    partial: bool = False,
) -> dict[str, Any]:
    """
    Validate mutation input against a Pydantic schema.

    Args:
        schema: Create or update schema
        data: Raw input fields
        partial: Return only the fields present in ``data`` (updates)

    Returns:
        Normalised fields, ready to hand to a repository

    Raises:
        ValidationError: With every failing field listed in the message
    """
    try:
        model = schema.model_validate(data)
    except PydanticValidationError as exc:
        problems = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            message = error["msg"].removeprefix("Value error, ")
            problems.append(f"{location}: {message}" if location else message)
        raise ValidationError("; ".join(problems)) from exc

    return model.model_dump(exclude_unset=partial)
