"""
Base model for Semantic Canvas.
"""

from pydantic import BaseModel as PydanticBaseModel, ConfigDict


class BaseModel(PydanticBaseModel):
    """
    Base model for all Semantic Canvas data structures.

    Provides common configuration and utilities.
    """

    model_config = ConfigDict(
        # Allow field population by name or alias
        populate_by_name=True,
        # Validate assignments after object creation
        validate_assignment=True,
        # Use enum values instead of enum names
        use_enum_values=True,
        # Reject unknown fields unless a model opts in
        extra="forbid",
    )
