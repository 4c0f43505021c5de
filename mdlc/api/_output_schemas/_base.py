"""Base output schema with standard errors and warnings fields."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Base schema for all API command outputs.

    Every command reports errors and warnings; unknown keys are rejected so
    outputs cannot drift from their schema.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages, empty list if no errors")
    warnings: list[str] = Field(default_factory=list, description="Warning messages, empty list if no warnings")
