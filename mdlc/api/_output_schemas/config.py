"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - section: str - the section name, empty string when listing all sections
    - content: dict[str, Any] - the section config dict, or the whole config when no section was given
    - config_path: str - path to the configuration file (may not exist when defaults are in use)
    """

    section: str = Field(..., description="Section name, empty string if none provided")
    content: dict[str, Any] = Field(..., description="Section config dict or the whole config")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


# Register schemas
register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
