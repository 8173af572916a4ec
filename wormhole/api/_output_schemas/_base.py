"""Fields every command output carries."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Common shape of a command's output document.

    Unknown keys are rejected so a misspelt field in a command shows up as a
    validation failure instead of silently reaching the user.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Problems that stopped or degraded the command")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems worth reporting")
