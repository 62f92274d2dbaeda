"""Fields shared by every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Command output carrying diagnostics next to the payload.

    ``errors`` holds fatal problems and files that could not be read;
    ``warnings`` holds findings worth a look that are reported alongside them.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Fatal or per-file problems, empty when none")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal findings, empty when none")
