"""Generator configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GeneratorConfig(BaseModel):
    """Options controlling which operations are generated and how deep.

    The four audience flags are independent; a root field must pass the
    filter of every flag that is set.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    depth_limit: int = Field(default=100, ge=0)
    include_deprecated_fields: bool = False
    include_cross_references: bool = False
    is_admin: bool = False
    is_mobile: bool = False
    is_website: bool = False
    is_shared: bool = False
    file_extension: str = "gql"
    assume_valid: bool = False

    @field_validator("file_extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("file extension must not be empty")
        return value
