"""Common Pydantic models shared across cloud agent domains."""

from pydantic import BaseModel, Field


class CloudErrorInfo(BaseModel):
    """Error reported against a cloud client or one of its images."""

    type: str = Field(..., description="Machine-readable error type")
    message: str = Field(..., description="Human-readable message")
    details: str | None = Field(None, description="Additional diagnostic details")


class AgentDescription(BaseModel):
    """Build agent as reported to the host on connection."""

    name: str | None = Field(None, description="Agent name")
    configuration_parameters: dict[str, str] = Field(
        default_factory=dict, description="Agent configuration parameters"
    )
