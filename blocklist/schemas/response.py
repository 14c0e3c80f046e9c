"""Response envelopes shared by every endpoint."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SUCCESS = "success"
PARTIAL = "partial"
ERROR = "error"


class ApiResponse(BaseModel):
    """Body of batch results and of every error response."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["success", "partial", "error"] = Field(
        ..., description="Overall outcome"
    )
    message: str = Field(..., description="Human-readable message")
    status_code: int = Field(..., alias="statusCode", description="HTTP status code")
    additional_errors: list["ApiResponse"] | None = Field(
        default=None,
        alias="additionalErrors",
        description="Per-item failures, only present on partial results",
    )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class CheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_included: bool = Field(..., alias="isIncluded")
