"""
Response envelopes for the BFHL API.

Every endpoint answers with one of these shapes:
- SuccessResponse  : operation result under "data"
- ErrorResponse    : validation or internal failure under "error"
- HealthResponse   : liveness probe
- NotFoundResponse : unknown route (no official_email)
"""
from typing import List, Union

from pydantic import BaseModel, Field


OperationResult = Union[List[int], int, str]


class SuccessResponse(BaseModel):
    """Response model for a successful /bfhl operation."""
    is_success: bool = True
    official_email: str
    data: OperationResult = Field(
        ...,
        description="List for fibonacci/prime, integer for lcm/hcf, word for AI",
        examples=[[0, 1, 1, 2, 3], 12, "Delhi"],
    )


class ErrorResponse(BaseModel):
    """Standard error response model."""
    is_success: bool = False
    official_email: str
    error: str = Field(..., examples=["Request body cannot be empty"])


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    is_success: bool = True
    official_email: str


class NotFoundResponse(BaseModel):
    """Response model for any route that does not exist."""
    is_success: bool = False
    error: str = "Endpoint not found"
