"""
BFHL Routes - The single operation dispatch endpoint.

POST /bfhl takes a JSON object with exactly one of:
- fibonacci : non-negative integer
- prime     : array of integers
- lcm       : array of non-zero integers
- hcf       : array of integers
- AI        : question string

Validation failures are raised as ValidationError and rendered
by the handlers registered in src.api.main.
"""
import json

from fastapi import APIRouter, Request

from src.core.config import get_settings
from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger
from src.core.validators import Operation, validate_request_body
from src.models.envelope import ErrorResponse, SuccessResponse
from src.services.ai_service import get_ai_service
from src.services.operations import execute

logger = get_logger(__name__)

router = APIRouter(
    prefix="/bfhl",
    tags=["BFHL"],
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


async def _read_json(request: Request):
    """Parse the raw body, mapping malformed JSON to a 400."""
    raw = await request.body()
    if not raw.strip():
        # An absent body is treated like {}
        return {}
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        # RecursionError: valid JSON nested deeper than the decoder allows
        raise ValidationError("Request body must be valid JSON")


@router.post(
    "",
    response_model=SuccessResponse,
    summary="Run one operation",
    description="""
    Dispatch one operation based on the single key present in the body.

    **Examples:**
    - `{"fibonacci": 5}` → `[0, 1, 1, 2, 3]`
    - `{"prime": [1, 2, 3, 4]}` → `[2, 3]`
    - `{"lcm": [4, 6]}` → `12`
    - `{"hcf": [12, 18, 24]}` → `6`
    - `{"AI": "capital of india"}` → `"Delhi"`
    """
)
async def run_operation(request: Request) -> SuccessResponse:
    """Validate the body, run the operation, and wrap the result."""
    body = await _read_json(request)
    validated = validate_request_body(body)
    request.state.operation = validated.operation.value

    logger.info(f"Processing operation: {validated.operation.value}")

    if validated.operation is Operation.AI:
        data = await get_ai_service().answer(validated.value)
    else:
        data = execute(validated.operation, validated.value)

    return SuccessResponse(
        is_success=True,
        official_email=get_settings().official_email,
        data=data,
    )
