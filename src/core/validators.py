"""
Input Validators - Shape and type checks for the /bfhl request body.

The body must be a JSON object holding exactly one operation key.
Every failure raises ValidationError with a client-facing message;
a successful check returns a ValidatedRequest with a normalized value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from src.core.config import get_settings
from src.core.exceptions import ValidationError
from src.core.logging_config import get_logger

logger = get_logger(__name__)


class Operation(str, Enum):
    """The closed set of operation keys accepted by /bfhl."""
    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


VALID_KEYS = [op.value for op in Operation]


@dataclass(frozen=True)
class ValidatedRequest:
    """An operation together with its checked, normalized value."""
    operation: Operation
    value: Union[int, List[int], str]


def _as_int(value: Any) -> Optional[int]:
    """
    Return value as an int if it is an integer, else None.

    bool is rejected even though it subclasses int. Integral floats
    such as 5.0 are accepted, since JSON does not tell them apart.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_fibonacci(value: Any) -> int:
    """Check the fibonacci term count."""
    n = _as_int(value)
    if n is None or n < 0:
        raise ValidationError("fibonacci requires a non-negative integer", field="fibonacci")

    limit = get_settings().fibonacci_max
    if n > limit:
        raise ValidationError(f"fibonacci value too large (max: {limit})", field="fibonacci")

    return n


def validate_integer_list(key: str, value: Any, allow_zero: bool = True) -> List[int]:
    """
    Check a non-empty list of integers for prime, lcm or hcf.

    Args:
        key: Operation key, used in error messages
        value: Raw JSON value
        allow_zero: False for lcm, which is undefined on zero

    Returns:
        The list with every member normalized to int
    """
    if not isinstance(value, list):
        raise ValidationError(f"{key} requires an array of integers", field=key)

    if not value:
        raise ValidationError(f"{key} array cannot be empty", field=key)

    numbers = [_as_int(item) for item in value]

    if not allow_zero:
        if any(n is None or n == 0 for n in numbers):
            raise ValidationError(f"{key} array must contain only non-zero integers", field=key)
    elif any(n is None for n in numbers):
        raise ValidationError(f"{key} array must contain only integers", field=key)

    return numbers


def validate_question(value: Any) -> str:
    """Check the AI question string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("AI requires a non-empty string question", field="AI")

    limit = get_settings().ai_question_max_length
    if len(value) > limit:
        raise ValidationError(f"AI question too long (max: {limit} characters)", field="AI")

    return value


def validate_request_body(body: Any) -> ValidatedRequest:
    """
    Full validation of a parsed /bfhl request body.

    Args:
        body: Parsed JSON body

    Returns:
        ValidatedRequest for the single operation present

    Raises:
        ValidationError: If the body does not describe exactly one valid operation
    """
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    keys = list(body.keys())

    if len(keys) == 0:
        raise ValidationError("Request body cannot be empty")

    if len(keys) > 1:
        raise ValidationError("Request must contain exactly one operation key")

    key = keys[0]
    if key not in VALID_KEYS:
        logger.debug(f"Rejected unknown operation key: {key!r}")
        raise ValidationError(
            f"Invalid operation key. Must be one of: {', '.join(VALID_KEYS)}"
        )

    operation = Operation(key)
    value = body[key]

    if operation is Operation.FIBONACCI:
        checked = validate_fibonacci(value)
    elif operation is Operation.LCM:
        checked = validate_integer_list(key, value, allow_zero=False)
    elif operation in (Operation.PRIME, Operation.HCF):
        checked = validate_integer_list(key, value)
    else:
        checked = validate_question(value)

    return ValidatedRequest(operation=operation, value=checked)
