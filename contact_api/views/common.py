"""Common request types and response envelopes."""

from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel


def _check_email(value: str) -> str:
    """Accept a bare address only; display-name forms like ``Eve <eve@x.com>`` fail."""

    try:
        result = validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return result.normalized


EmailAddress = Annotated[str, AfterValidator(_check_email)]


class SuccessResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None
