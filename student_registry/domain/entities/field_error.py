"""Value objects describing a rejected form field."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Why a field was rejected."""

    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"
    DUPLICATE_IDENTIFIER = "duplicate_identifier"


@dataclass(frozen=True)
class FieldError:
    """A single field-scoped validation failure with its user-facing message."""

    code: ErrorCode
    message: str
