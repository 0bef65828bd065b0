"""
Result Channel

Typed outcome returned by every use case. A result carries either a value or
an Error; the error code tags the outcome so callers can branch on it:

- NOT_FOUND: the referenced entity does not exist
- VALIDATION_FAILED: one or more field rules rejected the command
- any other code: an operation-specific business error
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

NOT_FOUND = "NOT_FOUND"
VALIDATION_FAILED = "VALIDATION_FAILED"


@dataclass(frozen=True)
class FieldError:
    """A single validation failure for one command field"""

    field: str
    message: str


class Error:
    def __init__(
        self,
        code: str,
        message: str,
        field_errors: Optional[List[FieldError]] = None,
    ):
        self.code = code
        self.message = message
        self.field_errors = list(field_errors or [])

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def is_not_found(self) -> bool:
        return self.error is not None and self.error.code == NOT_FOUND

    def is_validation_failure(self) -> bool:
        return self.error is not None and self.error.code == VALIDATION_FAILED

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Result.ok({self.value!r})"
        return f"Result.err({self.error!r})"


class Return:
    """Factory for Result values"""

    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)

    @staticmethod
    def not_found(message: str) -> Result:
        return Result(error=Error(NOT_FOUND, message))

    @staticmethod
    def validation_failure(field_errors: List[FieldError]) -> Result:
        # The first failure doubles as the summary message
        message = field_errors[0].message if field_errors else "Validation failed"
        return Result(
            error=Error(VALIDATION_FAILED, message, field_errors=field_errors)
        )
