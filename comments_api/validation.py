"""
Request-body validation that reports failures as data instead of raising.

FastAPI's automatic body parsing answers invalid input with a 422 and its
own error shape.  The comment handlers need a 400 inside the standard
envelope, so they take the raw JSON and run it through ``validate``.
"""
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ValidationResult(Generic[ModelT]):
    success: bool
    data: ModelT | None = None
    message: str | None = None


def format_validation_error(exc) -> str:
    """
    Return a one-line summary of the first error of a pydantic
    ``ValidationError`` or a FastAPI ``RequestValidationError``.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def validate(payload: Any, schema: type[ModelT]) -> ValidationResult[ModelT]:
    try:
        return ValidationResult(success=True, data=schema.model_validate(payload))
    except ValidationError as exc:
        return ValidationResult(success=False, message=format_validation_error(exc))
