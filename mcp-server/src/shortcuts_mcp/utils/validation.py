"""Tool argument validation using Pydantic."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from shortcuts_mcp.types.models import RunOptions

ArgumentsT = TypeVar("ArgumentsT", bound=BaseModel)


class ToolArgumentError(ValueError):
    """A tool was called with missing or malformed arguments."""


class ValidationError(BaseModel):
    """Validation error details."""

    field: str
    message: str
    code: str


class SearchArguments(BaseModel):
    query: str = Field(min_length=1)


class RunArguments(BaseModel):
    name: str = Field(min_length=1)
    input: str | None = None
    input_file: str | None = None
    output_type: str | None = None

    def to_options(self) -> RunOptions:
        return RunOptions(
            input=self.input,
            input_file=self.input_file,
            output_type=self.output_type,
        )


class ExistsArguments(BaseModel):
    name: str = Field(min_length=1)


def parse_arguments(model: type[ArgumentsT], arguments: dict[str, Any] | None) -> ArgumentsT:
    """Parse tool arguments, raising ToolArgumentError on the first problem."""
    try:
        return model.model_validate(arguments or {})
    except PydanticValidationError as e:
        first = _to_validation_error(e.errors()[0])
        raise ToolArgumentError(first.message) from e


def _to_validation_error(err: Any) -> ValidationError:
    field = ".".join(str(part) for part in err["loc"]) or "arguments"

    if err["type"] == "missing" or err.get("input") in (None, ""):
        return ValidationError(
            field=field,
            message=f"{field} is required",
            code="MISSING_ARGUMENT",
        )

    if err["type"] == "string_type":
        return ValidationError(
            field=field,
            message=f"{field} must be a string",
            code="INVALID_TYPE",
        )

    return ValidationError(field=field, message=f"{field}: {err['msg']}", code="INVALID_ARGUMENT")
