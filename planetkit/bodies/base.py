"""Shared pydantic base for validated bodies."""

from datetime import datetime
from typing import Any, Dict, List

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
)

from .rules import BuildResult, FieldViolation, Rule


def enforce_rule(
    rules: Dict[str, Rule],
    value: Any,
    handler: ValidatorFunctionWrapHandler,
    info: ValidationInfo,
) -> Any:
    """Run pydantic's own validation for a field, then its rule.

    ``None`` is checked against the rule before type validation so that a
    missing required value is reported with the rule message. A ``datetime``
    given for a rule field is reduced to its day.
    """
    rule = rules.get(info.field_name)
    if rule is None:
        return handler(value)
    if isinstance(value, datetime):
        value = value.date()
    if value is None:
        rule(None).unwrap()
    return rule(handler(value)).unwrap()


def violations_from_error(error: ValidationError) -> List[FieldViolation]:
    """Flatten a pydantic ValidationError into field violations."""
    violations = []
    for err in error.errors():
        ctx = err.get("ctx") or {}
        # Rule failures carry the original ValueError in the error context
        message = str(ctx["error"]) if "error" in ctx else err["msg"]
        violations.append(
            FieldViolation(
                field=".".join(str(part) for part in err["loc"]),
                message=message,
                value=err.get("input"),
            )
        )
    return violations


class BodyModel(BaseModel):
    """Base model whose fields are re-validated on every assignment.

    A rejected assignment raises ``ValidationError`` and keeps the previous
    value. Unknown fields are rejected.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @classmethod
    def try_build(cls, **fields) -> BuildResult:
        """Build a body without raising on invalid fields.

        Returns:
            BuildResult holding the body, or every field violation found
        """
        try:
            return BuildResult(value=cls(**fields))
        except ValidationError as e:
            return BuildResult(violations=violations_from_error(e))
