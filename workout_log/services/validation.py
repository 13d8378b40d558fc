"""One rule set for insert and update payloads, reported field by field."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from workout_log.core.exceptions import FieldError, ValidationError
from workout_log.schemas.workout import WorkoutFields

FieldsT = TypeVar("FieldsT", bound=WorkoutFields)


def validate_workout(schema: type[FieldsT], data: Mapping[str, Any] | BaseModel) -> FieldsT:
    """Parse `data` with `schema`, raising ValidationError that lists every violated field.

    Models are re-validated from their dumped values so a payload built with
    model_construct() cannot skip the rules.
    """
    raw = data.model_dump() if isinstance(data, BaseModel) else dict(data)
    try:
        return schema.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError([FieldError.from_pydantic(err) for err in exc.errors()]) from exc
