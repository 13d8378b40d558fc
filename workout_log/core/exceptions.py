"""Error taxonomy of the workout log core."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any


class WorkoutLogError(Exception):
    """Base for all errors raised by the core."""


@dataclass(frozen=True)
class FieldError:
    """One violated field constraint. `code` is stable and machine readable."""

    field: str
    code: str
    message: str

    @classmethod
    def from_pydantic(cls, error: dict[str, Any]) -> "FieldError":
        loc = error.get("loc") or ("__root__",)
        return cls(
            field=".".join(str(part) for part in loc),
            code=error.get("type", "value_error"),
            message=error.get("msg", "Invalid value"),
        )


class ValidationError(WorkoutLogError):
    """One or more field constraints were violated. Nothing was written."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(summary or "Invalid workout")

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


class NotFoundError(WorkoutLogError):
    """The referenced workout entry does not exist."""

    def __init__(self, entry_id: uuid.UUID | str):
        self.entry_id = entry_id
        super().__init__(f"Workout {entry_id} not found")


class StoreError(WorkoutLogError):
    """The persistence layer failed. Raised from the underlying driver error."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Workout store failed during {operation}")
