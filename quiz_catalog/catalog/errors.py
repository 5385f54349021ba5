from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str


class CatalogError(Exception):
    pass


class CatalogValidationError(CatalogError):
    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors) or "payload"
        super().__init__(f"invalid data: {fields}")

    @classmethod
    def for_field(cls, field: str, message: str) -> CatalogValidationError:
        return cls([FieldError(field=field, message=message)])


class ConflictError(CatalogError):
    pass


class StorageError(CatalogError):
    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(message)
