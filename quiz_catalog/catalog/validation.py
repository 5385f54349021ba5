from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from quiz_catalog.catalog.errors import CatalogValidationError, FieldError

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 1024
QUESTION_TEXT_MIN_LENGTH = 3
OPTION_TEXT_MIN_LENGTH = 1
# ids are INTEGER primary keys
ROW_ID_MAX = 2**31 - 1

CategoryTitle = Annotated[
    StrictStr,
    StringConstraints(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH),
]
QuestionText = Annotated[StrictStr, StringConstraints(min_length=QUESTION_TEXT_MIN_LENGTH)]
OptionText = Annotated[StrictStr, StringConstraints(min_length=OPTION_TEXT_MIN_LENGTH)]
RowId = Annotated[StrictInt, Field(ge=1, le=ROW_ID_MAX)]


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class CategoryToCreate(_Payload):
    title: CategoryTitle


class OptionToCreate(_Payload):
    text: OptionText
    is_correct: StrictBool


class OptionToUpdate(OptionToCreate):
    # Accepted for clients echoing stored options back; options are always recreated.
    id: StrictInt | None = None


class QuestionToCreate(_Payload):
    text: QuestionText
    category_id: RowId
    options: list[OptionToCreate]


class QuestionToUpdate(_Payload):
    text: QuestionText | None = None
    category_id: RowId | None = None
    options: list[OptionToUpdate] | None = None


PayloadT = TypeVar("PayloadT", bound=_Payload)


def _field_name(loc: Sequence[int | str]) -> str:
    return ".".join(str(part) for part in loc) or "payload"


def _as_field_errors(exc: ValidationError) -> list[FieldError]:
    return [
        FieldError(field=_field_name(error["loc"]), message=error["msg"])
        for error in exc.errors()
    ]


def _validate(model: type[PayloadT], data: object) -> PayloadT:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise CatalogValidationError(_as_field_errors(exc)) from exc


def validate_category(data: object) -> CategoryToCreate:
    return _validate(CategoryToCreate, data)


def validate_category_title(title: object) -> str:
    return validate_category({"title": title}).title


def validate_question_to_create(data: object) -> QuestionToCreate:
    return _validate(QuestionToCreate, data)


def validate_question_to_update(data: object) -> QuestionToUpdate:
    return _validate(QuestionToUpdate, data)


def is_row_id(value: int) -> bool:
    """True when the value can name a stored row; anything else cannot match one."""
    return 1 <= value <= ROW_ID_MAX


def ensure_correct_option(options: Sequence[OptionToCreate]) -> None:
    """Rejects option sets where no option is marked correct."""
    if not any(option.is_correct for option in options):
        raise CatalogValidationError.for_field(
            "options",
            "at least one option must be marked correct",
        )
