from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Response(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CategoryResponse(_Response):
    id: int
    title: str
    slug: str


class CategoryListResponse(_Response):
    categories: list[CategoryResponse]
    total: int
    page: int
    limit: int


class OptionResponse(_Response):
    id: int
    text: str
    is_correct: bool
    question_id: int


class QuestionResponse(_Response):
    id: int
    text: str
    category_id: int
    options: list[OptionResponse]


class QuestionListResponse(_Response):
    questions: list[QuestionResponse]
    total: int
    page: int
    limit: int
