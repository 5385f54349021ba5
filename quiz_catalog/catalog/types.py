from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CategoryView:
    id: int
    title: str
    slug: str


@dataclass(frozen=True, slots=True)
class OptionView:
    id: int
    text: str
    is_correct: bool
    question_id: int


@dataclass(frozen=True, slots=True)
class QuestionView:
    id: int
    text: str
    category_id: int
    options: tuple[OptionView, ...]


@dataclass(frozen=True, slots=True)
class CategoryPage:
    categories: tuple[CategoryView, ...]
    total: int
    page: int
    limit: int


@dataclass(frozen=True, slots=True)
class QuestionPage:
    questions: tuple[QuestionView, ...]
    total: int
    page: int
    limit: int
