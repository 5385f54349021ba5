from __future__ import annotations

from fastapi import Request

from quiz_catalog.catalog.categories import CategoryStore
from quiz_catalog.catalog.questions import QuestionStore
from quiz_catalog.db.session import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_category_store(request: Request) -> CategoryStore:
    return request.app.state.category_store


def get_question_store(request: Request) -> QuestionStore:
    return request.app.state.question_store
