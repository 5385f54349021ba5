from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response, status

from quiz_catalog.api.dependencies import get_question_store
from quiz_catalog.catalog.errors import CatalogError
from quiz_catalog.catalog.questions import QuestionStore
from quiz_catalog.core.pagination import parse_page_value

from .catalog_helpers import as_http_error, not_found, read_json_body
from .catalog_models import QuestionListResponse, QuestionResponse

router = APIRouter(tags=["questions"])


@router.get("/questions", response_model=QuestionListResponse)
async def list_questions(
    limit: str | None = Query(default=None),
    page: str | None = Query(default=None),
    store: QuestionStore = Depends(get_question_store),
) -> QuestionListResponse:
    try:
        result = await store.list_questions(parse_page_value(limit), parse_page_value(page))
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    return QuestionListResponse.model_validate(result)


@router.get("/questions/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: int,
    store: QuestionStore = Depends(get_question_store),
) -> QuestionResponse:
    try:
        question = await store.get_question_by_id(question_id)
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    if question is None:
        raise not_found()
    return QuestionResponse.model_validate(question)


@router.post(
    "/questions",
    response_model=QuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    request: Request,
    store: QuestionStore = Depends(get_question_store),
) -> QuestionResponse:
    body = await read_json_body(request)
    try:
        question = await store.create_question(body)
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    return QuestionResponse.model_validate(question)


@router.patch("/questions/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: int,
    request: Request,
    store: QuestionStore = Depends(get_question_store),
) -> QuestionResponse:
    body = await read_json_body(request)
    try:
        question = await store.update_question(question_id, body)
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    if question is None:
        raise not_found()
    return QuestionResponse.model_validate(question)


@router.delete("/questions/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: int,
    store: QuestionStore = Depends(get_question_store),
) -> Response:
    try:
        deleted = await store.delete_question(question_id)
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    if not deleted:
        raise not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
