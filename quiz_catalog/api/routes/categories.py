from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, status

from quiz_catalog.api.dependencies import get_category_store, get_question_store
from quiz_catalog.catalog.categories import CategoryStore
from quiz_catalog.catalog.errors import CatalogError
from quiz_catalog.catalog.questions import QuestionStore
from quiz_catalog.catalog.validation import validate_category
from quiz_catalog.core.pagination import parse_page_value

from .catalog_helpers import as_http_error, not_found, read_json_body
from .catalog_models import CategoryListResponse, CategoryResponse, QuestionListResponse

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(
    limit: str | None = Query(default=None),
    page: str | None = Query(default=None),
    store: CategoryStore = Depends(get_category_store),
) -> CategoryListResponse:
    try:
        result = await store.list_categories(parse_page_value(limit), parse_page_value(page))
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    return CategoryListResponse.model_validate(result)


@router.get("/categories/{slug}", response_model=CategoryResponse)
async def get_category(
    slug: str,
    store: CategoryStore = Depends(get_category_store),
) -> CategoryResponse:
    try:
        category = await store.get_category(slug)
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    if category is None:
        raise not_found()
    return CategoryResponse.model_validate(category)


@router.post(
    "/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    request: Request,
    store: CategoryStore = Depends(get_category_store),
) -> CategoryResponse:
    body = await read_json_body(request)
    try:
        payload = validate_category(body)
        category = await store.create_category(payload.title)
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    return CategoryResponse.model_validate(category)


@router.patch("/categories/{slug}", response_model=CategoryResponse)
async def update_category(
    slug: str,
    request: Request,
    store: CategoryStore = Depends(get_category_store),
) -> CategoryResponse:
    body = await read_json_body(request)
    try:
        payload = validate_category(body)
        category = await store.update_category(slug, payload.title)
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    if category is None:
        raise not_found()
    return CategoryResponse.model_validate(category)


@router.delete("/categories/{slug}", response_model=CategoryResponse)
async def delete_category(
    slug: str,
    store: CategoryStore = Depends(get_category_store),
) -> CategoryResponse:
    try:
        category = await store.delete_category(slug)
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    if category is None:
        raise not_found()
    return CategoryResponse.model_validate(category)


@router.get("/categories/{slug}/questions", response_model=QuestionListResponse)
async def list_category_questions(
    slug: str,
    limit: str | None = Query(default=None),
    page: str | None = Query(default=None),
    category_store: CategoryStore = Depends(get_category_store),
    question_store: QuestionStore = Depends(get_question_store),
) -> QuestionListResponse:
    try:
        category = await category_store.get_category(slug)
        if category is None:
            raise not_found()
        result = await question_store.list_questions_by_category(
            category.id,
            parse_page_value(limit),
            parse_page_value(page),
        )
    except CatalogError as exc:
        raise as_http_error(exc) from exc
    return QuestionListResponse.model_validate(result)
