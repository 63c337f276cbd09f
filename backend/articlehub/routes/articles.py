"""
ArticleHub Backend — Article Route Handlers
=============================================

What:  HTTP handlers for listing, creating, reading, replacing and deleting articles.
How:   Extracts path/query/body data, delegates to ArticleService, returns JSON.

Endpoints:
    GET    /articles        list with title/desc filters, sort/order, page/limit
    POST   /article         create (201)
    GET    /article/{id}    read
    PUT    /article/{id}    replace title/desc/content
    DELETE /article/{id}    delete

The list endpoint reads `request.query_params` directly instead of declaring
typed Query() parameters: FastAPI would answer `?page=abc` with 422, while
this API coerces malformed values to defaults.
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Request, status
from motor.motor_asyncio import AsyncIOMotorCollection

from articlehub.database import get_articles_collection
from articlehub.schemas.article import (
    ArticlePayload,
    ArticleResponse,
    ErrorResponse,
)
from articlehub.services.article_service import article_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Articles"])


@router.get(
    "/articles",
    response_model=List[ArticleResponse],
    responses={
        200: {"description": "Matching articles (possibly empty)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List articles with filtering, sorting and pagination",
    description=(
        "Query parameters (all optional): `title` and `desc` (case-insensitive "
        "substring filters), `sort` (field name), `order` (1 ascending, -1 "
        "descending; default 1), `page` (default 1), `limit` (default 10). "
        "Malformed numeric values fall back to their defaults."
    ),
)
async def list_articles(
    request: Request,
    collection: AsyncIOMotorCollection = Depends(get_articles_collection),
) -> List[ArticleResponse]:
    return await article_service.list_articles(
        collection=collection,
        params=request.query_params,
    )


@router.post(
    "/article",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Article created"},
        400: {"description": "Invalid request body", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a new article",
)
async def create_article(
    payload: ArticlePayload = Body(...),
    collection: AsyncIOMotorCollection = Depends(get_articles_collection),
) -> ArticleResponse:
    """
    Create an article. The identifier is generated server-side and returned
    in the `_id` field of the response.
    """
    return await article_service.create_article(collection=collection, payload=payload)


@router.get(
    "/article/{article_id}",
    response_model=ArticleResponse,
    responses={
        200: {"description": "The article"},
        400: {"description": "Invalid ID format", "model": ErrorResponse},
        404: {"description": "Article not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single article by ID",
)
async def get_article(
    article_id: str,
    collection: AsyncIOMotorCollection = Depends(get_articles_collection),
) -> ArticleResponse:
    return await article_service.get_article(collection=collection, article_id=article_id)


@router.put(
    "/article/{article_id}",
    response_model=str,
    responses={
        200: {"description": "Confirmation message"},
        400: {"description": "Invalid ID format or body", "model": ErrorResponse},
        404: {"description": "Article not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Replace an article",
)
async def update_article(
    article_id: str,
    payload: ArticlePayload = Body(...),
    collection: AsyncIOMotorCollection = Depends(get_articles_collection),
) -> str:
    """
    Replace title, desc and content of an article. Fields missing from the
    body are stored as empty strings.
    """
    return await article_service.update_article(
        collection=collection,
        article_id=article_id,
        payload=payload,
    )


@router.delete(
    "/article/{article_id}",
    response_model=str,
    responses={
        200: {"description": "Confirmation message"},
        400: {"description": "Invalid ID format", "model": ErrorResponse},
        404: {"description": "Article not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete an article",
)
async def delete_article(
    article_id: str,
    collection: AsyncIOMotorCollection = Depends(get_articles_collection),
) -> str:
    return await article_service.delete_article(collection=collection, article_id=article_id)
