"""
ArticleHub Backend — Article Service (Business Logic)
=======================================================

What:  CRUD operations over the article collection.
How:   Each method receives the Motor collection it operates on, performs
       exactly one database operation and returns Pydantic response models.
Who:   Called by route handlers in routes/articles.py.

List flow (GET /articles):
    ┌──────────────┐    ┌──────────────────┐    ┌──────────────┐    ┌──────────┐
    │ query params │───▶│ translate_query  │───▶│ find(filter, │───▶│ Articles │
    │   (Route)    │    │ (QueryDescriptor)│    │ sort/skip/   │    │  (JSON)  │
    └──────────────┘    └──────────────────┘    │ limit)       │    └──────────┘
                                                └──────────────┘

Error Handling Strategy:
    - Malformed IDs raise ValidationError before touching the database.
    - Misses (no document, zero matched/deleted) raise NotFoundError.
    - Driver failures (PyMongoError) are logged and wrapped in DatabaseError
      so no driver detail reaches the client.
"""

import logging
from typing import List, Mapping

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError as SchemaValidationError
from pymongo.errors import PyMongoError

from articlehub.exceptions import DatabaseError, NotFoundError, ValidationError
from articlehub.schemas.article import ArticlePayload, ArticleResponse
from articlehub.services.query_translator import translate_query

logger = logging.getLogger(__name__)


def parse_object_id(article_id: str) -> ObjectId:
    """
    Convert a path parameter into an ObjectId.

    Raises:
        ValidationError: Not a 24-character hex string.
    """
    if not ObjectId.is_valid(article_id):
        raise ValidationError(
            message="Invalid ID format",
            field="id",
            context={"value": article_id},
        )
    return ObjectId(article_id)


class ArticleService:
    """
    Business logic layer for article operations.

    Stateless: the collection handle is passed to every call, so a single
    instance is shared by all requests.
    """

    async def list_articles(
        self,
        collection: AsyncIOMotorCollection,
        params: Mapping[str, str],
    ) -> List[ArticleResponse]:
        """
        List articles matching the filter/sort/pagination query parameters.

        Args:
            collection: Article collection
            params: Raw query parameters (title, desc, sort, order, page, limit)

        Returns:
            At most `limit` articles, possibly an empty list.

        Raises:
            DatabaseError: Query or cursor iteration failed
        """
        descriptor = translate_query(params)
        query_filter = descriptor.to_filter()
        options = descriptor.find_options()
        logger.debug("Listing articles filter=%s options=%s", query_filter, options)

        try:
            cursor = collection.find(query_filter, **options)
            docs = await cursor.to_list(length=descriptor.limit)
        except PyMongoError as e:
            logger.error("Database error listing articles: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error fetching articles",
                context={"error_type": type(e).__name__},
            )

        try:
            return [ArticleResponse.from_document(doc) for doc in docs]
        except SchemaValidationError as e:
            logger.error("Stored article could not be decoded: %s", str(e))
            raise DatabaseError(
                message="Error iterating articles",
                context={"error_type": type(e).__name__},
            )

    async def create_article(
        self,
        collection: AsyncIOMotorCollection,
        payload: ArticlePayload,
    ) -> ArticleResponse:
        """
        Insert a new article with a freshly generated ObjectId.

        Raises:
            DatabaseError: Insert failed
        """
        doc = {"_id": ObjectId(), **payload.to_document()}
        try:
            await collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Database error creating article: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error creating article",
                context={"error_type": type(e).__name__},
            )

        logger.info("Article created: %s", doc["_id"])
        return ArticleResponse.from_document(doc)

    async def get_article(
        self,
        collection: AsyncIOMotorCollection,
        article_id: str,
    ) -> ArticleResponse:
        """
        Retrieve a single article by ID.

        Raises:
            ValidationError: Malformed ID (→ 400)
            NotFoundError: No article with this ID (→ 404)
            DatabaseError: Query failed (→ 500)
        """
        oid = parse_object_id(article_id)
        try:
            doc = await collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error("Database error fetching article %s: %s", article_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the article. Please try again.",
                context={"article_id": article_id},
            )

        if doc is None:
            raise NotFoundError(resource="article", resource_id=article_id)
        return ArticleResponse.from_document(doc)

    async def update_article(
        self,
        collection: AsyncIOMotorCollection,
        article_id: str,
        payload: ArticlePayload,
    ) -> str:
        """
        Replace the title, description and content of an existing article.

        Returns:
            Confirmation message.

        Raises:
            ValidationError: Malformed ID
            NotFoundError: No article with this ID
            DatabaseError: Update failed
        """
        oid = parse_object_id(article_id)
        try:
            result = await collection.update_one(
                {"_id": oid}, {"$set": payload.to_document()}
            )
        except PyMongoError as e:
            logger.error("Database error updating article %s: %s", article_id, str(e))
            raise DatabaseError(
                message="Error updating article",
                context={"article_id": article_id},
            )

        if result.matched_count == 0:
            raise NotFoundError(resource="article", resource_id=article_id)

        logger.info("Article updated: %s", article_id)
        return "Article updated successfully"

    async def delete_article(
        self,
        collection: AsyncIOMotorCollection,
        article_id: str,
    ) -> str:
        """
        Remove an article permanently.

        Raises:
            ValidationError: Malformed ID
            NotFoundError: Nothing was deleted
            DatabaseError: Delete failed
        """
        oid = parse_object_id(article_id)
        try:
            result = await collection.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error("Database error deleting article %s: %s", article_id, str(e))
            raise DatabaseError(
                message="Error deleting article",
                context={"article_id": article_id},
            )

        if result.deleted_count == 0:
            raise NotFoundError(resource="article", resource_id=article_id)

        logger.info("Article deleted: %s", article_id)
        return "Article deleted successfully"


# ── Singleton Instance ────────────────────────────────────────────────────
article_service = ArticleService()
