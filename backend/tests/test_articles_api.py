"""
ArticleHub Backend — HTTP Endpoint Tests
==========================================

What:  End-to-end request/response tests for every route.
How:   HTTPX AsyncClient over ASGITransport; the collection dependency is
       replaced by `mock_collection` (see conftest.py).

What we test:
    ✅ / welcome text for any method
    ✅ GET /articles coerces malformed params instead of returning 422
    ✅ POST /article returns 201 with `_id`; bad bodies return 400
    ✅ GET/PUT/DELETE /article/{id} status codes (200, 400, 404, 500)
    ✅ Error body shape and X-Request-ID propagation
    ✅ GET /health without a database client reports unhealthy
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from pymongo.errors import PyMongoError


class TestHome:

    @pytest.mark.asyncio
    async def test_home_page(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.text == "Welcome to the HomePage!\n"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
    async def test_home_page_answers_any_method(self, test_client, method):
        response = await test_client.request(method, "/")
        assert response.status_code == 200
        assert response.text == "Welcome to the HomePage!\n"


class TestListArticles:

    @pytest.mark.asyncio
    async def test_list_returns_articles(self, test_client, mock_collection, sample_article_doc):
        mock_collection.find.return_value.to_list.return_value = [sample_article_doc]

        response = await test_client.get("/articles")

        assert response.status_code == 200
        assert response.json() == [
            {
                "_id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "title": "Building APIs in Go",
                "desc": "REST API walkthrough",
                "content": "Routers, handlers and a document store.",
            }
        ]

    @pytest.mark.asyncio
    async def test_list_empty_is_array(self, test_client):
        response = await test_client.get("/articles")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_malformed_params_are_coerced(self, test_client, mock_collection):
        response = await test_client.get(
            "/articles", params={"page": "abc", "limit": "-3", "order": "sideways"}
        )

        assert response.status_code == 200
        mock_collection.find.assert_called_once_with({}, skip=0, limit=10)

    @pytest.mark.asyncio
    async def test_filters_sort_and_pagination(self, test_client, mock_collection):
        response = await test_client.get(
            "/articles",
            params={"title": "Go", "desc": "API", "sort": "title", "order": "-1",
                    "page": "2", "limit": "5"},
        )

        assert response.status_code == 200
        mock_collection.find.assert_called_once_with(
            {
                "title": {"$regex": "Go", "$options": "i"},
                "desc": {"$regex": "API", "$options": "i"},
            },
            skip=5,
            limit=5,
            sort=[("title", -1)],
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "page, limit",
        [(str(2**62), "10"), ("3", str(2**63 - 1))],
    )
    async def test_oversized_skip_falls_back_to_first_page(
        self, test_client, mock_collection, page, limit
    ):
        response = await test_client.get("/articles", params={"page": page, "limit": limit})

        assert response.status_code == 200
        mock_collection.find.assert_called_once_with({}, skip=0, limit=int(limit))

    @pytest.mark.asyncio
    async def test_database_failure_returns_500(self, test_client, mock_collection):
        mock_collection.find.return_value.to_list = AsyncMock(side_effect=PyMongoError("down"))

        response = await test_client.get("/articles")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert body["message"] == "Error fetching articles"
        assert "down" not in response.text

    @pytest.mark.asyncio
    async def test_undecodable_document_returns_500(self, test_client, mock_collection):
        mock_collection.find.return_value.to_list.return_value = [{"_id": ObjectId(), "title": 42}]

        response = await test_client.get("/articles")

        assert response.status_code == 500
        assert response.json()["message"] == "Error iterating articles"


class TestCreateArticle:

    @pytest.mark.asyncio
    async def test_create(self, test_client, mock_collection):
        response = await test_client.post(
            "/article", json={"title": "Hello", "desc": "d", "content": "c"}
        )

        assert response.status_code == 201
        body = response.json()
        assert ObjectId.is_valid(body["_id"])
        assert body["title"] == "Hello"
        mock_collection.insert_one.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_accepts_capitalised_title_and_ignores_id(self, test_client, mock_collection):
        client_id = "000000000000000000000000"
        response = await test_client.post(
            "/article", json={"_id": client_id, "Title": "Caps", "content": "c"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Caps"
        assert body["desc"] == ""
        assert body["_id"] != client_id

    @pytest.mark.asyncio
    async def test_create_invalid_json(self, test_client, mock_collection):
        response = await test_client.post(
            "/article", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"
        mock_collection.insert_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_wrong_field_type(self, test_client):
        response = await test_client.post("/article", json={"title": ["not", "a", "string"]})
        assert response.status_code == 400


class TestSingleArticle:

    @pytest.mark.asyncio
    async def test_get(self, test_client, mock_collection, sample_article_doc):
        mock_collection.find_one.return_value = sample_article_doc

        response = await test_client.get("/article/65a1f0c2e4b0a1b2c3d4e5f6")

        assert response.status_code == 200
        assert response.json()["_id"] == "65a1f0c2e4b0a1b2c3d4e5f6"

    @pytest.mark.asyncio
    async def test_get_not_found(self, test_client):
        response = await test_client.get(f"/article/{ObjectId()}")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_get_invalid_id(self, test_client):
        response = await test_client.get("/article/nope")

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Invalid ID format"

    @pytest.mark.asyncio
    async def test_update(self, test_client, mock_collection):
        oid = ObjectId()

        response = await test_client.put(f"/article/{oid}", json={"title": "T", "desc": "D"})

        assert response.status_code == 200
        assert response.json() == "Article updated successfully"
        mock_collection.update_one.assert_awaited_once_with(
            {"_id": oid}, {"$set": {"title": "T", "desc": "D", "content": ""}}
        )

    @pytest.mark.asyncio
    async def test_update_not_found(self, test_client, mock_collection):
        mock_collection.update_one = AsyncMock(return_value=MagicMock(matched_count=0))

        response = await test_client.put(f"/article/{ObjectId()}", json={"title": "T"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_invalid_id(self, test_client):
        response = await test_client.put("/article/bad", json={"title": "T"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete(self, test_client, mock_collection):
        response = await test_client.delete(f"/article/{ObjectId()}")

        assert response.status_code == 200
        assert response.json() == "Article deleted successfully"

    @pytest.mark.asyncio
    async def test_delete_not_found(self, test_client, mock_collection):
        mock_collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))

        response = await test_client.delete(f"/article/{ObjectId()}")

        assert response.status_code == 404
        assert response.json()["message"].startswith("article with ID")


class TestCrossCutting:

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated_and_in_error_body(self, test_client):
        response = await test_client.get("/article/bad")

        rid = response.headers["X-Request-ID"]
        assert len(rid) == 8
        assert response.json()["request_id"] == rid

    @pytest.mark.asyncio
    async def test_health_without_client_is_unhealthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"

    @pytest.mark.asyncio
    async def test_health_with_reachable_database(self, app, test_client):
        client = MagicMock()
        client.admin.command = AsyncMock(return_value={"ok": 1})
        app.state.mongo_client = client

        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        client.admin.command.assert_awaited_once_with("ping")
