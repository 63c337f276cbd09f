"""
ArticleHub Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for articles.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate the OpenAPI documentation.
Who:   Used by route handlers and ArticleService.

Wire format:
    {"_id": "65a1f0c2e4b0a1b2c3d4e5f6", "title": "...", "desc": "...", "content": "..."}

    The identifier is exposed as `_id` (the MongoDB key) rendered as a hex
    string. `Title` is accepted on input for clients written against the
    earlier capitalised field name.
"""

from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ArticlePayload(BaseModel):
    """
    What:  Body of POST /article and PUT /article/{id}.

    Every field defaults to an empty string; a PUT therefore replaces all
    three text fields, clearing the ones the client left out. Any `_id`
    in the body is ignored; identifiers are assigned by the service.
    """
    title: str = Field(
        default="",
        validation_alias=AliasChoices("title", "Title"),
        description="Article title",
    )
    desc: str = Field(
        default="",
        validation_alias=AliasChoices("desc", "Desc", "description"),
        description="Short description",
    )
    content: str = Field(
        default="",
        validation_alias=AliasChoices("content", "Content"),
        description="Article body",
    )

    model_config = {"extra": "ignore"}

    def to_document(self) -> Dict[str, Any]:
        """Stored document fields (without `_id`)."""
        return {"title": self.title, "desc": self.desc, "content": self.content}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ArticleResponse(BaseModel):
    """
    What:  Full representation of a stored article.
    Who:   Returned by GET /articles (as array items), POST /article and
           GET /article/{id}.
    """
    id: str = Field(alias="_id", description="Article identifier (24-char hex ObjectId)")
    title: str = Field(default="", description="Article title")
    desc: str = Field(default="", description="Short description")
    content: str = Field(default="", description="Article body")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "ArticleResponse":
        """
        Build a response from a raw MongoDB document.

        Missing text fields (documents written by other tools) read as "".
        """
        return cls(
            id=str(doc["_id"]),
            title=doc.get("title") or "",
            desc=doc.get("desc") or "",
            content=doc.get("content") or "",
        )


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
