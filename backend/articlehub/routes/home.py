"""
ArticleHub Backend — Home Route
=================================

What:  Plain-text landing response at `/`, answered for any HTTP method.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Home"])

WELCOME_MESSAGE = "Welcome to the HomePage!"

HOME_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(
    "/",
    methods=HOME_METHODS,
    response_class=PlainTextResponse,
    summary="Welcome message",
)
async def home_page() -> str:
    return WELCOME_MESSAGE + "\n"
