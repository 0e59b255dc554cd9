import json
import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from app.database.db import get_review_store
from app.models.review.review import REQUIRED_FIELDS_MESSAGE, has_required_fields
from app.services.json import return_json, return_error_json
from app.services.review_store import ReviewStore
from app.utilities.errors import StoreUnavailableError, ValidationError

logger = logging.getLogger(__name__)

review_router = APIRouter(
    prefix="/reviews",
    tags=["ReviewAPI"],
)


async def read_json_body(request: Request) -> dict:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


# Submit a review
@review_router.post("")
async def submit_review(
    request: Request,
    store: ReviewStore = Depends(get_review_store),
):
    body = await read_json_body(request)

    if not has_required_fields(body):
        return return_error_json(REQUIRED_FIELDS_MESSAGE)

    try:
        await store.create(body)
    except ValidationError as e:
        return return_error_json(e.message)
    except StoreUnavailableError:
        logger.exception("Error saving review")
        return return_error_json("Error saving review", code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return return_json("Review submitted successfully!", code=status.HTTP_201_CREATED)


# List all reviews
@review_router.get("")
async def list_reviews(store: ReviewStore = Depends(get_review_store)):
    try:
        reviews = await store.list_all()
    except StoreUnavailableError:
        logger.exception("Error retrieving reviews")
        return return_error_json("Error retrieving reviews", code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(status_code=status.HTTP_200_OK, content=reviews)
