from fastapi import Request
from config import DATABASE_NAME, REVIEW_COLLECTION
from app.services.review_store import ReviewStore


def get_review_store(request: Request) -> ReviewStore:
    client = request.app.state.mongo_client
    return ReviewStore(client[DATABASE_NAME][REVIEW_COLLECTION])
