import os
from fastapi import APIRouter
from fastapi.responses import FileResponse
from config import PUBLIC_DIR, INDEX_PAGE
from app.utilities.errors import NotFoundError

frontend_router = APIRouter(tags=["Frontend"])


@frontend_router.get("/", include_in_schema=False)
async def index():
    page = os.path.join(PUBLIC_DIR, INDEX_PAGE)
    if not os.path.isfile(page):
        raise NotFoundError("Page not found")
    return FileResponse(page, media_type="text/html")
