from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi import status
import logging
from config import LOG_LEVEL, PUBLIC_DIR
from app.database.connections import lifespan
from app.includes import get_all_routers
from app.middleware.access_log import AccessLogMiddleware
from app.utilities.errors import ReviewServiceError
from tools.routers import gather_routers, mount_public


logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.info("Starting FastAPI application")

app = FastAPI(
    title="Testimonial Reviews API",
    description="API for submitting and listing customer testimonials",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)
routers = get_all_routers()
app = gather_routers(app, routers)
app = mount_public(app, PUBLIC_DIR)

app.add_middleware(AccessLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ReviewServiceError)
async def review_service_error_handler(request: Request, exc: ReviewServiceError):
    logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal Server Error"},
    )


if __name__ == "__main__":
    import uvicorn
    from config import HOST, PORT

    uvicorn.run(app, host=HOST, port=PORT)
