from contextlib import asynccontextmanager
import logging
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import errors
from config import MONGODB_URI, MONGO_TIMEOUT_MS
from app.utilities.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def create_client(db_url: str = MONGODB_URI) -> AsyncIOMotorClient:
    if not db_url:
        raise RuntimeError("MONGODB_URI environment variable is required")
    try:
        return AsyncIOMotorClient(db_url, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
    except errors.ConfigurationError as e:
        raise RuntimeError(f"Invalid MongoDB configuration: {e}") from e


async def connect(client: AsyncIOMotorClient):
    try:
        await client.admin.command("ping")
    except errors.OperationFailure as err:
        raise StoreUnavailableError(f"Authentication or command error: {err}") from err
    except errors.PyMongoError as err:
        raise StoreUnavailableError(f"Unable to connect to the MongoDB server: {err}") from err


@asynccontextmanager
async def lifespan(app):
    """Async context manager for MongoDB connection lifecycle"""
    client = create_client()
    app.state.mongo_client = client

    # The service stays up without the store; store-backed routes answer 500
    try:
        await connect(client)
        logger.info("MongoDB connection established successfully at startup.")
    except StoreUnavailableError as e:
        logger.error(f"MongoDB connection failed at startup: {e.message}")

    yield

    mongo_client = getattr(app.state, "mongo_client", None)
    if mongo_client:
        mongo_client.close()
        logger.info("MongoDB connection closed at shutdown.")
    logger.info("Shutting down FastAPI app.")
