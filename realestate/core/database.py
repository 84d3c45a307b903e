"""MongoDB client lifecycle and collection access."""

from collections.abc import Iterator

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from realestate.core.config import settings
from realestate.core.logging import get_logger

logger = get_logger(__name__)

_client: MongoClient | None = None


def get_client() -> MongoClient:
    """Return the process-wide client, creating it on first use."""
    global _client
    if _client is None:
        _client = MongoClient(settings.MONGODB_URL)
        logger.info("mongo_client_created", database=settings.MONGODB_DATABASE)
    return _client


def get_database() -> Database:
    """Return the configured database."""
    return get_client()[settings.MONGODB_DATABASE]


def close_client() -> None:
    """Close the process-wide client if one was opened."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("mongo_client_closed")


def get_db() -> Iterator[Database]:
    """Dependency for getting the database handle."""
    yield get_database()


def owners(db: Database) -> Collection:
    return db[settings.OWNERS_COLLECTION]


def properties(db: Database) -> Collection:
    return db[settings.PROPERTIES_COLLECTION]


def property_images(db: Database) -> Collection:
    return db[settings.PROPERTY_IMAGES_COLLECTION]


def property_traces(db: Database) -> Collection:
    return db[settings.PROPERTY_TRACES_COLLECTION]


def ensure_indexes(db: Database) -> None:
    """Create the indexes used by lookups and listings. Safe to call repeatedly."""
    owners(db).create_index("idOwner", unique=True)
    properties(db).create_index("idProperty", unique=True)
    properties(db).create_index("idOwner")
    property_images(db).create_index("idProperty")
    property_traces(db).create_index([("idProperty", ASCENDING), ("dateSale", DESCENDING)])
