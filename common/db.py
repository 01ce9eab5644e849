from contextlib import asynccontextmanager
from pymongo import AsyncMongoClient
from pymongo.server_api import ServerApi
from common.config import Config
from common.logging import logger


class CaseStore:
    """Dials MongoDB for the cases collection.

    One instance lives for the whole process, but it never holds an open
    client: every call to ``session()`` connects, yields the collection and
    closes again.
    """

    def __init__(self, uri: str, database_name: str = None, collection_name: str = None):
        self.uri = uri
        self.database_name = database_name or Config.DATABASE_NAME
        self.collection_name = collection_name or Config.CASES_COLLECTION

    @classmethod
    def from_config(cls, uri: str):
        return cls(uri, Config.DATABASE_NAME, Config.CASES_COLLECTION)

    def _new_client(self):
        return AsyncMongoClient(
            self.uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )

    @asynccontextmanager
    async def session(self):
        client = self._new_client()
        try:
            await client.admin.command("ping")
            logger.info("Successfully connected to MongoDB!")
            yield client[self.database_name][self.collection_name]
        finally:
            try:
                await client.close()
                logger.info("MongoDB connection closed.")
            except Exception as e:
                logger.error(f"Failed to close MongoDB connection: {str(e)}")
