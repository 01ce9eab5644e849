import os
import sys
from dotenv import load_dotenv

load_dotenv()


class Config:
    APP_NAME = os.getenv("APP_NAME", "Legal Case Intake")
    APP_VERSION = "1.0.0"
    MONGO_URI = os.getenv("MONGO_URI")
    DATABASE_NAME = os.getenv("DATABASE_NAME", "legal_intake_db")
    CASES_COLLECTION = os.getenv("CASES_COLLECTION", "cases")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3001))
    LOG_DIR = os.getenv("LOG_DIR", "./logs/")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def require_mongo_uri() -> str:
    """Return the configured MongoDB URI, or exit the process if it is missing."""
    # common.logging imports Config
    from common.logging import logger

    if not Config.MONGO_URI:
        logger.error(
            "MONGO_URI environment variable not set. Please create a .env file.")
        sys.exit(1)
    return Config.MONGO_URI
