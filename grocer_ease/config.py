"""Configuration loaded from the environment."""

import os

from dotenv import load_dotenv

load_dotenv()

MONGO_CONFIG = {
    "uri": os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGODB_DATABASE", "grocer_ease_db"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
