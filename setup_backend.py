"""
Infrastructure Setup Script for GrocerEase
Creates the MongoDB collections and indexes and inserts sample data.
"""

import argparse
import logging

from grocer_ease.config import LOG_LEVEL
from grocer_ease.db.mongodb_client import MongoDBClient, mongo_client
from grocer_ease.loaders.document_loader import DocumentLoader

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the GrocerEase MongoDB database.")
    parser.add_argument("--uri", help="MongoDB connection string (default: MONGODB_URI)")
    parser.add_argument("--database", help="Database name (default: MONGODB_DATABASE)")
    parser.add_argument("--skip-seed", action="store_true", help="Only create collections and indexes")
    parser.add_argument("--check", action="store_true", help="Only check the MongoDB connection")
    return parser.parse_args(argv)


def check_database_connection(client) -> None:
    """Ping MongoDB; the driver's error propagates if it is unreachable."""
    logger.info("Checking MongoDB connection...")
    client.ping()
    logger.info("✅ MongoDB connection: OK (%s)", client.database_name)


def main(argv=None):
    """Main setup function."""
    args = parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    if args.uri or args.database:
        client = MongoDBClient(uri=args.uri, database=args.database)
    else:
        client = mongo_client

    if args.check:
        check_database_connection(client)
        return

    logger.info("🚀 Setting up GrocerEase database %s...", client.database_name)
    DocumentLoader(client).load_all(seed=not args.skip_seed)


if __name__ == "__main__":
    main()
