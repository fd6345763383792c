#!/usr/bin/env python3
"""
Configuration management for the OmniSmart assistant backend.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_RAW_DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data", "raw")


def _as_bool(val, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


class Config:
    """Configuration class for the application."""

    # Redis Configuration
    USE_REDIS = _as_bool(os.getenv("USE_REDIS"), True)
    REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT = int(os.getenv("REDIS_PORT", 6379))
    REDIS_DB = int(os.getenv("REDIS_DB", 0))

    # Application Configuration
    MAX_CONVERSATION_TURNS = int(os.getenv("MAX_CONVERSATION_TURNS", 14))
    MAX_SEARCH_HISTORY = int(os.getenv("MAX_SEARCH_HISTORY", 20))
    INITIAL_STORE_LIMIT = int(os.getenv("INITIAL_STORE_LIMIT", 6))
    INITIAL_PRODUCT_LIMIT = int(os.getenv("INITIAL_PRODUCT_LIMIT", 12))

    # Catalog files
    STORES_PATH = os.getenv("STORES_PATH", os.path.join(_RAW_DATA_DIR, "stores.json"))
    PRODUCTS_PATH = os.getenv("PRODUCTS_PATH", os.path.join(_RAW_DATA_DIR, "products.json"))
    SECTOR_CONTENT_PATH = os.getenv("SECTOR_CONTENT_PATH", os.path.join(_RAW_DATA_DIR, "sector_content.json"))

    # CORS: front dev servers
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    @classmethod
    def validate(cls):
        """Validate that the configuration values are usable."""
        invalid = []

        if cls.USE_REDIS and not cls.REDIS_HOST:
            invalid.append("REDIS_HOST")
        if cls.MAX_CONVERSATION_TURNS < 1:
            invalid.append("MAX_CONVERSATION_TURNS")
        if cls.INITIAL_STORE_LIMIT < 0:
            invalid.append("INITIAL_STORE_LIMIT")
        if cls.INITIAL_PRODUCT_LIMIT < 0:
            invalid.append("INITIAL_PRODUCT_LIMIT")

        if invalid:
            raise ValueError(f"Invalid configuration: {', '.join(invalid)}")

        return True

# Validate configuration on import
Config.validate()
