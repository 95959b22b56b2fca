"""
Blob storage configuration settings for the Voyage catalog.
"""
import os
from typing import Dict, Any
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Blob keys
PRODUCTS_BLOB_KEY = "products.csv"
PRODUCTS_JSON_BLOB_KEY = "products.json"
UPLOAD_ARCHIVE_PREFIX = "products_"


def get_blob_config() -> Dict[str, Any]:
    """
    Get blob store configuration from environment variables or defaults.

    Returns:
        Dict[str, Any]: Blob store configuration dictionary
    """
    default_config = {
        "root": "blob_store",
        "encoding": "utf-8",
    }

    # Override with environment variables if available
    config = {}
    for key in default_config:
        env_key = f"CATALOG_BLOB_{key.upper()}"
        config[key] = os.environ.get(env_key, default_config[key])

    logger.debug(f"Using blob store config with root: {config['root']}")

    return config


BLOB_CONFIG: Dict[str, Any] = get_blob_config()
