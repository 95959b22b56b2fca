"""
Utility package for the Voyage catalog.
"""
from voyage_catalog.utils.validation import (
    validate_upload,
    missing_required_columns
)
from voyage_catalog.utils.date_helpers import get_timestamp_str
from voyage_catalog.utils.logging_config import setup_logging, get_logger
