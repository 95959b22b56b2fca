"""
Date helper utilities for catalog blobs.
"""
from datetime import datetime
from typing import Optional


def get_timestamp_str(moment: Optional[datetime] = None) -> str:
    """
    Get a timestamp string for blob keys and filenames.

    Args:
        moment (Optional[datetime]): Time to format, now if None

    Returns:
        str: Timestamp string (YYYYMMDD_HHMMSS)
    """
    return (moment or datetime.now()).strftime("%Y%m%d_%H%M%S")
