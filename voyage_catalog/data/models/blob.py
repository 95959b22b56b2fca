"""
Blob store data models.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class BlobObject:
    """
    A stored blob, addressed by key and retrievable by URL.
    """
    key: str
    url: str
    size: int = 0
    uploaded_at: Optional[datetime] = None
