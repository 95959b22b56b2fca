"""
Base repository interface for blob-backed data access.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from voyage_catalog.data.connectors.base_connector import BaseBlobConnector
from voyage_catalog.data.models.blob import BlobObject
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Generic type for repository entities
T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for repositories that provide data access.
    """

    def __init__(self, connector: BaseBlobConnector):
        """
        Initialize the repository with a blob connector.

        Args:
            connector (BaseBlobConnector): The blob connector to use
        """
        self.connector = connector

    @abstractmethod
    def get_all(self, *args, **kwargs) -> List[T]:
        """
        Get all entities.

        Returns:
            List[T]: A list of entity objects
        """
        pass

    @abstractmethod
    def save_all(self, entities: List[T]) -> BlobObject:
        """
        Replace the stored entities.

        Args:
            entities (List[T]): Entities to store

        Returns:
            BlobObject: The written blob
        """
        pass

    def _find_blob(self, key: str) -> Optional[BlobObject]:
        """
        Find the blob stored under an exact key.

        Args:
            key (str): Blob key

        Returns:
            Optional[BlobObject]: The blob, or None if nothing is stored under the key
        """
        blobs = self.connector.list(prefix=key)
        for blob in blobs:
            if blob.key == key:
                return blob

        if blobs:
            logger.warning(f"No blob named {key}; found only {[blob.key for blob in blobs]}")
        return None

    def _read_blob(self, key: str) -> Optional[str]:
        """
        Read the text stored under a key.

        Args:
            key (str): Blob key

        Returns:
            Optional[str]: Blob content, or None if the blob does not exist
        """
        blob = self._find_blob(key)
        if blob is None:
            return None

        logger.debug(f"Fetching blob {blob.key} ({blob.size} bytes) from {blob.url}")
        return self.connector.fetch(blob.url)
