"""
Base blob store connector interface.
"""
from abc import ABC, abstractmethod
from typing import Any, List
from voyage_catalog.data.models.blob import BlobObject


class BaseBlobConnector(ABC):
    """
    Abstract base class for blob store connections.
    """

    @abstractmethod
    def connect(self) -> Any:
        """
        Establish a connection to the blob store.

        Returns:
            Any: The store handle
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """
        Close the blob store connection.
        """
        pass

    @abstractmethod
    def put(self, key: str, content: str) -> BlobObject:
        """
        Store text under a key, overwriting any previous blob.

        Args:
            key (str): Blob key, e.g. 'products.csv'
            content (str): Text to store

        Returns:
            BlobObject: The stored blob
        """
        pass

    @abstractmethod
    def list(self, prefix: str = "") -> List[BlobObject]:
        """
        List blobs whose keys start with a prefix.

        Args:
            prefix (str): Key prefix

        Returns:
            List[BlobObject]: Matching blobs ordered by key
        """
        pass

    @abstractmethod
    def fetch(self, url: str) -> str:
        """
        Download the text of a blob.

        Args:
            url (str): URL of a stored blob

        Returns:
            str: The blob content
        """
        pass

    def __enter__(self):
        """
        Context manager entry point.

        Returns:
            BaseBlobConnector: The connector instance
        """
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Context manager exit point.
        """
        self.disconnect()
