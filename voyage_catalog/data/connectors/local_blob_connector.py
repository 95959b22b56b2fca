"""
Filesystem-backed blob store connector.
"""
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname
from voyage_catalog.config.storage_config import BLOB_CONFIG
from voyage_catalog.data.connectors.base_connector import BaseBlobConnector
from voyage_catalog.data.models.blob import BlobObject
from voyage_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class LocalBlobConnector(BaseBlobConnector):
    """
    Connector storing each blob as a file under a root directory.

    Blob URLs are ``file://`` URIs of those files.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the local blob connector.

        Args:
            config (Optional[Dict[str, Any]]): Blob store configuration.
                                              If None, uses the default from storage_config.py
        """
        self.config = config if config is not None else BLOB_CONFIG
        self.encoding = self.config.get("encoding", "utf-8")
        self.root: Optional[Path] = None

    def connect(self) -> Path:
        """
        Open the store, creating its root directory if needed.

        Returns:
            Path: The resolved root directory
        """
        if self.root is None:
            try:
                root = Path(self.config["root"]).expanduser().resolve()
                root.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error(f"Error opening blob store at {self.config['root']}: {str(e)}")
                raise
            self.root = root
            logger.info(f"Blob store opened at {self.root}")

        return self.root

    def disconnect(self) -> None:
        if self.root is not None:
            logger.debug(f"Blob store at {self.root} closed")
            self.root = None

    def _path_for(self, key: str) -> Path:
        root = self.connect()
        path = (root / key).resolve()
        if root not in path.parents:
            raise ValueError(f"Blob key escapes the store root: {key}")
        return path

    def _blob_for(self, path: Path) -> BlobObject:
        stat = path.stat()
        return BlobObject(
            key=path.relative_to(self.root).as_posix(),
            url=path.as_uri(),
            size=stat.st_size,
            uploaded_at=datetime.fromtimestamp(stat.st_mtime),
        )

    def put(self, key: str, content: str) -> BlobObject:
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            # Atomic replace of the previous blob
            tmp_path = path.with_name(path.name + ".tmp")
            tmp_path.write_text(content, encoding=self.encoding)
            tmp_path.replace(path)
        except OSError as e:
            logger.error(f"Error writing blob {key}: {str(e)}")
            raise

        logger.debug(f"Stored blob {key} ({len(content)} chars)")
        return self._blob_for(path)

    def list(self, prefix: str = "") -> List[BlobObject]:
        root = self.connect()
        blobs = [
            self._blob_for(path)
            for path in root.rglob("*")
            if path.is_file() and not path.name.endswith(".tmp")
            and path.relative_to(root).as_posix().startswith(prefix)
        ]
        return sorted(blobs, key=lambda blob: blob.key)

    def fetch(self, url: str) -> str:
        parsed = urlparse(url)
        if parsed.scheme != "file":
            raise ValueError(f"Unsupported blob URL: {url}")

        path = Path(url2pathname(parsed.path))
        try:
            return path.read_text(encoding=self.encoding)
        except OSError as e:
            logger.error(f"Error fetching blob {url}: {str(e)}")
            raise
