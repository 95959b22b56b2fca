"""
Blob store connectors.
"""
from voyage_catalog.data.connectors.base_connector import BaseBlobConnector
from voyage_catalog.data.connectors.local_blob_connector import LocalBlobConnector
