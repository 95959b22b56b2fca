"""
Blob-backed repositories.
"""
from voyage_catalog.data.repositories.base_repository import BaseRepository
from voyage_catalog.data.repositories.product_repository import ProductRepository
