"""
Catalog data models.
"""
