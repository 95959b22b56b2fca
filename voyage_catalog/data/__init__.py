"""
Data access package: models, blob connectors and repositories.
"""
