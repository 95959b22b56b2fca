"""
CSV and JSON ingestion of catalog products.
"""
