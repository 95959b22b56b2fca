"""
Catalog analysis package: family grouping and exporters.
"""
