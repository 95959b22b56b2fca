"""
Configuration package for the Voyage catalog.
"""
