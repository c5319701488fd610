"""
Shared settings, logging, ORM models, and database helpers.
"""
