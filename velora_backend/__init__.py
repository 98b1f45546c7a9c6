"""
Velora Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases, domain models and the MongoDB-backed stores for user accounts and
the public review board.
"""
