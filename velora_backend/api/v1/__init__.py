"""
API layer for the Velora backend.

Exposes the HTTP endpoints under /api: register, login, the protected identity
check and the review board.
"""
from .auth_controller import router as auth_router
from .review_controller import router as review_router


__all__ = ["auth_router", "review_router"]
