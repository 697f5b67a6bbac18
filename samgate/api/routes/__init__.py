"""API route modules."""

from samgate.api.routes.validate import router as validate_router

__all__ = ["validate_router"]
