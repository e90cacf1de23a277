"""API layer package for FastAPI application and route composition."""

from .application import create_api_application
from .schemas import ResetJobRequestBody, SyncJobRequestBody

__all__ = ["ResetJobRequestBody", "SyncJobRequestBody", "create_api_application"]
