"""Health check model shared by the service routers."""

from datetime import datetime

from pydantic import BaseModel


class ServiceHealth(BaseModel):
    """Per-service health check response."""

    status: str
    service: str
    timestamp: datetime
