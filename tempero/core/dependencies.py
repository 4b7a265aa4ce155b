from fastapi import Request

from tempero.core.store import MemoryStore
from tempero.services.analytics_service import AnalyticsService


def get_store(request: Request) -> MemoryStore:
    """Dependency to get the application's record store."""
    return request.app.state.store


def get_analytics(request: Request) -> AnalyticsService:
    return AnalyticsService(get_store(request))
