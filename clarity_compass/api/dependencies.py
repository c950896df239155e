"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from clarity_compass.infrastructure.clients.advisor import AdviceClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_advice_client() -> AdviceClient:
    """Provide advice provider client instance"""
    return AdviceClient()
