"""Health check API endpoints"""
from fastapi import APIRouter

from service.health_service import get_health
from service.dto import HealthResponseDTO

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponseDTO)
def health_check() -> HealthResponseDTO:
    """Liveness of the reaction insights service; the reactions API is not contacted"""
    return get_health()
