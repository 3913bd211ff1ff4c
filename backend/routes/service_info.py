# backend/routes/service_info.py
from fastapi import APIRouter, Depends, status
from typing import List

from schemas.service_info import ServiceCallRecord, ServiceStats
from utils.dependencies import get_service_history
from utils.service_history import ServiceHistory

router = APIRouter(prefix="/service-info", tags=["Service info"])

# Failed backend calls, newest first
@router.get("/history", response_model=List[ServiceCallRecord])
def get_history(history: ServiceHistory = Depends(get_service_history)):
    return history.records

@router.get("/stats", response_model=ServiceStats)
def get_stats(history: ServiceHistory = Depends(get_service_history)):
    return history.stats()

@router.delete("/history", status_code=status.HTTP_204_NO_CONTENT)
def clear_history(history: ServiceHistory = Depends(get_service_history)):
    history.clear()
