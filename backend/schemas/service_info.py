from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel


# A backend dependency the storefront talks to, with local setup hints
class ServiceDescriptor(BaseModel):
    path: str
    name: str
    description: str
    connection_steps: List[str]


# Metadata about one failed backend call, for the service info dashboard
class ServiceCallRecord(BaseModel):
    service_name: str
    description: str
    endpoint: str
    method: str
    status_code: Optional[int] = None  # None for transport failures
    timestamp: datetime
    connection_steps: List[str]
    original_error: str


class ServiceStats(BaseModel):
    total_calls: int
    unique_services: int
    service_breakdown: Dict[str, int]
    last_call: Optional[datetime] = None
