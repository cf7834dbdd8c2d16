from typing import Dict, Any, Optional
from pydantic import BaseModel


class PingResponse(BaseModel):
    success: bool = True
    ready: bool
    message: str


class InspectResult(BaseModel):
    success: bool = True
    url: Optional[str] = None
    fetch_mode: Optional[str] = None
    total_types: int
    data: Dict[str, Dict[str, Any]]


class InspectError(BaseModel):
    success: bool = False
    error: str
