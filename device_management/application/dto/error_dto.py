from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """DTO for every error body the API returns"""
    timestamp: datetime
    status: int
    error: str  # Reason phrase, or "Validation Failed" for field errors
    message: str
    details: Optional[Dict[str, Any]] = None
