"""
Call log schemas
"""
from pydantic import BaseModel, Field, computed_field
from typing import Optional, List
import enum

from call_analyzer.schemas.metrics import AnalysisResult


class CallStatus(str, enum.Enum):
    """Call status enum"""
    CONNECTED = "connected"
    MISSED = "missed"


class CallLogEntry(BaseModel):
    """One call extracted from pasted log text"""
    number: str  # digits only, leading "+" stripped
    timestamp: str  # verbatim, never parsed into a datetime
    duration_seconds: int = Field(0, ge=0)
    duration_formatted: str = "00:00:00"

    @computed_field
    @property
    def status(self) -> CallStatus:
        return CallStatus.CONNECTED if self.duration_seconds > 0 else CallStatus.MISSED

    class Config:
        frozen = True


class CallLogText(BaseModel):
    """Raw pasted call log text"""
    text: str


class ParseResponse(BaseModel):
    """Parsed entries"""
    entries: List[CallLogEntry]
    total: int


class AnalyzeResponse(BaseModel):
    """Parsed entries with their summary (summary is null when nothing matched)"""
    entries: List[CallLogEntry]
    summary: Optional[AnalysisResult] = None
