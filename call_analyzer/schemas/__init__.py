"""
Pydantic schemas for parsed call logs and their analysis
"""
from call_analyzer.schemas.metrics import TopNumber, StatusSlice, AnalysisResult
from call_analyzer.schemas.call import (
    CallStatus, CallLogEntry, CallLogText, ParseResponse, AnalyzeResponse,
)

__all__ = [
    "TopNumber",
    "StatusSlice",
    "AnalysisResult",
    "CallStatus",
    "CallLogEntry",
    "CallLogText",
    "ParseResponse",
    "AnalyzeResponse",
]
