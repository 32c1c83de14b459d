"""
Call log metrics schemas
"""
from pydantic import BaseModel
from typing import List


class TopNumber(BaseModel):
    """Call tally for a single number"""
    number: str
    count: int
    duration_seconds: int

    class Config:
        frozen = True


class StatusSlice(BaseModel):
    """Connected/missed chart slice"""
    name: str  # "Connected" or "Missed"
    value: int
    color: str

    class Config:
        frozen = True


class AnalysisResult(BaseModel):
    """Summary statistics over a list of call log entries"""
    total_calls: int
    connected_count: int
    missed_count: int
    total_duration_seconds: int
    average_duration_seconds: int  # rounded, 0 when nothing connected
    total_duration: str  # HH:MM:SS
    average_duration: str  # HH:MM:SS
    top_numbers: List[TopNumber]
    status_distribution: List[StatusSlice]

    class Config:
        frozen = True
