"""
Call log parsing and aggregation
"""
from call_analyzer.services.parser import parse, parse_duration
from call_analyzer.services.aggregator import summarize
from call_analyzer.services.timefmt import format_seconds

__all__ = [
    "parse",
    "parse_duration",
    "summarize",
    "format_seconds",
]
