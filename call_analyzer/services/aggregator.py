"""
Call log aggregation
"""
import math
from typing import Dict, List, Optional, Sequence

from call_analyzer.schemas.call import CallLogEntry
from call_analyzer.schemas.metrics import AnalysisResult, StatusSlice, TopNumber
from call_analyzer.services.timefmt import format_seconds

TOP_NUMBERS_LIMIT = 5

CONNECTED_COLOR = "#10b981"
MISSED_COLOR = "#ef4444"


def round_half_up(value: float) -> int:
    """Nearest integer, ties away from zero (round() would give 2 for 2.5)"""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def tally_numbers(entries: Sequence[CallLogEntry]) -> List[TopNumber]:
    """Count calls and total duration per number, in first-occurrence order"""
    tallies: Dict[str, Dict[str, int]] = {}
    for entry in entries:
        if entry.number not in tallies:
            tallies[entry.number] = {"count": 0, "duration_seconds": 0}
        tallies[entry.number]["count"] += 1
        tallies[entry.number]["duration_seconds"] += entry.duration_seconds

    return [
        TopNumber(number=number, count=data["count"], duration_seconds=data["duration_seconds"])
        for number, data in tallies.items()
    ]


def rank_numbers(entries: Sequence[CallLogEntry], limit: int = TOP_NUMBERS_LIMIT) -> List[TopNumber]:
    """Most-called numbers first; equal counts keep first-occurrence order"""
    # sorted() is stable, which is what keeps the tie order
    ranked = sorted(tally_numbers(entries), key=lambda t: t.count, reverse=True)
    return ranked[:limit]


def summarize(entries: Sequence[CallLogEntry], limit: int = TOP_NUMBERS_LIMIT) -> Optional[AnalysisResult]:
    """
    Summary statistics for parsed entries.
    Returns None for an empty list: there is nothing to display.
    """
    if not entries:
        return None

    total_calls = len(entries)
    connected_count = sum(1 for e in entries if e.duration_seconds > 0)
    missed_count = total_calls - connected_count

    total_duration_seconds = sum(e.duration_seconds for e in entries)
    average = total_duration_seconds / connected_count if connected_count > 0 else 0
    average_duration_seconds = round_half_up(average)

    return AnalysisResult(
        total_calls=total_calls,
        connected_count=connected_count,
        missed_count=missed_count,
        total_duration_seconds=total_duration_seconds,
        average_duration_seconds=average_duration_seconds,
        total_duration=format_seconds(total_duration_seconds),
        average_duration=format_seconds(average_duration_seconds),
        top_numbers=rank_numbers(entries, limit),
        status_distribution=[
            StatusSlice(name="Connected", value=connected_count, color=CONNECTED_COLOR),
            StatusSlice(name="Missed", value=missed_count, color=MISSED_COLOR),
        ],
    )
