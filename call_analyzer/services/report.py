"""
Plain-text rendering of parsed entries and their summary
"""
from typing import List, Optional, Sequence

from call_analyzer.schemas.call import CallLogEntry
from call_analyzer.schemas.metrics import AnalysisResult

NO_ENTRIES_MESSAGE = "No call log entries found"


def format_summary(summary: AnalysisResult) -> List[str]:
    """Stat lines followed by the ranked top numbers"""
    lines = [
        f"Total Calls:    {summary.total_calls}",
        f"Connected:      {summary.connected_count}",
        f"Missed:         {summary.missed_count}",
        f"Total Duration: {summary.total_duration}",
        f"Avg Duration:   {summary.average_duration}",
        "",
        f"Top {len(summary.top_numbers)} Most Called Numbers:",
    ]
    for rank, top in enumerate(summary.top_numbers, start=1):
        lines.append(f"  {rank}. {top.number}  calls={top.count}  duration={top.duration_seconds}s")
    return lines


def format_entries(entries: Sequence[CallLogEntry]) -> List[str]:
    """Call details table, one row per entry"""
    width = max([len("Number")] + [len(e.number) for e in entries])
    lines = [f"{'Number':<{width}}  {'Timestamp':<19}  {'Duration':<8}  Status"]
    for entry in entries:
        status = entry.status.value.capitalize()
        lines.append(
            f"{entry.number:<{width}}  {entry.timestamp:<19}  {entry.duration_formatted:<8}  {status}"
        )
    return lines


def render_report(entries: Sequence[CallLogEntry], summary: Optional[AnalysisResult]) -> str:
    """Summary block followed by the call details table"""
    if summary is None or not entries:
        return NO_ENTRIES_MESSAGE
    return "\n".join(format_summary(summary) + ["", "Call Details:"] + format_entries(entries))
