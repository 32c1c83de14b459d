"""
Call log text parser

Pulls call entries out of pasted text such as:
    +919876543210 02/03/2026 2:06 PM, 00:00:06
    07447462059 02/03/2026 2:06 PM
Entries may sit one per line, run together in a single block, or be mixed
with unrelated text. Anything that does not match is skipped.
"""
import re
from typing import List, Optional

from call_analyzer.core.logging import get_logger
from call_analyzer.schemas.call import CallLogEntry

logger = get_logger(__name__)

NO_DURATION = "00:00:00"

# Not anchored to line starts: concatenated entries must still match.
# Digits are ASCII only; \s keeps Unicode whitespace (pasted NBSPs).
ENTRY_PATTERN = re.compile(
    r"\+?(?P<number>[0-9]{10,20})\s+"
    r"(?P<timestamp>[0-9]{2}/[0-9]{2}/[0-9]{4}\s+[0-9]{1,2}:[0-9]{2}\s+[AP]M)"
    r"(?:,\s*(?P<duration>[0-9]{2}:[0-9]{2}:[0-9]{2}))?",
)


def parse_duration(hhmmss: str) -> int:
    """HH:MM:SS -> seconds. Fields are taken literally (no 0-59 check)."""
    hours, minutes, seconds = (int(part) for part in hhmmss.split(":"))
    return hours * 3600 + minutes * 60 + seconds


def parse(raw_text: Optional[str]) -> List[CallLogEntry]:
    """Extract call entries in the order they appear in the text"""
    if not raw_text:
        return []

    entries = []
    for match in ENTRY_PATTERN.finditer(raw_text):
        duration = match.group("duration")
        entries.append(
            CallLogEntry(
                number=match.group("number"),
                timestamp=match.group("timestamp"),
                duration_seconds=parse_duration(duration) if duration else 0,
                duration_formatted=duration or NO_DURATION,
            )
        )

    logger.debug(f"Parsed {len(entries)} call entries from {len(raw_text)} characters")
    return entries
