"""
Call log endpoints
"""
from fastapi import APIRouter, HTTPException, status

from call_analyzer.core.config import settings
from call_analyzer.core.logging import get_logger
from call_analyzer.schemas.call import CallLogText, ParseResponse, AnalyzeResponse
from call_analyzer.services.parser import parse
from call_analyzer.services.aggregator import summarize

logger = get_logger(__name__)

router = APIRouter()


def _validate_text(data: CallLogText) -> str:
    """Reject blank or oversized input before parsing"""
    if not data.text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Call log text is empty",
        )
    if len(data.text) > settings.MAX_INPUT_CHARS:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Call log text exceeds {settings.MAX_INPUT_CHARS} characters",
        )
    return data.text


@router.post("/parse", response_model=ParseResponse)
def parse_calls(data: CallLogText):
    """Extract call entries from pasted text"""
    entries = parse(_validate_text(data))
    return ParseResponse(entries=entries, total=len(entries))


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze_calls(data: CallLogText):
    """
    Extract call entries and summarize them.
    An input with no recognizable entries is not an error: summary is null.
    """
    entries = parse(_validate_text(data))
    summary = summarize(entries, limit=settings.TOP_NUMBERS_LIMIT)
    if summary is None:
        logger.info("No call log entries found in submitted text")
    else:
        logger.info(
            f"Analyzed {summary.total_calls} calls "
            f"({summary.connected_count} connected, {summary.missed_count} missed)"
        )
    return AnalyzeResponse(entries=entries, summary=summary)
