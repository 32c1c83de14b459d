"""
Analyze a pasted call log from a file or stdin.

    python scripts/analyze_logs.py calls.txt
    cat calls.txt | python scripts/analyze_logs.py
    python scripts/analyze_logs.py calls.txt --api http://localhost:8000
"""
import argparse
import os
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from call_analyzer.core.logging import setup_logging
from call_analyzer.schemas.call import AnalyzeResponse
from call_analyzer.services.parser import parse
from call_analyzer.services.aggregator import summarize
from call_analyzer.services.report import render_report, NO_ENTRIES_MESSAGE
from call_analyzer.core.config import settings

load_dotenv()

API_BASE_URL = os.getenv("CALL_ANALYZER_API_URL", "")

logger = setup_logging()


def analyze_remote(text: str, api_url: str) -> AnalyzeResponse:
    """Send the text to a running API instead of analyzing locally"""
    response = requests.post(
        f"{api_url.rstrip('/')}/api/v1/calls/analyze",
        json={"text": text},
        timeout=30,
    )
    response.raise_for_status()
    return AnalyzeResponse.model_validate(response.json())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Summarize a pasted call log")
    parser.add_argument("path", nargs="?", help="call log text file (default: stdin)")
    parser.add_argument("--api", default=API_BASE_URL, help="analyze through a running API at this base URL")
    args = parser.parse_args(argv)

    if args.path:
        try:
            text = Path(args.path).read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not read {args.path}: {e}")
            return 1
    else:
        text = sys.stdin.read()

    if not text.strip():
        # The API rejects blank text; nothing to analyze either way
        print(NO_ENTRIES_MESSAGE)
        return 0

    if args.api:
        try:
            result = analyze_remote(text, args.api)
        except requests.RequestException as e:
            logger.error(f"API request failed: {e}")
            return 1
        entries, summary = result.entries, result.summary
    else:
        entries = parse(text)
        summary = summarize(entries, limit=settings.TOP_NUMBERS_LIMIT)

    print(render_report(entries, summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
