"""
Duration display helper
"""


def format_seconds(total_seconds: int) -> str:
    """
    Format a number of seconds as HH:MM:SS.
    Hours are not capped; the field widens past two digits for large totals.
    """
    if total_seconds < 0:
        raise ValueError(f"Duration cannot be negative: {total_seconds}")
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
