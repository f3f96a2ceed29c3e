# frontend/report.py
from datetime import datetime
from typing import Optional

RULE = "=" * 60
PASTED_PLACEHOLDER = "Pasted Code"


def format_timestamp(when: datetime) -> str:
    """US locale style, e.g. ``10/18/2026, 3:04:05 PM``."""
    clock = when.strftime("%I:%M:%S %p").lstrip("0")
    return f"{when.month}/{when.day}/{when.year}, {clock}"


def build_report(
    file_name: Optional[str],
    language: str,
    review: Optional[str],
    source_text: str,
    when: datetime,
) -> Optional[str]:
    """Plain-text report for download, or None when there is nothing to export."""
    if review is None:
        return None

    return f"""Code Review Report
File: {file_name or PASTED_PLACEHOLDER}
Language: {language}
Date: {format_timestamp(when)}

{RULE}

{review}

{RULE}

Original Code:
{source_text}
"""


def report_file_name(epoch_millis: int) -> str:
    return f"code-review-{epoch_millis}.txt"
