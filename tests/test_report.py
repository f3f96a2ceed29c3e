"""Tests for the downloadable review report."""

from datetime import datetime

import pytest

from frontend.report import (
    PASTED_PLACEHOLDER,
    RULE,
    build_report,
    format_timestamp,
    report_file_name,
)
from frontend.state import Panel, ReviewState, panel_for

WHEN = datetime(2026, 10, 18, 15, 4, 5)


def test_no_review_no_report():
    assert build_report("main.py", "python", None, "print(1)", WHEN) is None


def test_empty_review_still_exports():
    report = build_report("main.py", "python", "", "print(1)", WHEN)

    assert report is not None
    assert report.endswith("Original Code:\nprint(1)\n")


def test_report_offered_whenever_review_panel_shows():
    state = ReviewState(source_text="x", review="")

    assert panel_for(state) is Panel.REVIEW
    assert build_report(None, state.language, state.review, state.source_text, WHEN) is not None


def test_full_document():
    report = build_report("main.py", "python", "**Overall Score:** 8/10", "print(1)", WHEN)

    assert report == (
        "Code Review Report\n"
        "File: main.py\n"
        "Language: python\n"
        "Date: 10/18/2026, 3:04:05 PM\n"
        "\n"
        f"{RULE}\n"
        "\n"
        "**Overall Score:** 8/10\n"
        "\n"
        f"{RULE}\n"
        "\n"
        "Original Code:\n"
        "print(1)\n"
    )


def test_pasted_code_uses_placeholder():
    report = build_report(None, "go", "fine", "package main", WHEN)

    assert f"File: {PASTED_PLACEHOLDER}\n" in report


def test_sections_in_order():
    review = "Key Issues:\n- none"
    source = "def f():\n    return {'a': 1}\n"

    report = build_report("util.py", "python", review, source, WHEN)

    positions = [report.index(part) for part in ("util.py", "Language: python", review, source)]
    assert positions == sorted(positions)


def test_rule_is_sixty_equals():
    assert RULE == "=" * 60


@pytest.mark.parametrize(
    "when, expected",
    [
        (datetime(2026, 1, 2, 0, 5, 9), "1/2/2026, 12:05:09 AM"),
        (datetime(2026, 12, 31, 12, 0, 0), "12/31/2026, 12:00:00 PM"),
        (datetime(2026, 7, 4, 9, 30, 0), "7/4/2026, 9:30:00 AM"),
    ],
)
def test_timestamp_format(when, expected):
    assert format_timestamp(when) == expected


def test_file_name_uses_epoch_millis():
    assert report_file_name(1792335845123) == "code-review-1792335845123.txt"
