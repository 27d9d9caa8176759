"""
Report output for a finished ledger: the text ev sheet and a JSON summary.
"""

from .render import render_report, write_report
from .summary import build_summary, write_summary_json

__all__ = [
    "render_report",
    "write_report",
    "build_summary",
    "write_summary_json",
]
