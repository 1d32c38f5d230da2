"""
Reporting utilities (text/Excel) for truckload.
"""

from truckload_app.reports.simple_text_report import build_load_summary_text
from truckload_app.reports.excel_report import export_load_plan_excel

__all__ = [
    "build_load_summary_text",
    "export_load_plan_excel",
]
