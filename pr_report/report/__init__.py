from .renderer import DEFAULT_REPORT_PATH, REPORT_HEADING, REPORT_TITLE, ReportRenderer, render_report

__all__ = [
    "DEFAULT_REPORT_PATH",
    "REPORT_HEADING",
    "REPORT_TITLE",
    "ReportRenderer",
    "render_report",
]
