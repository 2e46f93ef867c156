"""Report rendering."""

from .formatter import ReportFormatter, priority_label

__all__ = ["ReportFormatter", "priority_label"]
