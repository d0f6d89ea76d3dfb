"""JUnit report generation."""

from run_report.junit.builder import ReportOptions, build_report
from run_report.junit.document import XmlNode
from run_report.junit.writer import serialize_report, write_report

__all__ = [
    "ReportOptions",
    "XmlNode",
    "build_report",
    "serialize_report",
    "write_report",
]
