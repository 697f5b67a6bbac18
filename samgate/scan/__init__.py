"""Scan driver and its helpers."""

from samgate.scan.classifier import classify_line
from samgate.scan.driver import ParseResult, parse_lines
from samgate.scan.source import parse_file
from samgate.scan.tracker import UniquenessTracker

__all__ = [
    "ParseResult",
    "UniquenessTracker",
    "classify_line",
    "parse_file",
    "parse_lines",
]
