"""Dataset loading and result reporting."""

from .loader import load_points
from .report import format_report, format_result, print_report

__all__ = [
    'load_points',
    'format_report',
    'format_result',
    'print_report'
]
