"""Reporting subpackage."""

from .summary import generate_summary, print_summary, save_summary_json

__all__ = ['generate_summary', 'print_summary', 'save_summary_json']
