"""Reporting module - parse result reports."""

from .json_reporter import JsonReporter

__all__ = ["JsonReporter"]
