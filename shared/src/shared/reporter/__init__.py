"""
System reporting for Passerelle components.
"""

from shared.reporter.system_reporter import LogSink, SystemReporter

__all__ = ["SystemReporter", "LogSink"]
