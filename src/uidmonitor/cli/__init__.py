"""
Command-line interface for the uid I/O monitor.
"""

from .main import main_cli

__all__ = ["main_cli"]
