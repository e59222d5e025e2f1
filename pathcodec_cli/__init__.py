"""
pathcodec_cli - Command Line Interface for the pathcodec helpers
"""

from .cli_entry import main, create_parser

__all__ = ["main", "create_parser"]
