"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from csvdecode.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from csvdecode.cli.output.json import JsonOutput
from csvdecode.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
