"""
Grantha - Command Line Interface

Main CLI entry point for reference resolution and interlinear tools.
"""
from cli.main import app, main

__all__ = ["app", "main"]
