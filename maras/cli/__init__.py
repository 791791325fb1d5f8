"""
CLI Module for MARAS rule post-processing.

Provides Typer-based command-line interface with Rich formatting.
"""
from .main_cli import app

__all__ = ['app']
