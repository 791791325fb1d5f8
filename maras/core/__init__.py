"""
Core infrastructure for MARAS rule post-processing.
Provides configuration, logging, and exception handling.
"""
from .exceptions import (
    MARASError,
    DecodeError,
    ConfigurationError,
)
from .config import PipelineConfig, FilterPolicyConfig, DEFAULT_STEPS
from .logging_config import setup_logging, get_logger

__all__ = [
    "MARASError",
    "DecodeError",
    "ConfigurationError",
    "PipelineConfig",
    "FilterPolicyConfig",
    "DEFAULT_STEPS",
    "setup_logging",
    "get_logger",
]
