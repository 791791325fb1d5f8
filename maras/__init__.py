"""
MARAS: post-processing of mined association rules for drug interaction and
adverse reaction analysis.
"""
from maras.core import DecodeError, ConfigurationError, PipelineConfig
from maras.representation import Item, Interaction, ClosureLattice, Rule, RawRule
from maras.filtering import (
    RuleSets,
    adapt_rules,
    empty_collection,
    append,
    find_closures,
    filter_rules,
    filter_no_singleton_rules,
    filter_no_complex_rules,
    FilterPipeline,
)

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "ConfigurationError",
    "PipelineConfig",
    "Item",
    "Interaction",
    "ClosureLattice",
    "Rule",
    "RawRule",
    "RuleSets",
    "adapt_rules",
    "empty_collection",
    "append",
    "find_closures",
    "filter_rules",
    "filter_no_singleton_rules",
    "filter_no_complex_rules",
    "FilterPipeline",
]
